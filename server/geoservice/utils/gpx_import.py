"""
GPX Waypoint Import
===================

Purpose:
- Turn the <wpt> elements of GPX files into point of interest payloads
- Upload them to a running geo service through POST /poi

The folder name is used as the category of every waypoint found in it,
e.g. `company/*.gpx` produces points of interest with category "company".
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

import requests

from ..common.exceptions import UploadError
from ..model.geo_point import to_wire

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


def poi_service_url(host: str, port: Optional[str] = None, path: Optional[str] = "/poi") -> str:
    """
    Build the POST /poi URL.

    Adds http:// when host carries no scheme, appends the port only when one
    is given (so 80/443 stay implicit) and makes sure the path starts with /.
    """
    url = host if host.startswith(("http://", "https://")) else f"http://{host}"
    if port:
        url += f":{port}"
    if path:
        if not path.startswith("/"):
            url += "/"
        url += path
    return url


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def waypoints_from_gpx(path) -> Iterator[Tuple[float, float, Optional[str]]]:
    """Yield (latitude, longitude, name) for every <wpt> in a GPX file."""
    root = ET.parse(path).getroot()
    for element in root.iter():
        if _local_name(element.tag) != "wpt":
            continue
        name = None
        for child in element:
            if _local_name(child.tag) == "name":
                name = (child.text or "").strip() or None
                break
        yield float(element.attrib["lat"]), float(element.attrib["lon"]), name


def build_poi_payload(latitude: float, longitude: float, category: str, name: str) -> Dict[str, Any]:
    if latitude is None or longitude is None:
        raise ValueError("latitude and longitude must not be None")
    if not category:
        raise ValueError("category must not be empty")
    if not name:
        raise ValueError("name must not be empty")

    return {
        "category": category,
        "name": name,
        "location": {"type": "Point", "coordinates": to_wire(latitude, longitude)},
    }


def post_poi(session: requests.Session, url: str, payload: Dict[str, Any]) -> str:
    """POST one point of interest; returns the Location of the created resource."""
    try:
        response = session.post(url, json=payload, timeout=DEFAULT_TIMEOUT)
    except requests.RequestException as e:
        raise UploadError(f"Error posting POI to {url}: {e}") from e

    if response.status_code != 201:
        raise UploadError(
            f"Error posting POI: {response.status_code} - {response.text}",
            status_code=response.status_code
        )

    location = response.headers.get("Location", "")
    logger.debug(f"[IMPORT] Created {location}")
    return location


def import_folder(folder, url: str, session: Optional[requests.Session] = None) -> int:
    """
    Upload every waypoint of every .gpx file in folder.

    Files that cannot be parsed are skipped with a warning; a rejected upload
    stops the whole import, not just the current file, so a misconfigured
    service URL is reported once instead of once per file.

    Returns:
        Number of points of interest created
    """
    folder = Path(folder)
    category = folder.name
    session = session or requests.Session()
    created = 0

    gpx_files = sorted(p for p in folder.iterdir() if p.suffix.lower() == ".gpx")
    logger.info(f"[IMPORT] {len(gpx_files)} GPX files in {folder} (category '{category}')")

    for gpx_file in gpx_files:
        try:
            waypoints = list(waypoints_from_gpx(gpx_file))
        except (ET.ParseError, KeyError, ValueError) as e:
            logger.warning(f"[IMPORT] Skipping {gpx_file}: {e}")
            continue

        logger.info(f"[IMPORT] Found {len(waypoints)} waypoints in {gpx_file.name}")
        for latitude, longitude, name in waypoints:
            payload = build_poi_payload(latitude, longitude, category, name or gpx_file.stem)
            post_poi(session, url, payload)
            created += 1

    return created
