"""
Import GPX Waypoints
====================

Uploads every waypoint of the .gpx files in one or more folders to a
running geo service. The folder name becomes the category.

Usage:
    python scripts/import_gpx.py data/company data/restaurant
    python scripts/import_gpx.py data/company --host geo.example.org --port 8080
"""

import argparse
import logging
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Config
from geoservice.common.exceptions import UploadError
from geoservice.utils.gpx_import import import_folder, poi_service_url


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Upload GPX waypoints as points of interest")
    parser.add_argument("folders", nargs="+", help="Folders of .gpx files; folder name = category")
    parser.add_argument("--host", help="Service host (default: POI_SERVICE_URL from the environment)")
    parser.add_argument("--port", help="Service port (omit for 80/443)")
    parser.add_argument("--path", default="/poi", help="Resource path (default: /poi)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')

    url = poi_service_url(args.host, args.port, args.path) if args.host else Config.POI_SERVICE_URL
    print(f"Uploading points of interest to: {url}")

    total = 0
    for folder in args.folders:
        if not os.path.isdir(folder):
            print(f"ERROR: not a directory: {folder}")
            return 1
        try:
            total += import_folder(folder, url)
        except UploadError as e:
            print(f"ERROR: {e.message}")
            return 2

    print(f"Created {total} points of interest")
    return 0


if __name__ == "__main__":
    sys.exit(main())
