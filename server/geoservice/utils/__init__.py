"""
Utilities Package
=================

Modules:
- response_helpers: Response formatting utilities
- gpx_import: GPX waypoint parsing and upload to POST /poi
"""
