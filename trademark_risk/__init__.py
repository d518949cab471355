"""
trademark-risk - traffic-light trademark checks for proposed product names

Scrapes a public trademark search site, caches parsed filing details per
searched name, and scores each name Green, Yellow or Red.
"""
__version__ = "0.1.0"
