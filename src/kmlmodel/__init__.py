"""
kmlmodel - typed value model for the KML 2.2 and Google Earth extension schema.

This package provides bounded angles, the aabbggrr color codec, coordinate
tuple parsing and formatting, and composite entities built on them.
"""

__version__ = "0.1.0"
