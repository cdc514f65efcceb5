"""
Validated value types used inside KML element and attribute content.
"""

from .angle import Angle, AngleKind
from .color import COLOR_PATTERN, Color
from .coordinate import Coordinate, Coordinates, format_number

__all__ = [
    "Angle",
    "AngleKind",
    "COLOR_PATTERN",
    "Color",
    "Coordinate",
    "Coordinates",
    "format_number",
]
