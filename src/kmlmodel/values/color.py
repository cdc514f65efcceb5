"""
KML color codec.

KML writes colors as eight hex digits in alpha, blue, green, red order
(``aabbggrr``). The text is validated once and kept exactly as given.
"""

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Pattern

from kmlmodel.core.errors import ColorFormatError

COLOR_PATTERN = r"^[0-9a-fA-F]{8}$"

_COLOR_RE: Pattern[str] = re.compile(COLOR_PATTERN)


@dataclass(frozen=True)
class Color:
    """
    An ``aabbggrr`` hex color.

    Attributes:
        hex: Eight hexadecimal digits, case preserved

    Raises:
        ColorFormatError: If the text is not exactly eight hex digits
    """

    hex: str

    DEFAULT: ClassVar["Color"]

    def __post_init__(self) -> None:
        """Validate the hex text."""
        # fullmatch so a trailing newline is rejected as well
        if not isinstance(self.hex, str) or _COLOR_RE.fullmatch(self.hex) is None:
            raise ColorFormatError(self.hex, COLOR_PATTERN)

    @classmethod
    def create(cls, hex: str) -> "Color":
        """
        Create a color from its hex text.

        Args:
            hex: Eight hex digits in aabbggrr order

        Returns:
            Color instance
        """
        return cls(hex)

    @classmethod
    def coerce(cls, value: Any) -> "Color":
        """Accept a Color or its hex text."""
        if isinstance(value, Color):
            return value
        return cls(value)

    def to_string(self) -> str:
        """Return the hex text exactly as it was given."""
        return self.hex

    def __str__(self) -> str:
        return self.hex


Color.DEFAULT = Color("ffffffff")
