"""
Bounded angle values.

KML constrains headings, tilts, latitudes and longitudes to one of five
closed intervals. A single ``Angle`` type carries the value together with
its ``AngleKind``; all bounds are inclusive.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from kmlmodel.core.errors import AngleRangeError, ValueParseError


class AngleKind(str, Enum):
    """The five KML angle types and their closed bounds."""

    ANGLE90 = "angle90"
    ANGLE180 = "angle180"
    ANGLE360 = "angle360"
    ANGLEPOS90 = "anglepos90"
    ANGLEPOS180 = "anglepos180"

    @property
    def minimum(self) -> float:
        """Inclusive lower bound."""
        return _BOUNDS[self][0]

    @property
    def maximum(self) -> float:
        """Inclusive upper bound."""
        return _BOUNDS[self][1]

    def contains(self, value: float) -> bool:
        """Check whether ``value`` lies within this kind's bounds."""
        minimum, maximum = _BOUNDS[self]
        return minimum <= value <= maximum


_BOUNDS = {
    AngleKind.ANGLE90: (-90.0, 90.0),
    AngleKind.ANGLE180: (-180.0, 180.0),
    AngleKind.ANGLE360: (-360.0, 360.0),
    AngleKind.ANGLEPOS90: (0.0, 90.0),
    AngleKind.ANGLEPOS180: (0.0, 180.0),
}


@dataclass(frozen=True)
class Angle:
    """
    An immutable angle checked against the bounds of its kind.

    The stored value is returned exactly as given; no wrapping or
    normalization is applied.

    Attributes:
        kind: Which of the five angle ranges applies
        value: Angle in decimal degrees

    Raises:
        AngleRangeError: If the value lies outside the kind's bounds
            (NaN is always outside)
    """

    kind: AngleKind
    value: float

    def __post_init__(self) -> None:
        """Validate the value against the kind's bounds."""
        kind = AngleKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if isinstance(self.value, bool):
            raise ValueParseError(self.value, expected=kind.value)
        try:
            value = float(self.value)
        except (TypeError, ValueError) as e:
            raise ValueParseError(self.value, expected=kind.value) from e
        if not kind.contains(value):
            raise AngleRangeError(value, kind.value, kind.minimum, kind.maximum)
        object.__setattr__(self, "value", value)

    @classmethod
    def create(cls, kind: Union[AngleKind, str], value: float) -> "Angle":
        """
        Create an angle of the given kind.

        Args:
            kind: AngleKind or its name (e.g. 'angle180')
            value: Angle in decimal degrees

        Returns:
            Angle instance
        """
        return cls(AngleKind(kind), value)

    @classmethod
    def parse(cls, kind: Union[AngleKind, str], text: str) -> "Angle":
        """
        Create an angle from a text token.

        Args:
            kind: AngleKind or its name
            text: Decimal text, surrounding whitespace ignored

        Returns:
            Angle instance

        Raises:
            ValueParseError: If the text is not a number
            AngleRangeError: If the number is out of bounds
        """
        try:
            value = float(text.strip())
        except (AttributeError, ValueError) as e:
            raise ValueParseError(text, expected=AngleKind(kind).value) from e
        return cls.create(kind, value)

    @classmethod
    def coerce(cls, kind: AngleKind, value: Any) -> "Angle":
        """
        Convert a number, text token or angle into an angle of ``kind``.

        An angle of another kind is re-checked against ``kind``'s bounds.
        """
        if isinstance(value, Angle):
            if value.kind is kind:
                return value
            return cls(kind, value.value)
        if isinstance(value, str):
            return cls.parse(kind, value)
        return cls(kind, value)

    # Kind-specific constructors

    @classmethod
    def angle90(cls, value: float) -> "Angle":
        return cls(AngleKind.ANGLE90, value)

    @classmethod
    def angle180(cls, value: float) -> "Angle":
        return cls(AngleKind.ANGLE180, value)

    @classmethod
    def angle360(cls, value: float) -> "Angle":
        return cls(AngleKind.ANGLE360, value)

    @classmethod
    def anglepos90(cls, value: float) -> "Angle":
        return cls(AngleKind.ANGLEPOS90, value)

    @classmethod
    def anglepos180(cls, value: float) -> "Angle":
        return cls(AngleKind.ANGLEPOS180, value)

    def get_angle(self) -> float:
        """Return the stored value."""
        return self.value

    def to_string(self) -> str:
        """Format the value as element text."""
        return repr(self.value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return self.to_string()
