"""
Shared building blocks for composite KML entities.

Composites are frozen pydantic models. Instead of an AbstractObject ->
AbstractFeature -> ... class chain, every entity holds an ``ObjectBase``
and one ``Extensions`` value per schema level it spans. All list-valued
fields are normalized with ``or_empty``.
"""

from enum import Enum
from typing import Any, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from kmlmodel.core.defaults import EMPTY, or_empty
from kmlmodel.values.angle import Angle, AngleKind
from kmlmodel.values.color import Color
from kmlmodel.values.coordinate import Coordinates


class AltitudeMode(str, Enum):
    """How altitudes are interpreted (KML and gx extension values)."""

    CLAMP_TO_GROUND = "clampToGround"
    RELATIVE_TO_GROUND = "relativeToGround"
    ABSOLUTE = "absolute"
    CLAMP_TO_SEA_FLOOR = "clampToSeaFloor"  # gx
    RELATIVE_TO_SEA_FLOOR = "relativeToSeaFloor"  # gx


class ColorMode(str, Enum):
    """Color mode of a color style."""

    NORMAL = "normal"
    RANDOM = "random"


class KmlModel(BaseModel):
    """Base configuration for all composite entities."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    def iter_extensions(self, prefix: str = "") -> Iterator[Tuple[str, "Extensions"]]:
        """
        Yield (dotted field path, Extensions) for every extension level,
        including those of nested models.
        """
        for name in type(self).model_fields:
            value = getattr(self, name)
            path = f"{prefix}{name}"
            if isinstance(value, Extensions):
                yield path, value
            elif isinstance(value, KmlModel):
                yield from value.iter_extensions(prefix=f"{path}.")


class IdAttributes(KmlModel):
    """
    The ``id`` and ``targetId`` attributes of an object.
    """

    id: Optional[str] = Field(None, description="Object identifier")
    target_id: Optional[str] = Field(None, description="Identifier of the updated object")


class SimpleTypeContainer(KmlModel):
    """
    A simple-typed extension element found inside an object.

    Attributes:
        namespace: Namespace URI of the extension element
        tag_name: Local name of the extension element
        value: Element content
    """

    namespace: str = Field(..., description="Extension namespace URI")
    tag_name: str = Field(..., description="Extension element name", min_length=1)
    value: Any = Field(None, description="Element content")


class Extensions(KmlModel):
    """
    Extension values attached at one schema level.

    Attributes:
        simple: Simple-typed extension elements
        objects: Object extensions (opaque to this model)
    """

    simple: Tuple[SimpleTypeContainer, ...] = Field(default=EMPTY)
    objects: Tuple[Any, ...] = Field(default=EMPTY)

    @field_validator("simple", "objects", mode="before")
    @classmethod
    def default_empty(cls, v: Any) -> Tuple[Any, ...]:
        """Store missing lists as the empty sequence."""
        return or_empty(v)

    @classmethod
    def of(cls, simple: Any = None, objects: Any = None) -> "Extensions":
        """Build from optional simple and object extension lists."""
        return cls(simple=or_empty(simple), objects=or_empty(objects))


class ObjectBase(KmlModel):
    """
    Fields shared by every KML object (the AbstractObject level).

    Attributes:
        simple_extensions: Simple extensions of the object level
        id_attributes: id / targetId, if any
    """

    simple_extensions: Tuple[SimpleTypeContainer, ...] = Field(default=EMPTY)
    id_attributes: Optional[IdAttributes] = None

    @field_validator("simple_extensions", mode="before")
    @classmethod
    def default_empty(cls, v: Any) -> Tuple[Any, ...]:
        """Store a missing list as the empty sequence."""
        return or_empty(v)

    @property
    def id(self) -> Optional[str]:
        """Shortcut for ``id_attributes.id``."""
        return self.id_attributes.id if self.id_attributes else None


def extensions_or_empty(v: Any) -> Extensions:
    """Default a missing ``Extensions`` field."""
    return Extensions() if v is None else v


def base_or_empty(v: Any) -> ObjectBase:
    """Default a missing ``ObjectBase`` field."""
    return ObjectBase() if v is None else v


class KmlObject(KmlModel):
    """
    A composite entity carrying object-level fields.
    """

    base: ObjectBase = Field(default_factory=ObjectBase)

    @field_validator("base", mode="before")
    @classmethod
    def default_base(cls, v: Any) -> ObjectBase:
        return base_or_empty(v)


# Value field types; each model coerces raw input in its "before" validators.
AngleField = InstanceOf[Angle]
ColorField = InstanceOf[Color]
CoordinatesField = InstanceOf[Coordinates]


def to_angle(kind: AngleKind, v: Any) -> Angle:
    """Coerce a number, text or angle to ``kind``."""
    return Angle.coerce(kind, v)


def to_color(v: Any) -> Color:
    """Coerce hex text or a Color; None gives the default color."""
    return Color.DEFAULT if v is None else Color.coerce(v)


def to_coordinates(v: Any) -> Coordinates:
    """Coerce None, text, a list of coordinates or Coordinates."""
    if isinstance(v, Coordinates):
        return v
    if v is None or isinstance(v, str):
        return Coordinates.parse(v)
    return Coordinates.create(v)
