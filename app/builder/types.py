"""Value types for the current build.

A ``Part`` is an immutable copy of a catalog component as the builder sees
it.  A ``BuildSnapshot`` is the whole current build at one instant: one
optional part per singular category plus an ordered tuple of accessories.
Snapshots are never mutated in place; every change produces a new one.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

from app.builder.errors import BuildValidationError

# Scalar value allowed in a component's specifications mapping
SpecValue = Union[bool, int, float, str]


class ComponentCategory(str, enum.Enum):
    drone = "drone"
    goggles = "goggles"
    radio = "radio"
    battery = "battery"
    accessory = "accessory"


SINGULAR_CATEGORIES: tuple[ComponentCategory, ...] = (
    ComponentCategory.drone,
    ComponentCategory.goggles,
    ComponentCategory.radio,
    ComponentCategory.battery,
)

# Plural spelling used by the saved-build mapping and older clients
_CATEGORY_ALIASES = {"accessories": ComponentCategory.accessory}


def parse_category(value: str | ComponentCategory) -> ComponentCategory:
    """Return the category named by ``value`` (case-insensitive).

    Raises BuildValidationError for anything that is not one of the five
    catalog categories.
    """
    if isinstance(value, ComponentCategory):
        return value
    if not isinstance(value, str):
        raise BuildValidationError(f"Unknown component category: {value!r}")
    normalized = value.strip().lower()
    if normalized in _CATEGORY_ALIASES:
        return _CATEGORY_ALIASES[normalized]
    try:
        return ComponentCategory(normalized)
    except ValueError as exc:
        raise BuildValidationError(f"Unknown component category: {value!r}") from exc


def _tag_tuple(tags: Any) -> tuple[str, ...]:
    if isinstance(tags, (list, tuple, set, frozenset)):
        return tuple(t for t in tags if isinstance(t, str))
    return ()


@dataclass(frozen=True)
class Part:
    """A catalog component as held by a build.

    ``specifications`` is exposed as a read-only mapping; the collection
    fields take no part in hashing.
    """

    id: int
    name: str
    category: ComponentCategory
    price: float
    weight: float | None = None
    in_stock: bool = True
    specifications: Mapping[str, SpecValue] = field(default_factory=dict, hash=False)
    compatible_with: tuple[str, ...] = field(default=(), hash=False)
    image: str = ""
    description: str = ""
    purchase_url: str | None = None

    def __post_init__(self):
        object.__setattr__(
            self, "specifications", MappingProxyType(dict(self.specifications or {}))
        )

    @classmethod
    def from_model(cls, component) -> Part:
        """Copy an ORM ``Component`` (or anything shaped like one)."""
        return cls(
            id=component.id,
            name=component.name,
            category=parse_category(component.category),
            price=component.price,
            weight=component.weight,
            in_stock=component.in_stock,
            specifications=component.specifications,
            compatible_with=_tag_tuple(component.compatible_with),
            image=component.image or "",
            description=component.description or "",
            purchase_url=component.purchase_url,
        )


@dataclass(frozen=True)
class BuildSnapshot:
    drone: Part | None = None
    goggles: Part | None = None
    radio: Part | None = None
    battery: Part | None = None
    accessories: tuple[Part, ...] = ()

    def __post_init__(self):
        # No two accessories share an id; the first occurrence is kept
        seen: set[int] = set()
        unique: list[Part] = []
        for accessory in self.accessories:
            if accessory.id not in seen:
                seen.add(accessory.id)
                unique.append(accessory)
        object.__setattr__(self, "accessories", tuple(unique))

    def slot(self, category: ComponentCategory) -> Part | None:
        """Return the part in a singular slot."""
        if category == ComponentCategory.accessory:
            raise ValueError("accessory is not a singular slot")
        return getattr(self, category.value)

    def parts(self) -> list[Part]:
        """All selected parts: singular slots in category order, then accessories."""
        selected = [self.slot(c) for c in SINGULAR_CATEGORIES]
        return [p for p in selected if p is not None] + list(self.accessories)

    def component_ids(self) -> dict[str, int | None | list[int]]:
        """Serialize to the saved-build ``component_ids`` mapping."""
        ids: dict[str, int | None | list[int]] = {
            c.value: (part.id if (part := self.slot(c)) is not None else None)
            for c in SINGULAR_CATEGORIES
        }
        ids["accessories"] = [a.id for a in self.accessories]
        return ids


EMPTY_SNAPSHOT = BuildSnapshot()


@dataclass(frozen=True)
class ResolvedBuild:
    """A saved build with every referenced component id looked up."""

    id: int
    name: str
    created_at: Any
    components: BuildSnapshot
