"""Compatibility checks for the current build.

Every check is anchored on the drone: without one there is nothing to
compare against and no warnings are produced.

Battery and radio:
  Compatible when either side carries the "all" tag or the two tag sets
  share at least one tag.

Goggles:
  Analog goggles work with any drone.  Goggles tagged with anything
  containing "dji" are a digital system and need a drone that also carries
  a "dji" tag.  Goggles tagged "all" never warn.
"""

from __future__ import annotations

from typing import Any

from app.builder.types import BuildSnapshot

WILDCARD_TAG = "all"
DIGITAL_MARKER = "dji"


def _tags(component: Any) -> list[str]:
    """Return the component's compatibility tags, or [] when malformed."""
    tags = getattr(component, "compatible_with", None)
    if not isinstance(tags, (list, tuple, set, frozenset)):
        return []
    return [t for t in tags if isinstance(t, str)]


def has_compatible_tag(tags_a: list[str], tags_b: list[str]) -> bool:
    """True if either side is a wildcard or the two sides share a tag."""
    if WILDCARD_TAG in tags_a or WILDCARD_TAG in tags_b:
        return True
    return not set(tags_a).isdisjoint(tags_b)


def _is_digital(tags: list[str]) -> bool:
    return any(DIGITAL_MARKER in tag for tag in tags)


def check_compatibility(snapshot: BuildSnapshot | None) -> list[str]:
    """Return human-readable warnings for the build, in check order.

    Order is battery, radio, goggles.  An empty list means no issues were
    found.  Never raises.
    """
    issues: list[str] = []
    drone = getattr(snapshot, "drone", None)
    if drone is None:
        return issues

    drone_tags = _tags(drone)

    battery = snapshot.battery
    if battery is not None and not has_compatible_tag(drone_tags, _tags(battery)):
        issues.append(
            f"The selected battery ({battery.name}) may not be compatible "
            f"with your drone ({drone.name})."
        )

    radio = snapshot.radio
    if radio is not None and not has_compatible_tag(drone_tags, _tags(radio)):
        issues.append(
            f"The selected radio ({radio.name}) may not be compatible "
            f"with your drone ({drone.name})."
        )

    goggles = snapshot.goggles
    if goggles is not None:
        goggles_tags = _tags(goggles)
        if (
            WILDCARD_TAG not in goggles_tags
            and _is_digital(goggles_tags)
            and not _is_digital(drone_tags)
        ):
            issues.append(
                f"The selected goggles ({goggles.name}) are a digital system and may not "
                f"be compatible with your analog drone ({drone.name})."
            )

    return issues
