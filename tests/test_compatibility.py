"""Tests for the drone-centred compatibility checks.

Covers:
- No drone: no warnings regardless of the other slots
- Battery and radio: tag intersection and the "all" wildcard
- Goggles: DJI digital goggles against analog drones
- Warning order (battery, radio, goggles)
- Malformed tag collections are treated as empty
"""

from types import SimpleNamespace

import pytest

from app.builder.compatibility import check_compatibility, has_compatible_tag
from app.builder.types import BuildSnapshot, Part
from app.models.component import ComponentCategory


def part(part_id: int, name: str, category: ComponentCategory, tags) -> Part:
    return Part(id=part_id, name=name, category=category, price=10.0, compatible_with=tags)


def drone(tags, name="Test Whoop") -> Part:
    return part(1, name, ComponentCategory.drone, tags)


def battery(tags, name="Test LiPo") -> Part:
    return part(2, name, ComponentCategory.battery, tags)


def radio(tags, name="Test Radio") -> Part:
    return part(3, name, ComponentCategory.radio, tags)


def goggles(tags, name="Test Goggles") -> Part:
    return part(4, name, ComponentCategory.goggles, tags)


# ---------------------------------------------------------------------------
# No drone
# ---------------------------------------------------------------------------

class TestNoDrone:
    def test_empty_build_has_no_warnings(self):
        assert check_compatibility(BuildSnapshot()) == []

    def test_none_snapshot_has_no_warnings(self):
        assert check_compatibility(None) == []

    def test_incompatible_parts_without_drone_do_not_warn(self):
        snapshot = BuildSnapshot(
            battery=battery(["battery-6s"]),
            radio=radio(["radio-spektrum"]),
            goggles=goggles(["dji-air-unit"]),
        )
        assert check_compatibility(snapshot) == []


# ---------------------------------------------------------------------------
# Battery
# ---------------------------------------------------------------------------

class TestBatteryCheck:
    def test_shared_tag_is_compatible(self):
        snapshot = BuildSnapshot(
            drone=drone(["battery-1s", "radio-frsky"]),
            battery=battery(["battery-1s"]),
        )
        assert check_compatibility(snapshot) == []

    def test_no_shared_tag_warns_once_naming_both(self):
        snapshot = BuildSnapshot(
            drone=drone(["battery-1s", "radio-frsky"], name="Mobula 6"),
            battery=battery(["battery-2s"], name="Tattu 2S"),
        )
        warnings = check_compatibility(snapshot)
        assert len(warnings) == 1
        assert "Tattu 2S" in warnings[0]
        assert "Mobula 6" in warnings[0]
        assert warnings[0] == (
            "The selected battery (Tattu 2S) may not be compatible with your drone (Mobula 6)."
        )

    @pytest.mark.parametrize(
        "drone_tags,battery_tags",
        [
            (["all"], ["battery-6s"]),
            (["battery-1s"], ["all"]),
            (["all"], []),
            ([], ["all"]),
        ],
    )
    def test_all_tag_is_universal(self, drone_tags, battery_tags):
        snapshot = BuildSnapshot(drone=drone(drone_tags), battery=battery(battery_tags))
        assert check_compatibility(snapshot) == []

    def test_both_empty_warns(self):
        snapshot = BuildSnapshot(drone=drone([]), battery=battery([]))
        assert len(check_compatibility(snapshot)) == 1


# ---------------------------------------------------------------------------
# Radio
# ---------------------------------------------------------------------------

class TestRadioCheck:
    def test_shared_protocol_is_compatible(self):
        snapshot = BuildSnapshot(
            drone=drone(["battery-1s", "radio-elrs"]),
            radio=radio(["radio-frsky", "radio-elrs"]),
        )
        assert check_compatibility(snapshot) == []

    def test_different_protocol_warns(self):
        snapshot = BuildSnapshot(
            drone=drone(["radio-frsky"], name="Meteor65"),
            radio=radio(["radio-spektrum"], name="DX6e"),
        )
        assert check_compatibility(snapshot) == [
            "The selected radio (DX6e) may not be compatible with your drone (Meteor65)."
        ]


# ---------------------------------------------------------------------------
# Goggles
# ---------------------------------------------------------------------------

class TestGogglesCheck:
    def test_dji_goggles_with_analog_drone_warn(self):
        snapshot = BuildSnapshot(drone=drone([], name="Whoop"), goggles=goggles(["dji-digital"], name="DJI V2"))
        warnings = check_compatibility(snapshot)
        assert warnings == [
            "The selected goggles (DJI V2) are a digital system and may not be compatible "
            "with your analog drone (Whoop)."
        ]

    def test_all_tag_goggles_never_warn(self):
        snapshot = BuildSnapshot(drone=drone([]), goggles=goggles(["all"]))
        assert check_compatibility(snapshot) == []

    def test_all_tag_short_circuits_even_with_dji_tag(self):
        snapshot = BuildSnapshot(drone=drone([]), goggles=goggles(["all", "dji-air-unit"]))
        assert check_compatibility(snapshot) == []

    def test_dji_goggles_with_dji_drone_are_fine(self):
        snapshot = BuildSnapshot(
            drone=drone(["battery-4s", "dji-air-unit"]),
            goggles=goggles(["dji-air-unit"]),
        )
        assert check_compatibility(snapshot) == []

    def test_substring_match_on_drone_side(self):
        snapshot = BuildSnapshot(drone=drone(["vista-dji-o3"]), goggles=goggles(["dji-air-unit"]))
        assert check_compatibility(snapshot) == []

    def test_analog_goggles_do_not_need_shared_tags(self):
        snapshot = BuildSnapshot(drone=drone(["battery-1s"]), goggles=goggles(["analog-5.8ghz"]))
        assert check_compatibility(snapshot) == []


# ---------------------------------------------------------------------------
# Ordering and robustness
# ---------------------------------------------------------------------------

class TestOrderingAndRobustness:
    def test_warnings_are_battery_then_radio_then_goggles(self):
        snapshot = BuildSnapshot(
            drone=drone(["battery-1s", "radio-frsky"]),
            goggles=goggles(["dji-air-unit"]),
            radio=radio(["radio-elrs"]),
            battery=battery(["battery-2s"]),
        )
        warnings = check_compatibility(snapshot)
        assert len(warnings) == 3
        assert warnings[0].startswith("The selected battery")
        assert warnings[1].startswith("The selected radio")
        assert warnings[2].startswith("The selected goggles")

    def test_accessories_are_not_checked(self):
        snapshot = BuildSnapshot(
            drone=drone(["battery-1s"]),
            accessories=(part(9, "Charger", ComponentCategory.accessory, ["battery-6s"]),),
        )
        assert check_compatibility(snapshot) == []

    @pytest.mark.parametrize("bad_tags", [None, "battery-1s", 42, {"battery-1s": True}])
    def test_malformed_drone_tags_are_treated_as_empty(self, bad_tags):
        snapshot = BuildSnapshot(drone=drone(bad_tags), battery=battery(["battery-1s"]))
        assert len(check_compatibility(snapshot)) == 1

    def test_malformed_tags_still_honour_wildcard_on_other_side(self):
        snapshot = BuildSnapshot(drone=drone(None), battery=battery(["all"]))
        assert check_compatibility(snapshot) == []

    def test_non_string_tags_are_ignored(self):
        snapshot = BuildSnapshot(drone=drone([None, 7]), goggles=goggles([3, "dji-air-unit"]))
        assert len(check_compatibility(snapshot)) == 1

    def test_accepts_any_object_with_the_right_attributes(self):
        snapshot = SimpleNamespace(
            drone=SimpleNamespace(name="D", compatible_with=["battery-1s"]),
            battery=SimpleNamespace(name="B"),
            radio=None,
            goggles=None,
        )
        assert len(check_compatibility(snapshot)) == 1

    def test_evaluation_is_deterministic(self):
        snapshot = BuildSnapshot(drone=drone(["x"]), battery=battery(["y"]), radio=radio(["z"]))
        assert check_compatibility(snapshot) == check_compatibility(snapshot)


class TestHasCompatibleTag:
    def test_intersection(self):
        assert has_compatible_tag(["a", "b"], ["b", "c"])

    def test_disjoint(self):
        assert not has_compatible_tag(["a"], ["c"])

    def test_wildcard(self):
        assert has_compatible_tag([], ["all"])
