"""Tests for the input parameter set."""

import dataclasses

import pytest

from debrisrisk.core.parameters import RESERVED_FIELDS, ParameterSet, clamp_unit_interval

# Initial state of the calculator form, keyed as the form sends it
FORM_DEFAULTS = {
    "spatialDensity": 0.001,
    "relativeVelocity": 10,
    "crossSectionalArea": 5,
    "missionDuration": 31536000,
    "orbitalAltitude": 400,
    "orbitalInclination": 51.6,
    "debrisSize": 1,
    "debrisMass": 0.1,
    "debrisVelocity": 8,
    "maneuverCapability": 0.8,
    "structuralVulnerability": 0.6,
}


class TestClampUnitInterval:
    @pytest.mark.parametrize(
        "value, expected",
        [(-1.0, 0.0), (0.0, 0.0), (0.3, 0.3), (1.0, 1.0), (5.0, 1.0)],
    )
    def test_clamp(self, value: float, expected: float) -> None:
        assert clamp_unit_interval(value) == expected


class TestParameterSet:
    def test_documented_defaults(self) -> None:
        params = ParameterSet()
        assert params.spatial_density == 0.001
        assert params.relative_velocity == 10
        assert params.cross_sectional_area == 5
        assert params.mission_duration == 31536000
        assert params.orbital_altitude == 400
        assert params.orbital_inclination == 51.6
        assert params.debris_size == 1
        assert params.debris_mass == 0.1
        assert params.debris_velocity == 8
        assert params.maneuver_capability == 0.8
        assert params.structural_vulnerability == 0.6

    def test_eleven_fields(self) -> None:
        assert len(ParameterSet.field_names()) == 11

    def test_ratios_clamped_on_construction(self) -> None:
        params = ParameterSet(maneuver_capability=5.0, structural_vulnerability=-0.5)
        assert params.maneuver_capability == 1.0
        assert params.structural_vulnerability == 0.0

    def test_other_fields_not_clamped(self) -> None:
        params = ParameterSet(orbital_inclination=270.0, orbital_altitude=-5.0)
        assert params.orbital_inclination == 270.0
        assert params.orbital_altitude == -5.0

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ParameterSet().orbital_altitude = 500.0

    def test_replace_reclamps(self) -> None:
        params = ParameterSet().replace(maneuver_capability=3.0, orbital_altitude=700.0)
        assert params.maneuver_capability == 1.0
        assert params.orbital_altitude == 700.0

    def test_replace_leaves_original(self) -> None:
        original = ParameterSet()
        original.replace(orbital_altitude=700.0)
        assert original.orbital_altitude == 400.0

    def test_mission_duration_years(self) -> None:
        assert ParameterSet(mission_duration=63072000).mission_duration_years == pytest.approx(2.0)

    def test_reserved_fields_are_marked(self) -> None:
        marked = {f.name for f in dataclasses.fields(ParameterSet) if f.metadata.get("reserved")}
        assert marked == RESERVED_FIELDS

    def test_to_dict(self) -> None:
        data = ParameterSet().to_dict()
        assert set(data) == set(ParameterSet.field_names())
        assert data["orbital_altitude"] == 400


class TestFromMapping:
    def test_camel_case_defaults(self) -> None:
        assert ParameterSet.from_mapping(FORM_DEFAULTS) == ParameterSet()

    def test_snake_case_keys(self) -> None:
        params = ParameterSet.from_mapping({"orbital_altitude": 800, "debris_size": "2.5"})
        assert params.orbital_altitude == 800.0
        assert params.debris_size == 2.5

    def test_missing_keys_keep_defaults(self) -> None:
        params = ParameterSet.from_mapping({"orbitalAltitude": 1200})
        assert params.orbital_altitude == 1200.0
        assert params.spatial_density == 0.001

    @pytest.mark.parametrize("raw", ["", "abc", None, "nan", float("nan")])
    def test_unparseable_reads_as_zero(self, raw) -> None:
        assert ParameterSet.from_mapping({"relativeVelocity": raw}).relative_velocity == 0.0

    def test_ratio_strings_clamped(self) -> None:
        params = ParameterSet.from_mapping({"maneuverCapability": "5", "structuralVulnerability": "-1"})
        assert params.maneuver_capability == 1.0
        assert params.structural_vulnerability == 0.0

    @pytest.mark.parametrize("raw", ["inf", "-Infinity", float("inf"), "1e400"])
    def test_infinite_value_raises(self, raw) -> None:
        with pytest.raises(ValueError, match="Non-finite value for orbital_altitude"):
            ParameterSet.from_mapping({"orbitalAltitude": raw})

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown parameter"):
            ParameterSet.from_mapping({"eccentricity": 0.1})
