"""Unit tests for path expressions over decoded JSON."""

import pytest

from zip_fixture_runner.errors import ConfigurationError, ExtractionError
from zip_fixture_runner.extraction import extract_path, extract_string, parse_path
from tests.conftest import location_body


class TestParsePath:
    def test_quoted_segment_after_index(self):
        assert parse_path("places[0].'place name'") == ["places", 0, "place name"]

    def test_double_quotes_and_negative_index(self):
        assert parse_path('a.b[-1][2]."c d"') == ["a", "b", -1, 2, "c d"]

    @pytest.mark.parametrize(
        "expr",
        ["", ".places", "places.", "places..name", "[0]", "places 'x'", "places['x']", "'unclosed", "places[0"],
    )
    def test_malformed_paths_are_rejected(self, expr):
        with pytest.raises(ConfigurationError):
            parse_path(expr)


class TestExtractPath:
    def test_extracts_first_place_name(self):
        body = location_body("us", "90210", "Beverly Hills", "Somewhere Else")

        assert extract_path(body, "places[0].'place name'") == "Beverly Hills"
        assert extract_path(body, "places[-1].'place name'") == "Somewhere Else"

    def test_empty_places_array(self):
        body = location_body("us", "00000")

        with pytest.raises(ExtractionError) as exc_info:
            extract_path(body, "places[0].'place name'")

        assert "out of range" in exc_info.value.reason
        assert exc_info.value.path == "places[0].'place name'"

    def test_missing_places_field(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_path({}, "places[0].'place name'")

        assert "no field 'places'" in exc_info.value.reason

    def test_missing_place_name_field(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_path({"places": [{"state": "CA"}]}, "places[0].'place name'")

        assert exc_info.value.reason == "places[0] has no field 'place name'"

    def test_indexing_into_an_object(self):
        with pytest.raises(ExtractionError, match="is not an array"):
            extract_path({"places": {"place name": "x"}}, "places[0]")

    def test_field_lookup_on_an_array(self):
        with pytest.raises(ExtractionError, match="is not an object"):
            extract_path([1, 2], "places")


class TestExtractString:
    def test_non_string_value_is_rejected(self):
        with pytest.raises(ExtractionError, match="expected a string, got int"):
            extract_string({"places": [{"place name": 7}]}, "places[0].'place name'")
