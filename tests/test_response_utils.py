"""Tests for utils/response_utils.py."""
from utils.response_utils import error_message, format_json, parse_body


class TestParseBody:
    def test_json(self):
        assert parse_body('{"shop": {"id": 1}}') == {"shop": {"id": 1}}

    def test_empty(self):
        assert parse_body("") is None
        assert parse_body("   \n") is None

    def test_plain_text(self):
        assert parse_body("Service Unavailable") == "Service Unavailable"

    def test_trailing_content_is_not_dropped(self):
        body = '{"shop": {"id": 1}}\n<!-- served by edge-7 -->'
        assert parse_body(body) == body

    def test_multiple_json_lines_kept_as_text(self):
        body = '{"a": 1}\n{"b": 2}\n'
        assert parse_body(body) == body


class TestFormatJson:
    def test_indented(self):
        assert format_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}'

    def test_unicode_kept(self):
        assert format_json({"title": "Café"}) == '{\n  "title": "Café"\n}'


class TestErrorMessage:
    def test_string_errors(self):
        assert error_message({"errors": "Not Found"}) == "Not Found"

    def test_structured_errors(self):
        assert error_message({"errors": {"title": ["can't be blank"]}}) == '{"title": ["can\'t be blank"]}'

    def test_no_errors(self):
        assert error_message({"product": {}}) is None
        assert error_message({"errors": ""}) is None
        assert error_message("Bad Gateway") is None
        assert error_message(None) is None
