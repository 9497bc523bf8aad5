import orjson
import pytest

from fabricator_assemble.utils import load_json


class TestLoadJson:
    def test_parses_object(self):
        assert load_json('{"primary": "red", "sizes": [1, 2]}') == {
            "primary": "red",
            "sizes": [1, 2],
        }

    def test_accepts_tab_indentation(self):
        assert load_json('{\n\t"a": {\n\t\t"b": true\n\t}\n}') == {"a": {"b": True}}

    def test_invalid_json_raises(self):
        with pytest.raises(orjson.JSONDecodeError):
            _ = load_json("{")
