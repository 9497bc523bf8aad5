from pathlib import Path

import pytest

from fabricator_assemble.utils import get_name, slugify, to_title_case


class TestGetName:
    def test_strips_extension(self):
        assert get_name("./src/materials/structures/foo.html") == "foo"

    def test_strips_ordering_prefix(self):
        assert get_name("./02-bar.html") == "bar"

    def test_preserves_ordering_prefix_when_asked(self):
        assert get_name("./02-bar.html", True) == "02-bar"

    def test_preserve_numbers_keyword(self):
        assert get_name("views/1.2-intro.html", preserve_numbers=True) == "1.2-intro"

    def test_strips_dotted_and_dashed_prefix(self):
        assert get_name("views/1.2-intro.html") == "intro"

    def test_replaces_whitespace_with_dashes(self):
        assert get_name("docs/getting started.md") == "getting-started"

    def test_whitespace_replaced_before_prefix_strip(self):
        assert get_name("docs/01 intro.md") == "intro"

    def test_accepts_path_objects(self):
        assert get_name(Path("src/data/site.yml")) == "site"

    def test_only_last_extension_is_removed(self):
        assert get_name("archive.tar.gz") == "archive.tar"

    def test_name_made_of_digits_becomes_empty(self):
        assert get_name("views/404.html") == ""
        assert get_name("views/404.html", preserve_numbers=True) == "404"


class TestToTitleCase:
    def test_dashes_and_underscores(self):
        assert to_title_case("foo-bar_baz") == "Foo Bar Baz"

    def test_lowercases_rest_of_word(self):
        assert to_title_case("HELLO-wORLD") == "Hello World"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", ""),
            ("single", "Single"),
            ("02-about", "02 About"),
        ],
    )
    def test_examples(self, value: str, expected: str):
        assert to_title_case(value) == expected


class TestSlugify:
    def test_collapses_whitespace_runs(self):
        assert slugify("my  card\tgrid") == "my-card-grid"

    def test_leaves_dashless_ids_alone(self):
        assert slugify("button") == "button"
