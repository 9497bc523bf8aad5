# pyright: reportAny=false
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from fabricator_assemble.config import (
    AssembleConfig,
    LogFormat,
    LogLevel,
    load_config,
    normalize_option_keys,
)
from fabricator_assemble.exceptions import ConfigError, ConfigLoadError

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem


class TestAssembleConfigDefaults:
    def test_defaults(self) -> None:
        config = AssembleConfig()

        assert config.layout == "default"
        assert config.layouts == ("src/views/layouts/*",)
        assert config.layout_includes == ("src/views/layouts/includes/*",)
        assert config.views == ("src/views/**/*",)
        assert config.src == ("src/views",)
        assert config.materials == ("src/materials/**/*",)
        assert config.data == ("src/data/**/*.{json,yml}",)
        assert config.docs == ("src/docs/**/*.md",)
        assert config.dest == Path("dist")
        assert config.extension == ".html"
        assert config.dest_map == {}
        assert config.build_data == {}
        assert config.keys.materials == "materials"
        assert config.keys.views == "views"
        assert config.keys.docs == "docs"
        assert config.log_errors is False
        assert config.auto_fabricator is None
        assert config.module_wrapper is None
        assert config.logging.level == LogLevel.INFO
        assert config.logging.format == LogFormat.TEXT

    def test_beautifier_defaults(self) -> None:
        beautifier = AssembleConfig().beautifier

        assert beautifier.indent_size == 1
        assert beautifier.indent_char == "\t"
        assert beautifier.indent_with_tabs is True

    def test_is_frozen(self) -> None:
        config = AssembleConfig()

        with pytest.raises(ValueError, match="frozen"):
            config.layout = "other"  # pyright: ignore[reportAttributeAccessIssue]


class TestAssembleConfigValidation:
    def test_accepts_camel_case_aliases(self) -> None:
        config = AssembleConfig.model_validate(
            {
                "buildData": {"version": "2.0"},
                "destMap": {"views/a.html": "b.html"},
                "layoutIncludes": "partials/*",
                "logErrors": True,
            }
        )

        assert config.build_data == {"version": "2.0"}
        assert config.dest_map == {"views/a.html": "b.html"}
        assert config.layout_includes == ("partials/*",)
        assert config.log_errors is True

    def test_single_pattern_becomes_tuple(self) -> None:
        config = AssembleConfig(views="pages/*")  # pyright: ignore[reportArgumentType]

        assert config.views == ("pages/*",)

    @pytest.mark.parametrize(
        ("extension", "expected"),
        [("htm", ".htm"), (".php", ".php"), ("", "")],
    )
    def test_extension_gets_leading_dot(self, extension: str, expected: str) -> None:
        assert AssembleConfig(extension=extension).extension == expected

    def test_invalid_auto_fabricator_regex(self) -> None:
        with pytest.raises(ValueError, match="not a valid regular expression"):
            _ = AssembleConfig(auto_fabricator="(", module_wrapper=Path("w.html"))

    def test_auto_fabricator_requires_module_wrapper(self) -> None:
        with pytest.raises(ValueError, match="requires moduleWrapper"):
            _ = AssembleConfig(auto_fabricator="modules/")

    def test_beautifier_keeps_unknown_options(self) -> None:
        config = AssembleConfig.model_validate(
            {"beautifier": {"indent_size": 2, "wrap_line_length": 80}}
        )

        assert config.beautifier.indent_size == 2
        assert config.beautifier.model_extra == {"wrap_line_length": 80}

    def test_callables_are_accepted(self) -> None:
        def on_error(_error: object) -> None: ...

        config = AssembleConfig.model_validate({"onError": on_error})

        assert config.on_error is on_error


class TestResolvedPaths:
    def test_dest_dir_is_relative_to_base_dir(self) -> None:
        config = AssembleConfig(base_dir=Path("/site"), dest=Path("public"))

        assert config.dest_dir == Path("/site/public")

    def test_search_paths(self) -> None:
        config = AssembleConfig(base_dir=Path("/site"), src=("a", "b"))  # pyright: ignore[reportCallIssue]

        assert config.search_paths == (Path("/site/a"), Path("/site/b"))


class TestNormalizeOptionKeys:
    def test_renames_aliases(self) -> None:
        result = normalize_option_keys(
            {"buildData": {}, "moduleAssemble": None, "dest": "out"}
        )

        assert result == {"build_data": {}, "module_assemble": None, "dest": "out"}

    def test_leaves_snake_case_untouched(self) -> None:
        assert normalize_option_keys({"build_data": 1}) == {"build_data": 1}


class TestLoadConfig:
    def test_explicit_options(self, fs: "FakeFilesystem") -> None:
        config = load_config({"dest": "out", "buildData": {"a": 1}}, include_env=False)

        assert config.dest == Path("out")
        assert config.build_data == {"a": 1}

    def test_discovers_config_file_in_base_dir(self, fs: "FakeFilesystem") -> None:
        fs.create_file(
            "/site/fabricator.toml",
            contents='dest = "public"\nlayout = "page"\n[buildData]\nversion = "1"\n',
        )

        config = load_config({"base_dir": "/site"}, include_env=False)

        assert config.dest == Path("public")
        assert config.layout == "page"
        assert config.build_data == {"version": "1"}

    def test_explicit_options_override_file(self, fs: "FakeFilesystem") -> None:
        fs.create_file("/site/fabricator.toml", contents='dest = "public"\n')

        config = load_config({"baseDir": "/site", "dest": "out"}, include_env=False)

        assert config.dest == Path("out")

    def test_explicit_config_path(self, fs: "FakeFilesystem") -> None:
        fs.create_file("/conf/custom.toml", contents='extension = "htm"\n')

        config = load_config(config_path=Path("/conf/custom.toml"), include_env=False)

        assert config.extension == ".htm"

    def test_missing_explicit_config_path(self, fs: "FakeFilesystem") -> None:
        with pytest.raises(ConfigLoadError, match="not found"):
            _ = load_config(config_path=Path("/conf/missing.toml"))

    def test_malformed_config_file(self, fs: "FakeFilesystem") -> None:
        fs.create_file("/site/fabricator.toml", contents="dest = \n")

        with pytest.raises(ConfigLoadError):
            _ = load_config({"base_dir": "/site"}, include_env=False)

    def test_env_overrides_file(
        self, fs: "FakeFilesystem", monkeypatch: pytest.MonkeyPatch
    ) -> None:
        fs.create_file("/site/fabricator.toml", contents='dest = "public"\n')
        monkeypatch.setenv("FABRICATOR_DEST", "from-env")
        monkeypatch.setenv("FABRICATOR_LOGGING__FORMAT", "json")

        config = load_config({"base_dir": "/site"})

        assert config.dest == Path("from-env")
        assert config.logging.format == LogFormat.JSON

    def test_env_ignored_when_disabled(
        self, fs: "FakeFilesystem", monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FABRICATOR_DEST", "from-env")

        assert load_config(include_env=False).dest == Path("dist")

    def test_validation_failure_raises_config_error(
        self, fs: "FakeFilesystem"
    ) -> None:
        with pytest.raises(ConfigError, match="Invalid assembly configuration"):
            _ = load_config({"autoFabricator": "modules/"}, include_env=False)
