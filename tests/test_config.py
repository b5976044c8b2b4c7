"""Tests for configuration loading."""

import json

import pytest

from scanner.config import find_config, load_config, read_module_name
from scanner.errors import ConfigError


class TestLoadConfig:
    """Tests for reading config files."""

    def test_yaml(self, tmp_path):
        """Test a YAML config file."""
        path = tmp_path / ".godepmap.yaml"
        path.write_text("entry: cmd/server\nmodule: example.com/app\nformat: mermaid\n")

        assert load_config(path) == {
            "entry": "cmd/server",
            "module": "example.com/app",
            "format": "mermaid",
        }

    def test_toml_table(self, tmp_path):
        """Test settings under a [godepmap] table."""
        path = tmp_path / ".godepmap.toml"
        path.write_text('[godepmap]\nentry = "cmd"\norientation = "TD"\n')

        assert load_config(path) == {"entry": "cmd", "orientation": "TD"}

    def test_toml_top_level(self, tmp_path):
        """Test settings at the top level of a TOML file."""
        path = tmp_path / "deps.toml"
        path.write_text('module = "example.com/app"\n')

        assert load_config(path) == {"module": "example.com/app"}

    def test_json(self, tmp_path):
        """Test a JSON config file."""
        path = tmp_path / ".godepmap.json"
        path.write_text(json.dumps({"output": "deps.dot"}))

        assert load_config(path) == {"output": "deps.dot"}

    def test_unknown_keys_dropped(self, tmp_path):
        """Test that unrecognized keys are ignored."""
        path = tmp_path / "config.yml"
        path.write_text("entry: cmd\ncolor: blue\n")

        assert load_config(path) == {"entry": "cmd"}

    def test_empty_file(self, tmp_path):
        """Test that an empty YAML file gives no settings."""
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == {}

    @pytest.mark.parametrize(
        "name, content",
        [
            ("bad.yaml", "entry: [unclosed\n"),
            ("bad.toml", "entry = \n"),
            ("bad.json", "{not json"),
        ],
    )
    def test_malformed(self, tmp_path, name, content):
        """Test that parse failures raise ConfigError."""
        path = tmp_path / name
        path.write_text(content)

        with pytest.raises(ConfigError, match="failed to parse config"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        """Test that a list at the top level is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- cmd\n- pkg\n")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config(path)

    @pytest.mark.parametrize(
        "name, content",
        [
            ("config.yaml", "module: 123\n"),
            ("config.yaml", "entry:\n  - cmd\n"),
            ("config.toml", "[godepmap]\nformat = true\n"),
            ("config.json", '{"output": null}'),
        ],
    )
    def test_non_string_value(self, tmp_path, name, content):
        """Test that recognized settings must be strings."""
        path = tmp_path / name
        path.write_text(content)

        with pytest.raises(ConfigError, match="must be a string"):
            load_config(path)

    def test_non_string_unknown_key_ignored(self, tmp_path):
        """Test that unrecognized keys are not type-checked."""
        path = tmp_path / "config.yaml"
        path.write_text("entry: cmd\nworkers: 4\n")

        assert load_config(path) == {"entry": "cmd"}

    def test_unsupported_format(self, tmp_path):
        """Test an unknown config file extension."""
        path = tmp_path / "config.ini"
        path.write_text("[godepmap]\n")

        with pytest.raises(ConfigError, match="unsupported config format"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing config file raises ConfigError."""
        with pytest.raises(ConfigError, match="failed to read config"):
            load_config(tmp_path / "absent.yaml")


class TestFindConfig:
    """Tests for default config file discovery."""

    def test_none_present(self, tmp_path):
        """Test a directory without config files."""
        assert find_config(tmp_path) is None

    def test_yaml_preferred(self, tmp_path):
        """Test that YAML wins over TOML when both exist."""
        (tmp_path / ".godepmap.toml").write_text("")
        (tmp_path / ".godepmap.yaml").write_text("")

        assert find_config(tmp_path) == tmp_path / ".godepmap.yaml"


class TestReadModuleName:
    """Tests for reading the module name from go.mod."""

    def test_bare_module(self, tmp_path):
        """Test a typical go.mod."""
        (tmp_path / "go.mod").write_text(
            "module github.com/acme/app\n\ngo 1.21\n\nrequire github.com/x/y v1.0.0\n"
        )

        assert read_module_name(tmp_path) == "github.com/acme/app"

    def test_quoted_module_with_comment(self, tmp_path):
        """Test a quoted module path followed by a comment."""
        (tmp_path / "go.mod").write_text(
            '// Deprecated: use v2\nmodule "example.com/app" // legacy\n'
        )

        assert read_module_name(tmp_path) == "example.com/app"

    def test_missing_go_mod(self, tmp_path):
        """Test a directory without go.mod."""
        assert read_module_name(tmp_path) is None

    def test_no_module_directive(self, tmp_path):
        """Test a go.mod without a module line."""
        (tmp_path / "go.mod").write_text("go 1.21\n")

        assert read_module_name(tmp_path) is None
