"""Loading of godepmap settings from config files and go.mod."""

import json
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

try:
    import yaml
    HAS_YAML = True
    PARSE_ERRORS = (ValueError, yaml.YAMLError)
except ImportError:
    HAS_YAML = False
    PARSE_ERRORS = (ValueError,)

from .errors import ConfigError


CONFIG_FILENAMES = (
    ".godepmap.yaml",
    ".godepmap.yml",
    ".godepmap.toml",
    ".godepmap.json",
)

CONFIG_KEYS = {"entry", "module", "format", "output", "orientation"}

# TOML configs may keep their settings under this table
TOML_TABLE = "godepmap"

MODULE_DIRECTIVE = re.compile(r"^\s*module\s+(\"[^\"]+\"|`[^`]+`|\S+)")


def find_config(root: Path) -> Optional[Path]:
    """Return the first default config file present in root, if any."""
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load settings from a YAML, TOML or JSON config file.

    Args:
        config_path: Path to the config file.

    Returns:
        Dictionary of recognized settings. Unknown keys are dropped.

    Raises:
        ConfigError: If the file cannot be read or parsed, or a recognized
            setting is not a string.
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"failed to read config {config_path}: {e}") from e

    try:
        if suffix in {".yaml", ".yml"}:
            if not HAS_YAML:
                raise ConfigError(f"PyYAML is required to read {config_path}")
            data = yaml.safe_load(content)

        elif suffix == ".toml":
            data = tomllib.loads(content)
            if isinstance(data.get(TOML_TABLE), dict):
                data = data[TOML_TABLE]

        elif suffix == ".json":
            data = json.loads(content)

        else:
            raise ConfigError(f"unsupported config format: {config_path}")

    except PARSE_ERRORS as e:
        raise ConfigError(f"failed to parse config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {config_path} must contain a mapping")

    settings = {key: value for key, value in data.items() if key in CONFIG_KEYS}
    for key, value in settings.items():
        if not isinstance(value, str):
            raise ConfigError(
                f"config key {key!r} in {config_path} must be a string, "
                f"got {type(value).__name__}"
            )

    return settings


def read_module_name(root: Union[str, Path]) -> Optional[str]:
    """
    Read the module path from the ``module`` directive of ``root/go.mod``.

    Returns:
        The module path, or None if go.mod is missing or has no directive.
    """
    go_mod = Path(root) / "go.mod"
    try:
        content = go_mod.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    for line in content.splitlines():
        line = line.split("//", 1)[0]
        match = MODULE_DIRECTIVE.match(line)
        if match:
            return match.group(1).strip("`\"")

    return None
