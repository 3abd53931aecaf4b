"""Load packaged defaults and [tool.scss-lint] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

import yaml

from scss_lint.domain.constants import DEFAULT_CONFIG_RESOURCE, LINTERS_KEY, TOOL_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """
    Loads config from the packaged default.yml and the nearest pyproject.toml.
    """

    def __init__(self, defaults_path: str | None = None) -> None:
        if defaults_path is not None:
            self._defaults_path = Path(defaults_path)
        else:
            # Default: packaged resource next to this module
            self._defaults_path = Path(__file__).resolve().parent / "resources" / DEFAULT_CONFIG_RESOURCE

    def load_defaults(self) -> dict[str, object]:
        """Return the packaged defaults, or an empty dict if they cannot be read."""
        if not self._defaults_path.exists():
            return {}
        try:
            with open(self._defaults_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Failed to load default configuration %s: %s", self._defaults_path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def load_project_config(self, start: Path | None = None) -> dict[str, object]:
        """Return [tool.scss-lint] from the nearest pyproject.toml at or above start, or {}."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as exc:
                logger.warning("Failed to read %s: %s", config_file, exc)
                return {}
            # The nearest pyproject.toml owns the settings, with or without our table.
            tool_section = data.get("tool", {}) or {}
            section = tool_section.get(TOOL_SECTION)
            return section if isinstance(section, dict) else {}
        return {}

    def load_config_from_fs(self, start: Path | None = None) -> dict[str, object]:
        """Merge project settings over the packaged defaults."""
        return ConfigFileLoader.merge(self.load_defaults(), self.load_project_config(start))

    @staticmethod
    def merge(defaults: dict[str, object], overrides: dict[str, object]) -> dict[str, object]:
        """Shallow merge, except per-linter sections which merge one level deeper."""
        merged = {**defaults, **overrides}
        default_linters = defaults.get(LINTERS_KEY) or {}
        override_linters = overrides.get(LINTERS_KEY) or {}
        if isinstance(default_linters, dict) and isinstance(override_linters, dict):
            linters: dict[str, object] = {}
            for name in (*default_linters, *override_linters):
                base = default_linters.get(name) or {}
                extra = override_linters.get(name) or {}
                if isinstance(base, dict) and isinstance(extra, dict):
                    linters[name] = {**base, **extra}
                else:
                    linters[name] = extra or base
            merged[LINTERS_KEY] = linters
        return merged
