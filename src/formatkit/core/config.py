"""Settings and indent option resolution.

Settings are read from a YAML file. The "tab" indent option is resolved to
a number of spaces here so the handlers only ever see an integer width.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from formatkit.core.errors import ConfigError
from formatkit.core.models import Language

logger = logging.getLogger(__name__)

TAB = "tab"
INDENT_CHOICES = ["2", "4", "8", TAB]
DEFAULT_TAB_WIDTH = 4

_DEFAULT_CONFIG_FILES = ("formatkit.yml", ".formatkit.yml")


def resolve_indent(option: int | str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Turn an indent option (``"2"``, ``4``, ``"tab"``) into a width.

    Raises:
        ValueError: If the option is not ``"tab"`` or a positive integer.
    """
    if isinstance(option, str):
        value = option.strip().lower()
        if value == TAB:
            option = tab_width
        elif value.isdigit():
            option = int(value)
        else:
            raise ValueError(f"Invalid indent option: {option!r}")
    if isinstance(option, bool) or not isinstance(option, int) or option <= 0:
        raise ValueError(f"Indent must be a positive integer or 'tab', got {option!r}")
    return option


class Settings(BaseModel):
    """User preferences applied by the CLI and API."""

    default_language: Language = Language.JSON
    indent: str = "2"
    tab_width: int = Field(default=DEFAULT_TAB_WIDTH, gt=0)
    minify_json_fallback: bool = True

    @field_validator("indent", mode="before")
    @classmethod
    def _check_indent(cls, value: object) -> str:
        text = str(value).strip().lower()
        resolve_indent(text)
        return text

    @property
    def indent_width(self) -> int:
        return resolve_indent(self.indent, self.tab_width)


def load_settings(config_path: str | Path | None = None, cwd: str | Path | None = None) -> Settings:
    """Load settings from ``config_path`` or the first default file in ``cwd``.

    Args:
        config_path: Explicit YAML file. Must exist.
        cwd: Directory searched for ``formatkit.yml`` / ``.formatkit.yml``
            when no explicit path is given. Defaults to the working directory.

    Returns:
        Settings, with defaults for anything the file does not set.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
    else:
        base = Path(cwd) if cwd else Path.cwd()
        path = next((base / name for name in _DEFAULT_CONFIG_FILES if (base / name).is_file()), None)
        if path is None:
            logger.debug("No config file found, using defaults")
            return Settings()

    logger.info(f"Loading settings from {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Cannot parse {path}: {exc}") from exc

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    known = {key: value for key, value in data.items() if key in Settings.model_fields}
    try:
        return Settings(**known)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {path}: {exc}") from exc
