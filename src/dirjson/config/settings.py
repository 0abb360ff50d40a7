"""Unified settings — init kwargs, env vars, and an optional TOML file.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the caller
  2. Env vars     — ``DIRJSON_*`` prefix
  3. TOML file    — ``[dirjson]`` table of an explicit ``config_path``
  4. Code defaults

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

TOML_TABLE = "dirjson"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the ``[dirjson]`` table of a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                parsed = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ValueError(msg) from exc
            self._data = parsed.get(TOML_TABLE, {})

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class DirJsonSettings(BaseSettings):
    """Settings consulted when resolving directories and logging.

    Attributes:
        app_name: Namespace appended to app-scoped directories
            (application support, caches, config, state, logs).
        app_author: Publisher name, used by platformdirs on Windows.
        root: Sandbox root. When set, every directory category resolves
            to ``<root>/<category>`` instead of the platform location.
        create_directories: Create a resolved directory if it is missing.
        verbose: Enable DEBUG-level dirjson logs.
        log_json: Render logs as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DIRJSON_",
    }

    app_name: str | None = None
    app_author: str | None = None
    root: Path | None = None
    create_directories: bool = True

    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(cls, *, config_path: Path | str | None = None, **overrides: Any) -> DirJsonSettings:
        """Construct settings, reading *config_path* as the TOML layer."""
        _tls.toml_path = Path(config_path) if config_path else None
        try:
            return cls(**overrides)
        finally:
            _tls.toml_path = None
