"""Library settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed to :meth:`RulefoldSettings.load`
  2. Env vars     — ``RULEFOLD_*`` prefix
  3. TOML file    — ``rulefold.toml`` discovered via walk-up
  4. Code defaults

The TOML file is flat::

    verbose = true
    trace_failures = true
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rulefold.config.discovery import find_config
from rulefold.errors import ConfigError


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rulefold.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ConfigError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RulefoldSettings(BaseSettings):
    """Frozen settings for logging and failure tracing.

    Attributes:
        verbose: Emit DEBUG records from ``rulefold`` loggers.
        log_json: Render log lines as JSON instead of console text.
        trace_failures: Log every failing property when a rule set
            returns ``Invalid``. Requires ``verbose`` to be visible.
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RULEFOLD_",
    }

    verbose: bool = False
    log_json: bool = False
    trace_failures: bool = False
    config_path: Path | None = None

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
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> RulefoldSettings:
        """Construct settings, discovering ``rulefold.toml`` unless given one.

        An explicit *config_path* that does not exist, or settings that fail
        validation (an unknown key, a value of the wrong type), raise
        :class:`~rulefold.errors.ConfigError`.
        """
        toml_path: Path | None
        if config_path is not None:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {toml_path}"
                raise ConfigError(msg)
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            source = toml_path if toml_path is not None else "environment"
            msg = f"Invalid settings from {source}: {exc}"
            raise ConfigError(msg) from exc
        finally:
            _tls.toml_path = None
