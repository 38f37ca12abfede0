"""Editor logging on top of telelog.

Buffer edits and session commands run inside ``span`` blocks, which profile
the block as a telelog component and report anything that escapes it.
One-off occurrences such as a load, a save or a resize go through
``record_event``. Settings come from ``HECTO_*`` environment variables
unless ``configure`` is given a preset.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "HECTO_"
LOGGER_NAME = "hecto"
PRESETS = ("development", "production", "quiet")

_config: Optional[Any] = None
_logger: Optional[Any] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level((env("LOG_LEVEL") or "WARNING").upper())
    console = not env_flag("DISABLE_CONSOLE", False)
    config.with_console_output(console)
    if console:
        config.with_colored_output(not env_flag("NO_COLOR", False))
    if env_flag("LOG_JSON", False):
        config.with_json_format(True)
    log_file = env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def _config_from_preset(preset: str) -> Any:
    key = preset.lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'.")

    config = tl.Config()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif key == "production":
        # The editor owns the terminal, so logs go to a file.
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(env("LOG_FILE") or "hecto.log")
    else:
        config.with_min_level("ERROR")
        config.with_console_output(False)
    return config


def configure(preset: Optional[str] = None) -> None:
    """Rebuild the editor logger from ``preset`` or, without one, the environment."""

    global _config, _logger
    config = _config_from_preset(preset) if preset else _config_from_env()
    config.with_profiling(True)
    _config = config
    _logger = None


def _log() -> Any:
    global _logger
    if _logger is None:
        if _config is None:
            configure()
        _logger = tl.Logger.with_config(LOGGER_NAME, _config)
    return _logger


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _emit(level: str, message: str, data: Dict[str, Any]) -> None:
    log = _log()
    pairs = [(str(key), _text(value)) for key, value in data.items()]
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, pairs)
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(pairs)}")


def record_event(
    name: str, *, level: str = "info", data: Optional[Dict[str, Any]] = None
) -> None:
    """Log ``event::<name>`` with ``data`` as key/value pairs."""

    _emit(level.lower(), f"event::{name}", {"event": name, **(data or {})})


@contextmanager
def span(name: str, *, metadata: Optional[Dict[str, Any]] = None) -> Iterator[None]:
    """Profile one editor operation as the telelog component ``name``.

    ``metadata`` is attached as logger context while the block runs. An
    exception leaving the block is logged as a ``span.fail`` event and
    re-raised unchanged.
    """

    log = _log()
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)
    try:
        with log.track_component(name), log.profile(name):
            yield
    except Exception as exc:
        record_event(
            "span.fail",
            level="error",
            data={"span": name, "reason": str(exc), **context},
        )
        raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = ["PRESETS", "configure", "env", "env_flag", "record_event", "span"]
