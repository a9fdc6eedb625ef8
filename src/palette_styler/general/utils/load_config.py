# src/palette_styler/general/utils/load_config.py

"""Read JSON config files from the package <data/> directory, with caching.

Modes:
- "raw"             -> parsed JSON, untouched
- "validated_dict"  -> dict[str, Any], passed through an optional validator

The data directory resolves in this order: explicit ``base_dir`` argument,
``PALETTE_STYLER_DATA_DIR`` / ``DATA_DIR`` environment variables, then the
first ``data`` folder found walking up from this file (the bundled one).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, overload

# json5 is an optional extra; only needed when allow_comments=True
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - depends on installed extras
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
DATA_DIR_ENV_VARS: tuple[str, ...] = ("PALETTE_STYLER_DATA_DIR", "DATA_DIR")

__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No usable 'data' directory could be located."""


class ConfigFileNotFound(FileNotFoundError):
    """The requested config file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """The config file is not valid JSON, or its validator rejected it."""


class ConfigTypeError(TypeError):
    """The parsed JSON has the wrong top-level shape for the requested mode."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: (path, mtime, mode, encoding, allow_comments)
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Drop every cached config (tests and hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _walk_up_candidates(start: Path) -> list[Path]:
    return [p / "data" for p in (start, *start.parents)]


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Return the directory config files are read from."""
    if base_dir is not None:
        return Path(base_dir).resolve()

    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()

    candidates = _walk_up_candidates(Path(__file__).resolve().parent)
    for cand in candidates:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found. Tried:\n  " + "\n  ".join(str(c) for c in candidates)
    )


def _read_json(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding) as f:
            if not allow_comments:
                return json.load(f)
            if _json5 is None:
                raise ConfigParseError(
                    "allow_comments=True needs the optional 'json5' package"
                )
            return _json5.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: None = ...,
    allow_comments: bool = False,
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["validated_dict"],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = ...,
    allow_comments: bool = False,
) -> dict[str, Any]: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load ``<data>/<file>.json`` and coerce it according to ``mode``.

    Results without a validator are cached per (path, mtime); editing a file
    on disk invalidates its entry automatically.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    data_dir = resolve_data_dir(base_dir)
    name = os.fspath(file)
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to read outside the data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    key = (path, path.stat().st_mtime, mode, encoding, allow_comments)
    if validator is None:
        with _CACHE_LOCK:
            if key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[key]

    data = _read_json(path, encoding, allow_comments)

    if mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected an object for 'validated_dict', "
                f"got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
            log.debug("Config loaded through validator (not cached): %s", path.name)
            return data

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS -> STORED: %s (mode=%s)", path.name, mode)
    return data


# ── Context manager to point the loader at another data directory ────────────
class temp_data_dir:
    """Temporarily redirect config loading to ``path`` for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("PALETTE_STYLER_DATA_DIR")
        os.environ["PALETTE_STYLER_DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("PALETTE_STYLER_DATA_DIR", None)
        else:
            os.environ["PALETTE_STYLER_DATA_DIR"] = self._old
        clear_config_cache()
