"""Utility helpers shared by the build configuration loader."""

from __future__ import annotations

from pathlib import Path

from .models import BuildConfigError


def _resolve_path(value: object | None, base: Path, default: Path) -> Path:
    """Return ``value`` as a path anchored at ``base``, or ``default``."""
    if value is None:
        return default
    text = str(value).strip()
    if not text:
        return default
    path = Path(text).expanduser()
    if path.is_absolute():
        return path
    return base / path


def _normalize_url_prefix(value: object | None, default: str) -> str:
    """Return a URL prefix with a single leading slash and no trailing slash."""
    if value is None:
        return default
    text = str(value).strip().strip("/")
    if not text:
        return ""
    return f"/{text}"


def _coerce_bool(key: str, value: object | None, *, default: bool) -> bool:
    """Return a boolean flag, rejecting values YAML did not parse as bool."""
    match value:
        case None:
            return default
        case bool():
            return value
        case _:
            msg = f"Build option '{key}' must be true or false, got {value!r}."
            raise BuildConfigError(msg)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = [
    "_coerce_bool",
    "_normalize_url_prefix",
    "_optional_str",
    "_resolve_path",
]
