"""
TOML-based configuration for diddoc tooling.

Loads settings from a TOML file and/or environment variables.
Environment variables take precedence over file values.

Usage:
    from diddoc_core.config import load_config
    cfg = load_config("diddoc.toml")
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[import,no-redef]

from diddoc_core.document import DEFAULT_CONTEXT
from diddoc_core.hashing import DEFAULT_HASH


@dataclass
class DocumentConfig:
    """Defaults applied when building and digesting documents."""
    default_context: str | list[str] = DEFAULT_CONTEXT
    hash: str = DEFAULT_HASH       # name from diddoc_core.hashing.HASH_FUNCTIONS
    encoding: str = "hex"          # digest text encoding


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    format: str = "human"   # "human" or "json"
    file: str | None = None


@dataclass
class DIDDocConfig:
    """Top-level configuration container."""
    document: DocumentConfig = field(default_factory=DocumentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dc: Any, raw: dict[str, Any]) -> None:
    """Merge a raw dict into a dataclass instance (in-place)."""
    for key, value in raw.items():
        key_under = key.replace("-", "_")
        if hasattr(dc, key_under):
            setattr(dc, key_under, value)


def load_config(path: str | None = None) -> DIDDocConfig:
    """
    Load configuration from a TOML file, then overlay environment variables.

    Env-var mapping:
        DIDDOC_CONTEXT    -> document.default_context
        DIDDOC_HASH       -> document.hash
        DIDDOC_ENCODING   -> document.encoding
        DIDDOC_LOG_LEVEL  -> logging.level
        DIDDOC_LOG_FMT    -> logging.format
        DIDDOC_LOG_FILE   -> logging.file
    """
    cfg = DIDDocConfig()

    # ── TOML file ────────────────────────────────────────────────
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                data = tomllib.load(f)
            for section_name, section_dc in [
                ("document", cfg.document),
                ("logging", cfg.logging),
            ]:
                if section_name in data:
                    _merge(section_dc, data[section_name])

    # ── Environment variable overrides ───────────────────────────
    if v := os.environ.get("DIDDOC_CONTEXT"):
        cfg.document.default_context = v
    if v := os.environ.get("DIDDOC_HASH"):
        cfg.document.hash = v
    if v := os.environ.get("DIDDOC_ENCODING"):
        cfg.document.encoding = v
    if v := os.environ.get("DIDDOC_LOG_LEVEL"):
        cfg.logging.level = v.upper()
    if v := os.environ.get("DIDDOC_LOG_FMT"):
        cfg.logging.format = v
    if v := os.environ.get("DIDDOC_LOG_FILE"):
        cfg.logging.file = v

    return cfg
