"""Configuration data models for the translator.

Each dataclass mirrors one section of the INI file. The declared field types drive the
value conversion performed by the configuration loader.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = [
    "Cache",
    "Config",
    "General",
    "Translation",
]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""
    SCRIPT_NAME: str = ""


@dataclass
class Translation:
    ENGINE: str = "google"
    DEFAULT_SOURCE_LANGUAGE: str = "??"
    DEFAULT_TARGET_LANGUAGE: str = "??"
    TIMEOUT: float = 10.0
    INFLIGHT_TIMEOUT: float = 10.0


@dataclass
class Cache:
    CAPACITY: int = 256
    TTL: float = 0.0  # seconds, 0 disables expiry


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
    CACHE: Cache = field(default_factory=Cache)
