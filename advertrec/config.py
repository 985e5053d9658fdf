"""Application configuration: server, database and recommendation settings."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

PASSWORD = "password"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass
class ServerConfig:
    """Address the RPC server listens on."""

    host: str = "127.0.0.1"
    port: int = 8888


@dataclass
class DatabaseConfig:
    """Connection settings for the backing MySQL database."""

    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = PASSWORD
    dbname: str = "advert_recommend"
    charset: str = "utf8mb4"


@dataclass
class RecommendConfig:
    """Tuning knobs of the recommendation engine."""

    collaborative_count: int = 5


@dataclass
class Config:
    """Complete application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    recommend: RecommendConfig = field(default_factory=RecommendConfig)

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration keyed by its JSON field names."""
        return {
            "server": {"host": self.server.host, "port": self.server.port},
            "database": {
                "host": self.database.host,
                "port": self.database.port,
                "user": self.database.user,
                "password": self.database.password,
                "dbname": self.database.dbname,
                "charset": self.database.charset,
            },
            "recommend": {
                "collaborativeCount": self.recommend.collaborative_count,
            },
        }


_SERVER_FIELDS = {"host": ("host", str), "port": ("port", int)}
_DATABASE_FIELDS = {
    "host": ("host", str),
    "port": ("port", int),
    "user": ("user", str),
    "password": ("password", str),
    "dbname": ("dbname", str),
    "charset": ("charset", str),
}
_RECOMMEND_FIELDS = {"collaborativeCount": ("collaborative_count", int)}


def default_config() -> Config:
    """Return a configuration holding the built-in defaults."""
    return Config()


def _check_type(section: str, key: str, value: Any, expected: type) -> None:
    if expected is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, expected)
    if not valid:
        raise ValueError(
            f"{section}.{key}: expected {expected.__name__}, got {type(value).__name__}"
        )


def _apply(section: str, target: Any, values: Any, fields: dict[str, tuple[str, type]]) -> None:
    if values is None:
        return
    if not isinstance(values, Mapping):
        raise ValueError(f"{section}: expected an object, got {type(values).__name__}")
    for key, value in values.items():
        if key not in fields:
            continue
        attr, expected = fields[key]
        _check_type(section, key, value, expected)
        setattr(target, attr, value)


def load_config(data: Mapping[str, Any] | str | bytes) -> Config:
    """Build a configuration from JSON text or a parsed mapping.

    Keys that are absent keep their default values; unknown keys are ignored.
    """
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid configuration JSON: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ValueError(f"configuration must be an object, got {type(data).__name__}")

    config = default_config()
    _apply("server", config.server, data.get("server"), _SERVER_FIELDS)
    _apply("database", config.database, data.get("database"), _DATABASE_FIELDS)
    _apply("recommend", config.recommend, data.get("recommend"), _RECOMMEND_FIELDS)

    count = config.recommend.collaborative_count
    if not _INT32_MIN <= count <= _INT32_MAX:
        raise ValueError(f"recommend.collaborativeCount out of range: {count}")
    return config