"""Enums shared by the generator core."""

from __future__ import annotations

from enum import Enum


class ProtocolType(str, Enum):
    """Wire protocol spoken by a generated example."""

    HTTP = "http"
    REDIS = "redis"
    MYSQL = "mysql"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        labels: dict[ProtocolType, str] = {
            ProtocolType.HTTP: "Http",
            ProtocolType.REDIS: "Redis",
            ProtocolType.MYSQL: "MySQL",
            ProtocolType.UNKNOWN: "Unknown",
        }
        return labels[self]

    @property
    def default_port(self) -> int:
        ports: dict[ProtocolType, int] = {
            ProtocolType.HTTP: 80,
            ProtocolType.REDIS: 6379,
            ProtocolType.MYSQL: 3306,
        }
        return ports.get(self, 1412)

    @classmethod
    def known(cls) -> list[ProtocolType]:
        """Every member except the ``UNKNOWN`` sentinel."""
        return [p for p in cls if p is not cls.UNKNOWN]


class Command(str, Enum):
    """Top-level command family."""

    HTTP = "http"
    REDIS = "redis"
    MYSQL = "mysql"
    PROXY = "proxy"


class Role(str, Enum):
    """Side of the generated example a protocol is resolved for."""

    SERVER = "server"
    CLIENT = "client"


class Target(str, Enum):
    """Where an option fragment ends up: generated source or generated config file."""

    SOURCE = "source"
    CONFIG = "config"
