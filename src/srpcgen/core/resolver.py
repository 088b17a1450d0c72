"""Resolve which protocol each side of a generated example speaks."""

from __future__ import annotations

from srpcgen.core.config import GeneratorConfig
from srpcgen.core.types import Command, ProtocolType, Role

_DIRECT: dict[Command, ProtocolType] = {
    Command.HTTP: ProtocolType.HTTP,
    Command.REDIS: ProtocolType.REDIS,
    Command.MYSQL: ProtocolType.MYSQL,
}


def resolve(config: GeneratorConfig, role: Role) -> ProtocolType:
    """Return the protocol *role* speaks under *config*.

    A command naming a protocol resolves to it for both roles. A proxy command
    resolves each role to its own sub-type. Anything unresolvable maps to
    ``ProtocolType.UNKNOWN``.
    """
    if config.command is Command.PROXY:
        sub = config.proxy_server_type if role is Role.SERVER else config.proxy_client_type
        return sub if sub is not None else ProtocolType.UNKNOWN

    return _DIRECT.get(config.command, ProtocolType.UNKNOWN)


def server_protocol(config: GeneratorConfig) -> ProtocolType:
    return resolve(config, Role.SERVER)


def client_protocol(config: GeneratorConfig) -> ProtocolType:
    return resolve(config, Role.CLIENT)
