"""Template transformation and file manifest engine."""

from srpcgen.core.config import GeneratorConfig
from srpcgen.core.errors import GenerationError, TemplateMismatchError, WriteError
from srpcgen.core.fragments import UNKNOWN_TYPE
from srpcgen.core.manifest import FileEntry, Manifest, basic_manifest
from srpcgen.core.resolver import client_protocol, resolve, server_protocol
from srpcgen.core.transforms import (
    CLIENT_CONFIG,
    CLIENT_MAIN,
    SERVER_CONFIG,
    SERVER_MAIN,
    Transform,
    default_port,
)
from srpcgen.core.types import Command, ProtocolType, Role, Target

__all__ = [
    "CLIENT_CONFIG",
    "CLIENT_MAIN",
    "SERVER_CONFIG",
    "SERVER_MAIN",
    "UNKNOWN_TYPE",
    "Command",
    "FileEntry",
    "GenerationError",
    "GeneratorConfig",
    "Manifest",
    "ProtocolType",
    "Role",
    "Target",
    "TemplateMismatchError",
    "Transform",
    "WriteError",
    "basic_manifest",
    "client_protocol",
    "default_port",
    "resolve",
    "server_protocol",
]
