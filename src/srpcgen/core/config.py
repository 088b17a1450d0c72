"""Configuration dataclass populated by a command controller."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from srpcgen.core.types import Command, ProtocolType


@dataclass(kw_only=True)
class GeneratorConfig:
    """
    Configuration for one generator invocation.

    Attributes:
        command: Command family selected on the command line.
        project_name: Name of the project directory to create.
        output_path: Directory the project directory is created in.
        template_path: Root of an alternative template tree. ``None`` selects
            the templates bundled with the package.
        depend_path: Path of the dependencies the generated project builds against.
        specified_depend_path: Whether ``depend_path`` was given explicitly.
        proxy_client_type: Client-side protocol of a proxy command.
        proxy_server_type: Server-side protocol of a proxy command.
    """

    command: Command
    project_name: str = ""
    output_path: Path = Path(".")
    template_path: Path | None = None
    depend_path: Path | None = None
    specified_depend_path: bool = False
    proxy_client_type: ProtocolType | None = None
    proxy_server_type: ProtocolType | None = None

    def __post_init__(self) -> None:
        if self.command is not Command.PROXY and (
            self.proxy_client_type is not None or self.proxy_server_type is not None
        ):
            raise ValueError(
                f"proxy sub-types are only valid for the proxy command, got {self.command.value}."
            )

    @property
    def is_proxy(self) -> bool:
        return self.command is Command.PROXY

    @property
    def project_dir(self) -> Path:
        """Directory the generated project is written to."""
        return self.output_path / self.project_name
