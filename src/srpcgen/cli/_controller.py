"""Command controllers: one configuration and one manifest per command word."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from srpcgen.core.config import GeneratorConfig
from srpcgen.core.manifest import Manifest, basic_manifest
from srpcgen.core.types import Command, ProtocolType

logger = logging.getLogger(__name__)

_console = Console()

_BASE_FLAGS: list[tuple[str, str]] = [
    ("-o", "project output path (default: CURRENT_PATH)"),
    ("-t", "path of templates (default: bundled templates)"),
    ("-d", "path of dependencies (default: COMPILE_PATH)"),
]

_PROXY_FLAGS: list[tuple[str, str]] = [
    ("-c", "client type for proxy [ http | redis | mysql ] (default: http)"),
    ("-s", "server type for proxy [ http | redis | mysql ] (default: http)"),
]


def _non_blank(ctx: click.Context, param: click.Parameter, value: str | None) -> Path | None:
    if value is None:
        return None
    if not value.strip():
        raise click.BadParameter("value must not be blank", ctx=ctx, param=param)
    return Path(value.strip())


def _protocol_option(flag: str, name: str) -> click.Option:
    return click.Option(
        [flag, name],
        type=click.Choice([p.value for p in ProtocolType.known()], case_sensitive=False),
    )


@dataclass
class Controller:
    """
    Owns the configuration and manifest of one command.

    Attributes:
        command: Command family fixed at construction.
        config: Configuration populated by ``parse_options``.
        files: Files the command generates.
    """

    command: Command
    config: GeneratorConfig = field(init=False)
    files: Manifest = field(init=False)

    def __post_init__(self) -> None:
        self.config = GeneratorConfig(command=self.command)
        self.files = basic_manifest()

    @property
    def flags(self) -> list[tuple[str, str]]:
        if self.command is Command.PROXY:
            return _BASE_FLAGS + _PROXY_FLAGS
        return list(_BASE_FLAGS)

    def usage(self, program: str) -> str:
        lines = [
            "Usage:",
            f"    {program} {self.command.value} <PROJECT_NAME> [FLAGS]",
            "",
            "Available Flags:",
        ]
        lines += [f"    {flag} :    {description}" for flag, description in self.flags]
        return "\n".join(lines) + "\n"

    def print_usage(self, program: str) -> None:
        _console.print(self.usage(program), markup=False, highlight=False)

    def _parser(self) -> click.Command:
        params: list[click.Parameter] = [
            click.Option(["-o", "output_path"], callback=_non_blank),
            click.Option(
                ["-t", "template_path"],
                type=click.Path(exists=True, file_okay=False, path_type=Path),
            ),
            click.Option(["-d", "depend_path"], callback=_non_blank),
        ]
        if self.command is Command.PROXY:
            params += [
                _protocol_option("-c", "client_type"),
                _protocol_option("-s", "server_type"),
            ]
        return click.Command(self.command.value, params=params, add_help_option=False)

    def parse_options(self, argv: Sequence[str]) -> bool:
        """Populate the configuration from a full command line.

        ``argv[0]`` is the program, ``argv[1]`` the command word and
        ``argv[2]`` the project name; flags are scanned from ``argv[3]`` on.
        The configuration is left untouched unless every argument parses.
        """
        if len(argv) < 3 or not argv[2].strip() or argv[2].startswith("-"):
            _console.print("Error:\n     Missing project name\n", markup=False, highlight=False)
            return False

        try:
            ctx = self._parser().make_context(argv[1], list(argv[3:]))
        except click.NoSuchOption as exc:
            _console.print(
                f"Error:\n     Unknown args : {exc.option_name}\n", markup=False, highlight=False
            )
            return False
        except click.ClickException as exc:
            _console.print(
                f"Error:\n     {exc.format_message()}\n", markup=False, highlight=False
            )
            return False

        self._apply(argv[2].strip(), ctx.params)
        return True

    def _apply(self, project_name: str, params: dict[str, Any]) -> None:
        config = self.config
        config.project_name = project_name

        if params["output_path"] is not None:
            config.output_path = params["output_path"]
        if params["template_path"] is not None:
            config.template_path = params["template_path"]
        if params["depend_path"] is not None:
            config.specified_depend_path = True
            config.depend_path = params["depend_path"]

        if self.command is Command.PROXY:
            if params["client_type"] is not None:
                config.proxy_client_type = ProtocolType(params["client_type"].lower())
            if params["server_type"] is not None:
                config.proxy_server_type = ProtocolType(params["server_type"].lower())

        logger.debug("Parsed options for %s: %s", self.command.value, config)


def http_controller() -> Controller:
    return Controller(Command.HTTP)


def redis_controller() -> Controller:
    return Controller(Command.REDIS)


def proxy_controller() -> Controller:
    return Controller(Command.PROXY)


CONTROLLERS: dict[str, Callable[[], Controller]] = {
    Command.HTTP.value: http_controller,
    Command.REDIS.value: redis_controller,
    Command.PROXY.value: proxy_controller,
}
