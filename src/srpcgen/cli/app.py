"""Typer CLI application for srpcgen."""

from __future__ import annotations

import logging
import sys
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Context, Exit, Option, Typer

import srpcgen
from srpcgen.cli._controller import (
    Controller,
    http_controller,
    proxy_controller,
    redis_controller,
)
from srpcgen.cli._logging import setup_logging
from srpcgen.cli._prompts import prompt_protocol
from srpcgen.cli._renderer import render_project
from srpcgen.core.config import GeneratorConfig
from srpcgen.core.errors import GenerationError
from srpcgen.core.resolver import client_protocol, server_protocol
from srpcgen.core.types import ProtocolType

logger = logging.getLogger(__name__)

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()

# Flags after PROJECT_NAME are handed to the controller untouched. Parsing stops
# at the first positional, so a flag placed before the name becomes the name and
# is rejected by the controller.
_PASSTHROUGH = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}

_FILE_DESCRIPTIONS: dict[str, str] = {
    "server.conf": "server configuration",
    "client.conf": "client configuration",
    "server_main.cc": "server example",
    "client_main.cc": "client example",
    "example.conf": "full configuration reference",
    "CMakeLists.txt": "build file",
    "GNUmakefile": "build entry point",
}


@app.callback()
def main(
    log_level: Annotated[
        str,
        Option(
            "--log-level",
            envvar="SRPCGEN_LOG_LEVEL",
            help="Logging level (DEBUG, INFO, WARNING, ERROR).",
        ),
    ] = "WARNING",
) -> None:
    """srpcgen: generate example client/server projects for HTTP, Redis and proxies."""
    setup_logging(log_level)


def _program(ctx: Context) -> str:
    return ctx.find_root().info_name or "srpcgen"


def _choose_proxy_types(config: GeneratorConfig) -> None:
    interactive = sys.stdin.isatty()

    if config.proxy_client_type is None:
        config.proxy_client_type = (
            prompt_protocol("Select client-side protocol") if interactive else ProtocolType.HTTP
        )
    if config.proxy_server_type is None:
        config.proxy_server_type = (
            prompt_protocol("Select server-side protocol") if interactive else ProtocolType.HTTP
        )


def _generate(ctx: Context, controller: Controller, project_name: str) -> None:
    program = _program(ctx)
    argv = [program, controller.command.value, project_name, *ctx.args]

    if not controller.parse_options(argv):
        controller.print_usage(program)
        raise Exit(code=1)

    config = controller.config
    if config.project_dir.exists():
        _console.print(f"[bold red]Error:[/] Directory '{config.project_dir}' already exists.")
        raise Exit(code=1)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  srpcgen v{srpcgen.__version__}")
    _console.print("[dim]│[/]")

    if config.is_proxy:
        _choose_proxy_types(config)

    _console.print("[bold green]◇[/]  Protocols")
    _console.print(f"[dim]│[/]  server: {server_protocol(config).label}")
    _console.print(f"[dim]│[/]  client: {client_protocol(config).label}")
    _console.print("[dim]│[/]")

    _console.print(f"[bold green]◇[/]  Creating {config.project_dir}/...")

    try:
        created = render_project(config, controller.files)
    except (GenerationError, FileExistsError) as exc:
        logger.debug("Generation failed", exc_info=True)
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=1) from None

    for name in created:
        desc = _FILE_DESCRIPTIONS.get(name, "")
        desc_str = f" [dim]- {desc}[/]" if desc else ""
        _console.print(f"[dim]│[/]  {name}{desc_str}")

    build = "make"
    if config.specified_depend_path:
        build = f"make WORKFLOW_DIR={config.depend_path}"

    _console.print("[dim]│[/]")
    _console.print(
        f"[bold cyan]●[/]  Done! cd {config.project_dir} && {build} && ./server & ./client"
    )
    _console.print()


@app.command(context_settings=_PASSTHROUGH)
def http(
    ctx: Context,
    project_name: Annotated[str, Argument(help="Name for the new project directory")],
) -> None:
    """Create an HTTP server and client example.

    Flags: -o OUTPUT_PATH, -t TEMPLATE_PATH, -d DEPENDENCY_PATH.
    """
    _generate(ctx, http_controller(), project_name)


@app.command(context_settings=_PASSTHROUGH)
def redis(
    ctx: Context,
    project_name: Annotated[str, Argument(help="Name for the new project directory")],
) -> None:
    """Create a Redis server and client example.

    Flags: -o OUTPUT_PATH, -t TEMPLATE_PATH, -d DEPENDENCY_PATH.
    """
    _generate(ctx, redis_controller(), project_name)


@app.command(context_settings=_PASSTHROUGH)
def proxy(
    ctx: Context,
    project_name: Annotated[str, Argument(help="Name for the new project directory")],
) -> None:
    """Create a proxy example whose client and server sides may speak different protocols.

    Flags: -o OUTPUT_PATH, -t TEMPLATE_PATH, -d DEPENDENCY_PATH,
    -c CLIENT_TYPE, -s SERVER_TYPE.
    """
    _generate(ctx, proxy_controller(), project_name)


@app.command()
def protocols() -> None:
    """List the supported protocols and their default ports."""
    _console.print()
    _console.print("[bold cyan]◆[/]  Supported protocols")
    _console.print("[dim]│[/]")
    for p in ProtocolType.known():
        _console.print(f"[dim]│[/]  [bold cyan]{p.value:<8}[/] [bold]{p.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 8} [dim]default port {p.default_port}[/]")
        _console.print("[dim]│[/]")
    _console.print()
