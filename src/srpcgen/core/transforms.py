"""Per-file transforms turning a template into generated text.

Templates use ``string.Template`` placeholders (``$port``, ``$type`` ...). Each
transform declares the exact placeholder set its template must contain, so a
template that drifts from its transform is rejected by ``Transform.check``
before anything is written.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from string import Template
from typing import TextIO

from srpcgen.core import fragments
from srpcgen.core.config import GeneratorConfig
from srpcgen.core.errors import TemplateMismatchError
from srpcgen.core.resolver import client_protocol, server_protocol
from srpcgen.core.types import ProtocolType, Target

logger = logging.getLogger(__name__)

Arguments = Callable[[GeneratorConfig], Mapping[str, object]]


def default_port(protocol: ProtocolType, proxy: bool = False) -> int:
    """Conventional port for *protocol*; a proxy listens one port below it."""
    port = protocol.default_port
    return port - 1 if proxy else port


@dataclass(frozen=True)
class Transform:
    """
    Strategy producing one template's substitution arguments.

    Attributes:
        name: Short identifier used in log and error messages.
        placeholders: Exact set of identifiers the template must contain.
        arguments: Builds the substitution mapping from a configuration.
    """

    name: str
    placeholders: frozenset[str]
    arguments: Arguments

    def check(self, fmt: str) -> None:
        """Raise ``TemplateMismatchError`` unless *fmt* uses exactly ``placeholders``."""
        template = Template(fmt)
        if not template.is_valid():
            raise TemplateMismatchError(self.name, set(), {"<invalid placeholder>"})

        found = set(template.get_identifiers())
        if found != self.placeholders:
            raise TemplateMismatchError(
                self.name, set(self.placeholders - found), found - self.placeholders
            )

    def render(self, fmt: str, config: GeneratorConfig) -> str:
        args = self.arguments(config)
        if set(args) != self.placeholders:
            raise TemplateMismatchError(
                self.name, set(self.placeholders - set(args)), set(args) - self.placeholders
            )
        return Template(fmt).substitute(args)

    def __call__(self, fmt: str, out: TextIO, config: GeneratorConfig) -> bool:
        """Write the substituted template to *out*; ``False`` if nothing was written."""
        written = out.write(self.render(fmt, config))
        logger.debug("%s transform wrote %d characters", self.name, written)
        return written > 0


def _server_config(config: GeneratorConfig) -> dict[str, object]:
    return {"port": default_port(server_protocol(config), config.is_proxy)}


def _client_config(config: GeneratorConfig) -> dict[str, object]:
    protocol = client_protocol(config)
    return {
        "port": default_port(protocol, config.is_proxy),
        "redirect": fragments.client_redirect(protocol, Target.CONFIG),
        "credentials": fragments.credentials(protocol, Target.CONFIG),
    }


def _server_main(config: GeneratorConfig) -> dict[str, object]:
    protocol = server_protocol(config)
    return {
        "type": protocol.label,
        "process": fragments.server_handler(protocol),
    }


def _client_main(config: GeneratorConfig) -> dict[str, object]:
    protocol = client_protocol(config)
    return {
        "type": protocol.label,
        "type_lower": protocol.label.lower(),
        "callback": fragments.client_callback(protocol),
        "credentials": fragments.credentials(protocol, Target.SOURCE),
        "redirect": fragments.client_redirect(protocol, Target.SOURCE),
        "set_request": fragments.client_request(protocol),
    }


SERVER_CONFIG = Transform("server-config", frozenset({"port"}), _server_config)
CLIENT_CONFIG = Transform(
    "client-config", frozenset({"port", "redirect", "credentials"}), _client_config
)
SERVER_MAIN = Transform("server-main", frozenset({"type", "process"}), _server_main)
CLIENT_MAIN = Transform(
    "client-main",
    frozenset({"type", "type_lower", "callback", "credentials", "redirect", "set_request"}),
    _client_main,
)
