"""File manifest describing one generated project."""

from __future__ import annotations

from dataclasses import dataclass

from srpcgen.core.transforms import (
    CLIENT_CONFIG,
    CLIENT_MAIN,
    SERVER_CONFIG,
    SERVER_MAIN,
    Transform,
)


@dataclass(frozen=True)
class FileEntry:
    """
    One file to materialize.

    Attributes:
        template: Path of the template, relative to the template root.
        destination: Path of the output, relative to the project directory.
        transform: Transform applied to the template, or ``None`` to copy it verbatim.
    """

    template: str
    destination: str
    transform: Transform | None = None

    def __post_init__(self) -> None:
        if not self.template:
            raise ValueError("template path must not be empty.")
        if not self.destination:
            raise ValueError("destination path must not be empty.")

    @property
    def verbatim(self) -> bool:
        return self.transform is None


Manifest = tuple[FileEntry, ...]


def basic_manifest() -> Manifest:
    """Files of a basic client/server example project, in creation order."""
    return (
        FileEntry("basic/server.conf", "server.conf", SERVER_CONFIG),
        FileEntry("basic/client.conf", "client.conf", CLIENT_CONFIG),
        FileEntry("basic/server_main.cc", "server_main.cc", SERVER_MAIN),
        FileEntry("basic/client_main.cc", "client_main.cc", CLIENT_MAIN),
        FileEntry("common/config.json", "example.conf"),
        FileEntry("common/util.h", "config/util.h"),
        FileEntry("common/CMakeLists.txt", "CMakeLists.txt"),
        FileEntry("common/GNUmakefile", "GNUmakefile"),
        FileEntry("config/Json.h", "config/Json.h"),
        FileEntry("config/Json.cc", "config/Json.cc"),
        FileEntry("config/config_simple.h", "config/config.h"),
        FileEntry("config/config_simple.cc", "config/config.cc"),
    )
