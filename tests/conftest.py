"""Shared fixtures for the srpcgen test suite."""

from __future__ import annotations

from collections.abc import Iterator
import importlib.resources as ilr
import logging
from pathlib import Path
import shutil

import pytest

from srpcgen.core import Command, GeneratorConfig, ProtocolType


@pytest.fixture
def http_config() -> GeneratorConfig:
    return GeneratorConfig(command=Command.HTTP)


@pytest.fixture
def redis_config() -> GeneratorConfig:
    return GeneratorConfig(command=Command.REDIS)


@pytest.fixture
def mysql_config() -> GeneratorConfig:
    return GeneratorConfig(command=Command.MYSQL)


@pytest.fixture
def proxy_config() -> GeneratorConfig:
    """Proxy whose client side speaks HTTP and whose server side speaks Redis."""
    return GeneratorConfig(
        command=Command.PROXY,
        proxy_client_type=ProtocolType.HTTP,
        proxy_server_type=ProtocolType.REDIS,
    )


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """Writable copy of the bundled templates."""
    dest = tmp_path / "templates"
    with ilr.as_file(ilr.files("srpcgen").joinpath("templates")) as src:
        shutil.copytree(src, dest)
    return dest


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo handlers and levels installed by ``setup_logging`` during a test."""
    logger = logging.getLogger("srpcgen")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
