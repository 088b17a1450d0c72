"""Materializes a manifest into a project directory on disk.

Every template is read and checked against its transform before anything is
written. Files are generated into a staging directory next to the target and
the staging directory is renamed into place only once every entry succeeded.
"""

from __future__ import annotations

import importlib.resources as ilr
from importlib.resources.abc import Traversable
import logging
import os
from pathlib import Path
import shutil
import tempfile

from srpcgen.core.config import GeneratorConfig
from srpcgen.core.errors import GenerationError, WriteError
from srpcgen.core.manifest import FileEntry, Manifest

logger = logging.getLogger(__name__)


def template_root(config: GeneratorConfig) -> Traversable:
    """Root of the template tree: ``-t`` if given, the bundled templates otherwise."""
    if config.template_path is not None:
        return config.template_path
    return ilr.files("srpcgen").joinpath("templates")


def _locate(root: Traversable, relative: str) -> Traversable:
    source = root
    for part in relative.split("/"):
        source = source.joinpath(part)
    return source


def _load(root: Traversable, files: Manifest) -> list[bytes]:
    """Read every template, checking transformed ones against their transform."""
    contents: list[bytes] = []
    for entry in files:
        source = _locate(root, entry.template)
        if not source.is_file():
            raise GenerationError(f"Template '{entry.template}' not found in {root}")

        try:
            data = source.read_bytes()
        except OSError as exc:
            raise GenerationError(f"Cannot read template '{entry.template}': {exc}") from exc

        if entry.transform is not None:
            try:
                fmt = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise GenerationError(f"Template '{entry.template}' is not valid UTF-8") from exc
            entry.transform.check(fmt)
        contents.append(data)
    return contents


def _directory_mode() -> int:
    """Mode ``mkdir`` would give a new directory under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o777 & ~umask


def _materialize(entry: FileEntry, data: bytes, root: Path, config: GeneratorConfig) -> None:
    target = root / entry.destination
    target.parent.mkdir(parents=True, exist_ok=True)

    if entry.transform is None:
        target.write_bytes(data)
        logger.debug("Copied %s -> %s", entry.template, entry.destination)
        return

    # _load has already decoded this template once
    with target.open("w", encoding="utf-8") as out:
        ok = entry.transform(data.decode("utf-8"), out, config)

    if not ok:
        raise WriteError(entry.destination)
    logger.debug("Rendered %s -> %s", entry.template, entry.destination)


def render_project(config: GeneratorConfig, files: Manifest) -> list[str]:
    """Render *files* into ``config.project_dir``. Returns the created file names.

    Raises ``FileExistsError`` if the project directory exists and
    ``GenerationError`` for template problems and for any I/O failure while
    writing. Nothing is left behind on failure.
    """
    project_dir = config.project_dir
    if project_dir.exists():
        raise FileExistsError(f"Directory '{project_dir}' already exists.")

    contents = _load(template_root(config), files)

    try:
        project_dir.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{project_dir.name}-", dir=project_dir.parent))
    except OSError as exc:
        raise GenerationError(f"Cannot create '{project_dir}': {exc}") from exc
    logger.info("Generating %s in staging directory %s", project_dir, staging)

    try:
        for entry, data in zip(files, contents):
            _materialize(entry, data, staging, config)
        staging.chmod(_directory_mode())
        staging.rename(project_dir)
    except OSError as exc:
        shutil.rmtree(staging, ignore_errors=True)
        raise GenerationError(f"Failed to write '{project_dir}': {exc}") from exc
    except BaseException:
        shutil.rmtree(staging, ignore_errors=True)
        raise

    logger.info("Generated %d files in %s", len(files), project_dir)
    return [entry.destination for entry in files]
