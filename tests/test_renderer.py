"""Unit tests for the project renderer."""

from __future__ import annotations

import json
import os
from pathlib import Path
import stat

import pytest

from srpcgen.cli._renderer import render_project, template_root
from srpcgen.core import (
    SERVER_CONFIG,
    Command,
    FileEntry,
    GenerationError,
    GeneratorConfig,
    ProtocolType,
    TemplateMismatchError,
    Transform,
    WriteError,
    basic_manifest,
)


def _config(tmp_path: Path, command: Command = Command.HTTP, **kwargs) -> GeneratorConfig:
    return GeneratorConfig(command=command, project_name="demo", output_path=tmp_path, **kwargs)


def _leftovers(parent: Path) -> list[Path]:
    return [p for p in parent.iterdir() if p.name.startswith(".demo-")]


class TestRenderProject:
    def test_creates_every_file(self, tmp_path: Path) -> None:
        created = render_project(_config(tmp_path), basic_manifest())

        project = tmp_path / "demo"
        assert created == [e.destination for e in basic_manifest()]
        for name in created:
            assert (project / name).is_file(), name
        assert not _leftovers(tmp_path)

    def test_verbatim_files_are_copied(self, tmp_path: Path) -> None:
        config = _config(tmp_path)
        render_project(config, basic_manifest())

        source = template_root(config).joinpath("config").joinpath("Json.cc")
        assert (tmp_path / "demo" / "config" / "Json.cc").read_bytes() == source.read_bytes()

    def test_transformed_files_are_substituted(self, tmp_path: Path) -> None:
        render_project(_config(tmp_path, Command.REDIS), basic_manifest())

        project = tmp_path / "demo"
        server = json.loads((project / "server.conf").read_text())
        client = json.loads((project / "client.conf").read_text())
        assert server["server"]["port"] == 6379
        assert client["client"]["remote_port"] == 6379
        assert client["client"]["user_name"] == "root"
        assert "WFRedisServer" in (project / "server_main.cc").read_text()
        assert "create_redis_task" in (project / "client_main.cc").read_text()

    def test_proxy_project(self, tmp_path: Path) -> None:
        config = _config(
            tmp_path,
            Command.PROXY,
            proxy_client_type=ProtocolType.HTTP,
            proxy_server_type=ProtocolType.REDIS,
        )
        render_project(config, basic_manifest())

        project = tmp_path / "demo"
        assert json.loads((project / "server.conf").read_text())["server"]["port"] == 6378
        assert json.loads((project / "client.conf").read_text())["client"]["remote_port"] == 79

    def test_raises_on_existing_directory(self, tmp_path: Path) -> None:
        (tmp_path / "demo").mkdir()

        with pytest.raises(FileExistsError):
            render_project(_config(tmp_path), basic_manifest())

    def test_creates_missing_output_path(self, tmp_path: Path) -> None:
        config = _config(tmp_path / "nested" / "out")
        render_project(config, basic_manifest())
        assert (tmp_path / "nested" / "out" / "demo" / "server.conf").is_file()

    def test_custom_template_tree(self, tmp_path: Path, template_tree: Path) -> None:
        (template_tree / "common" / "util.h").write_text("// custom\n")
        config = _config(tmp_path, template_path=template_tree)

        render_project(config, basic_manifest())
        assert (tmp_path / "demo" / "config" / "util.h").read_text() == "// custom\n"

    def test_directory_mode_follows_umask(self, tmp_path: Path) -> None:
        previous = os.umask(0o027)
        try:
            render_project(_config(tmp_path), basic_manifest())
        finally:
            os.umask(previous)

        assert stat.S_IMODE((tmp_path / "demo").stat().st_mode) == 0o750


class TestFailures:
    def test_mismatch_detected_before_writing(self, tmp_path: Path, template_tree: Path) -> None:
        client_conf = template_tree / "basic" / "client.conf"
        client_conf.write_text(client_conf.read_text().replace("$credentials", ""))
        out = tmp_path / "out"

        with pytest.raises(TemplateMismatchError):
            render_project(_config(out, template_path=template_tree), basic_manifest())

        assert not out.exists()

    def test_missing_template(self, tmp_path: Path, template_tree: Path) -> None:
        (template_tree / "common" / "GNUmakefile").unlink()

        with pytest.raises(GenerationError, match="GNUmakefile"):
            render_project(_config(tmp_path, template_path=template_tree), basic_manifest())

        assert not (tmp_path / "demo").exists()

    def test_write_failure_removes_partial_output(
        self, tmp_path: Path, template_tree: Path
    ) -> None:
        (template_tree / "empty.txt").write_text("")
        files = (
            FileEntry("basic/server.conf", "server.conf", SERVER_CONFIG),
            FileEntry("empty.txt", "empty.txt", Transform("empty", frozenset(), lambda c: {})),
        )
        out = tmp_path / "out"

        with pytest.raises(WriteError) as info:
            render_project(_config(out, template_path=template_tree), files)

        assert info.value.destination == "empty.txt"
        assert not (out / "demo").exists()
        assert not _leftovers(out)

    def test_template_not_utf8(self, tmp_path: Path, template_tree: Path) -> None:
        (template_tree / "basic" / "client.conf").write_bytes(b'{"port": \xff}\n')

        with pytest.raises(GenerationError, match="basic/client.conf") as info:
            render_project(_config(tmp_path, template_path=template_tree), basic_manifest())

        assert isinstance(info.value.__cause__, UnicodeDecodeError)
        assert not (tmp_path / "demo").exists()

    def test_output_path_under_a_file(self, tmp_path: Path) -> None:
        (tmp_path / "afile").write_text("")

        with pytest.raises(GenerationError) as info:
            render_project(_config(tmp_path / "afile" / "sub"), basic_manifest())

        assert isinstance(info.value.__cause__, NotADirectoryError)

    def test_io_failure_removes_partial_output(self, tmp_path: Path) -> None:
        # The second entry needs "config" as a directory after the first wrote it as a file
        files = (
            FileEntry("common/util.h", "config"),
            FileEntry("common/util.h", "config/util.h"),
        )

        with pytest.raises(GenerationError) as info:
            render_project(_config(tmp_path), files)

        assert isinstance(info.value.__cause__, OSError)
        assert not (tmp_path / "demo").exists()
        assert not _leftovers(tmp_path)
