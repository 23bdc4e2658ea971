"""Unit tests for the batch build."""

from pathlib import Path
from unittest.mock import MagicMock

from postprep.adapters.dates import GitCLIAdapter, NullVersionControlAdapter
from postprep.adapters.storage import FilesystemAdapter
from postprep.build import create_post_service, run_build
from postprep.config import DatesConfig, PathsConfig, ScanConfig, Settings
from postprep.domain.models import ProcessingResult
from postprep.domain.services import PostService
from postprep.ports.storage import StoragePort


def make_settings(tmp_path: Path, use_git: bool = True) -> Settings:
    return Settings(
        paths=PathsConfig(source=tmp_path / "posts", output=tmp_path / "out"),
        scan=ScanConfig(patterns=["*.md"]),
        dates=DatesConfig(use_git=use_git),
    )


class TestCreatePostService:
    """Tests for create_post_service."""

    def test_wires_configured_adapters(self, tmp_path: Path) -> None:
        service = create_post_service(make_settings(tmp_path))

        assert isinstance(service.storage, FilesystemAdapter)
        assert service.storage.output_dir == tmp_path / "out"
        assert isinstance(service.synthesizer.vcs, GitCLIAdapter)

    def test_git_disabled(self, tmp_path: Path) -> None:
        service = create_post_service(make_settings(tmp_path, use_git=False))
        assert isinstance(service.synthesizer.vcs, NullVersionControlAdapter)


class TestRunBuild:
    """Tests for run_build."""

    def test_processes_collected_paths(self, tmp_path: Path) -> None:
        settings = make_settings(tmp_path)
        paths = [tmp_path / "posts" / "a.md", tmp_path / "posts" / "b.md"]
        service = MagicMock(spec=PostService)
        service.storage = MagicMock(spec=StoragePort)
        service.storage.collect.return_value = paths
        service.process_all.return_value = [ProcessingResult(source_path=p) for p in paths]

        results = run_build(settings, service)

        service.storage.collect.assert_called_once_with(tmp_path / "posts", ["*.md"])
        service.process_all.assert_called_once_with(paths)
        assert len(results) == 2

    def test_missing_source_yields_nothing(self, tmp_path: Path) -> None:
        settings = make_settings(tmp_path, use_git=False)

        assert run_build(settings) == []
        assert not (tmp_path / "out").exists()

    def test_non_utf8_pass_through_copied(self, tmp_path: Path) -> None:
        source = tmp_path / "posts"
        source.mkdir()
        raw = b'---\ntitle: "Caf\xe9"\n---\n\nBody\n'
        (source / "latin1.md").write_bytes(raw)
        (source / ".draft.md").write_text("# Draft\n")

        results = run_build(make_settings(tmp_path, use_git=False))

        assert [r.success for r in results] == [True]
        assert (tmp_path / "out" / "latin1.md").read_bytes() == raw
        assert not (tmp_path / "out" / ".draft.md").exists()
