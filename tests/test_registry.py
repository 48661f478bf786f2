"""Tests for the registry file and checkout layout."""

import os

import pytest

from prj.core.errors import RegistryUnavailable
from prj.core.identifier import parse
from prj.core.layout import find_unexpected_directories, is_installed, is_within, repo_location
from prj.core.registry import REGISTRY_TEMPLATE, Registry


def test_read_missing_registry_raises(tmp_path):
    with pytest.raises(RegistryUnavailable):
        Registry(str(tmp_path / "missing")).read()


def test_create_writes_template_once(tmp_path):
    path = tmp_path / "nested" / ".current-projects"
    registry = Registry(str(path))

    assert registry.create() is True
    assert path.read_text() == REGISTRY_TEMPLATE
    assert registry.create() is False
    assert registry.read() == []


def test_read_filters_comments_and_blank_lines(tmp_path):
    path = tmp_path / "registry"
    path.write_text("# header\n\n  git@h:a/b.git  \n   # indented comment\ngit@h:c/d\n")
    assert Registry(str(path)).read() == ["git@h:a/b.git", "git@h:c/d"]


def test_append_adds_line_at_end(tmp_path):
    path = tmp_path / "registry"
    path.write_text("git@h:a/b")  # no trailing newline
    registry = Registry(str(path))

    registry.append("git@h:c/d.git")

    assert path.read_text() == "git@h:a/b\ngit@h:c/d.git\n"
    assert registry.read() == ["git@h:a/b", "git@h:c/d.git"]


def test_append_to_missing_registry_raises(tmp_path):
    with pytest.raises(RegistryUnavailable):
        Registry(str(tmp_path / "missing")).append("git@h:a/b")


def test_contains_ignores_case_and_suffix(tmp_path):
    path = tmp_path / "registry"
    path.write_text("git@h:Alice/Repo.git\n")
    registry = Registry(str(path))
    assert registry.contains("git@h:alice/repo")
    assert not registry.contains("git@h:alice/other")


def test_remove_keeps_comments_and_order(tmp_path):
    path = tmp_path / "registry"
    path.write_text("# header\ngit@h:a/b\ngit@h:c/d\ngit@h:e/f\n")
    registry = Registry(str(path))

    assert registry.remove("git@h:c/d") is True
    assert path.read_text() == "# header\ngit@h:a/b\ngit@h:e/f\n"
    assert registry.remove("git@h:c/d") is False


def test_repo_location(tmp_path):
    location = repo_location(str(tmp_path), parse("git@h:Alice/Repo.git"))
    assert location == os.path.join(str(tmp_path), "alice", "repo")
    assert not is_installed(location)
    os.makedirs(location)
    assert is_installed(location)


def test_find_unexpected_directories(tmp_path):
    for rel in ("alice/repo", "alice/stray", "bob/tool", ".logs/x"):
        (tmp_path / rel).mkdir(parents=True)
    (tmp_path / "alice" / "notes.txt").write_text("")
    (tmp_path / ".current-projects").write_text("")

    registered = [parse("git@h:alice/repo"), parse("git@h:carol/missing")]
    assert find_unexpected_directories(str(tmp_path), registered) == ["alice/stray", "bob/tool"]


def test_find_unexpected_directories_missing_root(tmp_path):
    assert find_unexpected_directories(str(tmp_path / "nope"), []) == []


def test_read_non_utf8_registry_raises_unavailable(tmp_path):
    path = tmp_path / "registry"
    path.write_bytes(b"git@h:a/b\n\xff\xfe\xfa\n")
    with pytest.raises(RegistryUnavailable) as excinfo:
        Registry(str(path)).read()
    assert "UTF-8" in excinfo.value.reason


def test_remove_cleans_up_temp_file_on_failure(tmp_path, monkeypatch):
    path = tmp_path / "registry"
    path.write_text("git@h:a/b\ngit@h:c/d\n")

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("prj.core.registry.os.replace", failing_replace)

    with pytest.raises(OSError):
        Registry(str(path)).remove("git@h:a/b")

    assert not (tmp_path / "registry.tmp").exists()
    assert path.read_text() == "git@h:a/b\ngit@h:c/d\n"


def test_is_within(tmp_path):
    root = tmp_path / "Projects"
    (root / "alice" / "repo").mkdir(parents=True)
    assert is_within(str(root), str(root / "alice" / "repo"))
    assert not is_within(str(root), str(root))
    assert not is_within(str(root), str(root / ".." / "victim"))
