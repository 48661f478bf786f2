"""Shared fixtures: a scriptable VcsClient and a temporary checkout root."""

import os
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

import pytest

from prj.vcs.base import VcsClient, VcsError


@dataclass
class FakeRepo:
    """Scripted state of one fake checkout."""
    branch: Optional[str] = "main"
    upstream: Optional[str] = None
    refs: Set[str] = field(default_factory=set)
    counts: Dict[Tuple[str, str], int] = field(default_factory=dict)
    changed: int = 0
    stashes: int = 0
    fetch_fails: bool = False
    delay: float = 0.0


class FakeVcs(VcsClient):
    """In-memory VcsClient keyed by checkout path; records every call."""

    def __init__(self):
        self.repos: Dict[str, FakeRepo] = {}
        self.calls: List[Tuple[str, str]] = []

    def add(self, path: str, **state) -> FakeRepo:
        repo = FakeRepo(**state)
        self.repos[path] = repo
        return repo

    def _repo(self, method: str, path: str) -> FakeRepo:
        self.calls.append((method, path))
        if path not in self.repos:
            raise VcsError(f"not a repository: {path}")
        return self.repos[path]

    def current_branch(self, repo_path):
        repo = self._repo("current_branch", repo_path)
        if repo.branch is None:
            raise VcsError("no branch")
        return repo.branch

    def fetch(self, repo_path, timeout=None):
        repo = self._repo("fetch", repo_path)
        if repo.delay:
            time.sleep(repo.delay)
        if repo.fetch_fails:
            raise VcsError("could not read from remote")

    def tracking_ref(self, repo_path):
        return self._repo("tracking_ref", repo_path).upstream

    def ref_exists(self, repo_path, ref):
        return ref in self._repo("ref_exists", repo_path).refs

    def count_commits(self, repo_path, base, head):
        return self._repo("count_commits", repo_path).counts.get((base, head), 0)

    def changed_files(self, repo_path):
        return self._repo("changed_files", repo_path).changed

    def stash_count(self, repo_path):
        return self._repo("stash_count", repo_path).stashes


@pytest.fixture
def vcs():
    return FakeVcs()


@pytest.fixture
def root(tmp_path):
    path = tmp_path / "Projects"
    path.mkdir()
    return str(path)


@pytest.fixture
def make_checkout(root, vcs):
    """Create root/owner/name on disk and register fake VCS state for it."""
    def _make(owner: str, name: str, **state) -> str:
        path = os.path.join(root, owner, name)
        os.makedirs(path)
        vcs.add(path, **state)
        return path
    return _make
