"""Tests for the repository inspector."""

import os

import pytest

from prj.core.errors import InspectionError, InspectionErrorKind
from prj.core.identifier import parse
from prj.core.inspector import FetchPolicy, Inspector
from prj.core.types import UpstreamKind

ALICE = parse("git@host:Alice/Repo.git")


def test_missing_checkout_is_not_installed_and_issues_no_queries(vcs, root):
    location = os.path.join(root, "alice", "repo")
    result = Inspector(vcs).inspect(ALICE, location)

    assert result.installed is False
    assert result.display_name == "alice/repo"
    assert vcs.calls == []


def test_tracked_upstream_behind(vcs, make_checkout):
    location = make_checkout("alice", "repo", upstream="origin/main",
                             counts={("HEAD", "origin/main"): 2})
    result = Inspector(vcs).inspect(ALICE, location)

    assert result.installed
    assert result.upstream_kind == UpstreamKind.TRACKED
    assert result.compare_ref == "origin/main"
    assert (result.behind, result.ahead, result.changed_files) == (2, 0, 0)
    assert not result.is_clean


def test_tracked_upstream_clean(vcs, make_checkout):
    location = make_checkout("alice", "repo", upstream="origin/main")
    result = Inspector(vcs).inspect(ALICE, location)
    assert result.is_clean


def test_fallback_prefers_main(vcs, make_checkout):
    location = make_checkout("alice", "repo", branch="feature", refs={"main", "master"},
                             counts={("main", "HEAD"): 3, ("master", "HEAD"): 9})
    result = Inspector(vcs).inspect(ALICE, location)

    assert result.upstream_kind == UpstreamKind.NONE
    assert result.compare_ref == "main"
    assert result.ahead == 3
    assert result.behind == 0


def test_fallback_uses_master_without_main(vcs, make_checkout):
    location = make_checkout("alice", "repo", branch="feature", refs={"master"},
                             counts={("master", "HEAD"): 1})
    result = Inspector(vcs).inspect(ALICE, location)
    assert result.compare_ref == "master"
    assert result.ahead == 1


def test_no_upstream_and_no_default_branch(vcs, make_checkout):
    location = make_checkout("alice", "repo", branch="trunk")
    result = Inspector(vcs).inspect(ALICE, location)

    assert result.compare_ref is None
    assert (result.behind, result.ahead) == (0, 0)
    assert result.is_clean


def test_fallback_clean_ignores_behind(vcs, make_checkout):
    location = make_checkout("alice", "repo", refs={"main"})
    assert Inspector(vcs).inspect(ALICE, location).is_clean


def test_changed_files_make_checkout_dirty(vcs, make_checkout):
    location = make_checkout("alice", "repo", upstream="origin/main", changed=4)
    result = Inspector(vcs).inspect(ALICE, location)
    assert result.changed_files == 4
    assert not result.is_clean


def test_branch_failure_raises(vcs, make_checkout):
    location = make_checkout("alice", "repo", branch=None)
    with pytest.raises(InspectionError) as excinfo:
        Inspector(vcs).inspect(ALICE, location)
    assert excinfo.value.kind == InspectionErrorKind.BRANCH_RESOLUTION_FAILED
    assert ("fetch", location) not in vcs.calls


def test_fetch_failure_raises_under_omit_policy(vcs, make_checkout):
    location = make_checkout("alice", "repo", fetch_fails=True, upstream="origin/main")
    with pytest.raises(InspectionError) as excinfo:
        Inspector(vcs).inspect(ALICE, location)
    assert excinfo.value.kind == InspectionErrorKind.FETCH_FAILED
    assert ("count_commits", location) not in vcs.calls


def test_fetch_failure_is_marked_under_mark_policy(vcs, make_checkout):
    location = make_checkout("alice", "repo", fetch_fails=True, upstream="origin/main",
                             counts={("HEAD", "origin/main"): 5}, changed=1)
    result = Inspector(vcs, fetch_policy=FetchPolicy.MARK).inspect(ALICE, location)

    assert result.fetch_failed
    assert result.branch == "main"
    assert result.changed_files == 1
    assert (result.behind, result.ahead) == (0, 0)
    assert not result.is_clean


def test_fetch_can_be_disabled(vcs, make_checkout):
    location = make_checkout("alice", "repo", fetch_fails=True)
    result = Inspector(vcs, fetch=False).inspect(ALICE, location)
    assert result.installed
    assert ("fetch", location) not in vcs.calls
