"""Tests for configuration loading."""

import os

import pytest

from prj.config import DEFAULT_FETCH_TIMEOUT, Config
from prj.core.inspector import FetchPolicy

ENV_VARS = ("PRJ_ROOT", "PRJ_REGISTRY", "PRJ_WORKERS", "PRJ_FETCH_TIMEOUT", "PRJ_LOG_DIR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = Config.from_env_and_args()

    assert config.checkout_root == os.path.join(str(tmp_path), "Projects")
    assert config.registry_path == os.path.join(config.checkout_root, ".current-projects")
    assert config.max_workers is None
    assert config.fetch is True
    assert config.fetch_timeout == DEFAULT_FETCH_TIMEOUT
    assert config.fetch_policy == FetchPolicy.OMIT
    assert config.log_dir is None


def test_environment_values(monkeypatch, tmp_path):
    monkeypatch.setenv("PRJ_ROOT", str(tmp_path / "code"))
    monkeypatch.setenv("PRJ_WORKERS", "4")
    monkeypatch.setenv("PRJ_FETCH_TIMEOUT", "5")

    config = Config.from_env_and_args()

    assert config.checkout_root == str(tmp_path / "code")
    assert config.registry_path == str(tmp_path / "code" / ".current-projects")
    assert config.max_workers == 4
    assert config.fetch_timeout == 5.0


def test_arguments_override_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PRJ_ROOT", str(tmp_path / "env"))
    monkeypatch.setenv("PRJ_REGISTRY", str(tmp_path / "env-registry"))
    monkeypatch.setenv("PRJ_WORKERS", "4")

    config = Config.from_env_and_args(
        root=str(tmp_path / "arg"),
        registry=str(tmp_path / "arg-registry"),
        max_workers=2,
        fetch_policy="mark"
    )

    assert config.checkout_root == str(tmp_path / "arg")
    assert config.registry_path == str(tmp_path / "arg-registry")
    assert config.max_workers == 2
    assert config.fetch_policy == FetchPolicy.MARK


def test_zero_timeout_disables_limit(tmp_path):
    config = Config.from_env_and_args(root=str(tmp_path), fetch_timeout=0)
    assert config.fetch_timeout is None


@pytest.mark.parametrize("kwargs,env", [
    ({"max_workers": 0}, {}),
    ({}, {"PRJ_WORKERS": "many"}),
    ({}, {"PRJ_WORKERS": "-1"}),
    ({}, {"PRJ_FETCH_TIMEOUT": "soon"}),
    ({"fetch_policy": "ignore"}, {}),
])
def test_invalid_values_raise(monkeypatch, tmp_path, kwargs, env):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Config.from_env_and_args(root=str(tmp_path), **kwargs)
