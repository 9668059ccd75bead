from __future__ import annotations

from pathlib import Path

import pytest

from fluentwait.config.loader import CONFIG_ENV_VAR, ConfigLoader
from fluentwait.logging.artifacts import ArtifactManager

CORE_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="session", autouse=True)
def clean_failure_artifacts():
    return ArtifactManager(CORE_ROOT / "artifacts").reset()


@pytest.fixture()
def wait_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return ConfigLoader.load(CORE_ROOT / "config" / "wait.json")
