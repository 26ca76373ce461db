import os

import pytest

from fsminspect.shared.config import TolerancePolicy, reset_policy_cache


@pytest.fixture(autouse=True)
def _fresh_policy(monkeypatch, tmp_path):
    # no stray FSM_* variables or .env files leak into the defaults
    for key in list(os.environ):
        if key.upper().startswith("FSM_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_policy_cache()
    yield
    reset_policy_cache()


@pytest.fixture
def policy():
    return TolerancePolicy()
