"""Unit tests for core.config: defaults and JSUNIT_ environment overrides."""

import pytest
from pydantic import ValidationError

from jsunit.core.config import Settings


def test_defaults() -> None:
    s = Settings(_env_file=None)
    assert s.TARGET_ROOT == "src/main/webapp/js"
    assert s.TEST_ROOT == "src/test/js"
    assert s.RESOURCE_ROOT is None
    assert s.SCRIPT_ENCODING is None
    assert s.SCRIPT_EXEC_TIMEOUT is None
    assert s.SCRIPT_MEMORY_LIMIT is None


def test_env_prefix_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSUNIT_TARGET_ROOT", "static/js")
    monkeypatch.setenv("JSUNIT_RESOURCE_ROOT", "vendor")
    monkeypatch.setenv("JSUNIT_SCRIPT_EXEC_TIMEOUT", "2.5")
    s = Settings(_env_file=None)
    assert s.TARGET_ROOT == "static/js"
    assert s.RESOURCE_ROOT == "vendor"
    assert s.SCRIPT_EXEC_TIMEOUT == 2.5


def test_empty_env_value_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSUNIT_TEST_ROOT", "")
    assert Settings(_env_file=None).TEST_ROOT == "src/test/js"


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, SCRIPT_EXEC_TIMEOUT=0)
