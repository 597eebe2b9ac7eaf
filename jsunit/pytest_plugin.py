"""
pytest plugin: a ``js_harness`` fixture with a fresh ScriptHarness per test.

Registered through the ``pytest11`` entry point. Roots come from jsunit settings
(JSUNIT_TARGET_ROOT, JSUNIT_TEST_ROOT, JSUNIT_RESOURCE_ROOT).
"""

import pytest

from jsunit.harness import ScriptHarness


@pytest.fixture
def js_harness() -> ScriptHarness:
    return ScriptHarness()
