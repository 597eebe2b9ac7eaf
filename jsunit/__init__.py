"""
jsunit: evaluate JavaScript sources against test scripts, with resources and mocks
bound into a fresh scope per evaluation.
"""

from jsunit.core.exceptions import ScriptEvaluationError, ScriptLoadError, ScriptTimeoutError
from jsunit.core.loader import ScriptLoader
from jsunit.core.result import Completion
from jsunit.harness import RUN_BANNER, ResourceEntry, ScriptHarness

__all__ = [
    "Completion",
    "RUN_BANNER",
    "ResourceEntry",
    "ScriptEvaluationError",
    "ScriptHarness",
    "ScriptLoadError",
    "ScriptLoader",
    "ScriptTimeoutError",
]
