"""
ScriptExecutor: execute(source, context, source_name) -> boxed completion value.

Builds a fresh scope from the context, evaluates the source in it and
translates engine failures into ScriptEvaluationError / ScriptTimeoutError.
The scope is dropped when the call returns; only the completion value is kept.
"""

import logging
from typing import Any

from jsunit.core.exceptions import ScriptEvaluationError, ScriptTimeoutError

from .context import ScriptContext
from .sandbox import ENGINE_ERRORS, JavaScriptEngine

_log = logging.getLogger(__name__)

# QuickJS reports an expired time limit as an uncatchable InternalError.
_INTERRUPTED_MARKER = "interrupted"


def _first_line(message: str) -> str:
    return message.splitlines()[0] if message else message


class ScriptExecutor:
    """Evaluate JavaScript source in a fresh scope of the given engine."""

    def __init__(self, engine: JavaScriptEngine) -> None:
        self._engine = engine

    def execute(self, source: str, context: ScriptContext, *, source_name: str) -> Any:
        """
        Evaluate source with the bindings of context. Line numbers start at one.
        Returns the boxed completion value; raises ScriptEvaluationError on failure.
        """
        scope = context.build()
        try:
            return self._engine.run(scope, source)
        except ENGINE_ERRORS as e:
            raise self._translate(e, source_name) from e

    def _translate(self, e: Exception, source_name: str) -> ScriptEvaluationError:
        message = str(e)
        if self._engine.time_limit is not None and _INTERRUPTED_MARKER in _first_line(message):
            _log.warning("Script %s timed out after %ss", source_name, self._engine.time_limit)
            return ScriptTimeoutError(
                source_name, f"Script execution timed out after {self._engine.time_limit}s"
            )
        _log.warning("Script %s failed: %s", source_name, _first_line(message))
        return ScriptEvaluationError(source_name, message)
