"""
Completion: the value of an evaluated script and its coercions.

Coercions run inside the engine (String, Number, Boolean), so the results follow
JavaScript conversion rules: non-numeric values give NaN, and 0, "", null,
undefined and NaN are false.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from jsunit.core.exceptions import ScriptEvaluationError
from jsunit.engines.script.sandbox import ENGINE_ERRORS, JavaScriptEngine

T = TypeVar("T")


class Completion:
    """Boxed completion value bound to the engine that produced it."""

    def __init__(self, engine: JavaScriptEngine, box: Any, *, source_name: str) -> None:
        self._engine = engine
        self._box = box
        self.source_name = source_name

    @property
    def box(self) -> Any:
        return self._box

    @property
    def value(self) -> Any:
        return self._coerce(self._engine.value)

    def to_text(self) -> str:
        return self._coerce(self._engine.to_text)

    def to_number(self) -> float:
        return self._coerce(self._engine.to_number)

    def to_boolean(self) -> bool:
        return self._coerce(self._engine.to_boolean)

    def _coerce(self, fn: Callable[[Any], T]) -> T:
        # toString / valueOf defined by the script may throw.
        try:
            return fn(self._box)
        except ENGINE_ERRORS as e:
            raise ScriptEvaluationError(self.source_name, str(e)) from e
