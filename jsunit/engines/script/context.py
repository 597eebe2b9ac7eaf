"""
ScriptContext: out, errors, resources and mocks for one evaluation.
"""

from collections.abc import Mapping
from typing import Any

from jsunit.engines.script.sandbox import JavaScriptEngine, build_scope


class ScriptContext:
    """
    Collects the bindings of one evaluation scope, in installation order:
    out, errors, every resource, then every mock.
    A name present in a later group shadows the same name in an earlier one.
    """

    def __init__(
        self,
        *,
        engine: JavaScriptEngine,
        resources: Mapping[str, Any] | None = None,
        mocks: Mapping[str, Any] | None = None,
    ) -> None:
        self._engine = engine
        self.out = engine.out
        self.errors = engine.errors
        self.resources = dict(resources or {})
        self.mocks = dict(mocks or {})

    def to_dict(self) -> dict[str, Any]:
        """Name -> boxed value. Mocks are applied last so they win over resources."""
        bindings: dict[str, Any] = {
            "out": self.out,
            "errors": self.errors,
        }
        bindings.update(self.resources)
        bindings.update(self.mocks)
        return bindings

    def build(self) -> Any:
        """Fresh engine scope populated from to_dict()."""
        return build_scope(self._engine, self.to_dict())
