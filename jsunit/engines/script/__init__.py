"""
Script engine (JavaScript, QuickJS).

Exports: ScriptExecutor, ScriptContext, JavaScriptEngine, build_scope.
"""

from .context import ScriptContext
from .executor import ScriptExecutor
from .sandbox import JavaScriptEngine, build_scope

__all__ = [
    "ScriptContext",
    "ScriptExecutor",
    "JavaScriptEngine",
    "build_scope",
]
