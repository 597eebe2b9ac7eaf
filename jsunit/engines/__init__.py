"""
Engines: Script (JavaScript).
"""

from jsunit.engines.script import ScriptContext, ScriptExecutor

__all__ = [
    "ScriptExecutor",
    "ScriptContext",
]
