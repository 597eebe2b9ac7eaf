"""
Errors raised by the harness: script loading and script evaluation.
"""


class ScriptLoadError(OSError):
    """Raised when a script file cannot be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read script {path!r}: {reason}")
        self.path = path


class ScriptEvaluationError(ValueError):
    """Raised when the engine rejects a script or the script throws."""

    def __init__(self, source_name: str, message: str) -> None:
        super().__init__(f"{source_name}: {message}")
        self.source_name = source_name
        self.message = message


class ScriptTimeoutError(ScriptEvaluationError):
    """Raised when an evaluation exceeds SCRIPT_EXEC_TIMEOUT."""

    pass
