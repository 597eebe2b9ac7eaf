"""
ScriptHarness: register resources and mocks, then evaluate target + test scripts.

Each evaluation concatenates the target script and the test script (target
first, no separator) and evaluates the result in a fresh scope holding:

- ``out``: text sink (stdout by default)
- ``errors``: the harness ErrorLog, shared by every evaluation
- every resource under its alias
- every mock under its alias, shadowing a resource with the same alias

The completion value is returned raw (evaluate) or coerced to text, number or
boolean with JavaScript semantics.
"""

import logging
from dataclasses import dataclass
from typing import IO, Any

from jsunit.core.config import settings as default_settings
from jsunit.core.loader import ScriptLoader
from jsunit.core.result import Completion
from jsunit.engines.script import JavaScriptEngine, ScriptContext, ScriptExecutor
from jsunit.engines.script.modules import ErrorLog, make_out_writer
from jsunit.engines.script.sandbox import RESERVED_NAMES

_log = logging.getLogger(__name__)

# Spelling kept as-is: existing suites match on this line.
RUN_BANNER = "Runnning test {test} against {target}"


@dataclass(frozen=True)
class ResourceEntry:
    """Compiled resource or mock: the boxed completion value of its script."""

    alias: str
    path: str
    value: Any


class ScriptHarness:
    """
    Holds the resource and mock catalogs and the ErrorLog of one test suite.
    Not thread-safe: use one harness per thread.
    """

    def __init__(
        self,
        *,
        loader: ScriptLoader | None = None,
        settings: Any = None,
        stream: IO[str] | None = None,
    ) -> None:
        s = settings or default_settings
        self.loader = loader or ScriptLoader(settings=s)
        self.errors = ErrorLog()
        self.engine = JavaScriptEngine(
            errors=self.errors,
            write=make_out_writer(stream),
            time_limit=s.SCRIPT_EXEC_TIMEOUT,
            memory_limit=s.SCRIPT_MEMORY_LIMIT,
        )
        self._executor = ScriptExecutor(self.engine)
        self.resources: dict[str, ResourceEntry] = {}
        self.mocks: dict[str, ResourceEntry] = {}

    def register_resource(self, alias: str, path: str) -> None:
        """Evaluate the script at path and bind its completion value under alias in every test."""
        self.resources[alias] = self._compile(alias, path)
        _log.debug("Registered resource %s from %s", alias, path)

    def register_mock(self, alias: str, path: str) -> None:
        """
        Like register_resource, but mocks are installed after resources and win on
        alias collisions. Resources are not visible while a mock script is compiled.
        """
        self.mocks[alias] = self._compile(alias, path)
        _log.debug("Registered mock %s from %s", alias, path)

    def run(self, target_name: str, test_name: str) -> Completion:
        """
        Evaluate target + test in a fresh scope and return the Completion.
        Scripts are read before anything is logged, so a missing file leaves the ErrorLog untouched.
        """
        target_source = self.loader.load_target(target_name)
        test_source = self.loader.load_test(test_name)
        self.errors.append(RUN_BANNER.format(test=test_name, target=target_name))
        context = ScriptContext(
            engine=self.engine,
            resources={alias: entry.value for alias, entry in self.resources.items()},
            mocks={alias: entry.value for alias, entry in self.mocks.items()},
        )
        _log.debug("Evaluating %s against %s", test_name, target_name)
        box = self._executor.execute(target_source + test_source, context, source_name=test_name)
        return Completion(self.engine, box, source_name=test_name)

    def evaluate(self, target_name: str, test_name: str) -> Any:
        return self.run(target_name, test_name).value

    def evaluate_to_text(self, target_name: str, test_name: str) -> str:
        return self.run(target_name, test_name).to_text()

    def evaluate_to_number(self, target_name: str, test_name: str) -> float:
        return self.run(target_name, test_name).to_number()

    def evaluate_to_boolean(self, target_name: str, test_name: str) -> bool:
        return self.run(target_name, test_name).to_boolean()

    def read_errors(self) -> str:
        return self.errors.render()

    def clear_errors(self) -> None:
        self.errors.clear()

    def _compile(self, alias: str, path: str) -> ResourceEntry:
        if not alias:
            raise ValueError("alias must be a non-empty string")
        if alias in RESERVED_NAMES:
            raise ValueError(f"alias {alias!r} is reserved")
        source = self.loader.load_resource(path)
        context = ScriptContext(engine=self.engine)
        value = self._executor.execute(source, context, source_name=path)
        return ResourceEntry(alias=alias, path=path, value=value)
