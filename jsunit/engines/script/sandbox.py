"""
Embedded JavaScript engine (QuickJS) for script evaluation.

One quickjs.Context backs a harness. Every evaluation runs in a fresh scope:
a prototype-less object consulted through ``with`` ahead of the global
object, with the source passed to a direct ``eval`` inside a throwaway
function. Declarations land in that function, so nothing survives the call.
Globals created during the call (assignment to undeclared names, writes to
``this``) are moved off the global object onto the scope, where closures made
by the script still reach them.

Values cross the Python boundary boxed in a one-element array so that
undefined, null and object identity are preserved between calls.
"""

from collections.abc import Callable, Mapping
from typing import Any

import quickjs

from jsunit.engines.script.modules.errors import ErrorLog

# Host callables are installed under these names, captured by the prelude, then deleted.
_HOST_NAMES = ("__jsunit_write", "__jsunit_log", "__jsunit_clear", "__jsunit_render")
_API_NAME = "__jsunit_api"
_API_MEMBERS = ("out", "errors", "scope", "bind", "run", "value", "text", "number", "truth")

_PRELUDE = r"""
globalThis.__jsunit_api = (function (global) {
  var write = global.__jsunit_write;
  var log = global.__jsunit_log;
  var clear = global.__jsunit_clear;
  var render = global.__jsunit_render;
  delete global.__jsunit_write;
  delete global.__jsunit_log;
  delete global.__jsunit_clear;
  delete global.__jsunit_render;

  var ownNames = Object.getOwnPropertyNames;
  var create = Object.create;
  var toText = String;
  var toNumber = Number;
  var toBoolean = Boolean;
  var evaluate = new Function("__jsunit_scope__", "__jsunit_source__",
    "with (__jsunit_scope__) { return eval(__jsunit_source__); }");

  function newOut() {
    return {
      print: function (value) { write(toText(value)); },
      println: function (value) {
        write((arguments.length ? toText(value) : "") + "\n");
      }
    };
  }
  var errors = {
    log: function (message) { log(toText(message)); },
    clear: function () { clear(); },
    toString: function () { return render(); }
  };

  return {
    out: function () { return [newOut()]; },
    errors: [errors],
    scope: function () { return create(null); },
    bind: function (scope, name, box) { scope[name] = box[0]; },
    run: function (scope, source) {
      var before = create(null);
      var names = ownNames(global);
      var i;
      for (i = 0; i < names.length; i++) { before[names[i]] = true; }
      try {
        return [evaluate(scope, source)];
      } finally {
        names = ownNames(global);
        for (i = 0; i < names.length; i++) {
          if (!before[names[i]]) {
            scope[names[i]] = global[names[i]];
            delete global[names[i]];
          }
        }
      }
    },
    value: function (box) { return box[0]; },
    text: function (box) { return toText(box[0]); },
    number: function (box) { return toNumber(box[0]); },
    truth: function (box) { return toBoolean(box[0]); }
  };
})(globalThis);
"""

# Names the evaluation wrapper resolves through the scope; binding them would hijack evaluation.
RESERVED_NAMES = frozenset({"eval", "arguments", "__jsunit_scope__", "__jsunit_source__"})

# Raised by quickjs for script errors (syntax, thrown values, interrupts).
ENGINE_ERRORS = (quickjs.JSException,)


class JavaScriptEngine:
    """
    Owns the quickjs.Context, the shared ``errors`` object and the ``out`` factory.
    Not thread-safe: use one engine (one harness) per thread.
    """

    def __init__(
        self,
        *,
        errors: ErrorLog,
        write: Callable[[str], None],
        time_limit: float | None = None,
        memory_limit: int | None = None,
    ) -> None:
        self._context = quickjs.Context()
        callables = (write, errors.append, errors.clear, errors.render)
        for name, fn in zip(_HOST_NAMES, callables):
            self._context.add_callable(name, fn)
        self._context.eval(_PRELUDE)
        self._api = {name: self._context.eval(f"{_API_NAME}.{name}") for name in _API_MEMBERS}
        self._context.eval(f"delete globalThis.{_API_NAME};")
        self.time_limit = time_limit
        if memory_limit is not None:
            self._context.set_memory_limit(memory_limit)
        if time_limit is not None:
            self._context.set_time_limit(time_limit)

    @property
    def out(self) -> Any:
        """A new boxed ``out`` object on every access; changes made by one scope stay there."""
        return self._api["out"]()

    @property
    def errors(self) -> Any:
        """Boxed ``errors`` object."""
        return self._api["errors"]

    def new_scope(self) -> Any:
        return self._api["scope"]()

    def bind(self, scope: Any, name: str, box: Any) -> None:
        self._api["bind"](scope, name, box)

    def run(self, scope: Any, source: str) -> Any:
        """Evaluate source under scope; return the boxed completion value. Raises ENGINE_ERRORS."""
        return self._api["run"](scope, source)

    def value(self, box: Any) -> Any:
        """Completion value converted by quickjs (objects and functions stay quickjs.Object)."""
        return self._api["value"](box)

    def to_text(self, box: Any) -> str:
        return self._api["text"](box)

    def to_number(self, box: Any) -> float:
        return float(self._api["number"](box))

    def to_boolean(self, box: Any) -> bool:
        return bool(self._api["truth"](box))


def build_scope(engine: JavaScriptEngine, bindings: Mapping[str, Any]) -> Any:
    """
    Create a fresh scope and bind every boxed value under its name, in mapping order.
    Later names overwrite earlier ones.
    """
    scope = engine.new_scope()
    for name, box in bindings.items():
        engine.bind(scope, name, box)
    return scope
