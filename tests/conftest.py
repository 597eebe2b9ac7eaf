import io
from pathlib import Path

import pytest

from jsunit.core.config import Settings
from jsunit.harness import ScriptHarness


class ScriptFiles:
    """Writes target, test and resource scripts under tmp_path."""

    def __init__(self, base: Path) -> None:
        self.target_root = base / "webapp" / "js"
        self.test_root = base / "test" / "js"
        self.resource_root = base / "resources"
        for d in (self.target_root, self.test_root, self.resource_root):
            d.mkdir(parents=True)

    def _write(self, root: Path, name: str, source: str) -> str:
        (root / name).write_text(source, encoding="utf-8")
        return name

    def target(self, name: str, source: str) -> str:
        return self._write(self.target_root, name, source)

    def test(self, name: str, source: str) -> str:
        return self._write(self.test_root, name, source)

    def resource(self, name: str, source: str) -> str:
        return self._write(self.resource_root, name, source)

    def settings(self, **overrides: object) -> Settings:
        values: dict[str, object] = {
            "TARGET_ROOT": str(self.target_root),
            "TEST_ROOT": str(self.test_root),
            "RESOURCE_ROOT": str(self.resource_root),
        }
        values.update(overrides)
        return Settings(**values)


@pytest.fixture
def scripts(tmp_path: Path) -> ScriptFiles:
    return ScriptFiles(tmp_path)


@pytest.fixture
def out_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def harness(scripts: ScriptFiles, out_stream: io.StringIO) -> ScriptHarness:
    return ScriptHarness(settings=scripts.settings(), stream=out_stream)
