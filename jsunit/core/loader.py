"""
Script loader: resolve a logical script name to its source text.

Target scripts resolve under TARGET_ROOT, test scripts under TEST_ROOT.
Resource and mock paths are passed through verbatim unless RESOURCE_ROOT is set
and the path is relative.
"""

import logging
import os
from typing import Any

from jsunit.core.config import settings as default_settings
from jsunit.core.exceptions import ScriptLoadError

_log = logging.getLogger(__name__)


class ScriptLoader:
    """
    Reads script files with the configured encoding (None = host default).
    Every file is opened and closed inside the call that reads it.
    """

    def __init__(
        self,
        *,
        target_root: str | None = None,
        test_root: str | None = None,
        resource_root: str | None = None,
        encoding: str | None = None,
        settings: Any = None,
    ) -> None:
        s = settings or default_settings
        self.target_root = target_root if target_root is not None else s.TARGET_ROOT
        self.test_root = test_root if test_root is not None else s.TEST_ROOT
        self.resource_root = resource_root if resource_root is not None else s.RESOURCE_ROOT
        self.encoding = encoding if encoding is not None else s.SCRIPT_ENCODING

    def target_path(self, name: str) -> str:
        return os.path.join(self.target_root, name)

    def test_path(self, name: str) -> str:
        return os.path.join(self.test_root, name)

    def resource_path(self, path: str) -> str:
        if self.resource_root and not os.path.isabs(path):
            return os.path.join(self.resource_root, path)
        return path

    def load_target(self, name: str) -> str:
        return self.read(self.target_path(name))

    def load_test(self, name: str) -> str:
        return self.read(self.test_path(name))

    def load_resource(self, path: str) -> str:
        return self.read(self.resource_path(path))

    def read(self, path: str) -> str:
        """Return the whole file as text. Raises ScriptLoadError; nothing partial is returned."""
        try:
            with open(path, encoding=self.encoding) as reader:
                return reader.read()
        except (OSError, UnicodeDecodeError) as e:
            _log.warning("Script load failed: %s: %s", path, e)
            raise ScriptLoadError(path, str(e)) from e
