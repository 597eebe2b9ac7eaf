"""
Script context modules: errors, out.
"""

from jsunit.engines.script.modules.errors import ErrorLog
from jsunit.engines.script.modules.out import make_out_writer

__all__ = [
    "ErrorLog",
    "make_out_writer",
]
