"""BACKPORT

Backward-compatibility shims for integer-array copying, charset transcoding
between text and bytes, and three-way integer comparison.
"""

import logging as _logging

from backport.logging import configure_from_env

__all__ = ["__version__"]
__version__ = "0.1.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
configure_from_env()
