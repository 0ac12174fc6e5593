"""Charset identifiers and name resolution.

A charset is represented by the ``codecs.CodecInfo`` registered for it. The two
charsets every runtime is required to support, ISO-8859-1 (Latin-1) and UTF-8,
are resolved once at import time and exposed as constants.
"""

import codecs
import logging
from functools import lru_cache
from typing import TypeAlias

from backport.errors import NullArgumentError, UnsupportedCharsetError

logger = logging.getLogger(__name__)

Charset: TypeAlias = codecs.CodecInfo

# Substitution policy of the built-in encoder/decoder: unmappable characters
# become "?" on encode, malformed input becomes U+FFFD on decode.
ENCODE_ERRORS = "replace"  # pragma: no mutate
DECODE_ERRORS = "replace"  # pragma: no mutate


@lru_cache(maxsize=None)
def _lookup(name: str) -> Charset:
    try:
        charset = codecs.lookup(name)
    except LookupError as e:
        raise UnsupportedCharsetError(name) from e
    logger.debug(
        "resolved %r -> %s", name, charset.name, extra={"operation": "for_name"}
    )
    return charset


def for_name(name: str) -> Charset:
    """Resolve a charset by name.

    Names are matched case-insensitively and aliases are accepted
    (``"Latin-1"``, ``"ISO-8859-1"`` and ``"l1"`` all name the same charset).

    Args:
        name: The charset name.

    Returns:
        The ``codecs.CodecInfo`` for the charset.

    Raises:
        NullArgumentError: If ``name`` is ``None``.
        UnsupportedCharsetError: If no codec is registered under ``name``.
    """
    if name is None:
        raise NullArgumentError("for_name")
    return _lookup(name)


def resolve(charset: Charset | str) -> Charset:
    """Return ``charset`` as a ``Charset``, looking it up if given by name."""
    if isinstance(charset, codecs.CodecInfo):
        return charset
    if isinstance(charset, str):
        return for_name(charset)
    raise TypeError(
        f"charset must be a codecs.CodecInfo or a name, got {type(charset).__name__}"
    )


ISO_8859_1: Charset = for_name("ISO-8859-1")
"""Character-Set ISO-8859-1, a.k.a. Latin-1."""

UTF_8: Charset = for_name("UTF-8")
"""Character-Set UTF-8."""
