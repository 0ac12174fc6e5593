"""Back-ported array, string and integer helpers.

Plain functions standing in for conveniences that newer runtimes ship natively:
``Arrays.copyOf``/``Arrays.copyOfRange`` for integer arrays, encoding text to and
decoding text from a given charset, an emptiness check on text, and three-way
integer comparison.

All functions are pure and fail fast: a required argument given as ``None``
raises ``NullArgumentError`` and a range argument outside its bounds raises
``OutOfRangeError``. Neither error is ever swallowed or replaced by a default.

Integer sequences are one-dimensional numpy integer arrays. Plain Python
sequences are accepted as input and converted with ``DEFAULT_DTYPE``; results are
always fresh arrays that do not share memory with the input.

Example:
    ```py
    >>> copy_of([1, 2, 3], 5).tolist()
    [1, 2, 3, 0, 0]
    >>> get_bytes("café", ISO_8859_1)
    b'caf\\xe9'
    ```
"""

import logging
import operator
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from backport.charsets import (
    DECODE_ERRORS,
    ENCODE_ERRORS,
    ISO_8859_1,
    UTF_8,
    Charset,
    resolve,
)
from backport.errors import NullArgumentError, OutOfRangeError

__all__ = [
    "ISO_8859_1",
    "UTF_8",
    "compare",
    "copy_of",
    "copy_of_range",
    "get_bytes",
    "get_string",
    "is_empty",
]

logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.int64

IntArray = npt.NDArray[np.integer]


def _as_int_array(source: IntArray | Sequence[int], operation: str) -> IntArray:
    """Coerce ``source`` to a 1-D integer ndarray without copying ndarrays."""
    if source is None:
        raise NullArgumentError(operation, 0, 2)
    array = source if isinstance(source, np.ndarray) else np.asarray(source)
    if array.ndim != 1:
        raise ValueError(
            f"{operation}: expected a 1-D sequence, got {array.ndim} dimensions"
        )
    if not isinstance(source, np.ndarray):
        if array.size == 0:
            # np.asarray([]) is float64
            array = np.empty(0, dtype=DEFAULT_DTYPE)
        elif array.dtype.kind == "i":
            array = array.astype(DEFAULT_DTYPE, copy=False)
    if array.dtype.kind not in "iu":
        raise TypeError(
            f"{operation}: expected an integer sequence, got dtype {array.dtype}"
        )
    return array


# ============================================================================
#                               Arrays
# ============================================================================


def copy_of(source: IntArray | Sequence[int], length: int) -> IntArray:
    """Replacement for ``Arrays.copyOf()``.

    Args:
        source: Integer sequence to copy from.
        length: Number of elements in the result.

    Returns:
        A new array of exactly ``length`` elements. The first
        ``min(len(source), length)`` come from ``source`` in order; any
        remaining elements are zero.

    Raises:
        NullArgumentError: If ``source`` is ``None``.
        OutOfRangeError: If ``length`` is negative.
    """
    array = _as_int_array(source, "copy_of")
    length = operator.index(length)
    if length < 0:
        raise OutOfRangeError("copy_of", "length", length, "length >= 0")

    target = np.zeros(length, dtype=array.dtype)
    count = min(array.size, length)
    target[:count] = array[:count]
    logger.debug(
        "copied %d of %d elements into %d",
        count,
        array.size,
        length,
        extra={"operation": "copy_of"},
    )
    return target


def copy_of_range(
    source: IntArray | Sequence[int], from_: int, upto: int
) -> IntArray:
    """Replacement for ``Arrays.copyOfRange()``.

    Args:
        source: Integer sequence to copy from.
        from_: First element to copy (inclusive).
        upto: Last element to copy (exclusive).

    Returns:
        A new array holding ``source[from_:upto]``.

    Raises:
        NullArgumentError: If ``source`` is ``None``.
        OutOfRangeError: Unless ``0 <= from_ <= upto <= len(source)``.
    """
    array = _as_int_array(source, "copy_of_range")
    from_ = operator.index(from_)
    upto = operator.index(upto)
    size = array.size
    # explicit checks; numpy slicing would wrap negatives and clamp overruns
    if not 0 <= from_ <= size:
        raise OutOfRangeError("copy_of_range", "from_", from_, f"0 <= from_ <= {size}")
    if not from_ <= upto <= size:
        bound = f"{from_} <= upto <= {size}"
        raise OutOfRangeError("copy_of_range", "upto", upto, bound)

    target = array[from_:upto].copy()
    logger.debug(
        "copied [%d, %d) of %d elements",
        from_,
        upto,
        size,
        extra={"operation": "copy_of_range"},
    )
    return target


# ============================================================================
#                               Strings
# ============================================================================


def get_bytes(contents: str, charset: Charset | str) -> bytes:
    """Replacement for ``String.getBytes(Charset)``.

    Characters the charset cannot represent are replaced by ``?``.

    Args:
        contents: Text to encode.
        charset: Charset (or charset name) to encode the text in.

    Returns:
        The text encoded in the given charset.

    Raises:
        NullArgumentError: If either argument is ``None``.
    """
    if contents is None:
        raise NullArgumentError("get_bytes", 0, 2)
    if charset is None:
        raise NullArgumentError("get_bytes", 1, 2)
    codec = resolve(charset)
    encoded, _ = codec.encode(contents, ENCODE_ERRORS)
    logger.debug(
        "%d chars -> %d bytes (%s)",
        len(contents),
        len(encoded),
        codec.name,
        extra={"operation": "get_bytes"},
    )
    return bytes(encoded)


def get_string(content: bytes, charset: Charset | str) -> str:
    """Replacement for ``new String(byte[], Charset)``.

    Malformed input is replaced by U+FFFD rather than raising.

    Args:
        content: Bytes to decode.
        charset: Charset (or charset name) of the bytes.

    Returns:
        The decoded text.

    Raises:
        NullArgumentError: If either argument is ``None``.
    """
    if content is None:
        raise NullArgumentError("get_string", 0, 2)
    if charset is None:
        raise NullArgumentError("get_string", 1, 2)
    codec = resolve(charset)
    decoded, _ = codec.decode(bytes(content), DECODE_ERRORS)
    logger.debug(
        "%d bytes -> %d chars (%s)",
        len(content),
        len(decoded),
        codec.name,
        extra={"operation": "get_string"},
    )
    return decoded


def is_empty(contents: str) -> bool:
    """Replacement for ``String.isEmpty()``.

    Raises:
        NullArgumentError: If ``contents`` is ``None``.
    """
    if contents is None:
        raise NullArgumentError("is_empty")
    return len(contents) == 0


# ============================================================================
#                               Integers
# ============================================================================


def compare(a: int, b: int) -> int:
    """Replacement for ``Integer.compare(int, int)``.

    Returns:
        ``-1`` if ``a < b``, ``1`` if ``a > b``, otherwise ``0``.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
