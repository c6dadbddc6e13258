"""Runtime kind classification and the admission policy shared by all collections.

A collection stores values of a single *kind*. The kind is a coarse structural
category of a value (integer, string, mapping, struct, ...), fixed by the first
value admitted into the collection. Composite and reference-like kinds are never
admitted.
"""

import array
import asyncio
import ctypes
import mmap
import numbers
import queue
import weakref
from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from collections.abc import Set as AbstractSet
from enum import Enum
from typing import Any

import jax
import numpy as np

from kindred.exceptions import InvalidKindError, InvalidTypeError, MismatchedKindError


class Kind(Enum):
    """Structural category of a value."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "str"
    BYTES = "bytes"
    ARRAY = "array"
    CHANNEL = "channel"
    FUNCTION = "function"
    INTERFACE = "interface"
    MAP = "map"
    POINTER = "pointer"
    SLICE = "slice"
    STRUCT = "struct"
    UNSAFE_POINTER = "unsafe_pointer"

    def __str__(self) -> str:
        return self.value


REJECTED_KINDS: frozenset[Kind] = frozenset(
    {
        Kind.ARRAY,
        Kind.CHANNEL,
        Kind.FUNCTION,
        Kind.INTERFACE,
        Kind.MAP,
        Kind.POINTER,
        Kind.SLICE,
        Kind.STRUCT,
        Kind.UNSAFE_POINTER,
    }
)

_UNSAFE_POINTER_TYPES: tuple[type, ...] = (memoryview, mmap.mmap, ctypes.c_void_p)
_POINTER_TYPES: tuple[type, ...] = (
    weakref.ReferenceType,
    *weakref.ProxyTypes,
    ctypes._Pointer,  # pylint: disable=protected-access
)
_ARRAY_TYPES: tuple[type, ...] = (tuple, np.ndarray, jax.Array, array.array)
_SLICE_TYPES: tuple[type, ...] = (list, bytearray, deque)
_CHANNEL_TYPES: tuple[type, ...] = (queue.Queue, queue.SimpleQueue, asyncio.Queue, Iterator)


def kind_of(value: Any) -> Kind:
    """Classify a value into its structural kind.

    Scalars are classified through the `numbers` tower so numpy scalars share a
    kind with the corresponding Python builtin (``np.int64(1)`` is ``Kind.INT``).
    Anything not matched by a more specific rule is a ``Kind.STRUCT``.

    Examples:
        >>> kind_of(3)
        <Kind.INT: 'int'>
        >>> kind_of(True)
        <Kind.BOOL: 'bool'>
        >>> kind_of([1, 2])
        <Kind.SLICE: 'slice'>
    """
    if isinstance(value, (bool, np.bool_)):
        return Kind.BOOL
    if isinstance(value, numbers.Integral):
        return Kind.INT
    if isinstance(value, numbers.Real):
        return Kind.FLOAT
    if isinstance(value, numbers.Complex):
        return Kind.COMPLEX
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, bytes):
        return Kind.BYTES
    if value is None:
        return Kind.INTERFACE
    if isinstance(value, _UNSAFE_POINTER_TYPES):
        return Kind.UNSAFE_POINTER
    if isinstance(value, _POINTER_TYPES):
        return Kind.POINTER
    if isinstance(value, _ARRAY_TYPES):
        return Kind.ARRAY
    if isinstance(value, _SLICE_TYPES):
        return Kind.SLICE
    if isinstance(value, (Mapping, AbstractSet)):
        return Kind.MAP
    if isinstance(value, _CHANNEL_TYPES):
        return Kind.CHANNEL
    if callable(value):
        return Kind.FUNCTION
    return Kind.STRUCT


def is_rejected_kind(kind: Kind) -> bool:
    """Check if values of a kind can never be stored in a collection."""
    return kind in REJECTED_KINDS


def admit(locked_kind: Kind | None, values: Iterable[Any], collection_name: str) -> Kind | None:
    """Check a batch of values against a collection's locked kind.

    Every value is checked before the caller commits anything, so a failing batch
    leaves the collection untouched. When the collection has no locked kind yet,
    the first value of the batch fixes the kind the rest of the batch must share.

    Args:
        locked_kind: The collection's current kind, or None if it is unlocked.
        values: The candidate values.
        collection_name: Name used in error messages.

    Returns:
        The kind the collection should be locked to once the batch is committed.

    Raises:
        InvalidKindError: A value's kind differs from the locked kind.
        InvalidTypeError: A value's kind is rejected.
    """
    kind = locked_kind
    for value in values:
        value_kind = kind_of(value)
        if kind is not None and value_kind != kind:
            raise InvalidKindError(f"invalid value type for {collection_name}: expected {kind}, got {value_kind}")
        if is_rejected_kind(value_kind):
            raise InvalidTypeError(f"{value_kind} is not a supported type for {collection_name}")
        kind = value_kind
    return kind


def check_compatible(*kinds: Kind | None) -> Kind | None:
    """Return the kind shared by every locked collection in an operation.

    Unlocked collections (``None``) are compatible with any kind.

    Raises:
        MismatchedKindError: Two locked kinds differ.
    """
    shared: Kind | None = None
    for kind in kinds:
        if kind is None:
            continue
        if shared is None:
            shared = kind
        elif kind != shared:
            raise MismatchedKindError(f"mismatched data types among sets: {shared} != {kind}")
    return shared
