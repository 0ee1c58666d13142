"""
Item serialization
==================
Turns items into the canonical byte sequence fed to the hash rounds.

Two items that serialize to the same bytes are the same item as far as the
filter is concerned. Builtin scalars, tuples, lists, sets, frozensets and
dicts get one encoding per value, stable across processes. Any other object
is pickled, which is only stable when its pickle is; such items should be
serialized by the caller through ``serializer(item) -> bytes``.
"""

import pickle
import struct
from typing import Any, Callable, Iterable

from .exceptions import InvalidArgument
from .utils import Constants

Serializer = Callable[[Any], bytes]

PICKLE_PROTOCOL = 4

# One-byte type tags keep 1, 1.0, "1" and b"1" apart
TAG_NONE = b'N'
TAG_BYTES = b'B'
TAG_STR = b'S'
TAG_BOOL = b'?'
TAG_INT = b'I'
TAG_FLOAT = b'F'
TAG_TUPLE = b'T'
TAG_LIST = b'L'
TAG_SET = b'E'
TAG_DICT = b'D'
TAG_PICKLE = b'P'

LENGTH_FORMAT = '<I'

def _encode_sequence(tag: bytes, encoded: Iterable[bytes]) -> bytes:
    """Tag, element count, then each element prefixed with its length."""
    parts = list(encoded)
    out = bytearray(tag)
    out += struct.pack(LENGTH_FORMAT, len(parts))
    for part in parts:
        out += struct.pack(LENGTH_FORMAT, len(part))
        out += part
    return bytes(out)

def default_serializer(item: Any) -> bytes:
    """Serialize builtin values deterministically, pickle anything else."""
    if item is None:
        return TAG_NONE
    if isinstance(item, (bytes, bytearray, memoryview)):
        return TAG_BYTES + bytes(item)
    if isinstance(item, str):
        return TAG_STR + item.encode('utf-8')
    if isinstance(item, bool):
        return TAG_BOOL + (b'\x01' if item else b'\x00')
    if isinstance(item, int):
        length = item.bit_length() // 8 + 1
        return TAG_INT + item.to_bytes(length, 'little', signed=True)
    if isinstance(item, float):
        return TAG_FLOAT + struct.pack('<d', item)
    if isinstance(item, tuple):
        return _encode_sequence(TAG_TUPLE, (default_serializer(v) for v in item))
    if isinstance(item, list):
        return _encode_sequence(TAG_LIST, (default_serializer(v) for v in item))
    if isinstance(item, (set, frozenset)):
        # Iteration order follows the hash seed, sorted encodings do not
        return _encode_sequence(TAG_SET, sorted(default_serializer(v) for v in item))
    if isinstance(item, dict):
        pairs = sorted(_encode_sequence(TAG_TUPLE, (default_serializer(k), default_serializer(v)))
                       for k, v in item.items())
        return _encode_sequence(TAG_DICT, pairs)
    try:
        return TAG_PICKLE + pickle.dumps(item, protocol=PICKLE_PROTOCOL)
    except (pickle.PicklingError, TypeError, AttributeError) as e:
        raise InvalidArgument(f"Cannot serialize item of type {type(item).__name__}: {e}") from e

def serialize_with_padding(item: Any, serializer: Serializer = default_serializer) -> bytearray:
    """Serialize an item behind four zero bytes reserved for the round counter."""
    if item is None:
        raise InvalidArgument("Item must not be None.")
    payload = serializer(item)
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise InvalidArgument(
            f"Serializer must return bytes, got {type(payload).__name__}"
        )
    buffer = bytearray(Constants.ROUND_PREFIX_BYTES)
    buffer.extend(payload)
    return buffer
