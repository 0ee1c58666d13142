"""
Hash algorithms
===============
Pluggable hash capabilities consumed by the index generator. Every algorithm
exposes ``compute_hash(data) -> bytes``; only the first four bytes of the
digest are used per round, so a custom algorithm needs a good avalanche
effect over those bytes.
"""

import hashlib
import logging
import struct
from typing import Callable, Dict

import mmh3  # MurmurHash3 for a fast non-cryptographic alternative

from .exceptions import FilterClosedError, InvalidArgument

logger = logging.getLogger(__name__)

class HashAlgorithm:
    """Base class for streaming hash algorithms.

    Subclasses implement ``_initialize``, ``_update`` and ``_final``.
    ``compute_hash`` re-initializes the state on every call, so rounds never
    observe each other's partial state.
    """

    name = "abstract"
    digest_size = 0

    def __init__(self):
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _initialize(self) -> None:
        raise NotImplementedError

    def _update(self, data: bytes) -> None:
        raise NotImplementedError

    def _final(self) -> bytes:
        raise NotImplementedError

    def compute_hash(self, data: bytes) -> bytes:
        """Hash a complete buffer and return the digest."""
        if self._closed:
            raise FilterClosedError(f"Hash algorithm {self.name} has been closed.")
        self._initialize()
        self._update(data)
        return self._final()

    def close(self) -> None:
        """Release the algorithm. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        logger.debug(f"Closed hash algorithm {self.name}")

    def __call__(self, data: bytes) -> bytes:
        return self.compute_hash(data)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        return f"{type(self).__name__}()"

class HashlibHash(HashAlgorithm):
    """Any digest provided by hashlib (sha1, sha256, md5, blake2b, ...)."""

    def __init__(self, name: str):
        super().__init__()
        try:
            probe = hashlib.new(name)
        except (ValueError, TypeError) as e:
            raise InvalidArgument(f"Unknown hashlib algorithm: {name}") from e
        self.name = probe.name
        self.digest_size = probe.digest_size
        self._state = None

    def _initialize(self) -> None:
        self._state = hashlib.new(self.name)

    def _update(self, data: bytes) -> None:
        self._state.update(data)

    def _final(self) -> bytes:
        digest = self._state.digest()
        self._state = None
        return digest

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"

class SHA1Hash(HashlibHash):
    """SHA-1, the default hash algorithm of the filter."""

    def __init__(self):
        super().__init__("sha1")

    def __repr__(self):
        return "SHA1Hash()"

class FNV1a32Hash(HashAlgorithm):
    """32-bit FNV-1a. Fast, non-cryptographic, little-endian 4 byte digest."""

    name = "fnv1a32"
    digest_size = 4

    PRIME = 16777619
    OFFSET = 2166136261
    MASK = 0xFFFFFFFF

    def __init__(self):
        super().__init__()
        self._hash = self.OFFSET

    def _initialize(self) -> None:
        self._hash = self.OFFSET

    def _update(self, data: bytes) -> None:
        h = self._hash
        for byte in data:
            h ^= byte
            h = (h * self.PRIME) & self.MASK
        self._hash = h

    def _final(self) -> bytes:
        return struct.pack('<I', self._hash)

class Murmur3Hash(HashAlgorithm):
    """32-bit MurmurHash3 (x86) via mmh3, little-endian 4 byte digest."""

    name = "murmur3"
    digest_size = 4

    def __init__(self, seed: int = 0):
        super().__init__()
        self.seed = seed
        self._buffer = bytearray()

    def _initialize(self) -> None:
        self._buffer = bytearray()

    def _update(self, data: bytes) -> None:
        self._buffer.extend(data)

    def _final(self) -> bytes:
        value = mmh3.hash(bytes(self._buffer), self.seed, signed=False)
        self._buffer = bytearray()
        return struct.pack('<I', value)

    def __repr__(self):
        return f"Murmur3Hash(seed={self.seed})"

class CallableHash(HashAlgorithm):
    """Adapts a plain ``hash(bytes) -> bytes`` function to a HashAlgorithm."""

    name = "callable"

    def __init__(self, func: Callable[[bytes], bytes]):
        super().__init__()
        self.func = func
        self._data = b""

    def _initialize(self) -> None:
        self._data = b""

    def _update(self, data: bytes) -> None:
        self._data += data

    def _final(self) -> bytes:
        digest = self.func(self._data)
        self._data = b""
        return digest

    def __repr__(self):
        return f"CallableHash({getattr(self.func, '__name__', repr(self.func))})"

def as_hash_algorithm(hash_algorithm) -> HashAlgorithm:
    """Return hash_algorithm unchanged, or wrap a plain function in CallableHash."""
    if isinstance(hash_algorithm, HashAlgorithm):
        return hash_algorithm
    if callable(hash_algorithm):
        return CallableHash(hash_algorithm)
    raise InvalidArgument(
        f"hash_algorithm must be a HashAlgorithm or a callable, got {type(hash_algorithm).__name__}"
    )

HASH_ALGORITHMS: Dict[str, Callable[[], HashAlgorithm]] = {
    "sha1": SHA1Hash,
    "sha256": lambda: HashlibHash("sha256"),
    "md5": lambda: HashlibHash("md5"),
    "blake2b": lambda: HashlibHash("blake2b"),
    "fnv1a32": FNV1a32Hash,
    "murmur3": Murmur3Hash,
}

def get_hash_algorithm(name: str) -> HashAlgorithm:
    """Create a new hash algorithm instance by name."""
    try:
        factory = HASH_ALGORITHMS[name.lower()]
    except (KeyError, AttributeError):
        raise InvalidArgument(
            f"Unknown hash algorithm {name!r}; choose one of {', '.join(sorted(HASH_ALGORITHMS))}"
        ) from None
    return factory()
