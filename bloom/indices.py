import struct
from typing import Iterator, List

from .exceptions import InvalidArgument
from .hashing import HashAlgorithm
from .utils import Constants

ROUND_FORMAT = '<I'  # Little-endian uint32 round counter
INDEX_FORMAT = '<I'  # Little-endian uint32 read from the digest

class IndexGenerator:
    """Derives hash_count bit indices from one hash algorithm salted by round number."""

    def __init__(self, bit_count: int, hash_count: int, hash_algorithm: HashAlgorithm):
        if bit_count < 1:
            raise InvalidArgument("Bit count must be positive.")
        if hash_count < 1:
            raise InvalidArgument("Hash count must be positive.")
        self.bit_count = bit_count
        self.hash_count = hash_count
        self.hash_algorithm = hash_algorithm

    def iter_indices(self, buffer: bytearray) -> Iterator[int]:
        """Lazily yield one index per round.

        The first four bytes of buffer are overwritten with the round number
        before each hash, so buffer must be a padded, writable bytearray.
        """
        if len(buffer) < Constants.ROUND_PREFIX_BYTES:
            raise InvalidArgument(
                f"Buffer must be at least {Constants.ROUND_PREFIX_BYTES} bytes, got {len(buffer)}"
            )
        for i in range(self.hash_count):
            struct.pack_into(ROUND_FORMAT, buffer, 0, i)
            digest = self.hash_algorithm.compute_hash(bytes(buffer))
            if len(digest) < Constants.INDEX_BYTES:
                raise InvalidArgument(
                    f"Hash digest must be at least {Constants.INDEX_BYTES} bytes, got {len(digest)}"
                )
            yield struct.unpack_from(INDEX_FORMAT, digest, 0)[0] % self.bit_count

    def compute_indices(self, buffer: bytearray) -> List[int]:
        """Return the indices for every round, in round order."""
        return list(self.iter_indices(buffer))
