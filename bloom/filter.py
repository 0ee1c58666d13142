import logging
from typing import Any, Callable, Dict, List, Optional, Union

import numpy as np

from . import sizing
from .exceptions import CapacityExceeded, FilterClosedError
from .hashing import HashAlgorithm, SHA1Hash, as_hash_algorithm
from .indices import IndexGenerator
from .serialization import Serializer, default_serializer, serialize_with_padding
from .utils import Constants, bits_to_bytes

logger = logging.getLogger(__name__)

class BloomFilter:
    """Bloom filter for probabilistic membership testing.

    Sized once from a maximum item count and the false positive probability
    wanted when that many items have been added. Items are insert-only:
    bits are set and never cleared, so an added item is always reported
    present.

    hash_algorithm is a HashAlgorithm or a plain ``hash(bytes) -> bytes``
    function, which is wrapped in CallableHash. Only the first four digest
    bytes are used per round.

    Use as a context manager (or call ``close()``) to release the hash
    algorithm::

        with BloomFilter(1000, 0.001) as bf:
            bf.add("My Text")
            assert "My Text" in bf
    """

    def __init__(self,
                 capacity: int,
                 false_positive_probability: float = Constants.DEFAULT_FALSE_POSITIVE_PROBABILITY,
                 hash_algorithm: Optional[Union[HashAlgorithm, Callable[[bytes], bytes]]] = None,
                 serializer: Optional[Serializer] = None):
        """Initialize Bloom filter for capacity items at the given false positive probability."""
        bit_count, hash_count = sizing.size(capacity, false_positive_probability)

        self._capacity = int(capacity)
        self._false_positive_probability = float(false_positive_probability)
        self._item_count = 0
        self._closed = False

        self.hash_algorithm = as_hash_algorithm(hash_algorithm) if hash_algorithm is not None else SHA1Hash()
        self.serializer = serializer if serializer is not None else default_serializer
        self.index_generator = IndexGenerator(bit_count, hash_count, self.hash_algorithm)

        # Initialize bit array
        self.bit_array = np.zeros(bit_count, dtype=np.bool_)

        logger.info(f"Bloom filter sized for {self._capacity} items at p={self._false_positive_probability}: "
                    f"{bit_count} bits, {hash_count} hash rounds, {self.hash_algorithm!r}")

    @property
    def capacity(self) -> int:
        """Maximum number of items that can be added."""
        return self._capacity

    @property
    def false_positive_probability(self) -> float:
        """Configured false positive probability at full capacity."""
        return self._false_positive_probability

    @property
    def bit_count(self) -> int:
        return self.index_generator.bit_count

    @property
    def hash_count(self) -> int:
        return self.index_generator.hash_count

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise FilterClosedError("Bloom filter has been closed.")

    def compute_indices(self, item: Any) -> List[int]:
        """Bit indices for an item, one per hash round."""
        self._check_open()
        buffer = serialize_with_padding(item, self.serializer)
        return self.index_generator.compute_indices(buffer)

    def contains(self, item: Any) -> bool:
        """Check if an item might be in the set.

        False means the item was never added. True means it was added, or is a
        false positive within the configured probability.
        """
        self._check_open()
        buffer = serialize_with_padding(item, self.serializer)
        for bit_pos in self.index_generator.iter_indices(buffer):
            if not self.bit_array[bit_pos]:
                return False
        return True

    def add(self, item: Any) -> None:
        """Add an item to the Bloom filter."""
        self._check_open()
        if self._item_count >= self._capacity:
            raise CapacityExceeded(self._capacity)
        indices = self.compute_indices(item)
        self._item_count += 1
        self.bit_array[indices] = True

    def is_full(self) -> bool:
        """Check if no more items can be added."""
        return self._item_count >= self._capacity

    def get_size_bytes(self) -> int:
        """Get size of the bit array in bytes when packed."""
        return bits_to_bytes(self.bit_count)

    def fill_ratio(self) -> float:
        """Fraction of bits currently set."""
        return int(np.count_nonzero(self.bit_array)) / self.bit_count

    def estimated_false_positive_rate(self) -> float:
        """Expected false positive rate for the items added so far."""
        return sizing.estimate_false_positive_rate(self.bit_count, self.hash_count, self._item_count)

    def get_stats(self) -> Dict[str, Any]:
        """Get filter statistics."""
        return {
            'capacity': self._capacity,
            'item_count': self._item_count,
            'false_positive_probability': self._false_positive_probability,
            'bit_count': self.bit_count,
            'hash_count': self.hash_count,
            'size_bytes': self.get_size_bytes(),
            'fill_ratio': self.fill_ratio(),
            'estimated_false_positive_rate': self.estimated_false_positive_rate(),
            'hash_algorithm': repr(self.hash_algorithm),
        }

    def close(self) -> None:
        """Release the hash algorithm. Calling close twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self.hash_algorithm.close()
        logger.debug("Bloom filter closed")

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __len__(self) -> int:
        return self._item_count

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        return (f"BloomFilter(capacity={self._capacity}, "
                f"false_positive_probability={self._false_positive_probability}, "
                f"bit_count={self.bit_count}, hash_count={self.hash_count})")
