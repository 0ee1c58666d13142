class BloomFilterError(Exception):
    """Base class for Bloom filter errors."""

class InvalidArgument(BloomFilterError, ValueError):
    """Raised when a capacity, probability, buffer or item is out of its valid domain."""

class CapacityExceeded(BloomFilterError):
    """Raised when adding to a filter that already holds its maximum number of items."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"The maximum number of items ({capacity}) has already been reached.")

class FilterClosedError(BloomFilterError):
    """Raised when a closed filter or hash algorithm is used."""
