import math
from typing import List, Tuple

class Constants:
    """Constants used throughout the Bloom filter implementation."""
    DEFAULT_FALSE_POSITIVE_PROBABILITY = 0.001
    DEFAULT_HASH_ALGORITHM = "sha1"
    ROUND_PREFIX_BYTES = 4  # Room for the little-endian round counter
    INDEX_BYTES = 4  # Digest bytes consumed per round

    # (capacity, false positive probability) pairs used by the benchmark
    BENCHMARK_PAIRS: List[Tuple[int, float]] = [
        (10000, 0.01),
        (10000, 0.001),
        (10000, 0.0001),
        (100000, 0.1),
        (100000, 0.01),
        (100000, 0.001),
        (1000000, 0.001),
    ]

def bits_to_bytes(bit_count: int) -> int:
    """Number of bytes needed to pack the given number of bits."""
    return math.ceil(bit_count / 8)

def format_probability(p: float) -> str:
    """Format a probability as a fraction and a percentage."""
    return f"{p:.8f} ({p*100:.6f}%)"
