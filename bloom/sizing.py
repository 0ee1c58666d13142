"""
Bloom filter sizing
===================
Derives the bit-array length and the number of hash rounds from a target
capacity and false positive probability.

For reasoning behind the calculations see https://en.wikipedia.org/wiki/Bloom_filter
and http://hur.st/bloomfilter:

    m = -n * ln(p) / (ln 2)^2
    k = (m / n) * ln(2)
"""

import math
import numbers
from typing import Tuple

from .exceptions import InvalidArgument

LN2 = math.log(2)
LN2_SQUARED = LN2 ** 2

def validate(capacity: int, false_positive_probability: float) -> None:
    """Check capacity and probability are inside their valid domains."""
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
        raise InvalidArgument("Maximum items must be an integer.")
    if capacity < 1:
        raise InvalidArgument("Maximum items must be positive.")
    if isinstance(false_positive_probability, bool) or not isinstance(false_positive_probability, numbers.Real):
        raise InvalidArgument("False Positive Probability must be a real number.")
    if math.isnan(false_positive_probability) or false_positive_probability <= 0 or false_positive_probability >= 1:
        raise InvalidArgument("False Positive Probability must be between 0 and one.")

def get_size(n: int, p: float) -> int:
    """Calculate optimal size of bit array (at least one bit)."""
    m = -(n * math.log(p)) / LN2_SQUARED
    return max(1, math.ceil(m))

def get_hash_count(m: int, n: int) -> int:
    """Calculate optimal number of hash rounds (at least one)."""
    # round() is half-to-even, which is what the sizing tables assume
    k = round(LN2 * m / n)
    return max(1, k)

def size(capacity: int, false_positive_probability: float) -> Tuple[int, int]:
    """Return (bit_count, hash_count) for the given capacity and probability."""
    validate(capacity, false_positive_probability)
    bit_count = get_size(int(capacity), float(false_positive_probability))
    return bit_count, get_hash_count(bit_count, int(capacity))

def bits_per_item(false_positive_probability: float) -> float:
    """Bits of filter needed per inserted item for the given probability."""
    return -math.log(false_positive_probability) / LN2_SQUARED

def estimate_false_positive_rate(bit_count: int, hash_count: int, item_count: int) -> float:
    """Expected false positive rate after inserting item_count items."""
    if item_count <= 0:
        return 0.0
    return (1.0 - math.exp(-hash_count * item_count / bit_count)) ** hash_count
