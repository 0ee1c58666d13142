"""
Bloom Filter Sizing Calculator
==============================
Prints bit-array size and hash rounds for a capacity across several
false positive probabilities.
"""

import sys
from bloom import Constants
from bloom.sizing import size, bits_per_item, estimate_false_positive_rate
from bloom.utils import bits_to_bytes, format_probability

PROBABILITIES = [0.1, 0.05, 0.01, 0.001, 0.0001, 0.00001]

def calculate_sizes(capacity: int):
    """Calculate (probability, bits, hash rounds, estimated FPR) rows."""
    rows = []
    for p in PROBABILITIES:
        bit_count, hash_count = size(capacity, p)
        estimated = estimate_false_positive_rate(bit_count, hash_count, capacity)
        rows.append((p, bit_count, hash_count, estimated))
    return rows

def print_sizing_information(capacity: int):
    """Print sizing table for the given capacity."""
    print(f"\nBloom Filter Sizing for {capacity:,} items")
    print(f"Default FPR: {format_probability(Constants.DEFAULT_FALSE_POSITIVE_PROBABILITY)}\n")

    print(f"{'FPR':<12} {'Bits':<15} {'Size (KB)':<12} {'Bits/Item':<12} {'Hash Rounds':<13} {'Estimated FPR':<15}")
    print(f"{'-'*79}")

    for p, bit_count, hash_count, estimated in calculate_sizes(capacity):
        size_kb = bits_to_bytes(bit_count) / 1024
        print(f"{p:<12} {bit_count:<15,} {size_kb:<12.2f} {bits_per_item(p):<12.2f} {hash_count:<13} {estimated:<15.8f}")

if __name__ == "__main__":
    print_sizing_information(int(sys.argv[1]) if len(sys.argv) > 1 else 1_000_000)
