import pytest

from bloom import BloomFilter, Murmur3Hash

def false_positive_rate(item_count: int, false_positive_probability: float, hash_algorithm=None,
                        probe_count: int = None) -> float:
    """Add item_count integers, then probe probe_count integers never added (item_count by default)."""
    probe_count = probe_count or item_count
    with BloomFilter(item_count, false_positive_probability, hash_algorithm=hash_algorithm) as bf:
        for i in range(item_count):
            bf.add(i)
        false_positives = 0
        for j in range(item_count, item_count + probe_count):
            if bf.contains(j):
                false_positives += 1
        return false_positives / probe_count

# Hashing is not perfect, so allow double the configured probability.
# At p=0.0001 only one false positive is expected per 10000 probes, so that
# row probes ten times as many items to keep the bound meaningful.
@pytest.mark.parametrize("item_count, probability, probe_count", [
    (10000, 0.01, None),
    (10000, 0.001, None),
    (10000, 0.0001, 100000),
    (100000, 0.1, None),
    (100000, 0.01, None),
    pytest.param(100000, 0.001, None, marks=pytest.mark.slow),
])
def test_false_positive_rate_within_bound(item_count, probability, probe_count):
    rate = false_positive_rate(item_count, probability, probe_count=probe_count)
    print(f"\n  {item_count} items at p={probability}: observed {rate:.6f}")
    assert rate <= probability * 2

def test_false_positive_rate_with_murmur3():
    assert false_positive_rate(10000, 0.01, Murmur3Hash()) <= 0.02

@pytest.mark.slow
def test_false_positive_rate_one_million_items():
    assert false_positive_rate(1000000, 0.001) <= 0.002
