#!/usr/bin/env python
import os
import sys
import time
import logging
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from typing import Dict, List, Tuple
from bloom import BloomFilter, Constants, get_hash_algorithm

logging.basicConfig(level=logging.WARNING)

HASH_NAMES = ["sha1", "murmur3", "fnv1a32"]

def measure_false_positive_rate(capacity: int, probability: float, hash_name: str) -> Dict[str, float]:
    """Fill a filter to capacity, then probe the same number of never-added items."""
    with BloomFilter(capacity, probability, hash_algorithm=get_hash_algorithm(hash_name)) as bf:
        start = time.perf_counter()
        for i in range(capacity):
            bf.add(i)
        add_time = time.perf_counter() - start

        start = time.perf_counter()
        false_positives = 0
        for j in range(capacity, capacity * 2):
            if bf.contains(j):
                false_positives += 1
        contains_time = time.perf_counter() - start

        return {
            'observed_fpr': false_positives / capacity,
            'estimated_fpr': bf.estimated_false_positive_rate(),
            'add_us': add_time / capacity * 1_000_000,
            'contains_us': contains_time / capacity * 1_000_000,
            'hash_count': bf.hash_count,
            'size_bytes': bf.get_size_bytes(),
        }

def run_benchmark(pairs: List[Tuple[int, float]]) -> Dict[str, List[Dict[str, float]]]:
    """Run every (capacity, probability) pair against every hash algorithm."""
    results = {name: [] for name in HASH_NAMES}
    for capacity, probability in pairs:
        for name in HASH_NAMES:
            print(f"Measuring {name} with {capacity:,} items at p={probability}...")
            result = measure_false_positive_rate(capacity, probability, name)
            result['capacity'] = capacity
            result['probability'] = probability
            results[name].append(result)
            ok = result['observed_fpr'] <= probability * 2
            print(f"  observed {result['observed_fpr']:.6f}, estimated {result['estimated_fpr']:.6f} "
                  f"{'✓' if ok else '✗'}  add {result['add_us']:.2f} μs, contains {result['contains_us']:.2f} μs")
    return results

def plot_results(results: Dict[str, List[Dict[str, float]]], pairs: List[Tuple[int, float]], output_dir: str = "plots"):
    """Plot observed vs configured false positive rate and per-operation latency."""
    os.makedirs(output_dir, exist_ok=True)
    labels = [f"{c:,}\np={p}" for c, p in pairs]
    x = np.arange(len(pairs))
    bar_width = 0.8 / (len(HASH_NAMES) + 1)

    plt.figure(figsize=(12, 7))
    plt.bar(x, [p for _, p in pairs], bar_width, label='Configured', color='black', alpha=0.6)
    for offset, name in enumerate(HASH_NAMES, start=1):
        plt.bar(x + offset * bar_width, [r['observed_fpr'] for r in results[name]], bar_width, label=name)
    plt.yscale('log')
    plt.xlabel('Capacity / Probability', fontsize=12)
    plt.ylabel('False Positive Rate', fontsize=12)
    plt.title('Observed vs Configured False Positive Rate', fontsize=14)
    plt.xticks(x + bar_width * len(HASH_NAMES) / 2, labels)
    plt.legend()
    plt.tight_layout()
    plt.savefig(os.path.join(output_dir, 'false_positive_rate.png'), dpi=300)
    plt.close()

    plt.figure(figsize=(12, 7))
    for name in HASH_NAMES:
        plt.plot(labels, [r['add_us'] for r in results[name]], marker='o', linewidth=2, label=f"{name} add")
        plt.plot(labels, [r['contains_us'] for r in results[name]], marker='s', linestyle='--', linewidth=2,
                 label=f"{name} contains")
    plt.xlabel('Capacity / Probability', fontsize=12)
    plt.ylabel('Time per Operation (μs)', fontsize=12)
    plt.title('Operation Latency by Hash Algorithm', fontsize=14)
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(os.path.join(output_dir, 'operation_latency.png'), dpi=300)
    plt.close()
    print(f"Plots saved to {output_dir}/")

def main():
    # The million item pair takes minutes in pure Python; pass --full to include it
    pairs = Constants.BENCHMARK_PAIRS
    if "--full" not in sys.argv:
        pairs = [(c, p) for c, p in pairs if c < 1_000_000]
    results = run_benchmark(pairs)
    plot_results(results, pairs)

if __name__ == "__main__":
    main()
