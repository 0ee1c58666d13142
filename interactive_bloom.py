import cmd
import time
import logging
from bloom import BloomFilter, Constants, BloomFilterError, get_hash_algorithm
from bloom.hashing import HASH_ALGORITHMS

logging.basicConfig(level=logging.WARNING)

class BloomFilterShell(cmd.Cmd):
    intro = 'Welcome to the Bloom filter shell. Type help or ? to list commands.\n'
    prompt = '(bloom) '

    def __init__(self):
        super().__init__()
        self.capacity = 1000
        self.false_positive_probability = Constants.DEFAULT_FALSE_POSITIVE_PROBABILITY
        self.hash_name = Constants.DEFAULT_HASH_ALGORITHM
        self.bloom = None
        self._init_filter()

    def _init_filter(self):
        """Create a fresh filter with the current settings.

        The previous filter is closed only once the new one is built.
        """
        bloom = BloomFilter(
            self.capacity,
            self.false_positive_probability,
            hash_algorithm=get_hash_algorithm(self.hash_name)
        )
        if self.bloom is not None:
            self.bloom.close()
        self.bloom = bloom
        print(f"Initialized {self.bloom!r} using {self.hash_name}")

        # Track operation times in microseconds
        self.operation_times = {
            'add': [],
            'contains': []
        }

    def _time_operation(self, operation: str, func, *args, **kwargs):
        """Time an operation and store the result in microseconds."""
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()

        duration_us = (end_time - start_time) * 1_000_000
        self.operation_times[operation].append(duration_us)
        return result, duration_us

    def do_add(self, arg):
        """Add an item: add text"""
        if not arg:
            print("Error: Please provide an item")
            return
        try:
            _, duration = self._time_operation('add', self.bloom.add, arg)
            print(f"Add operation completed in {duration:.2f} μs")
        except BloomFilterError as e:
            print(f"Error: {e}")

    def do_contains(self, arg):
        """Check for an item: contains text"""
        if not arg:
            print("Error: Please provide an item")
            return
        try:
            result, duration = self._time_operation('contains', self.bloom.contains, arg)
            print("Possibly present" if result else "Definitely absent")
            print(f"Contains operation completed in {duration:.2f} μs")
        except BloomFilterError as e:
            print(f"Error: {e}")

    def do_new(self, arg):
        """Create a new filter: new capacity [false_positive_probability]"""
        try:
            parts = arg.split()
            capacity = int(parts[0])
            probability = float(parts[1]) if len(parts) > 1 else Constants.DEFAULT_FALSE_POSITIVE_PROBABILITY
        except (ValueError, IndexError):
            print("Error: Please provide capacity as an integer and an optional probability")
            return
        previous = (self.capacity, self.false_positive_probability)
        self.capacity, self.false_positive_probability = capacity, probability
        try:
            self._init_filter()
        except BloomFilterError as e:
            self.capacity, self.false_positive_probability = previous
            print(f"Error: {e}")

    def do_hash(self, arg):
        """Switch hash algorithm and start a new filter: hash [sha1|sha256|md5|blake2b|fnv1a32|murmur3]"""
        if arg.lower() not in HASH_ALGORITHMS:
            print(f"Error: Please specify one of {', '.join(sorted(HASH_ALGORITHMS))}")
            return
        self.hash_name = arg.lower()
        self._init_filter()

    def do_stats(self, arg):
        """Show filter statistics"""
        stats = self.bloom.get_stats()
        print("\nBloom Filter Statistics:")
        print(f"Items: {stats['item_count']} / {stats['capacity']}")
        print(f"Size: {stats['bit_count']} bits ({stats['size_bytes'] / 1024:.2f} KB)")
        print(f"Hash rounds: {stats['hash_count']} ({stats['hash_algorithm']})")
        print(f"Fill ratio: {stats['fill_ratio']:.4f}")
        print(f"Configured FPR: {stats['false_positive_probability']}")
        print(f"Estimated FPR: {stats['estimated_false_positive_rate']:.8f}")

        print("\nOperation Timing Statistics (in microseconds):")
        for op, times in self.operation_times.items():
            if times:
                print(f"\n{op.upper()}:")
                print(f"  Average: {sum(times) / len(times):.2f} μs")
                print(f"  Minimum: {min(times):.2f} μs")
                print(f"  Maximum: {max(times):.2f} μs")
                print(f"  Total Operations: {len(times)}")

    def do_reset(self, arg):
        """Reset the filter, keeping its settings"""
        self._init_filter()

    def do_exit(self, arg):
        """Exit the shell"""
        self.bloom.close()
        return True

if __name__ == '__main__':
    BloomFilterShell().cmdloop()
