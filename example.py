import logging
from bloom import BloomFilter, FNV1a32Hash, Murmur3Hash

logging.basicConfig(level=logging.INFO)

def main():
    # Standard usage with the default SHA-1 hash
    with BloomFilter(capacity=1000, false_positive_probability=0.001) as bf:
        bf.add("My Text")

        print(f"'My Text' in filter: {'My Text' in bf}")  # True
        print(f"'Never been seen before' in filter: {bf.contains('Never been seen before')}")  # False (usually)

    # Using a different hash algorithm such as FNV-1a 32
    with BloomFilter(capacity=1000, false_positive_probability=0.001, hash_algorithm=FNV1a32Hash()) as bf:
        for i in range(1000):
            bf.add(i)
        print(f"\nFNV-1a filter full: {bf.is_full()}")
        print(f"Fill ratio: {bf.fill_ratio():.4f}")

    # A custom serializer decides which items are considered equal
    users = [{"id": 1, "name": "Ada"}, {"id": 2, "name": "Grace"}]
    with BloomFilter(capacity=100, hash_algorithm=Murmur3Hash(),
                     serializer=lambda user: str(user["id"]).encode()) as bf:
        for user in users:
            bf.add(user)
        # Only the id is serialized, so a renamed user is still a member
        print(f"\nRenamed user 1 in filter: {bf.contains({'id': 1, 'name': 'Augusta'})}")

        print("\nFilter statistics:")
        for key, value in bf.get_stats().items():
            print(f"{key}: {value}")

if __name__ == "__main__":
    main()
