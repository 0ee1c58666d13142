from .filter import BloomFilter
from .utils import Constants
from .exceptions import BloomFilterError, InvalidArgument, CapacityExceeded, FilterClosedError
from .hashing import HashAlgorithm, HashlibHash, SHA1Hash, FNV1a32Hash, Murmur3Hash, CallableHash, get_hash_algorithm
from .sizing import size

__all__ = ['BloomFilter', 'Constants', 'BloomFilterError', 'InvalidArgument', 'CapacityExceeded',
           'FilterClosedError', 'HashAlgorithm', 'HashlibHash', 'SHA1Hash', 'FNV1a32Hash',
           'Murmur3Hash', 'CallableHash', 'get_hash_algorithm', 'size']
