import hashlib
import struct
import pytest
import mmh3

from bloom.exceptions import FilterClosedError, InvalidArgument
from bloom.hashing import (FNV1a32Hash, HashlibHash, Murmur3Hash, SHA1Hash,
                           get_hash_algorithm, HASH_ALGORITHMS)

@pytest.mark.parametrize("data, expected", [
    (b"", 0x811c9dc5),
    (b"a", 0xe40c292c),
    (b"foobar", 0xbf9cf968),
])
def test_fnv1a32_vectors(data, expected):
    digest = FNV1a32Hash().compute_hash(data)
    assert len(digest) == 4
    assert struct.unpack('<I', digest)[0] == expected

def test_fnv1a32_reinitializes_between_calls():
    h = FNV1a32Hash()
    first = h.compute_hash(b"foobar")
    h.compute_hash(b"something else entirely")
    assert h.compute_hash(b"foobar") == first

def test_sha1_matches_hashlib():
    h = SHA1Hash()
    assert h.digest_size == 20
    assert h.compute_hash(b"abc") == hashlib.sha1(b"abc").digest()
    assert h.compute_hash(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"

def test_hashlib_algorithms():
    h = HashlibHash("sha256")
    assert h(b"payload") == hashlib.sha256(b"payload").digest()

def test_unknown_hashlib_algorithm():
    with pytest.raises(InvalidArgument):
        HashlibHash("not-a-hash")

def test_murmur3_matches_mmh3():
    h = Murmur3Hash(seed=7)
    expected = mmh3.hash(b"payload", 7, signed=False)
    assert h.compute_hash(b"payload") == struct.pack('<I', expected)
    assert Murmur3Hash().compute_hash(b"") == b"\x00\x00\x00\x00"

def test_close_is_idempotent_and_blocks_use():
    h = SHA1Hash()
    h.close()
    h.close()
    assert h.closed
    with pytest.raises(FilterClosedError):
        h.compute_hash(b"abc")

def test_context_manager_closes():
    with FNV1a32Hash() as h:
        h.compute_hash(b"abc")
    assert h.closed

@pytest.mark.parametrize("name", sorted(HASH_ALGORITHMS))
def test_registry_creates_fresh_instances(name):
    first = get_hash_algorithm(name)
    second = get_hash_algorithm(name.upper())
    assert first is not second
    assert len(first.compute_hash(b"\x00\x00\x00\x00data")) >= 4

def test_registry_unknown_name():
    with pytest.raises(InvalidArgument, match="Unknown hash algorithm"):
        get_hash_algorithm("crc32")
