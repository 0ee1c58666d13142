import os
import subprocess
import sys
from pathlib import Path

import pytest

from bloom.exceptions import InvalidArgument
from bloom.serialization import default_serializer, serialize_with_padding

def test_types_do_not_collide():
    encoded = {default_serializer(v) for v in (1, 1.0, "1", b"1", True)}
    assert len(encoded) == 5

def test_deterministic():
    assert default_serializer(("a", 1, 2.5)) == default_serializer(("a", 1, 2.5))
    assert default_serializer(-129) == default_serializer(-129)
    assert default_serializer(-129) != default_serializer(129)

def test_padding_prepended():
    buffer = serialize_with_padding("Test String")
    assert isinstance(buffer, bytearray)
    assert buffer[:4] == b"\x00\x00\x00\x00"
    assert bytes(buffer[4:]) == default_serializer("Test String")

def test_short_payload_still_padded():
    buffer = serialize_with_padding("x", serializer=lambda item: b"")
    assert buffer == bytearray(4)

def test_none_rejected():
    with pytest.raises(InvalidArgument):
        serialize_with_padding(None)

def test_serializer_must_return_bytes():
    with pytest.raises(InvalidArgument, match="must return bytes"):
        serialize_with_padding("x", serializer=str)

def test_unpicklable_item():
    with pytest.raises(InvalidArgument):
        default_serializer(lambda: None)

def test_equal_tuples_encode_identically():
    joined = "".join(["a", "b"])
    first = ("ab", "ab")
    second = ("ab", joined)
    assert first == second
    assert default_serializer(first) == default_serializer(second)

def test_containers_are_length_prefixed():
    assert default_serializer(("ab", "c")) != default_serializer(("a", "bc"))
    assert default_serializer((1, 2)) != default_serializer([1, 2])
    assert default_serializer(((1,), 2)) != default_serializer((1, (2,)))

def test_sets_and_dicts_ignore_iteration_order():
    assert default_serializer({"x", "y", "z"}) == default_serializer({"z", "y", "x"})
    assert default_serializer(frozenset([3, 1, 2])) == default_serializer({1, 2, 3})
    assert default_serializer({"a": 1, "b": [2, None]}) == default_serializer({"b": [2, None], "a": 1})
    assert default_serializer({"a": 1}) != default_serializer({"a": 2})

def test_frozenset_indices_stable_across_hash_seeds():
    root = Path(__file__).resolve().parents[1]
    code = ("from bloom import BloomFilter; "
            "print(BloomFilter(10).compute_indices(frozenset(['alpha', 'beta', 'gamma', 'delta'])))")
    outputs = set()
    for seed in ("1", "2", "3", "4", "5"):
        env = dict(os.environ, PYTHONHASHSEED=seed,
                   PYTHONPATH=os.pathsep.join(filter(None, [str(root), os.environ.get("PYTHONPATH")])))
        result = subprocess.run([sys.executable, "-c", code], cwd=str(root), env=env,
                                capture_output=True, text=True, check=True)
        outputs.add(result.stdout.strip())
    assert len(outputs) == 1
