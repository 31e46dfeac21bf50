import dataclasses
import random

import pytest

from armlut.bits import Decoded, bit, bit_range


def test_bit_reads_single_bits():
    assert bit(0b1010, 1) is True
    assert bit(0b1010, 0) is False
    assert bit(0b1010, 3) is True


def test_bits_reassemble_value():
    rng = random.Random(1234)
    for _ in range(200):
        value = rng.getrandbits(32)
        rebuilt = sum(int(bit(value, k)) << k for k in range(32))
        assert rebuilt == value


def test_full_range_is_identity():
    rng = random.Random(99)
    for _ in range(100):
        value = rng.getrandbits(32)
        assert bit_range(value, 0, 32) == value


def test_range_split_recombines():
    rng = random.Random(7)
    for _ in range(100):
        value = rng.getrandbits(32)
        split = rng.randrange(0, 33)
        low = bit_range(value, 0, split)
        high = bit_range(value, split, 32)
        assert (high << split) | low == value


def test_single_bit_range_matches_bit():
    value = 0xDEADBEEF
    for k in range(32):
        assert bit_range(value, k, k + 1) == int(bit(value, k))


def test_empty_range_is_zero():
    assert bit_range(0xFFFFFFFF, 5, 5) == 0


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        bit(1, -1)


def test_reversed_range_rejected():
    with pytest.raises(ValueError):
        bit_range(0xFF, 8, 4)


def test_negative_start_rejected():
    with pytest.raises(ValueError):
        bit_range(0xFF, -2, 4)


def test_decoded_is_frozen():
    decoded = Decoded("Swi", "exec_thumb_swi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        decoded.fmt = "Branch"
    assert decoded == Decoded("Swi", "exec_thumb_swi")