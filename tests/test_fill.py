import pytest

from bvec.bit_vec import BitVec, bit_vec
from bvec.fill import BitFill


def test_zeroes_match_filled_vector():
    fill = BitFill.zeroes(10, 8)
    assert fill.bit_len() == 10
    assert fill == BitVec.new_fill(False, 10, 8)
    assert not any(fill.get_bit(i) for i in range(10))


def test_ones_match_filled_vector():
    fill = BitFill.ones(10, 8)
    assert fill == BitVec.new_fill(True, 10, 8)
    assert all(fill[i] for i in range(10))


def test_blocks_match_filled_vector():
    fill = BitFill.ones(21, 8)
    reference = BitVec.new_fill(True, 21, 8)
    assert fill.block_len() == reference.block_len()
    assert [fill.get_block(i) for i in range(fill.block_len())] == [
        reference.get_block(i) for i in range(reference.block_len())
    ]


def test_constructor_value_matches_named_constructors():
    assert BitFill(5, True, 8) == BitFill.ones(5, 8)
    assert BitFill(5, False, 8) == BitFill.zeroes(5, 8)
    assert BitFill(5, True, 8) != BitFill.zeroes(5, 8)


def test_to_bit_vec_round_trip():
    fill = BitFill.ones(13, 8)
    bv = fill.to_bit_vec()
    assert len(bv) == 13
    assert bv == BitVec.new_fill(True, 13, 8)


def test_get_bits_matches_vector():
    fill = BitFill.ones(10, 8)
    reference = BitVec.new_fill(True, 10, 8)
    assert fill.get_bits(1, 3) == reference.get_bits(1, 3)
    assert fill.get_bits(2, 8) == reference.get_bits(2, 8)


def test_raw_block_of_ones_is_full():
    fill = BitFill.ones(3, 8)
    assert fill.get_raw_block(0) == 0b11111111


def test_empty_fill():
    fill = BitFill.ones(0, 8)
    assert fill.block_len() == 0
    assert fill == bit_vec(block_bits=8)


def test_get_bit_out_of_bounds():
    with pytest.raises(IndexError):
        BitFill.ones(4, 8).get_bit(4)


def test_get_block_out_of_bounds():
    fill = BitFill.zeroes(8, 8)
    with pytest.raises(IndexError):
        fill.get_block(1)
    with pytest.raises(IndexError):
        fill.get_raw_block(1)


def test_get_bits_out_of_bounds():
    with pytest.raises(IndexError):
        BitFill.ones(4, 8).get_bits(2, 3)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        BitFill(-1)