import pytest

from bvec.bit_vec import BitVec, bit_vec
from bvec.core import BoolArray

F, T = False, True


def test_bit_slicing():
    v = bit_vec(F, T, T, F, T, F, F, T, T, F, F, T, F, T, T, F, block_bits=8)
    assert not v.get_bit(0)
    assert v.get_bit(1)
    assert v.get_bit(2)
    assert not v.get_bit(3)

    w = v.bit_slice(2, 14)
    assert w.bit_len() == 12
    assert w.get_bit(0)
    assert not w.get_bit(1)

    assert w.get_bits(2, 4) == 0b00001001
    assert w.get_bits(2, 5) == 0b00011001
    assert w.get_bits(2, 8) == 0b10011001
    assert w.get_bits(3, 8) == 0b01001100

    assert w.get_block(0) == 0b01100101
    assert w.get_block(1) == 0b00001010


def test_resize():
    v = BitVec.new_fill(True, 13, block_bits=8)
    assert len(v) == 13

    v.resize(50, False)
    assert len(v) == 50
    assert v.get_bit(12) is True
    assert v.get_bit(13) is False
    assert v.get_bit(49) is False

    v.resize(67, True)
    assert len(v) == 67
    assert v.get_bit(12) is True
    assert v.get_bit(13) is False
    assert v.get_bit(49) is False
    assert v.get_bit(50) is True
    assert v.get_bit(66) is True

    v.set_bit(3, False)
    assert v.get_bit(3) is False

    v.resize(17, False)
    assert len(v) == 17
    assert v.get_bit(1) is True
    assert v.get_bit(2) is True
    assert v.get_bit(3) is False
    assert v.get_bit(4) is True
    assert v.get_bit(16) is False


def test_shrink_to_fit():
    v = BitVec.with_capacity(100, block_bits=8)
    assert isinstance(v, BitVec)
    assert v.capacity() == 104

    v.push(True)
    v.push(False)
    assert len(v) == 2
    assert v.capacity() == 104

    v.shrink_to_fit()
    assert len(v) == 2
    assert v.capacity() == 8


def test_into_blocks():
    v = bit_vec(T, F, T, block_bits=8)
    assert v.capacity() == 8
    blocks = v.into_blocks()
    assert len(blocks) == 1
    assert blocks[0] == 0b00000101


def test_into_blocks_doc_example():
    v = bit_vec(T, T, F, F, T, F, T, F, block_bits=8)
    assert v.into_blocks()[0] == 0b01010011


def test_truncate():
    v = BitVec.new_fill(True, 80, block_bits=8)
    assert len(v) == 80
    assert v.get_bit(34) is True
    v.truncate(45)
    assert len(v) == 45
    assert v.get_bit(34) is True


def test_full_first_block():
    v = BitVec.new_fill(True, 77, block_bits=8)
    assert len(v) == 77
    assert v.get_block(0) == 0b11111111


def test_pop():
    v = bit_vec(T, F, T, block_bits=8)
    assert v.pop() is True
    assert v.pop() is False
    assert v.pop() is True
    assert v.pop() is None


def test_clear_and_is_empty():
    v = bit_vec(T, F, T, block_bits=8)
    assert len(v) == 3
    assert not v.is_empty()
    v.clear()
    assert len(v) == 0
    assert v.is_empty()


def test_push_bit_and_pop_bit():
    v = BitVec(8)
    v.push_bit(True)
    v.push_bit(False)
    assert v.pop_bit() is False
    assert v.pop_bit() is True
    assert v.pop_bit() is None


def test_set_through_slice():
    v = bit_vec(T, F, T, block_bits=8)
    w = v.bit_slice(1, 2)
    assert w.get_block(0) == 0
    w.set_bit(0, True)
    assert v == bit_vec(T, T, T, block_bits=8)


def test_set_bits_one_block_fastpath():
    v = BitVec.new_fill(False, 8, block_bits=8)
    v.set_bits(2, 4, 0b1111)
    assert v.get_block(0) == 0b00111100


def test_from_bits():
    bits = [True] * 20
    bits[3] = False
    bv = BitVec.from_bits(BoolArray(bits))
    assert len(bv) == 20
    assert bv[0]
    assert bv[1]
    assert bv[2]
    assert not bv[3]
    assert bv[4]
    assert bv[19]


def test_from_bits_slice():
    bits = BitVec.new_fill(True, 20)
    bits.set_bit(3, False)
    sliced = bits.bit_slice(1, None)
    bv = BitVec.from_bits(sliced)
    assert len(bv) == 19
    assert bv[0]
    assert bv[1]
    assert not bv[2]
    assert bv[3]
    assert bv[18]


def test_disequality():
    assert bit_vec(T, T, F) != bit_vec(T, T)


def test_mixed_equality():
    bv = bit_vec(T, F, T, block_bits=8)
    assert bv == BoolArray([True, False, True])


def test_trailing_comma_equivalent():
    assert bit_vec(T, F, T) == bit_vec(*[T, F, T])


def test_single_element():
    result = True
    bv = bit_vec(result)
    assert bv[0] is True
    assert len(bv) == 1


def test_fill_and_literal_agree():
    bv1 = BitVec.new_fill(True, 3)
    bv2 = bit_vec(T, F, T)
    assert bv1 != bv2
    bv1.set_bit(1, False)
    assert bv1 == bv2


def test_library_example():
    bv1 = BitVec.new_fill(False, 50)
    bv2 = BitVec.new_fill(False, 50)
    assert bv1 == bv2
    bv1.set(49, True)
    assert bv1 != bv2
    assert bv1.pop() is True
    assert bv2.pop() is False
    assert bv1 == bv2


def test_from_blocks_round_trip():
    bv = BitVec.from_blocks([0b01010011], block_bits=8)
    assert len(bv) == 8
    assert bv == bit_vec(T, T, F, F, T, F, T, F, block_bits=8)
    assert bv.into_blocks() == [0b01010011]


def test_from_blocks_rejects_oversized_block():
    with pytest.raises(ValueError):
        BitVec.from_blocks([256], block_bits=8)


def test_get_out_of_bounds():
    with pytest.raises(IndexError):
        bit_vec(T, F).get(5)


def test_ordering():
    assert bit_vec(F, T) < bit_vec(T, T)
    assert bit_vec(T, T) > bit_vec(F, T)
    assert bit_vec(T) < bit_vec(F, F)
    assert bit_vec(T, F) <= bit_vec(T, F)


def test_hash_equal_vectors():
    bv1 = bit_vec(T, F, T, T)
    bv2 = BitVec.new_fill(True, 4)
    bv2.set(1, False)
    assert bv1 == bv2
    assert hash(bv1) == hash(bv2)
    assert len({bv1, bv2}) == 1


def test_hash_ignores_stale_bits():
    bv1 = bit_vec(T, T, T)
    bv1.pop()
    bv2 = bit_vec(T, T)
    assert hash(bv1) == hash(bv2)


def test_repr_round_trips_bits():
    bv = bit_vec(T, F, T, block_bits=8)
    assert repr(bv) == "BitVec('101', block_bits=8)"