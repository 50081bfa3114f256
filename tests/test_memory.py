import pytest

from fractview.memory import (
    allocate_zeroed,
    compare,
    copy,
    fill,
    find_byte,
    move,
    zero,
)


def test_fill_sets_prefix_only():
    buf = bytearray(b"xxxxxx")
    result = fill(buf, ord("A"), 4)
    assert result is buf
    assert buf == b"AAAAxx"


def test_fill_reduces_value_modulo_256():
    buf = bytearray(3)
    fill(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_fill_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    fill(buf, 0, 0)
    assert buf == b"abc"


def test_fill_rejects_overrun():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, 3)


def test_fill_rejects_negative_count():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, -1)


def test_zero_clears_prefix():
    buf = bytearray(b"hello")
    zero(buf, 3)
    assert buf == b"\0\0\0lo"


def test_allocate_zeroed_size_and_content():
    buf = allocate_zeroed(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_allocate_zeroed_empty():
    assert allocate_zeroed(0, 2**70) == bytearray()


def test_allocate_zeroed_overflow():
    with pytest.raises(OverflowError):
        allocate_zeroed(2**40, 2**40)


def test_allocate_zeroed_negative():
    with pytest.raises(ValueError):
        allocate_zeroed(-1, 4)


def test_copy_round_trip():
    src = b"fractal"
    dst = bytearray(len(src))
    assert copy(dst, src, len(src)) is dst
    assert bytes(dst) == src


def test_copy_partial():
    dst = bytearray(b"......")
    copy(dst, b"abcdef", 3)
    assert dst == b"abc..."


def test_copy_rejects_short_source():
    with pytest.raises(ValueError):
        copy(bytearray(5), b"ab", 5)


def test_move_forward_overlap():
    buf = bytearray(b"abcdef")
    move(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_move_backward_overlap():
    buf = bytearray(b"abcdef")
    move(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_move_rejects_overrun():
    with pytest.raises(ValueError):
        move(bytearray(4), 2, 0, 3)


def test_find_byte_first_match():
    data = b"hello"
    assert find_byte(data, ord("l"), len(data)) == data.index(b"l")


def test_find_byte_outside_window():
    assert find_byte(b"hello", ord("o"), 3) is None


def test_find_byte_wraps_value():
    data = b"\x01\x02"
    assert find_byte(data, 0x102, 2) == data.index(b"\x02")


def test_compare_equal():
    assert compare(b"same", b"same", 4) == 0


def test_compare_difference_sign_and_value():
    assert compare(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert compare(b"abd", b"abc", 3) == ord("d") - ord("c")


def test_compare_limited_window():
    assert compare(b"abX", b"abY", 2) == 0


def test_compare_unsigned_bytes():
    assert compare(b"\xff", b"\x00", 1) == 0xFF


def test_compare_rejects_overrun():
    with pytest.raises(ValueError):
        compare(b"a", b"ab", 2)