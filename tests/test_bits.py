from jubhash.stdlib.utils.pack.bool.bytesToBits import buffer_to_bits, pad_bits, to_bits


def test_lsb_first_expansion():
    assert to_bits(b"\x01") == [True, False, False, False, False, False, False, False]
    assert to_bits(b"\x80") == [False, False, False, False, False, False, False, True]
    assert to_bits(b"\x90") == [False, False, False, False, True, False, False, True]


def test_bytes_expand_in_order():
    bits = to_bits(b"\x01\x02")
    assert bits[0] is True
    assert bits[9] is True
    assert sum(bits) == 2


def test_padding_law():
    for length in range(0, 40):
        bits = buffer_to_bits(bytes([0xff]) * length)
        assert len(bits) % 3 == 0
        assert 8 * length <= len(bits) < 8 * length + 3
        assert all(bits[:8 * length])
        assert not any(bits[8 * length:])


def test_pad_bits_does_not_modify_input():
    bits = [True, True]
    padded = pad_bits(bits)
    assert padded == [True, True, False]
    assert bits == [True, True]
    assert pad_bits([]) == []
