import itertools

from jubhash.types import Fs
from jubhash.stdlib.utils.casts.wrapFs import wrap_fs
from jubhash.stdlib.utils.multiplexer.lookup3bitSigned import sel3s

N = Fs.modulus


def test_wrap_is_canonical_and_idempotent():
    for x in [0, 1, -1, N - 1, N, N + 1, -N, -N - 5, 3 * N + 7, 2 ** 256, -(2 ** 300)]:
        w = wrap_fs(x)
        assert 0 <= w.value < N
        assert wrap_fs(w) == w
        assert wrap_fs(w.value) == w
        assert w.value == x % N


def test_wrap_negative():
    assert wrap_fs(-1).value == N - 1
    assert wrap_fs(-N).value == 0


def test_sel3s_all_triples():
    cur = Fs(1)
    for a, b, c in itertools.product([False, True], repeat=3):
        tmp, nxt = sel3s([a, b, c], cur)
        expected = (1 + a + 2 * b) * (-1 if c else 1)
        assert tmp == Fs(expected)
        assert nxt == Fs(16)


def test_sel3s_zero_triple():
    tmp, nxt = sel3s([False, False, False], Fs(1))
    assert tmp.value == 1
    assert nxt.value == 16


def test_sel3s_scales_with_cur():
    tmp, nxt = sel3s([True, True, True], Fs(16))
    assert tmp == Fs(-64)
    assert nxt == Fs(256)
