from jubhash.errors import InputTooLong
from jubhash.types import Array, Fs
from jubhash.stdlib.ecc.babyjubjubParams import EdwardsParams
from jubhash.stdlib.ecc.edwardsAdd import Point, add
from jubhash.stdlib.hashes.pedersen.bn256.generators import WINDOWS
from jubhash.stdlib.utils.casts.wrapFs import wrap_fs
from jubhash.stdlib.utils.multiplexer.lookup3bitSigned import sel3s
from jubhash.stdlib.utils.pack.bool.bytesToBits import buffer_to_bits
from typing import Any

CHUNKS_PER_GENERATOR = 62


def capacity(table) -> int:
    """Number of triples the table can absorb."""
    return len(table) * CHUNKS_PER_GENERATOR


# Multiply the `generator`-th base point by `fs` using its window tables.
# Window w is indexed by byte w of the little-endian scalar encoding.
def fs_to_point(fs, generator: int, table, context: EdwardsParams) -> Point:
    scalar: Fs = wrap_fs(fs)
    acc_bytes = scalar.value.to_bytes(WINDOWS, 'little')

    tmp_point: Point = context.INFINITY
    for window in range(WINDOWS):
        tmp_point = add(tmp_point, table[generator][window][acc_bytes[window]], context)
    return tmp_point


def pedersen_hash_bits(bits: Array[bool, Any], table, context: EdwardsParams) -> Point:
    if len(bits) % 3 != 0:
        raise ValueError("Bit length must be a multiple of 3, got {}.".format(len(bits)))

    triples = len(bits) // 3
    if triples > capacity(table):
        raise InputTooLong(triples, capacity(table))

    result: Point = context.INFINITY
    current_generator = 0
    chunks_left = CHUNKS_PER_GENERATOR
    pending = False

    acc: Fs = Fs(0)
    cur: Fs = Fs(1)

    for i in range(0, len(bits), 3):
        tmp, cur = sel3s(bits[i:i + 3], cur)
        acc = acc + tmp
        chunks_left -= 1
        pending = True

        if chunks_left == 0:
            result = add(result, fs_to_point(acc, current_generator, table, context), context)
            current_generator += 1
            chunks_left = CHUNKS_PER_GENERATOR
            acc = Fs(0)
            cur = Fs(1)
            pending = False

    if pending:
        result = add(result, fs_to_point(acc, current_generator, table, context), context)

    return result


def pedersen_hash_bytes(data: bytes, table, context: EdwardsParams) -> Point:
    return pedersen_hash_bits(buffer_to_bits(data), table, context)
