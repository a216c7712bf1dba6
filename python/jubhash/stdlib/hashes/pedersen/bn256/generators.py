"""Windowed lookup tables for the Baby Jubjub Pedersen hash generators.

For every generator ``g`` the table holds 32 windows of 256 points each,
``table[g][w][v] == v * (256**w * g)``. Each window is filled by repeated
addition of its unit step, and the step for the next window is the current
one multiplied by 256, so a 32-byte little-endian scalar is turned into a
point with 32 lookups and 32 additions.
"""
import logging
import time

from jubhash.errors import InvalidCurvePoint
from jubhash.stdlib.ecc.babyjubjubParams import EdwardsParams
from jubhash.stdlib.ecc.edwardsAdd import Point, add, on_curve, point, scalar_mult

logger = logging.getLogger(__name__)

WINDOWS = 32
WINDOW_SIZE = 256

# Base generators of the hash, one per chunk of 62 triples
PEDERSEN_GENERATORS = (
    point(
        0x184570ed4909a81b2793320a26e8f956be129e4eed381acf901718dff8802135,
        0x1c3a9a830f61587101ef8cbbebf55063c1c6480e7e5a7441eac7f626d8f69a45,
    ),
    point(
        0x0afc00ffa0065f5479f53575e86f6dcd0d88d7331eefd39df037eea2d6f031e4,
        0x237a6734dd50e044b4f44027ee9e70fcd2e5724ded1d1c12b820a11afdc15c7a,
    ),
    point(
        0x00fb62ad05ee0e615f935c5a83a870f389a5ea2baccf22ad731a4929e7a75b37,
        0x00bc8b1c9d376ceeea2cf66a91b7e2ad20ab8cce38575ac13dbefe2be548f702,
    ),
    point(
        0x0675544aa0a708b0c584833fdedda8d89be14c516e0a7ef3042f378cb01f6e48,
        0x169025a530508ee4f1d34b73b4d32e008b97da2147f15af3c53f405cf44f89d4,
    ),
    point(
        0x07350a0660a05014168047155c0a0647ea2720ecb182a6cb137b29f8a5cfd37f,
        0x3004ad73b7abe27f17ec04b04b450955a4189dd012b4cf4b174af15bd412696a,
    ),
)


def validate_generators(generators, context: EdwardsParams) -> None:
    for i, g in enumerate(generators):
        if not on_curve(g, context):
            raise InvalidCurvePoint(
                (g[0].value, g[1].value),
                "Pedersen generator {} is not on the curve.".format(i),
            )


def gen_table_for_generator(g: Point, context: EdwardsParams) -> tuple:
    result = []
    for window in range(WINDOWS):
        window_table = [context.INFINITY]
        accum = context.INFINITY
        for _ in range(1, WINDOW_SIZE):
            accum = add(accum, g, context)
            window_table.append(accum)
        g = scalar_mult(g, WINDOW_SIZE, context)
        result.append(tuple(window_table))
    return tuple(result)


def build_table(generators, context: EdwardsParams) -> tuple:
    # Validate everything first so a bad constant never yields a partial table
    validate_generators(generators, context)

    start = time.perf_counter()
    table = []
    for i, g in enumerate(generators):
        table.append(gen_table_for_generator(g, context))
        logger.debug("Built lookup table for generator %d", i)
    logger.debug(
        "Built %d generator tables (%d windows x %d points) in %.2fs",
        len(table), WINDOWS, WINDOW_SIZE, time.perf_counter() - start,
    )
    return tuple(table)
