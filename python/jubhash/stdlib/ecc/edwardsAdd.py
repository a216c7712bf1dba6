from jubhash.types import Array, Fp
from jubhash.stdlib.ecc.babyjubjubParams import EdwardsParams

Point = Array[Fp, 2]


def point(x: int, y: int) -> Point:
    return (Fp(x), Fp(y))


# Add two points on a twisted Edwards curve
# Curve parameters are defined with the last argument
# https://en.wikipedia.org/wiki/Twisted_Edwards_curve#Addition_on_twisted_Edwards_curves
def add(pt1: Point, pt2: Point, context: EdwardsParams) -> Point:

    a: Fp = context.EDWARDS_A
    d: Fp = context.EDWARDS_D

    u1: Fp = pt1[0]
    v1: Fp = pt1[1]
    u2: Fp = pt2[0]
    v2: Fp = pt2[1]

    t: Fp = d*u1*u2*v1*v2
    uOut: Fp = (u1*v2 + v1*u2) / (Fp(1) + t)
    vOut: Fp = (v1*v2 - a*u1*u2) / (Fp(1) - t)

    return (uOut, vOut)


def negate(pt: Point) -> Point:
    return (-pt[0], pt[1])


def on_curve(pt: Point, context: EdwardsParams) -> bool:
    x: Fp = pt[0]
    y: Fp = pt[1]
    x2: Fp = x * x
    y2: Fp = y * y
    return context.EDWARDS_A * x2 + y2 == Fp(1) + context.EDWARDS_D * x2 * y2


# Double-and-add, least significant bit first
def scalar_mult(pt: Point, k: int, context: EdwardsParams) -> Point:
    if k < 0:
        return scalar_mult(negate(pt), -k, context)
    result: Point = context.INFINITY
    base: Point = pt
    while k:
        if k & 1:
            result = add(result, base, context)
        base = add(base, base, context)
        k >>= 1
    return result


def to_affine(pt: Point) -> tuple:
    """Canonical integer coordinates, both in [0, p)."""
    return (pt[0].value, pt[1].value)


def equal(pt1: Point, pt2: Point) -> bool:
    return to_affine(pt1) == to_affine(pt2)
