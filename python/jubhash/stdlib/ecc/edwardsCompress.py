from jubhash.errors import InvalidCurvePoint
from jubhash.stdlib.ecc.babyjubjubParams import EdwardsParams
from jubhash.stdlib.ecc.edwardsAdd import Point, on_curve, point

COORDINATE_BYTES = 32


# Encode a point as x || y, each coordinate 32 bytes big-endian
def encode_point(pt: Point) -> bytes:
    return (pt[0].value.to_bytes(COORDINATE_BYTES, 'big')
            + pt[1].value.to_bytes(COORDINATE_BYTES, 'big'))


def decode_point(data: bytes, context: EdwardsParams) -> Point:
    if len(data) != 2 * COORDINATE_BYTES:
        raise InvalidCurvePoint(data, "Encoded point must be {} bytes, got {}.".format(2 * COORDINATE_BYTES, len(data)))
    x = int.from_bytes(data[:COORDINATE_BYTES], 'big')
    y = int.from_bytes(data[COORDINATE_BYTES:], 'big')
    if x >= context.MODULUS or y >= context.MODULUS:
        raise InvalidCurvePoint((x, y), "Coordinate out of range of the base field.")
    pt = point(x, y)
    if not on_curve(pt, context):
        raise InvalidCurvePoint((x, y))
    return pt


# Compress JubJub Curve Point to 256 bits using big endianness bit order:
# the y coordinate with its most significant bit replaced by the sign (parity) of x
def compress(pt: Point) -> bytes:
    x: int = pt[0].value
    y: int = pt[1].value

    sign = x & 1
    packed = (y & ((1 << 255) - 1)) | (sign << 255)
    return packed.to_bytes(COORDINATE_BYTES, 'big')
