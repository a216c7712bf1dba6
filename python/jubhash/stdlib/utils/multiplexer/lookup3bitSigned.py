from jubhash.types import Array, Fs

# Three-bit window (2 bits + sign bit) of the Pedersen encoding.
# Maps the bits `b` to the signed multiple (1 + b[0] + 2*b[1]) * cur and
# returns it with the step for the next window (cur * 16).
# The order of operations is fixed: both data bits, then the sign.
def sel3s(b: Array[bool, 3], cur: Fs) -> tuple:
    tmp: Fs = cur
    if b[0]:
        tmp = tmp + cur
    cur = cur * 2
    if b[1]:
        tmp = tmp + cur
    if b[2]:
        tmp = -tmp
    cur = cur * 8
    return tmp, cur
