from jubhash.types import Array
from typing import Any, List

# Expand bytes into bits, least significant bit of each byte first
def to_bits(data: bytes) -> Array[bool, Any]:
    bits: List[bool] = []
    for b in data:
        for i in range(8):
            bits.append((b >> i) & 1 == 1)
    return bits # type: ignore


# Pad with `False` up to the next multiple of 3
def pad_bits(bits: Array[bool, Any]) -> Array[bool, Any]:
    padded = list(bits) # type: ignore
    padded.extend([False] * (-len(padded) % 3))
    return padded # type: ignore


def buffer_to_bits(data: bytes) -> Array[bool, Any]:
    return pad_bits(to_bits(data))
