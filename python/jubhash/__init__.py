from __future__ import annotations

from jubhash.__about__ import __author__, __version__
from jubhash.errors import InputTooLong, InvalidCurvePoint, JubHashError
from jubhash.hasher import PedersenHasher, pedersen_hash

__all__ = [
    "__version__",
    "__author__",
    "PedersenHasher",
    "pedersen_hash",
    "JubHashError",
    "InvalidCurvePoint",
    "InputTooLong",
]
