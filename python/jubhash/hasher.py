import logging
import threading

from jubhash.stdlib.ecc.babyjubjubParams import BABYJUBJUB_PARAMS
from jubhash.stdlib.ecc.edwardsAdd import to_affine
from jubhash.stdlib.ecc.edwardsCompress import encode_point
from jubhash.stdlib.hashes.pedersen.bn256.generators import PEDERSEN_GENERATORS, build_table
from jubhash.stdlib.hashes.pedersen.bn256.hashBytes import capacity, pedersen_hash_bits, pedersen_hash_bytes
from jubhash.stdlib.utils.pack.bool.bytesToBits import pad_bits

logger = logging.getLogger(__name__)


class PedersenHasher:
    """Pedersen hash over Baby Jubjub backed by a shared, write-once lookup table.

    The first instantiation builds and validates the generator table; every
    later instantiation returns the same instance. The table is never
    modified afterwards, so the instance can be used from any thread.
    """
    _instance = None
    _lock = threading.Lock()

    def __new__(cls, context=BABYJUBJUB_PARAMS, generators=PEDERSEN_GENERATORS):
        with cls._lock:
            if cls._instance is None:
                logger.debug("Initializing Pedersen generator table")
                table = build_table(generators, context)
                instance = super(PedersenHasher, cls).__new__(cls)
                instance.context = context
                instance.generators = generators
                instance.table = table
                cls._instance = instance
            elif cls._instance.context is not context or cls._instance.generators is not generators:
                raise RuntimeError("PedersenHasher is already initialized with different parameters.")
        return cls._instance

    @property
    def capacity_bits(self) -> int:
        return 3 * capacity(self.table)

    def hash_bits(self, bits) -> tuple:
        """Hash a bit sequence; it is padded with `False` to a multiple of 3."""
        return to_affine(pedersen_hash_bits(pad_bits(bits), self.table, self.context))

    def hash_bytes(self, data) -> tuple:
        return to_affine(self.hash_point(data))

    def hash_point(self, data):
        """Digest as an affine point of field elements."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("Expected a bytes-like object, got {}.".format(type(data).__name__))
        return pedersen_hash_bytes(bytes(data), self.table, self.context)

    def digest(self, data) -> bytes:
        """64-byte encoding x || y of the digest, each coordinate big-endian."""
        return encode_point(self.hash_point(data))


def pedersen_hash(data) -> tuple:
    return PedersenHasher().hash_bytes(data)
