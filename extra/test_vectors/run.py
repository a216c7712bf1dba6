import sys
import numpy as np

from jubhash import PedersenHasher, InputTooLong


def generate_vectors(count, length):
    hasher = PedersenHasher()
    if 8 * length > hasher.capacity_bits:
        raise InputTooLong((8 * length + 2) // 3, hasher.capacity_bits // 3)

    for _ in range(count):
        entropy = np.random.bytes(length)
        x, y = hasher.hash_bytes(entropy)
        print("# input: {}".format(entropy.hex()))
        print("Point(x=0x{:064x}, y=0x{:064x})".format(x, y))
        print("")

if __name__ == "__main__":
    if len(sys.argv) not in (2, 3):
        print("Usage: python run.py <count> [length]")
        sys.exit(1)

    count = int(sys.argv[1])
    length = int(sys.argv[2]) if len(sys.argv) == 3 else 64
    generate_vectors(count, length)
