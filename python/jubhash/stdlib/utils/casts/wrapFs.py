from jubhash.types import Fs

# Reduce an integer into the canonical residue class of the scalar field.
# Reduction is a single Euclidean modulo, so negative inputs of any magnitude
# land in [0, n) as well.
def wrap_fs(x) -> Fs:
    if isinstance(x, Fs):
        return x
    return Fs(x)
