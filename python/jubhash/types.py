from typing import TypeVar, Generic, Any
from mpyc import finfields

T = TypeVar('T', bound=Any)
N = TypeVar('N')

# Scalar field of BN256, which is the coordinate field of Baby Jubjub
bn256_scalar_field_modulus = 21888242871839275222246405745257275088548364400416034343698204186575808495617
# Order of the prime-order subgroup used for Pedersen scalars
babyjubjub_subgroup_order = 2736030358979909402780800718157159386076813972158567259200215660948447373041

Fp = finfields.GF(bn256_scalar_field_modulus)
Fs = finfields.GF(babyjubjub_subgroup_order)

class Array(Generic[T, N]):
    def __getitem__(self, key: int) -> T:
        return self[key]
