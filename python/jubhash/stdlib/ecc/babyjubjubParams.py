from jubhash.types import Array, Fp, Fs
from dataclasses import dataclass

# Baby Jubjub in the form `-x^2 + y^2 = 1 + d*x^2*y^2` over the BN256 scalar field.
# It is obtained from the usual Montgomery-friendly form (a = 168700, d = 168696)
# through the isomorphism with a' = -1:
#   scaling = 1911982854305225074381251344103329931637610209014896889891168275855466657090
#   a' = a * scaling^2 = -1
#   d' = d * scaling^2 = -(168696/168700)

@dataclass(frozen=True)
class EdwardsParams:
	EDWARDS_A: Fp
	EDWARDS_D: Fp
	EDWARDS_C: int
	ORDER: int
	MODULUS: int
	INFINITY: Array[Fp, 2]
	G: Array[Fp, 2]

BABYJUBJUB_PARAMS: EdwardsParams = EdwardsParams(
    EDWARDS_A=Fp(21888242871839275222246405745257275088548364400416034343698204186575808495616), # Coefficient A (-1)
    EDWARDS_D=Fp(12181644023421730124874158521699555681764249180949974110617291017600649128846), # Coefficient D
    EDWARDS_C=1, # Cofactor of the parameter set the generators were published with

    # Order of the prime subgroup and of the base field
    ORDER=Fs.modulus,
    MODULUS=Fp.modulus,

    # Point at infinity
    INFINITY=(Fp(0), Fp(1)),

    # Generator
    G=(
        Fp(0x2ef3f9b423a2c8c74e9803958f6c320e854a1c1c06cd5cc8fd221dc052d76df7),
        Fp(0x05a01167ea785d3f784224644a68e4067532c815f5f6d57d984b5c0e9c6c94b7),
    ),
)
