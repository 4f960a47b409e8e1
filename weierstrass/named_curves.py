from . import curve
from . import point


# Small curve used in worked examples: y^2 = x^3 + 63x + 60 mod 97
TOY_P = 97
TOY_A = 63
TOY_B = 60
TOY_CURVE = curve.Curve.from_parameters(TOY_A, TOY_B, TOY_P)
TOY_POINT = point.Point.from_coordinates(25, 24)

# Secp256k1 curve parameters
SECP256K1_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP256K1_A = 0
SECP256K1_B = 7
SECP256K1_GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
SECP256K1_GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

# Secp256k1 order
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

SECP256K1 = curve.Curve.from_parameters(SECP256K1_A, SECP256K1_B, SECP256K1_P)
SECP256K1_G = point.Point.from_coordinates(SECP256K1_GX, SECP256K1_GY)

# NIST P-256 (secp256r1) curve parameters, a = -3 mod p
P256_P = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
P256_A = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC
P256_B = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
P256_GX = 0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296
P256_GY = 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5

# P-256 order
P256_ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

P256 = curve.Curve.from_parameters(P256_A, P256_B, P256_P)
P256_G = point.Point.from_coordinates(P256_GX, P256_GY)
