"""Toy in-memory record store with small-curve ECDSA, LEA-OFB and a McEliece-style key pair."""

__version__ = "0.1.0"

__all__ = ["app", "ecdsa", "lea", "math_ops", "matrix_ops", "mceliece"]