"""Bitboards, a KPK bitbase, material imbalance and engine utilities for chess programs."""

__version__ = "0.1.0"

__all__ = ["types", "misc", "bitboard", "bitbase", "material", "runtime"]