"""Bitboard chess board representation and pseudo-legal move generation."""

__version__ = "1.0.0"
__all__ = ["attacks", "bitboard", "board", "cli", "movegen", "piece"]