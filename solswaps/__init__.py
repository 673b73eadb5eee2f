"""Decoders for Solana DEX pool creations and Jupiter aggregator swaps, with their data records."""

__version__ = "0.1.0"