"""Deterministic byte stream used for dithering perturbations.

A tiny xorshift64* generator. Each filter call gets its own stream so the
dithering sequence depends only on the seed and the order of draws, never on
what other calls did before.
"""
from __future__ import annotations

import numpy as np

DEFAULT_SEED = 0x853C49E6748FEA9B

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MULTIPLIER = 0x2545F4914F6CDD1D


class XorShiftStream:
    """xorshift64* generator advanced once per requested byte."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        seed &= _MASK64
        if seed == 0:
            raise ValueError("seed must be non-zero (xorshift state would stay 0)")
        self._seed = seed
        self._state = seed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    def reset(self) -> None:
        """Rewind the stream to its initial seed."""
        self._state = self._seed

    def next_byte(self) -> int:
        x = self._state
        x ^= x >> 12
        x ^= (x << 25) & _MASK64
        x ^= x >> 27
        self._state = x
        return ((x * _MULTIPLIER) & _MASK64) & 0xFF

    def take(self, n: int) -> np.ndarray:
        """Draw ``n`` bytes in order and return them as a uint8 array."""
        if n < 0:
            raise ValueError("n must be >= 0")
        out = np.empty(n, dtype=np.uint8)
        x = self._state
        for i in range(n):
            x ^= x >> 12
            x ^= (x << 25) & _MASK64
            x ^= x >> 27
            out[i] = ((x * _MULTIPLIER) & _MASK64) & 0xFF
        self._state = x
        return out
