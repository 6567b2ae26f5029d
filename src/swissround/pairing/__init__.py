"""Pairing engines for Swiss Round."""

from swissround.pairing.base import PairingEngine, RandomPairingStrategy
from swissround.pairing.random_pairing import (
    FixedPairingStrategy,
    ShufflePairingStrategy,
)
from swissround.pairing.swiss import SwissPairingEngine

__all__ = [
    "PairingEngine",
    "RandomPairingStrategy",
    "ShufflePairingStrategy",
    "FixedPairingStrategy",
    "SwissPairingEngine",
]
