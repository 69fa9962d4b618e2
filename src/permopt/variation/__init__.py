"""
Variation operators for permopt: shuffling, breeding and mutation.
"""

from .breeding import breed
from .mutation import mutate
from .shuffle import shuffle_ordering, swap_positions

__all__ = [
    "breed",
    "mutate",
    "shuffle_ordering",
    "swap_positions",
]
