"""
Base mutator interface for SeedFuzz

Defines the common interface that all mutators must implement.
"""

# Standard library imports
import logging
import random
from abc import ABC, abstractmethod
from typing import Optional, Union

logger = logging.getLogger(__name__)


def resolve_rng(rng: Optional[Union[random.Random, int]] = None) -> random.Random:
    """
    Build the random source used by mutators and campaigns.

    Args:
        rng: A ``random.Random``-compatible object, an integer seed, or None

    Returns:
        The object itself when one is given, a private ``random.Random(seed)``
        for an integer, or a fresh unseeded ``random.Random()`` for None
    """
    if rng is None:
        return random.Random()
    # bool is an int subclass but never a meaningful seed
    if isinstance(rng, int) and not isinstance(rng, bool):
        return random.Random(rng)
    if not (hasattr(rng, "randint") and hasattr(rng, "choice")):
        raise TypeError(f"Random source must provide randint() and choice(), got {type(rng).__name__}")
    return rng


class BaseMutator(ABC):
    """
    Abstract base class for all mutators.

    Provides a common interface for different mutation strategies.
    Randomness always comes from an injected ``rng`` so that runs can be
    replayed with a fixed seed.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """Initialize the mutator with an optional random seed or random source."""
        self.rng = resolve_rng(rng if rng is not None else seed)

    @abstractmethod
    def mutate(self, data: str, rng: Optional[random.Random] = None) -> str:
        """
        Apply a single mutation to ``data``.

        Args:
            data: The string to mutate
            rng: Optional random source overriding the mutator's own

        Returns:
            Mutated string
        """
        pass

    def teardown(self) -> None:
        """
        Clean up resources used by this mutator.

        This method is called when the mutator is no longer needed
        and should release any resources (temporary files, memory, etc.)
        """
        # Default implementation does nothing
        pass
