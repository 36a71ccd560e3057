"""
Mutator Manager for SeedFuzz

Manages mutator selection and orchestrates compound mutations.
Delegates all actual mutation logic to specialized mutators in the mutators/ directory.
"""

# Standard library imports
from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Local imports
from .mutators.base import resolve_rng
from .mutators.string_mutator import OPERATORS, StringMutator

logger = logging.getLogger(__name__)

# Constants
DEFAULT_OPERATORS = list(OPERATORS)


@dataclass
class FuzzConfig:
    """Configuration for mutation operations
    operators must be a list of operator names (e.g., ['delete', 'insert', 'flip']).
    """
    operators: List[str] = field(default_factory=lambda: list(DEFAULT_OPERATORS))
    operator_weights: Optional[Dict[str, float]] = None  # None = uniform selection
    rng: Optional[random.Random] = None  # Optional random generator for reproducibility
    rng_seed: Optional[int] = None  # Used only when rng is None

    def __str__(self) -> str:
        return f"FuzzConfig(operators={self.operators})"


class MutatorManager:
    """
    Manages mutator selection and orchestrates mutation of seeds.

    Owns the random source shared by every operator so that a fixed
    ``rng_seed`` replays the same sequence of candidates.
    """

    def __init__(self, config: Optional[FuzzConfig] = None):
        self.config = config or FuzzConfig()
        self.rng = resolve_rng(self.config.rng if self.config.rng is not None else self.config.rng_seed)
        self.string_mutator = StringMutator(rng=self.rng, operators=self.config.operators)

        self._weights: Optional[List[float]] = None
        if self.config.operator_weights:
            weights = []
            for name in self.string_mutator.operator_names:
                weight = float(self.config.operator_weights.get(name, 0.0))
                if weight < 0:
                    raise ValueError(f"Operator weight for '{name}' must be non-negative")
                weights.append(weight)
            if sum(weights) <= 0:
                raise ValueError("At least one operator weight must be positive")
            unknown = set(self.config.operator_weights) - set(self.string_mutator.operator_names)
            if unknown:
                raise ValueError(f"Weights given for disabled or unknown operator(s): {', '.join(sorted(unknown))}")
            self._weights = weights

        # Track which operators were applied to the current candidate
        self.current_mutation_chain: List[str] = []

    def __del__(self):
        """Automatic cleanup when MutatorManager is destroyed."""
        self.teardown()

    def teardown(self) -> None:
        """
        Clean up all mutator resources.
        """
        mutator = getattr(self, 'string_mutator', None)
        if mutator is not None:
            mutator.teardown()
            logger.debug("String mutator teardown completed")

    @property
    def mutator_usage_counts(self) -> Dict[str, int]:
        """Number of times each operator has been applied."""
        return dict(self.string_mutator.usage_counts)

    def choose_operator(self) -> str:
        if self._weights is None:
            return self.string_mutator.choose_operator(self.rng)
        return self.rng.choices(self.string_mutator.operator_names, weights=self._weights)[0]

    def mutate(self, data: str) -> str:
        """Apply one randomly selected operator to data."""
        name = self.choose_operator()
        self.current_mutation_chain.append(name)
        return self.string_mutator.apply(name, data, self.rng)

    def multi_mutate(self, seed: str, count: int) -> str:
        """
        Apply ``count`` mutations in succession, starting from ``seed``.

        Args:
            seed: Seed string
            count: Number of mutations (0 returns the seed unchanged)

        Returns:
            The mutated candidate
        """
        if count < 0:
            raise ValueError(f"Mutation count must be non-negative, got {count}")
        self.current_mutation_chain = []
        candidate = seed
        for _ in range(count):
            candidate = self.mutate(candidate)
        logger.debug(f"Applied {count} mutation(s): {' -> '.join(self.current_mutation_chain) or 'none'}")
        return candidate

    def choose_seed(self, seeds: List[str]) -> str:
        """Pick a seed from the population; a single seed costs no random draw."""
        if not seeds:
            raise ValueError("Seed population is empty")
        if len(seeds) == 1:
            return seeds[0]
        return self.rng.choice(seeds)

    def choose_mutation_count(self, minimum: int, maximum: Optional[int] = None) -> int:
        """Return the mutation count for a trial; uniform in [minimum, maximum] when a range is set."""
        if maximum is None or maximum == minimum:
            return minimum
        return self.rng.randint(minimum, maximum)
