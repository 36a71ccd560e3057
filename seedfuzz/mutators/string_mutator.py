"""
String Mutator

Character-level mutation operators for text seeds. Each operator makes one
minimal edit (delete, insert or bit-flip a single character) and tolerates
the empty string.
"""

# Standard library imports
import logging
import random
from typing import Callable, Dict, List, Optional

# Local imports
from .base import BaseMutator, resolve_rng

logger = logging.getLogger(__name__)

# Constants
PRINTABLE_MIN = 32
PRINTABLE_MAX = 126
MAX_FLIP_BIT = 6  # 7-bit clean ASCII


def delete_random_character(s: str, rng: random.Random) -> str:
    """Return s with a random character deleted"""
    if s == "":
        return s

    pos = rng.randint(0, len(s) - 1)
    return s[:pos] + s[pos + 1:]


def insert_random_character(s: str, rng: random.Random) -> str:
    """Return s with a random printable character inserted"""
    pos = rng.randint(0, len(s))
    random_character = chr(rng.randint(PRINTABLE_MIN, PRINTABLE_MAX))
    return s[:pos] + random_character + s[pos:]


def flip_random_character(s: str, rng: random.Random) -> str:
    """Return s with a random bit flipped in a random position"""
    if s == "":
        return s

    pos = rng.randint(0, len(s) - 1)
    c = s[pos]
    bit = 1 << rng.randint(0, MAX_FLIP_BIT)
    new_c = chr(ord(c) ^ bit)
    return s[:pos] + new_c + s[pos + 1:]


# Operator table, in the order used for uniform selection
OPERATORS: Dict[str, Callable[[str, random.Random], str]] = {
    "delete": delete_random_character,
    "insert": insert_random_character,
    "flip": flip_random_character,
}


class StringMutator(BaseMutator):
    """
    Mutator applying one randomly chosen character-level operator per call.

    Operator choice is uniform over the enabled operators. Usage counts are
    kept per operator name for campaign reporting.
    """

    def __init__(self,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None,
                 operators: Optional[List[str]] = None):
        super().__init__(seed, rng)
        names = list(operators) if operators is not None else list(OPERATORS)
        unknown = [name for name in names if name not in OPERATORS]
        if unknown:
            raise ValueError(f"Unknown mutation operator(s): {', '.join(map(str, unknown))}")
        if not names:
            raise ValueError("StringMutator requires at least one operator")
        self.operator_names = names
        self.usage_counts: Dict[str, int] = {name: 0 for name in names}
        logger.debug(f"StringMutator enabled operators: {', '.join(names)}")

    def choose_operator(self, rng: Optional[random.Random] = None) -> str:
        """Pick an operator name uniformly at random."""
        rng = rng or self.rng
        return rng.choice(self.operator_names)

    def apply(self, name: str, data: str, rng: Optional[random.Random] = None) -> str:
        """Apply the named operator once."""
        rng = rng or self.rng
        operator = OPERATORS[name]
        result = operator(data, rng)
        self.usage_counts[name] = self.usage_counts.get(name, 0) + 1
        return result

    def mutate(self, data: str, rng: Optional[random.Random] = None) -> str:
        """Return data with a random mutation applied"""
        rng = rng or self.rng
        return self.apply(self.choose_operator(rng), data, rng)

    def multi_mutate(self, data: str, count: int, rng: Optional[random.Random] = None) -> str:
        """Apply ``count`` successive mutations, threading each result into the next."""
        if count < 0:
            raise ValueError(f"Mutation count must be non-negative, got {count}")
        rng = rng or self.rng
        candidate = data
        for _ in range(count):
            candidate = self.mutate(candidate, rng)
        return candidate


def mutate(s: str, rng: Optional[random.Random] = None) -> str:
    """Module-level convenience: apply one random operator to s."""
    rng = resolve_rng(rng)
    name = rng.choice(list(OPERATORS))
    return OPERATORS[name](s, rng)


def multi_mutate(s: str, n: int, rng: Optional[random.Random] = None) -> str:
    """Module-level convenience: apply n random operators to s in succession."""
    if n < 0:
        raise ValueError(f"Mutation count must be non-negative, got {n}")
    rng = resolve_rng(rng)
    for _ in range(n):
        s = mutate(s, rng)
    return s
