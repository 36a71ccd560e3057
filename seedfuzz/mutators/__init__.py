"""
Init file for mutators package
"""

import logging

from .base import BaseMutator, resolve_rng
from .string_mutator import (
    OPERATORS,
    StringMutator,
    delete_random_character,
    flip_random_character,
    insert_random_character,
)

# Configure module-level logger
logger = logging.getLogger(__name__)

__all__ = [
    "BaseMutator",
    "StringMutator",
    "OPERATORS",
    "delete_random_character",
    "insert_random_character",
    "flip_random_character",
    "resolve_rng",
]
