"""
SeedFuzz - A seed-mutation fuzzing framework for string inputs.

This package provides tools for mutation-based fuzzing, including:
- Character-level mutation operators (delete, insert, bit-flip)
- Campaign-based fuzz driver with acceptance bookkeeping
- Function and external-program runners
- Text and JSON campaign reports
"""

from .fuzzing_framework import (
    CallbackResult,
    CampaignAbortedError,
    CampaignConfigurationError,
    CampaignContext,
    CrashInfo,
    FuzzingCampaign,
    FuzzResult,
    InputRejected,
    TargetDefectError,
    TrialOutcome,
    TrialRecord,
    mutation_fuzz,
    setup_logging,
)
from .mutator_manager import FuzzConfig, MutatorManager
from .mutators import (
    StringMutator,
    delete_random_character,
    flip_random_character,
    insert_random_character,
)
from .mutators.string_mutator import multi_mutate, mutate
from .runners import FunctionRunner, ProgramRunner, TargetCrashError
from .validators import http_program, is_valid_url

__version__ = "1.0.0"
__all__ = [
    "FuzzingCampaign",
    "FuzzResult",
    "CallbackResult",
    "CampaignContext",
    "CrashInfo",
    "TrialOutcome",
    "TrialRecord",
    "CampaignConfigurationError",
    "CampaignAbortedError",
    "InputRejected",
    "TargetDefectError",
    "mutation_fuzz",
    "setup_logging",
    "MutatorManager",
    "FuzzConfig",
    "StringMutator",
    "delete_random_character",
    "insert_random_character",
    "flip_random_character",
    "mutate",
    "multi_mutate",
    "FunctionRunner",
    "ProgramRunner",
    "TargetCrashError",
    "http_program",
    "is_valid_url",
]
