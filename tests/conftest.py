#!/usr/bin/env python3
"""
Shared test fixtures and utilities for the SeedFuzz test suite.

This module provides common pytest fixtures, utilities, and helper functions
that are used across multiple test modules.
"""

import os
import sys
from pathlib import Path
from typing import Any, Iterable, List, Sequence

import pytest

# Add the parent directory to sys.path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from seedfuzz.fuzzing_framework import FuzzingCampaign, InputRejected
from seedfuzz.validators import http_program

URL_SEED = "http://www.google.com/search?q=fuzzing"
TEXT_SEED = "Testing 123!!"


class ScriptedRandom:
    """
    Random source replaying scripted results.

    ``randints`` feeds randint() in order and ``choices`` feeds choice().
    Every drawn value is checked against the requested bounds so that a
    script that no longer matches the code fails loudly.
    """

    def __init__(self, randints: Iterable[int] = (), choices: Iterable[Any] = ()):
        self.randints: List[int] = list(randints)
        self.choices: List[Any] = list(choices)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        if not self.randints:
            raise AssertionError(f"Unexpected randint({a}, {b}) call: script exhausted")
        value = self.randints.pop(0)
        if not a <= value <= b:
            raise AssertionError(f"Scripted value {value} outside randint({a}, {b})")
        self.calls.append(('randint', a, b, value))
        return value

    def choice(self, seq: Sequence[Any]) -> Any:
        if not self.choices:
            raise AssertionError(f"Unexpected choice({list(seq)}) call: script exhausted")
        value = self.choices.pop(0)
        if value not in seq:
            raise AssertionError(f"Scripted choice {value!r} not in {list(seq)}")
        self.calls.append(('choice', tuple(seq), value))
        return value

    @property
    def exhausted(self) -> bool:
        return not self.randints and not self.choices


class RecordingTarget:
    """Target wrapper remembering every candidate and whether it was accepted."""

    def __init__(self, func):
        self.func = func
        self.seen: List[tuple] = []

    def __call__(self, candidate: str) -> Any:
        try:
            value = self.func(candidate)
        except Exception:
            self.seen.append((candidate, False))
            raise
        self.seen.append((candidate, True))
        return value

    @property
    def accepted(self) -> set:
        return {candidate for candidate, ok in self.seen if ok}

    @property
    def rejected(self) -> set:
        return {candidate for candidate, ok in self.seen if not ok}


def accept_all(candidate: str) -> bool:
    return True


def reject_all(candidate: str) -> bool:
    raise ValueError("always invalid")


def reject_uppercase(candidate: str) -> str:
    if candidate != candidate.lower():
        raise InputRejected("uppercase characters are not allowed")
    return candidate


# Test Campaign Classes
class BasicTestCampaign(FuzzingCampaign):
    """Basic URL campaign for unit tests"""
    name = "Basic Test Campaign"
    seed = URL_SEED
    target = http_program
    trials = 20
    mutations = 15
    rng_seed = 1234
    verbose = False
    crash_logging = False


class AcceptAllCampaign(FuzzingCampaign):
    """Campaign whose target accepts everything"""
    name = "Accept All"
    seed = TEXT_SEED
    target = accept_all
    trials = 10
    mutations = 3
    rng_seed = 99
    verbose = False
    crash_logging = False


class DefectTestCampaign(FuzzingCampaign):
    """Campaign whose target has a bug unrelated to input validity"""
    name = "Defect Test Campaign"
    seed = TEXT_SEED
    trials = 5
    mutations = 1
    rng_seed = 5
    verbose = False
    crash_logging = False

    def check(self, candidate):
        return {}[candidate]


# Test Fixtures
@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run every test inside its own directory so default artifact paths stay out of the tree."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def basic_campaign():
    """Fixture providing a basic URL campaign"""
    return BasicTestCampaign()


@pytest.fixture
def accept_all_campaign():
    """Fixture providing a campaign that accepts every candidate"""
    return AcceptAllCampaign()


@pytest.fixture
def defect_campaign():
    """Fixture providing a campaign whose target raises KeyError"""
    return DefectTestCampaign()


@pytest.fixture
def temp_config_file(tmp_path):
    """Fixture providing a temporary campaign configuration file"""
    path = tmp_path / "temp_campaigns.py"
    path.write_text('''
from seedfuzz.fuzzing_framework import FuzzingCampaign
from seedfuzz.validators import http_program


class TempUrlCampaign(FuzzingCampaign):
    name = "Temporary URL Campaign"
    seed = "http://example.com/index.html"
    target = http_program
    trials = 10
    mutations = 5
    rng_seed = 3


class TempLowerCampaign(FuzzingCampaign):
    name = "Temporary Lower Campaign"
    seed = "lowercase text"
    target = str.lower
    trials = 5
    mutations = 2
    rng_seed = 4

CAMPAIGNS = [TempUrlCampaign, TempLowerCampaign]
''')
    return path


def project_env() -> dict:
    """Environment for subprocesses that import seedfuzz from the source tree."""
    env = dict(os.environ)
    env['PYTHONPATH'] = str(PROJECT_ROOT) + os.pathsep + env.get('PYTHONPATH', '')
    return env
