#!/usr/bin/env python3
"""
Intermediate Example 1: Corpus, Mutation Ranges and Callbacks

Shows a campaign drawing from several seeds, a per-trial mutation range,
a custom check() and callbacks that watch every trial.

    python -m seedfuzz examples/intermediate/01_corpus_and_callbacks.py -v
"""

import json

# Local imports
from seedfuzz.fuzzing_framework import CallbackResult, FuzzingCampaign, TrialOutcome


def count_outcomes(context, record):
    """Tally outcomes per seed in shared_data."""
    per_seed = context.shared_data.setdefault('per_seed', {})
    counts = per_seed.setdefault(record.seed, {'accepted': 0, 'rejected': 0})
    counts['accepted' if record.outcome is TrialOutcome.ACCEPTED else 'rejected'] += 1
    return CallbackResult.SUCCESS


def announce(context):
    print(f"Launching {context.campaign.name} with {len(context.campaign.get_seeds())} seeds")
    return CallbackResult.SUCCESS


class JsonCorpusCampaign(FuzzingCampaign):
    """Fuzz json.loads with a small corpus of valid documents."""
    name = "JSON Corpus"
    seed = '{"a": [1, 2, 3]}'
    corpus = ['[true, false, null]', '"text"', '{"nested": {"k": 1.5e3}}']
    trials = 200
    mutations = 1
    max_mutations = 4
    rng_seed = 7
    # JSONDecodeError is a ValueError subclass; RecursionError would be a real defect
    expected_exceptions = (ValueError,)
    pre_launch_callback = announce
    post_trial_callback = count_outcomes

    def check(self, candidate):
        return json.loads(candidate)


class ArithmeticCampaign(FuzzingCampaign):
    """Fuzz int() parsing with a classifier instead of an exception tuple."""
    name = "Integer Parsing"
    seed = "-12345"
    trials = 100
    mutations = 2
    rng_seed = 11
    target = int
    rejection_classifier = staticmethod(lambda exc: isinstance(exc, ValueError))


CAMPAIGNS = [JsonCorpusCampaign, ArithmeticCampaign]
