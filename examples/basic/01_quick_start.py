#!/usr/bin/env python3
"""
Basic Example 1: Quick Start - Fuzzing a URL Validator

The simplest possible campaign: a seed, a target and a trial budget.
Candidates that still parse as http(s) URLs with a host are accepted.

To run this example with the SeedFuzz CLI:
    python -m seedfuzz examples/basic/01_quick_start.py
"""

# Local imports
from seedfuzz.fuzzing_framework import FuzzingCampaign
from seedfuzz.validators import http_program


class QuickStartCampaign(FuzzingCampaign):
    """Minimal fuzzing campaign - just the essentials."""
    name = "Quick Start"
    seed = "http://www.google.com/search?q=fuzzing"
    target = http_program
    trials = 20
    mutations = 15
    verbose = False


# Register campaign(s) for framework and CLI discovery
CAMPAIGNS = [QuickStartCampaign]
