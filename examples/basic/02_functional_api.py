#!/usr/bin/env python3
"""
Basic Example 2: Functional API

Runs a one-off campaign with mutation_fuzz() and prints the result.
A fixed rng seed makes the run reproducible.

    python examples/basic/02_functional_api.py
"""

# Local imports
from seedfuzz import mutation_fuzz, multi_mutate
from seedfuzz.validators import http_program


def main() -> int:
    seed_input = "http://www.google.com/search?q=fuzzing"
    for i in range(5):
        print(f"{i} mutations: {multi_mutate(seed_input, i * 5, rng=i)!r}")

    result = mutation_fuzz(seed_input, http_program, trials=100, mutations=15, rng=42)
    print(f"{result.accepted_trials}/{result.trials} accepted "
          f"({result.acceptance_ratio:.1f}%), {len(result.accepted)} unique")
    for candidate in sorted(result.accepted)[:10]:
        print(f"  {candidate!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
