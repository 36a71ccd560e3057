#!/usr/bin/env python3
"""
Mutator tests for SeedFuzz

Covers the three character-level operators, compound mutation and the
StringMutator bookkeeping.
"""

import os
import random
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from seedfuzz.mutators import (
    OPERATORS,
    BaseMutator,
    StringMutator,
    delete_random_character,
    flip_random_character,
    insert_random_character,
    resolve_rng,
)
from seedfuzz.mutators.string_mutator import multi_mutate, mutate
from conftest import TEXT_SEED, URL_SEED, ScriptedRandom

SAMPLE_INPUTS = ["", "a", "ab", TEXT_SEED, URL_SEED, "~" * 40]


class TestOperatorsOnEmptyInput(unittest.TestCase):
    """Operators must never fail on the empty string"""

    def test_delete_empty_is_identity(self):
        self.assertEqual(delete_random_character("", random.Random(0)), "")

    def test_flip_empty_is_identity(self):
        self.assertEqual(flip_random_character("", random.Random(0)), "")

    def test_insert_empty_gives_one_character(self):
        for seed in range(50):
            result = insert_random_character("", random.Random(seed))
            self.assertEqual(len(result), 1)
            self.assertTrue(32 <= ord(result) <= 126)

    def test_empty_delete_and_flip_draw_nothing(self):
        rng = ScriptedRandom()
        self.assertEqual(delete_random_character("", rng), "")
        self.assertEqual(flip_random_character("", rng), "")
        self.assertEqual(rng.calls, [])


class TestOperatorLengths(unittest.TestCase):
    """Length guarantees of each operator"""

    def test_delete_shortens_by_one(self):
        rng = random.Random(1)
        for s in SAMPLE_INPUTS[1:]:
            for _ in range(30):
                self.assertEqual(len(delete_random_character(s, rng)), len(s) - 1)

    def test_insert_lengthens_by_one(self):
        rng = random.Random(2)
        for s in SAMPLE_INPUTS:
            for _ in range(30):
                self.assertEqual(len(insert_random_character(s, rng)), len(s) + 1)

    def test_flip_keeps_length(self):
        rng = random.Random(3)
        for s in SAMPLE_INPUTS:
            for _ in range(30):
                self.assertEqual(len(flip_random_character(s, rng)), len(s))


class TestOperatorSemantics(unittest.TestCase):
    """What each operator actually changes"""

    def test_delete_removes_one_character(self):
        rng = random.Random(4)
        for _ in range(50):
            result = delete_random_character(TEXT_SEED, rng)
            self.assertTrue(any(TEXT_SEED[:i] + TEXT_SEED[i + 1:] == result for i in range(len(TEXT_SEED))))

    def test_insert_adds_printable_character(self):
        rng = random.Random(5)
        for _ in range(50):
            result = insert_random_character(TEXT_SEED, rng)
            positions = [i for i in range(len(result)) if result[:i] + result[i + 1:] == TEXT_SEED]
            self.assertTrue(positions)
            self.assertTrue(32 <= ord(result[positions[0]]) <= 126)

    def test_flip_changes_exactly_one_low_bit(self):
        rng = random.Random(6)
        for _ in range(100):
            result = flip_random_character(TEXT_SEED, rng)
            diffs = [(a, b) for a, b in zip(TEXT_SEED, result) if a != b]
            self.assertEqual(len(diffs), 1)
            xor = ord(diffs[0][0]) ^ ord(diffs[0][1])
            self.assertIn(xor, [1 << bit for bit in range(7)])

    def test_scripted_positions(self):
        # insert 'A' at 0, delete at 0, flip bit 5 of 'T'
        rng = ScriptedRandom(randints=[0, 65])
        self.assertEqual(insert_random_character("bc", rng), "Abc")
        rng = ScriptedRandom(randints=[1])
        self.assertEqual(delete_random_character("abc", rng), "ac")
        rng = ScriptedRandom(randints=[0, 5])
        self.assertEqual(flip_random_character("T", rng), "t")

    def test_insert_position_covers_end(self):
        rng = ScriptedRandom(randints=[3, 33])
        self.assertEqual(insert_random_character("abc", rng), "abc!")


class TestStringMutator(unittest.TestCase):
    """Compound mutation and bookkeeping"""

    def test_is_base_mutator(self):
        self.assertIsInstance(StringMutator(seed=0), BaseMutator)

    def test_multi_mutate_zero_is_identity(self):
        mutator = StringMutator(seed=0)
        for s in SAMPLE_INPUTS:
            self.assertEqual(mutator.multi_mutate(s, 0), s)
        self.assertEqual(sum(mutator.usage_counts.values()), 0)

    def test_multi_mutate_negative_count_rejected(self):
        with self.assertRaises(ValueError):
            StringMutator(seed=0).multi_mutate(TEXT_SEED, -1)

    def test_usage_counts_match_mutations(self):
        mutator = StringMutator(seed=7)
        mutator.multi_mutate(URL_SEED, 25)
        self.assertEqual(sum(mutator.usage_counts.values()), 25)
        self.assertEqual(set(mutator.usage_counts), set(OPERATORS))

    def test_scripted_insert_delete_flip(self):
        rng = ScriptedRandom(
            choices=["insert", "delete", "flip"],
            randints=[
                0, 65,  # insert 'A' at position 0
                0,      # delete position 0
                0, 5,   # flip bit 5 of position 0
            ],
        )
        mutator = StringMutator(rng=rng)
        result = mutator.multi_mutate(TEXT_SEED, 3)
        self.assertEqual(result, "testing 123!!")
        # one insert and one delete cancel out
        self.assertEqual(len(result), len(TEXT_SEED) + 1 - 1)
        self.assertTrue(rng.exhausted)
        self.assertEqual(mutator.usage_counts, {"delete": 1, "insert": 1, "flip": 1})

    def test_operator_subset(self):
        mutator = StringMutator(seed=1, operators=["insert"])
        result = mutator.multi_mutate(TEXT_SEED, 10)
        self.assertEqual(len(result), len(TEXT_SEED) + 10)
        self.assertEqual(mutator.usage_counts, {"insert": 10})

    def test_unknown_operator_rejected(self):
        with self.assertRaises(ValueError):
            StringMutator(operators=["insert", "shuffle"])

    def test_empty_operator_list_rejected(self):
        with self.assertRaises(ValueError):
            StringMutator(operators=[])

    def test_same_seed_same_output(self):
        first = StringMutator(seed=42).multi_mutate(URL_SEED, 20)
        second = StringMutator(seed=42).multi_mutate(URL_SEED, 20)
        self.assertEqual(first, second)


class TestModuleLevelHelpers(unittest.TestCase):

    def test_mutate_with_int_seed_is_reproducible(self):
        self.assertEqual(mutate(URL_SEED, 3), mutate(URL_SEED, 3))

    def test_multi_mutate_with_int_seed_is_reproducible(self):
        self.assertEqual(multi_mutate(URL_SEED, 10, 3), multi_mutate(URL_SEED, 10, 3))

    def test_multi_mutate_zero(self):
        self.assertEqual(multi_mutate(URL_SEED, 0), URL_SEED)

    def test_multi_mutate_negative(self):
        with self.assertRaises(ValueError):
            multi_mutate(URL_SEED, -2)

    def test_length_stays_within_mutation_count(self):
        rng = random.Random(8)
        for n in range(0, 20):
            result = multi_mutate(TEXT_SEED, n, rng)
            self.assertLessEqual(abs(len(result) - len(TEXT_SEED)), n)


class TestResolveRng(unittest.TestCase):

    def test_none_gives_fresh_random(self):
        self.assertIsInstance(resolve_rng(None), random.Random)

    def test_int_gives_seeded_random(self):
        self.assertEqual(resolve_rng(5).random(), random.Random(5).random())

    def test_instance_passed_through(self):
        rng = random.Random(1)
        self.assertIs(resolve_rng(rng), rng)
        scripted = ScriptedRandom()
        self.assertIs(resolve_rng(scripted), scripted)

    def test_invalid_source_rejected(self):
        with self.assertRaises(TypeError):
            resolve_rng("not a random source")
        with self.assertRaises(TypeError):
            resolve_rng(True)


if __name__ == '__main__':
    unittest.main()
