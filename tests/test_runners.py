#!/usr/bin/env python3
"""
Target runner tests: in-process functions and external programs.
"""

import os
import subprocess
import sys
import unittest

import pytest

from seedfuzz.fuzzing_framework import (
    FuzzingCampaign,
    InputRejected,
    TargetDefectError,
    mutation_fuzz,
)
from seedfuzz.runners import FunctionRunner, ProgramRunner, TargetCrashError
from conftest import TEXT_SEED, URL_SEED

PREFIX_CHECK = (
    "import sys\n"
    "data = sys.stdin.read()\n"
    "sys.exit(0 if data.startswith('http') else 1)\n"
)


def python_program(source):
    return [sys.executable, "-c", source]


class TestFunctionRunner(unittest.TestCase):

    def test_return_value_passed_through(self):
        runner = FunctionRunner(int)
        self.assertEqual(runner("42"), 42)

    def test_expected_exception_becomes_rejection(self):
        runner = FunctionRunner(int)
        with self.assertRaises(InputRejected) as ctx:
            runner("forty-two")
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_other_exceptions_propagate(self):
        runner = FunctionRunner(lambda s: {}[s])
        with self.assertRaises(KeyError):
            runner("x")

    def test_custom_expected_exceptions(self):
        runner = FunctionRunner(lambda s: {}[s], expected_exceptions=(KeyError,))
        with self.assertRaises(InputRejected):
            runner("x")

    def test_requires_callable(self):
        with self.assertRaises(TypeError):
            FunctionRunner("not callable")

    def test_repr(self):
        self.assertIn("int", repr(FunctionRunner(int)))

    def test_rejections_survive_empty_expected_exceptions(self):
        # the campaign treats InputRejected as a rejection regardless of its own tuple
        result = mutation_fuzz("12345", FunctionRunner(int), trials=30, mutations=2, rng=8,
                               expected_exceptions=())
        self.assertEqual(result.accepted_trials + result.rejected_trials, 30)
        for candidate in result.accepted:
            int(candidate)


class TestProgramRunner(unittest.TestCase):

    def test_exit_zero_accepts(self):
        runner = ProgramRunner(python_program(PREFIX_CHECK))
        process = runner(URL_SEED)
        self.assertIsInstance(process, subprocess.CompletedProcess)
        self.assertEqual(process.returncode, 0)

    def test_nonzero_exit_rejects(self):
        runner = ProgramRunner(python_program(PREFIX_CHECK))
        with self.assertRaises(InputRejected):
            runner(TEXT_SEED)

    def test_candidate_delivered_on_stdin(self):
        echo = "import sys\nsys.stdout.write(sys.stdin.read())\n"
        process = ProgramRunner(python_program(echo))("héllo\nworld")
        self.assertEqual(process.stdout.decode("utf-8"), "héllo\nworld")

    @pytest.mark.skipif(os.name != "posix", reason="signals are POSIX only")
    def test_signal_is_crash(self):
        source = "import os, signal\nos.kill(os.getpid(), signal.SIGKILL)\n"
        runner = ProgramRunner(python_program(source))
        with self.assertRaises(TargetCrashError) as ctx:
            runner("anything")
        self.assertLess(ctx.exception.returncode, 0)

    def test_timeout_is_crash(self):
        runner = ProgramRunner(python_program("import time\ntime.sleep(10)\n"), timeout=0.5)
        with self.assertRaises(TargetCrashError):
            runner("slow")

    def test_missing_program(self):
        with self.assertRaises(FileNotFoundError):
            ProgramRunner(["definitely-not-a-real-program-seedfuzz"])

    def test_empty_command(self):
        with self.assertRaises(ValueError):
            ProgramRunner([])


class ProgramCampaign(FuzzingCampaign):
    name = "Program Campaign"
    seed = URL_SEED
    trials = 6
    mutations = 2
    rng_seed = 11
    verbose = False
    crash_logging = False


class TestProgramCampaign(unittest.TestCase):

    def test_program_classifies_candidates(self):
        campaign = ProgramCampaign()
        campaign.target = ProgramRunner(python_program(PREFIX_CHECK))
        result = campaign.run()
        self.assertEqual(result.trials, 6)
        self.assertEqual(result.accepted_trials + result.rejected_trials, 6)
        self.assertTrue(all(c.startswith("http") for c in result.accepted))

    @pytest.mark.skipif(os.name != "posix", reason="signals are POSIX only")
    def test_program_crash_stops_campaign(self):
        source = "import os, signal\nos.kill(os.getpid(), signal.SIGSEGV)\n"
        campaign = ProgramCampaign()
        campaign.target = ProgramRunner(python_program(source))
        with self.assertRaises(TargetDefectError) as ctx:
            campaign.run()
        self.assertIsInstance(ctx.exception.__cause__, TargetCrashError)
        self.assertEqual(campaign.result.trials, 1)


if __name__ == '__main__':
    unittest.main()
