#!/usr/bin/env python3
"""
SeedFuzz - Main Entry Point

This script provides a command-line interface for running fuzzing campaigns.

Campaigns come either from a configuration file (a Python module defining a
CAMPAIGNS list or FuzzingCampaign subclasses) or from quick-mode flags:

  seedfuzz campaigns.py
  seedfuzz --seed "http://www.google.com/search?q=fuzzing" --target url --trials 20 --mutations 15
  seedfuzz --seed "1 + 2" --program "python3 -c 'import sys; eval(sys.stdin.read())'"

Environment Variable Support:
Environment variables are applied as defaults when CLI arguments are not provided.
CLI arguments always take precedence over environment variables.

Supported Environment Variables:
- SEEDFUZZ_CONFIG_FILE: Path to campaign configuration file
- SEEDFUZZ_VERBOSE: Verbosity level (0, 1, 2)
- SEEDFUZZ_TRIALS: Number of trials per campaign
- SEEDFUZZ_MUTATIONS: Mutations per trial
- SEEDFUZZ_RNG_SEED: Random seed for reproducible runs
- SEEDFUZZ_REPORT_FORMATS: Comma-separated list of report formats (text,json,accepted,all)
- SEEDFUZZ_REPORT_DIR: Directory for reports
- SEEDFUZZ_LOG_DIR: Directory for seedfuzz.log (file logging is off when unset)
"""

# ===========================
# Standard Library Imports
# ===========================
import argparse
import builtins
import importlib
import importlib.util
import logging
import os
import shlex
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Type

# ===========================
# Local Imports
# ===========================
from .fuzzing_framework import FuzzingCampaign, setup_logging, VALID_REPORT_FORMATS
from .runners import ProgramRunner
from .utils.report import escape_input
from .validators import VALIDATORS

logger = logging.getLogger(__name__)

REPORT_FORMAT_CHOICES = list(VALID_REPORT_FORMATS) + ['all']


def load_campaigns_from_file(config_file: Path) -> List[Type[FuzzingCampaign]]:
    """
    Load campaign classes from a configuration file.

    Args:
        config_file: Path to the campaign configuration file

    Returns:
        List of campaign classes to execute
    """
    spec = importlib.util.spec_from_file_location("config", config_file)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load config from {config_file}")

    config_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config_module)

    # Look for CAMPAIGNS list in the module
    if hasattr(config_module, 'CAMPAIGNS'):
        return list(config_module.CAMPAIGNS)

    # Look for classes that inherit from FuzzingCampaign
    campaigns = []
    for name in dir(config_module):
        obj = getattr(config_module, name)
        if (isinstance(obj, type) and
                issubclass(obj, FuzzingCampaign) and
                obj is not FuzzingCampaign):
            campaigns.append(obj)
    return campaigns


def resolve_target(target_name: str) -> Callable[[str], Any]:
    """
    Resolve a target given on the command line.

    Accepts a built-in validator name (see ``seedfuzz.validators.VALIDATORS``)
    or ``module:function`` for any importable callable.
    """
    if target_name in VALIDATORS:
        return VALIDATORS[target_name]
    module_name, sep, attr_path = target_name.partition(':')
    if not sep or not module_name or not attr_path:
        raise ValueError(
            f"Unknown target '{target_name}': use one of {', '.join(sorted(VALIDATORS))} or module:function"
        )
    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split('.'):
        obj = getattr(obj, part)
    if not callable(obj):
        raise ValueError(f"Target '{target_name}' is not callable")
    return obj


def resolve_exception(name: str) -> Type[BaseException]:
    """Resolve an exception class from a builtin name or ``module:Name``."""
    if ':' in name:
        module_name, _, attr = name.partition(':')
        obj = getattr(importlib.import_module(module_name), attr)
    else:
        obj = getattr(builtins, name, None)
    if not (isinstance(obj, type) and issubclass(obj, BaseException)):
        raise ValueError(f"'{name}' is not an exception class")
    return obj


def build_quick_campaign(args: argparse.Namespace) -> Type[FuzzingCampaign]:
    """Build a campaign class from quick-mode flags."""
    if args.program:
        target: Callable[[str], Any] = ProgramRunner(shlex.split(args.program), timeout=args.timeout)
        name = f"program {shlex.split(args.program)[0]}"
    else:
        target = resolve_target(args.target)
        name = f"target {args.target}"

    attributes = {
        'name': name,
        'seed': args.seed,
        'target': staticmethod(target),
    }
    if args.expected_exception:
        attributes['expected_exceptions'] = tuple(resolve_exception(n) for n in args.expected_exception)
    return type('QuickCampaign', (FuzzingCampaign,), attributes)


def apply_cli_overrides(campaign: FuzzingCampaign, args: argparse.Namespace) -> None:
    """
    Apply CLI flag and environment variable overrides to a campaign instance.

    Args:
        campaign: FuzzingCampaign instance to modify
        args: Parsed CLI arguments from argparse
    """
    if args.trials is not None:
        campaign.trials = args.trials
    if args.mutations is not None:
        campaign.mutations = args.mutations
    if args.max_mutations is not None:
        campaign.max_mutations = args.max_mutations
    if args.rng_seed is not None:
        campaign.rng_seed = args.rng_seed
    if args.report_formats:
        campaign.report_formats = list(args.report_formats)
    if args.report_dir:
        campaign.report_directory = args.report_dir
    if args.crash_dir:
        campaign.crash_log_directory = args.crash_dir
    campaign.verbose = args.verbose >= 1


def verbosity_to_level(verbosity: int) -> int:
    return logging.DEBUG if verbosity >= 2 else logging.INFO if verbosity >= 1 else logging.WARNING


def _env_int(parser: argparse.ArgumentParser, var: str) -> Optional[int]:
    """Read an integer environment default; a malformed value is a usage error (exit status 2)."""
    val = os.getenv(var)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        parser.error(f"{var} must be an integer, got {val!r}")


# ===========================
# Argument Parsing and CLI Setup
# ===========================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seedfuzz",
        description="SeedFuzz - seed-mutation fuzzing for string inputs",
        epilog="Environment variables (SEEDFUZZ_*) can be used as defaults for most options. "
               "CLI arguments take precedence over environment variables.",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    env_defaults = {
        'config_file': os.getenv('SEEDFUZZ_CONFIG_FILE'),
        'verbose': _env_int(parser, 'SEEDFUZZ_VERBOSE') or 0,
        'trials': _env_int(parser, 'SEEDFUZZ_TRIALS'),
        'mutations': _env_int(parser, 'SEEDFUZZ_MUTATIONS'),
        'rng_seed': _env_int(parser, 'SEEDFUZZ_RNG_SEED'),
        'report_formats': [f.strip() for f in os.getenv('SEEDFUZZ_REPORT_FORMATS', '').split(',') if f.strip()],
        'report_dir': os.getenv('SEEDFUZZ_REPORT_DIR'),
        'log_dir': os.getenv('SEEDFUZZ_LOG_DIR'),
    }

    parser.add_argument(
        "config_file",
        type=Path,
        nargs='?',
        default=env_defaults['config_file'],
        help="Path to campaign configuration file (or set SEEDFUZZ_CONFIG_FILE)"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=env_defaults['verbose'],
        help="Increase verbosity: -v (INFO), -vv (DEBUG). Can also set SEEDFUZZ_VERBOSE"
    )
    parser.add_argument(
        "--list-campaigns",
        action="store_true",
        help="List available campaigns and exit."
    )

    quick_group = parser.add_argument_group("Quick Mode")
    quick_group.add_argument(
        "--seed",
        help="Seed input; builds a single campaign instead of reading a config file."
    )
    target_group = quick_group.add_mutually_exclusive_group()
    target_group.add_argument(
        "--target",
        help=f"Target callable: one of {', '.join(sorted(VALIDATORS))} or module:function."
    )
    target_group.add_argument(
        "--program",
        help="External program (quoted command line) fed each candidate on stdin; "
             "non-zero exit status rejects the candidate."
    )
    quick_group.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-candidate timeout in seconds for --program."
    )
    quick_group.add_argument(
        "--expected-exception",
        action="append",
        metavar="NAME",
        help="Exception class counted as a rejection (builtin name or module:Name); repeatable. "
             "Default: ValueError."
    )

    run_group = parser.add_argument_group("Run Control")
    run_group.add_argument(
        "--trials",
        type=int,
        default=env_defaults['trials'],
        help="Number of trials (overrides campaign configuration). Can also set SEEDFUZZ_TRIALS"
    )
    run_group.add_argument(
        "--mutations",
        type=int,
        default=env_defaults['mutations'],
        help="Mutations per trial (overrides campaign configuration). Can also set SEEDFUZZ_MUTATIONS"
    )
    run_group.add_argument(
        "--max-mutations",
        type=int,
        default=None,
        help="Upper bound for a random per-trial mutation count."
    )
    run_group.add_argument(
        "--rng-seed",
        type=int,
        default=env_defaults['rng_seed'],
        help="Random seed for reproducible runs. Can also set SEEDFUZZ_RNG_SEED"
    )

    output_group = parser.add_argument_group("Output Control")
    output_group.add_argument(
        "--report-formats",
        nargs='+',
        choices=REPORT_FORMAT_CHOICES,
        default=env_defaults['report_formats'],
        help="Report output formats (can specify multiple). Use 'all' for all formats. "
             "Can also set SEEDFUZZ_REPORT_FORMATS as comma-separated list"
    )
    output_group.add_argument(
        "--report-dir",
        type=Path,
        default=env_defaults['report_dir'],
        help="Directory for reports. Can also set SEEDFUZZ_REPORT_DIR"
    )
    output_group.add_argument(
        "--crash-dir",
        type=Path,
        default=None,
        help="Directory for crash metadata."
    )
    output_group.add_argument(
        "--log-dir",
        type=Path,
        default=env_defaults['log_dir'],
        help="Directory for seedfuzz.log. Can also set SEEDFUZZ_LOG_DIR"
    )
    output_group.add_argument(
        "--show-accepted",
        action="store_true",
        help="Print every accepted input after each campaign."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the seedfuzz CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    invalid_formats = [f for f in args.report_formats if f not in REPORT_FORMAT_CHOICES]
    if invalid_formats:
        parser.error(f"invalid report format(s): {', '.join(invalid_formats)}")

    level = verbosity_to_level(args.verbose)
    try:
        setup_logging(args.log_dir, console_level=level, file_level=min(level, logging.INFO))
    except OSError as e:
        print(f"[ERROR] Failed to initialize file logging in {args.log_dir}: {e}", file=sys.stderr)
        return 2

    # Quick mode or configuration file
    if args.seed is not None:
        if not args.target and not args.program:
            parser.error("--seed requires --target or --program")
        if args.config_file:
            parser.error("--seed cannot be combined with a config file")
        try:
            campaigns = [build_quick_campaign(args)]
        except (ValueError, ImportError, AttributeError, FileNotFoundError) as e:
            logger.error(f"Failed to build campaign: {e}")
            return 1
    else:
        if args.target or args.program:
            parser.error("--target/--program require --seed")
        if not args.config_file:
            parser.error("config_file is required unless using --seed")
        try:
            campaigns = load_campaigns_from_file(args.config_file)
        except Exception as e:
            logger.error(f"Failed to load campaigns from {args.config_file}: {e}")
            return 1

    if not campaigns:
        logger.error("No campaigns found in configuration file")
        return 1

    # List campaigns if requested
    if args.list_campaigns:
        print(f"Found {len(campaigns)} campaigns in {args.config_file or 'command line'}:")
        for i, campaign_class in enumerate(campaigns, 1):
            instance = campaign_class()
            print(f"  {i}. {campaign_class.__name__} (Seed: {instance.seed!r}, "
                  f"Trials: {instance.trials}, Mutations: {instance.mutations})")
        return 0

    # Execute campaigns
    success_count = 0
    for campaign_class in campaigns:
        campaign = campaign_class()
        apply_cli_overrides(campaign, args)
        if args.verbose == 0:
            print(f"Processing campaign: {campaign_class.__name__}")
        else:
            logger.info(f"Processing campaign: {campaign_class.__name__}")

        ok = campaign.execute()
        result = campaign.result
        if result is not None:
            print(f"Campaign {campaign_class.__name__}: {result.accepted_trials}/{result.trials} accepted "
                  f"({result.acceptance_ratio:.2f}%), {len(result.accepted)} unique")
            if args.show_accepted:
                for candidate in sorted(result.accepted):
                    print(f"  {escape_input(candidate)}")
        if ok:
            success_count += 1
        else:
            print(f"Campaign {campaign_class.__name__} failed")

    # Summary
    total_campaigns = len(campaigns)
    print(f"Execution complete: {success_count}/{total_campaigns} campaigns successful")
    return 0 if success_count == total_campaigns else 1


if __name__ == "__main__":
    sys.exit(main())
