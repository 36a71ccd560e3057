#!/usr/bin/env python3
"""
SeedFuzz Framework

This module provides a class-based framework for defining seed-mutation
fuzzing campaigns. A campaign declares a seed, a target callable and a
trial budget as class attributes; executing it mutates the seed once per
trial, feeds the candidate to the target and folds the outcome into a
result set.

Targets signal an invalid candidate by raising one of the campaign's
expected exceptions (``ValueError`` by default, plus ``InputRejected``).
Any other exception is treated as a defect in the target: it is logged as a
crash and stops the campaign instead of being counted as a rejection.
"""

# Standard library imports
from __future__ import annotations
import copy
import inspect
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Set, Tuple, Type, Union

# Local imports
from .mutator_manager import FuzzConfig, MutatorManager
from .utils.report import (
    write_accepted_inputs,
    write_campaign_summary,
    write_crash_report,
    write_json_report,
)

# Constants
DEFAULT_TRIALS = 1000
DEFAULT_MUTATIONS = 1
DEFAULT_MAX_HISTORY_SIZE = 1000
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Centralized output directory structure (relative to the working directory)
DEFAULT_ARTIFACTS_DIR = Path("artifacts")
DEFAULT_LOG_DIR = DEFAULT_ARTIFACTS_DIR / "logs"
DEFAULT_CRASH_LOG_DIR = DEFAULT_ARTIFACTS_DIR / "crash_logs"
DEFAULT_REPORT_DIR = DEFAULT_ARTIFACTS_DIR / "reports"

VALID_REPORT_FORMATS = ('text', 'json', 'accepted')

logger = logging.getLogger(__name__)


def setup_logging(log_dir: Optional[Union[str, Path]] = None,
                  console_level: int = logging.WARNING,
                  file_level: int = logging.INFO) -> Optional[Path]:
    """
    Configure console and (optionally) file logging for SeedFuzz.

    Handlers installed by a previous call are replaced, so calling this more
    than once does not duplicate output.

    Args:
        log_dir: Directory for ``seedfuzz.log``; None disables file logging
        console_level: Level for the console handler
        file_level: Level for the file handler

    Returns:
        Path of the log file, or None when file logging is disabled

    Raises:
        OSError: If the log directory cannot be created or written
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, '_seedfuzz_handler', False):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    console_handler._seedfuzz_handler = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    levels = [console_level]
    file_path = None
    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_path = log_path / 'seedfuzz.log'
        file_handler = logging.FileHandler(file_path)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        file_handler._seedfuzz_handler = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)
        levels.append(file_level)

    # Root must pass the most verbose level any handler wants
    root_logger.setLevel(min(levels))
    return file_path


# ===========================
# Errors
# ===========================

class CampaignConfigurationError(ValueError):
    """Raised before any trial runs when a campaign is misconfigured."""


class InputRejected(Exception):
    """Raised by a target or runner to reject a malformed candidate."""


class CampaignAbortedError(RuntimeError):
    """Raised when a campaign stops before completing its trials."""

    def __init__(self, message: str, result: Optional['FuzzResult'] = None,
                 crash_info: Optional['CrashInfo'] = None):
        super().__init__(message)
        self.result = result
        self.crash_info = crash_info


class TargetDefectError(CampaignAbortedError):
    """Raised when the target fails with an exception that is not an expected rejection."""


# ===========================
# Data types
# ===========================

class CallbackResult(Enum):
    """Standard return values for all callback functions"""
    SUCCESS = "success"          # Continue normally
    NO_SUCCESS = "no_success"    # Non-critical failure, continue with logging
    FAIL_CRASH = "fail_crash"    # Critical failure, trigger crash handling


class TrialOutcome(Enum):
    """Classification of a single trial"""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CRASHED = "crashed"


@dataclass
class CrashInfo:
    """Standardized crash information passed to crash callbacks"""
    candidate: Optional[str]
    crash_source: str  # "pre_launch", "target", "post_trial"
    exception: Optional[BaseException] = None
    context: Optional['CampaignContext'] = None
    timestamp: datetime = field(default_factory=datetime.now)
    crash_id: str = field(init=False)

    def __post_init__(self):
        self.crash_id = f"crash_{self.timestamp.strftime('%Y%m%d_%H%M%S_%f')}"

    def to_dict(self) -> dict:
        return {
            'crash_id': self.crash_id,
            'timestamp': self.timestamp.isoformat(),
            'crash_source': self.crash_source,
            'candidate': self.candidate,
            'exception_type': type(self.exception).__name__ if self.exception else None,
            'exception': str(self.exception) if self.exception else None,
        }


@dataclass
class TrialRecord:
    """Tracks a single fuzzing trial"""
    iteration: int
    seed: str
    candidate: str
    mutation_count: int
    outcome: TrialOutcome
    error: Optional[BaseException] = None
    duration_ms: float = 0.0
    mutation_chain: List[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.outcome is TrialOutcome.ACCEPTED

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization and reporting"""
        return {
            'iteration': self.iteration,
            'seed': self.seed,
            'candidate': self.candidate,
            'mutation_count': self.mutation_count,
            'mutation_chain': list(self.mutation_chain),
            'outcome': self.outcome.value,
            'error_type': type(self.error).__name__ if self.error else None,
            'error': str(self.error) if self.error else None,
            'duration_ms': round(self.duration_ms, 3),
        }


@dataclass
class CampaignContext:
    """Shared context passed to all callbacks"""
    campaign: Any
    iteration: int = 0  # Current trial number
    is_running: bool = True
    stats: dict = field(default_factory=lambda: {
        'trials': 0,
        'accepted': 0,
        'rejected': 0,
        'callbacks_executed': 0,
        'no_success_count': 0,
        'crash_count': 0
    })
    shared_data: dict = field(default_factory=dict)  # User data sharing between callbacks
    start_time: float = field(default_factory=time.time)
    history: List[TrialRecord] = field(default_factory=list)
    max_history_size: int = DEFAULT_MAX_HISTORY_SIZE  # Oldest entries are dropped beyond this

    def record(self, trial: TrialRecord) -> None:
        self.history.append(trial)
        if self.max_history_size >= 0 and len(self.history) > self.max_history_size:
            del self.history[:len(self.history) - self.max_history_size]


@dataclass
class FuzzResult:
    """Outcome of a complete campaign run"""
    seed: str
    trials: int = 0
    accepted_trials: int = 0
    rejected_trials: int = 0
    accepted: Set[str] = field(default_factory=set)
    mutator_usage: Dict[str, int] = field(default_factory=dict)
    crash: Optional[CrashInfo] = None
    elapsed: float = 0.0

    @property
    def acceptance_ratio(self) -> float:
        """Percentage of trials whose candidate was accepted (duplicates counted per trial)."""
        if self.trials == 0:
            return 0.0
        return 100.0 * self.accepted_trials / self.trials

    @property
    def unique_acceptance_ratio(self) -> float:
        """Percentage computed from the deduplicated result set."""
        if self.trials == 0:
            return 0.0
        return 100.0 * len(self.accepted) / self.trials

    def to_dict(self) -> dict:
        return {
            'seed': self.seed,
            'trials': self.trials,
            'accepted_trials': self.accepted_trials,
            'rejected_trials': self.rejected_trials,
            'unique_accepted': len(self.accepted),
            'acceptance_ratio': round(self.acceptance_ratio, 2),
            'unique_acceptance_ratio': round(self.unique_acceptance_ratio, 2),
            'mutator_usage': dict(self.mutator_usage),
            'elapsed_seconds': round(self.elapsed, 4),
            'crash': self.crash.to_dict() if self.crash else None,
            'accepted': sorted(self.accepted),
        }


# ===========================
# Callback handling
# ===========================

class CallbackManager:
    """
    Unified callback execution and management.
    Handles all user and internal callbacks with error handling.
    Logs crashes and invokes user crash callbacks.
    """

    def __init__(self, campaign: 'FuzzingCampaign'):
        self.campaign = campaign

    def execute_callback(self, callback_func: Optional[Callable], callback_type: str,
                         context: CampaignContext, *args) -> CallbackResult:
        """
        Execute a callback with unified error handling and result processing.

        Args:
            callback_func: The user-provided callback function
            callback_type: Type of callback ("pre_launch", "post_trial", etc.)
            context: Campaign context object
            *args: Additional arguments to pass to callback

        Returns:
            CallbackResult indicating success, no-success, or crash
        """
        if not callback_func:
            return CallbackResult.SUCCESS

        try:
            context.stats['callbacks_executed'] += 1
            result = callback_func(context, *args)
        except Exception as e:
            logger.error(f"Callback {callback_type} failed with exception: {e}")
            # Treat exceptions as crashes
            return CallbackResult.FAIL_CRASH

        if isinstance(result, CallbackResult):
            return result
        elif result is False or result == "no_success":
            return CallbackResult.NO_SUCCESS
        elif result == "fail_crash" or result == "crash":
            return CallbackResult.FAIL_CRASH
        # None, True and unknown values continue normally
        return CallbackResult.SUCCESS

    def handle_crash(self, crash_source: str, candidate: Optional[str],
                     context: CampaignContext, exception: Optional[BaseException] = None) -> CrashInfo:
        """
        Handle crash scenarios with built-in logging and user callback.

        Args:
            crash_source: Source of the crash ("pre_launch", "target", "post_trial")
            candidate: The candidate involved in the crash (if any)
            context: Campaign context
            exception: Exception that caused the crash (if any)

        Returns:
            The recorded CrashInfo
        """
        context.stats['crash_count'] += 1
        crash_info = CrashInfo(candidate, crash_source, exception, context)

        # 1. Built-in crash logging (if enabled)
        if self.campaign.crash_logging:
            self._internal_crash_logger(crash_info, context)

        # 2. User crash callback (if provided)
        crash_callback = self.campaign.get_callable('crash_callback')
        if crash_callback:
            try:
                crash_callback(crash_info, context)
            except Exception as e:
                logger.error(f"User crash callback failed: {e}")

        # 3. Stop campaign execution
        context.is_running = False
        return crash_info

    def handle_no_success(self, callback_type: str, context: CampaignContext, *args) -> None:
        """
        Handle no-success scenarios with optional user callback.
        """
        context.stats['no_success_count'] += 1

        no_success_callback = self.campaign.get_callable('no_success_callback')
        if no_success_callback:
            try:
                no_success_callback(callback_type, context, *args)
            except Exception as e:
                logger.error(f"No-success callback failed: {e}")
        else:
            logger.warning(f"Callback {callback_type} returned no-success")

    def _internal_crash_logger(self, crash_info: CrashInfo, context: CampaignContext) -> None:
        """Write crash metadata for later triage."""
        try:
            path = write_crash_report(
                crash_info,
                crash_dir=self.campaign.crash_log_directory,
                campaign_name=self.campaign.name or self.campaign.__class__.__name__,
                seed=self.campaign.seed,
                stats=context.stats,
            )
            logger.error(f"Crash logged: {crash_info.crash_id} in {path.parent}/")
        except OSError as e:
            logger.error(f"Failed to log crash: {e}")


# ===========================
# Campaign
# ===========================

class FuzzingCampaign:
    """
    Base fuzzing campaign class.

    Campaign-level attributes:
        - name: Campaign name
        - seed: Initial valid input every candidate is derived from
        - corpus: Additional seeds; each trial picks uniformly from [seed] + corpus
        - target: Callable taking one string; returns normally to accept
        - trials: Number of trials (default 1000)
        - mutations: Mutations applied per trial (default 1)
        - max_mutations: If set, per-trial count is uniform in [mutations, max_mutations]
        - rng_seed / rng: Random seed or random source for reproducible runs
        - operators / operator_weights: Enabled mutation operators and optional weights
        - expected_exceptions: Exception types counted as rejections (default ValueError)
        - rejection_classifier: Callable(exception) -> bool overriding expected_exceptions
        - verbose: Log campaign progress at INFO (default True)
        - report_formats: Any of 'text', 'json', 'accepted' or 'all'
        - report_directory: Where reports are written
        - crash_logging / crash_log_directory: Built-in crash artifact capture
        - max_history_size: Trial records kept on the context

    Subclasses may override ``check()`` instead of setting ``target``.
    """

    # Campaign defaults - consolidated in one place
    name: Optional[str] = None
    seed: Optional[str] = None
    corpus: List[str] = []
    target: Optional[Callable[[str], Any]] = None
    trials = DEFAULT_TRIALS
    mutations = DEFAULT_MUTATIONS
    max_mutations: Optional[int] = None
    rng_seed: Optional[int] = None
    rng: Optional[Any] = None
    operators: Optional[List[str]] = None
    operator_weights: Optional[Dict[str, float]] = None
    expected_exceptions: Tuple[Type[BaseException], ...] = (ValueError,)
    rejection_classifier: Optional[Callable[[BaseException], bool]] = None
    verbose = True
    max_history_size = DEFAULT_MAX_HISTORY_SIZE

    # Reporting
    report_formats: List[str] = []
    report_directory: Union[str, Path] = DEFAULT_REPORT_DIR

    # Callback configuration
    pre_launch_callback: Optional[Callable] = None
    post_trial_callback: Optional[Callable] = None
    crash_callback: Optional[Callable] = None
    no_success_callback: Optional[Callable] = None

    # Crash logging configuration
    crash_logging = True  # Enable/disable built-in crash capture
    crash_log_directory: Union[str, Path] = DEFAULT_CRASH_LOG_DIR

    def __init__(self):
        """Initialize campaign with callback manager."""
        # Deep copy all mutable class attributes to instance attributes
        for attr_name in dir(self.__class__):
            # Skip magic methods, private attrs, and methods
            if (not attr_name.startswith('__') and
                    not callable(getattr(self.__class__, attr_name))):

                class_value = getattr(self.__class__, attr_name)

                # Only deep copy mutable types (list, dict, set)
                if isinstance(class_value, (list, dict, set)):
                    setattr(self, attr_name, copy.deepcopy(class_value))

        self.callback_manager = CallbackManager(self)
        self.context: Optional[CampaignContext] = None
        self.result: Optional[FuzzResult] = None
        self.last_fuzzer: Optional[MutatorManager] = None

    def get_callable(self, attr_name: str) -> Optional[Callable]:
        """
        Look up a callable configured as an attribute without binding it.

        Plain functions assigned in a class body would otherwise become bound
        methods and receive the campaign as their first argument.
        """
        value = inspect.getattr_static(self, attr_name, None)
        if isinstance(value, (staticmethod, classmethod)):
            value = getattr(self, attr_name)
        return value

    def create_fuzzer(self) -> MutatorManager:
        """Create a mutator manager configured for this campaign."""
        config = FuzzConfig(
            rng=self.rng,
            rng_seed=self.rng_seed,
            operator_weights=self.operator_weights,
        )
        if self.operators is not None:
            config.operators = list(self.operators)
        return MutatorManager(config)

    def get_seeds(self) -> List[str]:
        return [self.seed] + list(self.corpus or [])

    def validate_campaign(self) -> None:
        """
        Validate campaign configuration.

        Raises:
            CampaignConfigurationError: Listing every problem found
        """
        errors = []

        if not isinstance(self.seed, str):
            errors.append(f"Campaign seed must be a string, got {type(self.seed).__name__}")
        for entry in self.corpus or []:
            if not isinstance(entry, str):
                errors.append(f"Corpus entries must be strings, got {type(entry).__name__}")
                break
        if not _is_count(self.trials):
            errors.append(f"Campaign trials must be a non-negative integer, got {self.trials!r}")
        if not _is_count(self.mutations):
            errors.append(f"Campaign mutations must be a non-negative integer, got {self.mutations!r}")
        if self.max_mutations is not None:
            if not _is_count(self.max_mutations):
                errors.append(f"Campaign max_mutations must be a non-negative integer, got {self.max_mutations!r}")
            elif _is_count(self.mutations) and self.max_mutations < self.mutations:
                errors.append("Campaign max_mutations must not be less than mutations")
        if type(self).check is FuzzingCampaign.check and not callable(self.get_callable('target')):
            errors.append("Campaign target must be callable (or override check())")
        expected = self.expected_exceptions
        if not isinstance(expected, tuple) or not all(
                isinstance(exc, type) and issubclass(exc, BaseException) for exc in expected):
            errors.append("Campaign expected_exceptions must be a tuple of exception types")
        for fmt in self.report_formats or []:
            if fmt != 'all' and fmt not in VALID_REPORT_FORMATS:
                errors.append(f"Unknown report format '{fmt}' (valid: {', '.join(VALID_REPORT_FORMATS)}, all)")
        # operators, operator_weights, rng and rng_seed are checked by building a throwaway fuzzer
        try:
            self.create_fuzzer().teardown()
        except (ValueError, TypeError, AttributeError) as e:
            errors.append(f"Invalid mutator configuration: {e}")

        if errors:
            for error in errors:
                logger.error(error)
            raise CampaignConfigurationError("; ".join(errors))

    def check(self, candidate: str) -> Any:
        """Run the target on one candidate; raising an expected exception rejects it."""
        target = self.get_callable('target')
        return target(candidate)

    def is_expected_rejection(self, exc: BaseException) -> bool:
        """Decide whether an exception from the target means 'invalid input'."""
        if isinstance(exc, InputRejected):
            return True
        classifier = self.get_callable('rejection_classifier')
        if classifier is not None:
            try:
                return bool(classifier(exc))
            except Exception as e:
                # A failing classifier turns the original exception into a defect
                logger.error(f"Rejection classifier failed on {type(exc).__name__}: {e}")
                return False
        return isinstance(exc, self.expected_exceptions)

    def run(self) -> FuzzResult:
        """
        Run all trials and return the result.

        Raises:
            CampaignConfigurationError: If the campaign is misconfigured
            TargetDefectError: If the target raised an unexpected exception
            CampaignAbortedError: If a callback requested a stop
        """
        self.validate_campaign()
        self.context = CampaignContext(self, max_history_size=self.max_history_size)
        context = self.context
        seeds = self.get_seeds()
        result = FuzzResult(seed=self.seed)
        self.result = result

        callback_result = self.callback_manager.execute_callback(
            self.get_callable('pre_launch_callback'), "pre_launch", context
        )
        if callback_result == CallbackResult.FAIL_CRASH:
            result.crash = self.callback_manager.handle_crash("pre_launch", None, context)
            raise CampaignAbortedError("Campaign aborted by pre-launch callback", result, result.crash)
        elif callback_result == CallbackResult.NO_SUCCESS:
            self.callback_manager.handle_no_success("pre_launch", context)

        fuzzer = self.create_fuzzer()
        self.last_fuzzer = fuzzer

        if self.verbose:
            logger.info("Starting campaign: %s", self.name or 'Unnamed Campaign')
            logger.info("   Seed: %r", self.seed)
            logger.info("   Corpus size: %d", len(seeds))
            logger.info("   Trials: %s", self.trials)
            if self.max_mutations is not None:
                logger.info("   Mutations per trial: %s-%s", self.mutations, self.max_mutations)
            else:
                logger.info("   Mutations per trial: %s", self.mutations)

        start = time.perf_counter()
        try:
            self._run_fuzzing_loop(fuzzer, seeds, result)
        finally:
            result.elapsed = time.perf_counter() - start
            result.mutator_usage = fuzzer.mutator_usage_counts

        if self.verbose:
            logger.info(
                f"Campaign {self.name or 'Unnamed Campaign'} finished: "
                f"{result.accepted_trials}/{result.trials} accepted "
                f"({result.acceptance_ratio:.2f}%), {len(result.accepted)} unique"
            )
        return result

    def _run_fuzzing_loop(self, fuzzer: MutatorManager, seeds: List[str], result: FuzzResult) -> None:
        context = self.context
        post_trial_callback = self.get_callable('post_trial_callback')

        for iteration in range(self.trials):
            context.iteration = iteration
            seed = fuzzer.choose_seed(seeds)
            count = fuzzer.choose_mutation_count(self.mutations, self.max_mutations)
            candidate = fuzzer.multi_mutate(seed, count)

            error = None
            started = time.perf_counter()
            try:
                self.check(candidate)
            except Exception as e:
                if not self.is_expected_rejection(e):
                    record = TrialRecord(iteration, seed, candidate, count, TrialOutcome.CRASHED, e,
                                         (time.perf_counter() - started) * 1000,
                                         list(fuzzer.current_mutation_chain))
                    context.record(record)
                    context.stats['trials'] += 1
                    result.trials += 1
                    logger.error(f"Target raised unexpected {type(e).__name__} on {candidate!r}: {e}")
                    result.crash = self.callback_manager.handle_crash("target", candidate, context, e)
                    raise TargetDefectError(
                        f"Target failed on trial {iteration} with {type(e).__name__}: {e}",
                        result, result.crash
                    ) from e
                outcome = TrialOutcome.REJECTED
                error = e
            else:
                outcome = TrialOutcome.ACCEPTED

            record = TrialRecord(iteration, seed, candidate, count, outcome, error,
                                 (time.perf_counter() - started) * 1000,
                                 list(fuzzer.current_mutation_chain))
            context.record(record)
            context.stats['trials'] += 1
            result.trials += 1
            if outcome is TrialOutcome.ACCEPTED:
                context.stats['accepted'] += 1
                result.accepted_trials += 1
                result.accepted.add(candidate)
                logger.debug(f"Trial {iteration}: accepted {candidate!r}")
            else:
                context.stats['rejected'] += 1
                result.rejected_trials += 1
                logger.debug(f"Trial {iteration}: rejected {candidate!r} ({type(error).__name__}: {error})")

            callback_result = self.callback_manager.execute_callback(
                post_trial_callback, "post_trial", context, record
            )
            if callback_result == CallbackResult.FAIL_CRASH:
                result.crash = self.callback_manager.handle_crash("post_trial", candidate, context)
                raise CampaignAbortedError(
                    f"Campaign aborted by post-trial callback on trial {iteration}", result, result.crash
                )
            elif callback_result == CallbackResult.NO_SUCCESS:
                self.callback_manager.handle_no_success("post_trial", context, record)

    def execute(self) -> bool:
        """
        Execute the fuzzing campaign and write the configured reports.

        Returns:
            True if every trial ran, False on misconfiguration or an aborted run
        """
        try:
            self.run()
            return True
        except CampaignConfigurationError as e:
            if self.verbose:
                logger.error(f"--- Campaign validation failed: {e}")
            return False
        except CampaignAbortedError as e:
            if self.verbose:
                logger.error(f"--- Campaign execution failed: {e}")
            return False
        finally:
            if self.result is not None:
                try:
                    self.write_reports()
                except OSError as e:
                    # Do not fail execution due to reporting errors
                    logger.warning(f"Failed to write campaign reports: {e}")

    def get_report_formats(self) -> List[str]:
        formats = list(self.report_formats or [])
        if 'all' in formats:
            return list(VALID_REPORT_FORMATS)
        return formats

    def write_reports(self) -> List[Path]:
        """Write every configured report for the last run; returns the written paths."""
        written: List[Path] = []
        if self.result is None:
            return written
        report_dir = Path(self.report_directory)
        for fmt in self.get_report_formats():
            if fmt == 'text':
                written.append(write_campaign_summary(self, self.result, self.context, report_dir=report_dir))
            elif fmt == 'json':
                written.append(write_json_report(self, self.result, self.context, report_dir=report_dir))
            elif fmt == 'accepted':
                written.append(write_accepted_inputs(self, self.result, report_dir=report_dir))
        for path in written:
            logger.info(f"Report written: {path}")
        return written

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(name={self.name!r}, seed={self.seed!r}, "
                f"trials={self.trials}, mutations={self.mutations})")


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def mutation_fuzz(seed: str,
                  target: Callable[[str], Any],
                  trials: int,
                  mutations: int,
                  rng: Optional[Any] = None,
                  expected_exceptions: Tuple[Type[BaseException], ...] = (ValueError,),
                  rejection_classifier: Optional[Callable[[BaseException], bool]] = None,
                  max_mutations: Optional[int] = None,
                  corpus: Optional[List[str]] = None) -> FuzzResult:
    """
    Fuzz ``target`` with mutations of ``seed`` and return the result.

    Args:
        seed: Initial valid input
        target: Callable accepting one string
        trials: Number of trials
        mutations: Mutations per trial
        rng: Random source or integer seed for reproducible runs
        expected_exceptions: Exceptions that count as rejections
        rejection_classifier: Optional callable overriding expected_exceptions
        max_mutations: Optional upper bound for a per-trial mutation range
        corpus: Optional additional seeds

    Returns:
        FuzzResult for the run

    Raises:
        CampaignConfigurationError: On invalid arguments
        TargetDefectError: If target raised an unexpected exception
    """
    campaign = FuzzingCampaign()
    campaign.name = "mutation_fuzz"
    campaign.seed = seed
    campaign.target = target
    campaign.trials = trials
    campaign.mutations = mutations
    campaign.max_mutations = max_mutations
    campaign.corpus = list(corpus or [])
    campaign.expected_exceptions = expected_exceptions
    campaign.rejection_classifier = rejection_classifier
    campaign.verbose = False
    campaign.crash_logging = False
    if isinstance(rng, int) and not isinstance(rng, bool):
        campaign.rng_seed = rng
    else:
        campaign.rng = rng
    return campaign.run()
