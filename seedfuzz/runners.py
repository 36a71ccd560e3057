"""
Target runners for SeedFuzz

Adapters that turn a Python function or an external program into a target
callable for a campaign. Runners raise ``InputRejected`` for invalid input so
that campaigns classify the outcome without any extra configuration.
"""

# Standard library imports
import logging
import shutil
import subprocess
from typing import Any, Callable, List, Optional, Sequence, Tuple, Type

# Local imports
from .fuzzing_framework import InputRejected

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class TargetCrashError(RuntimeError):
    """Raised when an external target is killed by a signal or times out."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


class FunctionRunner:
    """
    Wraps a function so that its expected exceptions become rejections.

    Any other exception propagates unchanged.
    """

    def __init__(self, func: Callable[[str], Any],
                 expected_exceptions: Tuple[Type[BaseException], ...] = (ValueError,)):
        if not callable(func):
            raise TypeError(f"FunctionRunner requires a callable, got {type(func).__name__}")
        self.func = func
        self.expected_exceptions = expected_exceptions

    def __call__(self, candidate: str) -> Any:
        try:
            return self.func(candidate)
        except self.expected_exceptions as e:
            raise InputRejected(f"{type(e).__name__}: {e}") from e

    def __repr__(self) -> str:
        name = getattr(self.func, '__name__', repr(self.func))
        return f"FunctionRunner({name})"


class ProgramRunner:
    """
    Runs an external program with the candidate on standard input.

    - exit status 0: accepted (the CompletedProcess is returned)
    - positive exit status: rejected (InputRejected)
    - killed by a signal or timed out: TargetCrashError
    """

    def __init__(self, argv: Sequence[str], timeout: Optional[float] = None,
                 encoding: str = DEFAULT_ENCODING):
        if not argv:
            raise ValueError("ProgramRunner requires a command")
        self.argv: List[str] = list(argv)
        if shutil.which(self.argv[0]) is None:
            raise FileNotFoundError(f"Program not found: {self.argv[0]}")
        self.timeout = timeout
        self.encoding = encoding

    def __call__(self, candidate: str) -> subprocess.CompletedProcess:
        try:
            process = subprocess.run(
                self.argv,
                input=candidate.encode(self.encoding, errors="surrogatepass"),
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise TargetCrashError(f"{self.argv[0]} timed out after {self.timeout}s") from e

        if process.returncode < 0:
            raise TargetCrashError(
                f"{self.argv[0]} killed by signal {-process.returncode}", process.returncode
            )
        if process.returncode > 0:
            stderr = process.stderr.decode(self.encoding, errors="replace").strip()
            logger.debug(f"{self.argv[0]} exited with {process.returncode}: {stderr}")
            raise InputRejected(f"{self.argv[0]} exited with status {process.returncode}")
        return process

    def __repr__(self) -> str:
        return f"ProgramRunner({' '.join(self.argv)!r})"
