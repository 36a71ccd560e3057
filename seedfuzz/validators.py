"""
Built-in validators usable as campaign targets.
"""

from typing import Callable, Dict
from urllib.parse import urlparse

SUPPORTED_SCHEMES = ("http", "https")


def http_program(url: str) -> bool:
    """
    Accept URLs with a supported scheme and a non-empty host.

    Raises:
        ValueError: For any other URL
    """
    result = urlparse(url)
    if result.scheme not in SUPPORTED_SCHEMES:
        raise ValueError("Scheme must be one of " + repr(SUPPORTED_SCHEMES))
    if result.netloc == '':
        raise ValueError("Host must be non-empty")

    # Do something with the URL
    return True


def is_valid_url(url: str) -> bool:
    try:
        http_program(url)
        return True
    except ValueError:
        return False


# Validators selectable by name from the command line
VALIDATORS: Dict[str, Callable[[str], bool]] = {
    "url": http_program,
}
