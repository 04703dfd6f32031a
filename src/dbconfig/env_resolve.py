import os
from typing import Mapping, Optional, Tuple


def lookup(key: str, environ: Optional[Mapping[str, str]] = None) -> Tuple[str, bool]:
    """
    Look up an environment variable.

    Returns a ``(value, present)`` pair. An empty value counts as not present.
    """
    if environ is None:
        environ = os.environ
    val = environ.get(key)
    if not val:
        return "", False
    return val, True


def lookup_int(key: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    """Look up an integer environment variable, falling back to ``default`` when unset."""
    val, present = lookup(key, environ)
    if not present:
        return default
    if not (val.isascii() and val.isdigit()):
        raise ValueError(f"{key} environment variable value \"{val}\" is not a valid integer")
    return int(val)
