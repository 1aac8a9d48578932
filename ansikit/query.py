"""Terminal colour capability lookups from the environment."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence


def _is_windows() -> bool:
    return sys.platform == "win32"


def _non_empty(value: Optional[str]) -> bool:
    return bool(value)


def clicolor() -> Optional[bool]:
    """Return the CLICOLOR setting: None when unset, else whether it is not "0"."""
    value = os.environ.get("CLICOLOR")
    if value is None:
        return None
    return value != "0"


def clicolor_force() -> bool:
    """Return True if CLICOLOR_FORCE is set to a non-empty value."""
    return _non_empty(os.environ.get("CLICOLOR_FORCE"))


def no_color() -> bool:
    """Return True if NO_COLOR is set to a non-empty value."""
    return _non_empty(os.environ.get("NO_COLOR"))


def term_supports_color() -> bool:
    """Check TERM for colour support."""
    term = os.environ.get("TERM")
    if term is None:
        # Windows often leaves TERM unset while still supporting colour.
        return _is_windows()
    return term != "dumb"


def term_supports_ansi_color() -> bool:
    """Check TERM for ANSI colour support."""
    if not _is_windows():
        return term_supports_color()
    term = os.environ.get("TERM")
    if term is None:
        return False
    return term not in ("dumb", "cygwin")


def truecolor() -> bool:
    """Check COLORTERM for 24-bit colour support."""
    return os.environ.get("COLORTERM", "") in ("truecolor", "24bit")


def is_ci() -> bool:
    """Report whether the CI variable is present."""
    return "CI" in os.environ


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the terminal's colour capabilities."""
    parser = argparse.ArgumentParser(
        prog="ansikit-query", description="Report a terminal's colour capabilities."
    )
    parser.parse_args(argv)
    report = [
        ("clicolor", clicolor()),
        ("clicolor_force", clicolor_force()),
        ("no_color", no_color()),
        ("term_supports_ansi_color", term_supports_ansi_color()),
        ("term_supports_color", term_supports_color()),
        ("truecolor", truecolor()),
        ("is_ci", is_ci()),
    ]
    for name, value in report:
        print(f"{name}: {value}")
    return 0