"""Utility functions for textpolish."""

import logging
import sys

from colorama import Fore, Style, just_fix_windows_console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to stderr so stdout only carries the result."""
    just_fix_windows_console()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(message)s',
        stream=sys.stderr,
    )


def log_msg(msg: str, color=Fore.WHITE, emoji: str = '') -> None:
    """Print a formatted status message with optional color and emoji."""
    prefix = f"{emoji} " if emoji else ''
    print(f"{prefix}{color}{msg}{Style.RESET_ALL}", file=sys.stderr)
