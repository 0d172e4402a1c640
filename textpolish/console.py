"""Reading the text to improve and writing the result."""

import sys
from typing import Optional, TextIO

import pyperclip

from .errors import ClipboardError

INPUT_PROMPT = "Enter text to be improved (press Enter twice or Ctrl+D to finish):"
RESULT_LABEL = "Improved text:"


def read_input_text(flag_text: str, stream: Optional[TextIO] = None) -> str:
    """Return flag_text if given, otherwise read lines from stdin.

    Reading stops at the first empty line or at end of input. Lines are
    joined with newlines and the result is stripped.
    """
    if flag_text:
        return flag_text

    stream = stream or sys.stdin
    print(INPUT_PROMPT)
    lines = []
    # readline, not file iteration: no read-ahead on a tty
    for line in iter(stream.readline, ''):
        line = line.rstrip('\r\n')
        if line == '':
            break
        lines.append(line)
    return '\n'.join(lines).strip()


def print_result(text: str) -> None:
    print(RESULT_LABEL)
    print(text)


def copy_to_clipboard(text: str) -> None:
    """Copy text to the system clipboard, raising ClipboardError on failure."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Error copying to clipboard: {e}") from e
    print("Improved text copied to clipboard!")
