"""Command line interface for textpolish."""
import argparse
import logging
import sys
from typing import List, Optional

from colorama import Fore

from .config import CONFIG_FILE, ENV_FILE, load_config
from .console import copy_to_clipboard, print_result, read_input_text
from .errors import InputError, TextPolishError
from .languages import available_languages, validate_language
from .llm import OpenAIClient
from .utils import log_msg, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Textpolish: improve text using an LLM')
    parser.add_argument('-text', '--text', default='', help='Text to be improved (read from stdin if omitted); '
                             'use -text=VALUE when the text starts with "-"')
    parser.add_argument('-lang', '--lang', '-l', dest='lang', default='',
                        help='Language for improvement (en-us or pt-br)')
    parser.add_argument('-copy', '--copy', '-c', dest='copy', action='store_true',
                        help='Copy improved text to clipboard')
    parser.add_argument('--config', default=CONFIG_FILE, help=f'Path to JSON config file (default: {CONFIG_FILE})')
    parser.add_argument('--env-file', default=ENV_FILE, help=f'Path to environment file (default: {ENV_FILE})')
    parser.add_argument('--list-languages', action='store_true', help='List supported languages')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def run(parsed_args: argparse.Namespace) -> None:
    """Run the load, read, request and print pipeline once."""
    config = load_config(parsed_args.config, parsed_args.env_file)

    lang = validate_language(parsed_args.lang or config.default_language)

    text = read_input_text(parsed_args.text)
    if not text:
        raise InputError("no text to improve")

    client = OpenAIClient(
        api_key=config.openai_api_key,
        endpoint=config.openai_api_endpoint,
        timeout=config.request_timeout_seconds,
    )
    improved_text = client.improve(config.openai_model, text, lang)
    print_result(improved_text)

    if parsed_args.copy:
        copy_to_clipboard(improved_text)


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the textpolish command line tool."""
    if args is None:
        args = sys.argv[1:]

    parsed_args = build_parser().parse_args(args)
    setup_logging(parsed_args.verbose)

    if parsed_args.list_languages:
        print("Supported languages:")
        for lang in available_languages():
            print(f"  - {lang}")
        return 0

    try:
        run(parsed_args)
    except TextPolishError as e:
        log_msg(str(e), Fore.RED, '❌')
        logger.debug("Failure details", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
