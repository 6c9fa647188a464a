#!/usr/bin/env python3
"""
pdftitle - command line entry point

Prints the probable title of each PDF file given on the command line.
"""

import argparse
import sys
from typing import List, Optional

from .config import (
    DEFAULT_CONVERSION_TIMEOUT,
    DEFAULT_ENGINE,
    DEFAULT_GS_COMMAND,
    DEFAULT_SPACING_COEFFICIENT,
    DEFAULT_WORDS_IN_DICT_PERCENT,
    ENGINES,
    TitleConfig,
)
from .logging_config import setup_logging
from .title_extractor import TitleExtractor


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Arguments without the program name, sys.argv when None

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog='pdftitle',
        description='Pdftitle prints the title of each pdf file.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pdftitle paper.pdf
  pdftitle -w -s 0.2 slides/*.pdf
        """
    )

    parser.add_argument(
        'files',
        nargs='+',
        metavar='file',
        help='PDF files to read'
    )

    parser.add_argument(
        '-s', '--spacing',
        type=float,
        default=DEFAULT_SPACING_COEFFICIENT,
        help='spacing coefficient used to decide word boundaries (default: %(default)s)'
    )

    parser.add_argument(
        '-w', '--no-words-check',
        action='store_true',
        help='disable dictionary check'
    )

    parser.add_argument(
        '-p', '--words-percent',
        type=float,
        default=DEFAULT_WORDS_IN_DICT_PERCENT,
        help='minimum percentage of words in dictionary for a valid title (default: %(default)s)'
    )

    parser.add_argument(
        '--gs',
        default=DEFAULT_GS_COMMAND,
        help='ghostscript executable (default: %(default)s)'
    )

    parser.add_argument(
        '--engine',
        choices=ENGINES,
        default=DEFAULT_ENGINE,
        help='PDF reader engine (default: %(default)s)'
    )

    parser.add_argument(
        '--words',
        metavar='FILE',
        help='word list with one word per line, replaces the bundled one'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=DEFAULT_CONVERSION_TIMEOUT,
        help='seconds allowed for the ghostscript conversion (default: %(default)s)'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='logging level, logs go to stderr (default: %(default)s)'
    )

    args = parser.parse_args(argv)

    try:
        args.config = TitleConfig(
            spacing_coefficient=args.spacing,
            disable_words_check=args.no_words_check,
            words_in_dict_percent=args.words_percent,
            gs_command=args.gs,
            conversion_timeout=args.timeout,
            engine=args.engine,
            words_file=args.words,
        )
    except ValueError as e:
        parser.error(str(e))

    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for pdftitle."""
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    try:
        extractor = TitleExtractor(args.config)
    except OSError as e:
        print(f"error: cannot load word list: {e}", file=sys.stderr)
        return 2

    for result in extractor.process_all(args.files):
        if result.ok:
            print(result.format_line(), file=sys.stdout)
        else:
            print(result.format_line(), file=sys.stderr)
        sys.stdout.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
