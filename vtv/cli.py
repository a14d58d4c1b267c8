#!/usr/bin/env python3
"""
VTV CLI
=======
Command-line interface for the Vietnamese word finder.

Usage:
    vtv search "tiengviet" --wordlist data/Viet39K.txt
    vtv syllables "ba"
    vtv strip "Tiếng Việt"
    vtv tones "ơ"
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from vtv import __version__

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False, console: Console = None):
        self.quiet = quiet
        self.console = console or Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def raw(self, text: str):
        """Print unstyled text, even in quiet mode (machine-readable output)."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return

        table = Table(title=title, show_header=bool(headers))
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def configure_logging(level: str = None):
    """Configure root logging from --log-level or logging.level in app.yaml."""
    from vtv.settings import get_setting

    cfg = get_setting("logging", {}) or {}
    level = level or cfg.get("level") or "WARNING"
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=cfg.get("format", "%(levelname)s %(message)s"),
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_search(args, out: Output):
    """Find dictionary words spelled from the query letters."""
    from vtv import VietWordFinder, MatcherConfig, validate_query

    valid, result = validate_query(args.query)
    if not valid:
        out.error(result)
        return 1

    config = MatcherConfig(max_workers=args.workers) if args.workers else None
    finder = VietWordFinder(wordlist_path=args.wordlist, config=config)
    found = finder.search(result)
    found.words.sort()

    if args.json:
        out.raw(json.dumps({
            'query': found.query,
            'normalized': found.normalized,
            'syllables': found.syllables,
            'words': found.words,
        }, ensure_ascii=False, indent=2))
        return 0

    out.print(found.summary())
    if found.words:
        out.table([], found.rows(args.per_line))
    return 0


def cmd_syllables(args, out: Output):
    """List candidate syllables for a set of letters."""
    from vtv import SyllableGenerator, normalize

    generator = SyllableGenerator()
    normalized = normalize(args.letters)
    consonants, vowels = generator.split_letters(normalized)
    syllables = list(dict.fromkeys(generator.make_syllables(consonants, vowels)))

    if args.json:
        out.raw(json.dumps({
            'consonants': consonants,
            'vowels': vowels,
            'syllables': syllables,
        }, ensure_ascii=False, indent=2))
        return 0

    out.print(f"Consonants: {' '.join(consonants) or '-'}")
    out.print(f"Vowels: {' '.join(vowels) or '-'}")
    out.print(f"{len(syllables)} syllables")
    if syllables:
        out.raw(' '.join(syllables))
    return 0


def cmd_strip(args, out: Output):
    """Print text lowercased with tone marks removed."""
    from vtv import strip_all_tones

    out.raw(strip_all_tones(args.text))
    return 0


def cmd_tones(args, out: Output):
    """Show the six tone forms of a base vowel."""
    from vtv import Tone, add_tone, strip_all_tones
    from vtv.tones import BASE_VOWELS

    vowel = strip_all_tones(args.vowel.strip())
    if vowel not in BASE_VOWELS:
        out.error(f"'{args.vowel}' is not a base vowel ({' '.join(BASE_VOWELS)})")
        return 1

    rows = [[tone.value, add_tone(vowel, tone)] for tone in Tone]
    out.table(['Tone', 'Form'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='vtv',
        description='VTV - Vietnamese Word Finder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s search "tiengviet" --wordlist data/Viet39K.txt
  %(prog)s search "banhmithit" --json
  %(prog)s syllables "ba"
  %(prog)s strip "Tiếng Việt"
  %(prog)s tones "ơ"
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Logging verbosity')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- search ---
    p = subparsers.add_parser('search', aliases=['s'], help='Find words spelled from letters')
    p.add_argument('query', help='Letters to search (tones and spaces allowed)')
    p.add_argument('--wordlist', '-w', help='Word list file (default: wordlist.path in app.yaml)')
    p.add_argument('--workers', type=int, help='Matcher threads (default: from app.yaml)')
    p.add_argument('--per-line', type=int, help='Words per output row (default: from app.yaml)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- syllables ---
    p = subparsers.add_parser('syllables', aliases=['syl'], help='List candidate syllables')
    p.add_argument('letters', help='Letters to build syllables from')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- strip ---
    p = subparsers.add_parser('strip', help='Remove tone marks from text')
    p.add_argument('text', help='Text to strip')

    # --- tones ---
    p = subparsers.add_parser('tones', help='Show the tone forms of a vowel')
    p.add_argument('vowel', help='Base vowel (a ă â e ê i o ô ơ u ư y)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {
        's': 'search',
        'syl': 'syllables',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=getattr(args, 'quiet', False))

    commands = {
        'search': cmd_search,
        'syllables': cmd_syllables,
        'strip': cmd_strip,
        'tones': cmd_tones,
    }

    handler = commands.get(command)
    if handler:
        try:
            configure_logging(args.log_level)
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.log_level == 'DEBUG':
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
