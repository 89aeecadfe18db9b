#!/usr/bin/env python3
"""
markov-namegen CLI
==================
Command-line front-end: train on a corpus file and print generated names.

Usage:
    markov-namegen generate -n 10
    markov-namegen generate --mode cluster --corpus names.txt --pattern '^[a-z]{4,8}$'
    markov-namegen clusters foobar aurelius
"""

import argparse
import logging
import sys

from markov_namegen import __version__
from markov_namegen.corpus import DEFAULT_CORPUS_PATH, read_corpus
from markov_namegen.errors import NameGenError
from markov_namegen.generator import CharacterChainGenerator, ClusterChainGenerator
from markov_namegen.clusters import clusterize
from markov_namegen.settings import get_setting
from markov_namegen.vowels import make_classifier

# =============================================================================
# Constants
# =============================================================================

GENERATORS = {
    'character': CharacterChainGenerator,
    'cluster': ClusterChainGenerator,
}

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, *args, **kwargs):
        """Always printed; this is the command's actual output."""
        print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Train a generator and print names."""
    if args.count < 0:
        out.error("--count must be zero or greater")
        return 1

    builder = GENERATORS[args.mode].builder()
    try:
        if args.order is not None:
            builder.with_order(args.order)
        if args.no_prior:
            builder.without_prior()
        elif args.prior is not None:
            builder.with_prior(args.prior)
        if args.pattern:
            builder.with_pattern(args.pattern)
        if args.seed is not None:
            builder.with_seed(args.seed)
        if args.max_attempts is not None:
            builder.with_max_attempts(args.max_attempts)
        if args.extra_vowels:
            if args.mode == 'cluster':
                builder.with_extra_vowels(args.extra_vowels)
            else:
                out.error("--extra-vowels only applies to --mode cluster; ignoring it")

        for path in args.corpus or [DEFAULT_CORPUS_PATH]:
            builder.train(read_corpus(path))

        namegen = builder.build()
        out.print(f"{args.count} names from {type(namegen).__name__} (order {namegen.order}):\n")
        for i, name in enumerate(namegen.generate(args.count), 1):
            if not args.lowercase:
                name = name.capitalize()
            out.result(f"{i:2}. {name}" if args.numbered else name)
    except (OSError, UnicodeDecodeError) as e:
        out.error(f"Cannot read corpus: {e}")
        return 1
    except NameGenError as e:
        out.error(str(e))
        return 1

    return 0


def cmd_clusters(args, out: Output):
    """Show how words split into vowel/consonant clusters."""
    is_vowel = make_classifier(args.extra_vowels or '')
    for word in args.words:
        word = word.lower()
        if not word:
            out.error("Cannot clusterize an empty word")
            return 1
        out.result(f"{word}: {' | '.join(clusterize(word, is_vowel))}")
    return 0


# =============================================================================
# Entry point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='markov-namegen',
        description='Markov chain name generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10
  %(prog)s generate -n 20 --mode cluster --order 2 --seed 123
  %(prog)s generate --corpus elves.txt --pattern '^[a-z]{4,8}$'
  %(prog)s clusters foobar aurelius
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    p.add_argument('-n', '--count', type=int, default=get_setting('cli.default_count', 10),
                   help='Number of names (default: %(default)s)')
    p.add_argument('--mode', '-m', choices=sorted(GENERATORS), default='character',
                   help='Chain symbols: single characters or vowel/consonant clusters')
    p.add_argument('--corpus', '-c', action='append',
                   help='Training file, one name per line (repeatable; default: bundled Roman names)')
    p.add_argument('--order', '-o', type=int, help='Markov chain order')
    prior = p.add_mutually_exclusive_group()
    prior.add_argument('--prior', type=float, help='Weight of unseen transitions')
    prior.add_argument('--no-prior', action='store_true', help='Disable prior smoothing')
    p.add_argument('--pattern', '-p', help='Regex every name must match')
    p.add_argument('--seed', '-s', type=int, help='Seed for reproducible output')
    p.add_argument('--max-attempts', type=int, help='Give up after this many rejected names')
    p.add_argument('--extra-vowels', help='Extra vowel characters for cluster mode (e.g. y)')
    p.add_argument('--lowercase', action='store_true', help='Do not capitalize output')
    p.add_argument('--numbered', action='store_true', help='Prefix names with their index')

    # --- clusters ---
    p = subparsers.add_parser('clusters', help='Split words into vowel/consonant clusters')
    p.add_argument('words', nargs='+', help='Words to split')
    p.add_argument('--extra-vowels', help='Extra vowel characters (e.g. y)')

    return parser


COMMANDS = {
    'generate': cmd_generate, 'gen': cmd_generate, 'g': cmd_generate,
    'clusters': cmd_clusters,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)
    out = Output(quiet=args.quiet)
    return COMMANDS[args.command](args, out)


if __name__ == '__main__':
    sys.exit(main())
