import argparse
import random
import sys

import hasher
import logger
from password_generator import parse_complexity
from penguin import Penguin, resolve_config

# =========================================
# CONFIGURATION
# =========================================

DEFAULT_COUNT = 1
DEFAULT_COMPLEXITY = "basic"


def non_negative_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def split_words(values):
    """Flatten repeated, comma-delimited -w values. Empty items are kept as empty words."""
    words = []
    for value in values or []:
        words.extend(value.split(","))
    return words


def build_parser():
    parser = argparse.ArgumentParser(
        prog="penguin",
        description="Generate memorable passwords from your own base words.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", aliases=["g"], help="Generate passwords")
    gen.add_argument('-w', '--words', action='append', default=[],
                     help="Words to use for password generation (comma-separated)")
    gen.add_argument('-n', '--number', type=non_negative_int, default=DEFAULT_COUNT,
                     help="Number of passwords to generate")
    gen.add_argument('-c', '--complexity', default=DEFAULT_COMPLEXITY,
                     help="Complexity level (basic, medium, hard, penguin)")
    gen.add_argument('-u', '--whole-words', action='store_true', help="Use whole words")
    gen.add_argument('-l', '--length', type=non_negative_int, help="Password length")
    # extras
    gen.add_argument('--seed', type=int, help="Seed for reproducible (NOT secure) output")
    gen.add_argument('--hash', choices=hasher.HASH_MODES, default='none',
                     help="Print a hash next to each password")
    gen.add_argument('--pepper', action='store_true', help="Apply PENGUIN_PEPPER before hashing")
    gen.add_argument('--log', action='store_true', help="Append a JSON line describing this run")
    return parser


def format_passwords(passwords, hashes=None, hash_mode="none"):
    lines = ["", "> Generated passwords:"]
    for i, password in enumerate(passwords, start=1):
        line = f"   {i}. {password}"
        if hashes:
            line += f"  [{hash_mode}] {hashes[i - 1]}"
        lines.append(line)
    lines.append("")
    return "\n".join(lines)


def run_generate(args):
    words = split_words(args.words)
    complexity = parse_complexity(args.complexity)

    rng = None
    if args.seed is not None:
        print(f"[!] Seeded with {args.seed}: output is reproducible, do not use it for real accounts.",
              file=sys.stderr)
        rng = random.Random(args.seed)

    # complexity and whole-words are always passed, only length may fall back
    passwords = Penguin(words).generate_password(
        args.number,
        complexity=complexity,
        use_whole_words=args.whole_words,
        length=args.length,
        rng=rng,
    )

    hashes = None
    if args.hash != 'none':
        hashes = []
        for password in passwords:
            salt, hash_value = hasher.hash_password(password, args.hash, use_pepper=args.pepper)
            hashes.append(f"{salt}${hash_value}" if salt else hash_value)

    if args.log:
        config = resolve_config(complexity, args.whole_words, args.length)
        logger.write_log(
            complexity=config.complexity.value,
            use_whole_words=config.use_whole_words,
            length=config.length,
            count=args.number,
            word_count=len(words),
            hash_mode=args.hash,
            seeded=args.seed is not None,
        )

    print(format_passwords(passwords, hashes, args.hash))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        run_generate(args)
    except (ValueError, OSError) as e:
        print(f"[!] Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
