#!/usr/bin/env python3
# greek_stemmer/cli.py
#
# Prints the stem of each word, one per line.
#
# Usage:
#   greek-stemmer αγάπης γραμματα
#   echo "δρόμος δρόμοι" | greek-stemmer --debug
#   greek-stemmer --config my_config.json ανθρωπος

import argparse
import sys

from dotenv import load_dotenv

from greek_stemmer.config import StemmerConfigError, load_config
from greek_stemmer.stemmer import GreekStemmer, set_debug


def main(argv=None):
    # GREEK_STEMMER_CONFIG_PATH may come from a .env file in the working directory
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Stem Greek words with the Greek Porter stemmer."
    )
    parser.add_argument(
        'words',
        nargs='*',
        help="Words to stem (read from stdin when omitted)"
    )
    parser.add_argument(
        '--config',
        default=None,
        help="Path to stemmer_config.json (defaults to $GREEK_STEMMER_CONFIG_PATH or the bundled file)"
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help="Log every rule that fires"
    )
    args = parser.parse_args(argv)

    if args.debug:
        set_debug(True)

    try:
        stemmer = GreekStemmer(load_config(args.config))
    except StemmerConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    words = args.words
    if not words:
        words = sys.stdin.read().split()

    for word in words:
        print(stemmer.stem(word))
    return 0


if __name__ == "__main__":
    sys.exit(main())
