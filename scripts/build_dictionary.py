#!/usr/bin/env python3
"""
Dictionary Builder for wordbreak.

This script compiles plain word lists (one word per line) into a compact
marisa_trie file that wordbreak can memory-map instead of building a trie
on every start.

Usage:
    python scripts/build_dictionary.py words.txt [more.txt ...] --output words.dic
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Set

from wordbreak.constants import COMPILED_SUFFIX
from wordbreak.dictionary import CompiledDictionary, read_word_list

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# Dictionary Building
# ============================================================================

def collect_words(paths: List[Path]) -> Set[str]:
    """Merge the words of every word list."""
    words = set()
    for path in paths:
        words.update(read_word_list(path))
    logger.info(f"Collected {len(words)} unique words from {len(paths)} file(s)")
    return words


def build_dictionary(words: Set[str], output_path: Path) -> CompiledDictionary:
    """Compile and save the dictionary."""
    logger.info("Building marisa_trie.Trie...")
    dictionary = CompiledDictionary.from_words(words)
    dictionary.save(output_path)

    file_size = output_path.stat().st_size / 1024
    logger.info(f"Saved dictionary to {output_path} ({file_size:.1f} KB, {len(dictionary)} words)")

    return dictionary


# ============================================================================
# Main
# ============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Build a compiled wordbreak dictionary from word lists"
    )
    parser.add_argument(
        'wordlists',
        type=Path,
        nargs='+',
        help="Word list files, one word per line"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        required=True,
        help=f"Output dictionary path (should end in {COMPILED_SUFFIX})"
    )

    args = parser.parse_args()

    missing = [p for p in args.wordlists if not p.exists()]
    if missing:
        for path in missing:
            logger.error(f"Word list not found: {path}")
        sys.exit(1)

    if args.output.suffix != COMPILED_SUFFIX:
        logger.warning(f"{args.output} does not end in {COMPILED_SUFFIX}; "
                       "the CLI will read it as a word list")

    start_time = time.time()

    words = collect_words(args.wordlists)
    build_dictionary(words, args.output)

    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds")


if __name__ == '__main__':
    main()
