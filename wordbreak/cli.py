"""
CLI interface for wordbreak.

Usage:
    wordbreak applepenapple -w apple -w pen
    wordbreak --split -f words.txt "pineapplepenapple"
    echo catsandog | wordbreak --json -f words.dic
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Union

from wordbreak import __version__, segment
from wordbreak.constants import COMPILED_SUFFIX
from wordbreak.dictionary import CompiledDictionary, load_lexicon, read_word_list
from wordbreak.segmenter import build_trie
from wordbreak.trie import Trie

logger = logging.getLogger(__name__)

EXIT_SEGMENTABLE = 0
EXIT_NOT_SEGMENTABLE = 1
EXIT_ERROR = 2


# ============================================================================
# Dictionary Assembly
# ============================================================================

def build_lexicon(words: List[str], files: List[str]) -> Union[Trie, CompiledDictionary]:
    """
    Assemble the lexicon from -w words and -f files.

    A lone dictionary file is used as loaded. Several sources are merged
    into one trie; compiled dictionaries contribute all of their words.
    """
    if not words and len(files) == 1:
        return load_lexicon(files[0])

    merged = set(words)
    for path in files:
        if path.endswith(COMPILED_SUFFIX):
            merged.update(CompiledDictionary.load(path))
        else:
            merged.update(read_word_list(path))
    return build_trie(merged)


# ============================================================================
# Output Formatting
# ============================================================================

def format_default(segments: Optional[List[str]]) -> str:
    """Plain true/false."""
    return "true" if segments is not None else "false"


def format_split(segments: Optional[List[str]]) -> str:
    """Words joined like: apple | pen | apple"""
    if segments is None:
        return "(no segmentation)"
    return " | ".join(segments)


def format_json(text: str, segments: Optional[List[str]]) -> str:
    """Format the result as JSON."""
    data = {
        "text": text,
        "segmentable": segments is not None,
        "segments": segments,
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordbreak",
        description="Check whether text splits into dictionary words",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment (read from stdin if omitted)",
    )
    parser.add_argument(
        "--word", "-w",
        action="append",
        default=[],
        dest="words",
        help="Dictionary word (repeatable)",
    )
    parser.add_argument(
        "--file", "-f",
        action="append",
        default=[],
        dest="files",
        help=f"Word list file, or compiled {COMPILED_SUFFIX} dictionary (repeatable)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--split", "-s",
        action="store_true",
        help="Print one segmentation",
    )
    output.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Refuse inputs longer than this many characters",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log dictionary loading and search details",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"wordbreak {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if not args.words and not args.files:
        parser.error("no dictionary given, use --word or --file")

    try:
        if args.text is None:
            text = sys.stdin.read()
            if text.endswith("\n"):
                text = text[:-1]
        else:
            text = args.text

        lexicon = build_lexicon(args.words, args.files)
        logger.debug("Lexicon ready: %d words", len(lexicon))
        segments = segment(text, lexicon, max_length=args.max_length)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(format_json(text, segments))
    elif args.split:
        print(format_split(segments))
    else:
        print(format_default(segments))

    return EXIT_SEGMENTABLE if segments is not None else EXIT_NOT_SEGMENTABLE


if __name__ == "__main__":
    sys.exit(main())
