#!/usr/bin/env python3
import argparse
import sys
from dotenv import load_dotenv

load_dotenv()

from kanasearch import DEFAULT_MODE
from kanasearch.logger import logger
from kanasearch.search import (
    convert_query,
    convert_search_input,
    convert_search_input_for_submit,
)

MODES = ("preview", "submit")


def convert_line(text: str, mode: str, katakana: bool = False, as_json: bool = False) -> str:
    if as_json:
        return convert_query(text, katakana=katakana).model_dump_json()
    if mode == "submit":
        return convert_search_input_for_submit(text, katakana=katakana)
    return convert_search_input(text, katakana=katakana)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert romaji search input to kana, keeping \"quoted\" text literal"
    )
    parser.add_argument(
        "text", nargs="*", help="Search input; read line by line from stdin when omitted"
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=DEFAULT_MODE if DEFAULT_MODE in MODES else "preview",
        help="preview keeps quote characters, submit strips them"
    )
    parser.add_argument(
        "--katakana", action="store_true", help="Emit katakana instead of hiragana"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print raw, preview and submit forms as JSON"
    )
    args = parser.parse_args(argv)

    if args.text:
        lines = [" ".join(args.text)]
    else:
        lines = [line.rstrip("\n") for line in sys.stdin]

    logger.debug(f"Converting {len(lines)} input(s) in {args.mode} mode")
    for line in lines:
        print(convert_line(line, args.mode, katakana=args.katakana, as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
