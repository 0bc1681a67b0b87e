from __future__ import annotations
import argparse, json, sys
from typing import List

from . import config as CFG
from .engine import Engine
from .errors import DocumentLoadError, EmptyIndexError
from .loader import read_queries
from .models import FindResult

USAGE = """\
linefuzzyfinder

NAME
\tlinefuzzyfinder - finds a line similar to input words

SYNOPSIS
\tUsage: linefuzzyfinder [-d documentFilepath] [-i wordSetFilepath]
\tUsage: linefuzzyfinder [-d documentFilepath] [-c ...]

DESCRIPTION
\tlinefuzzyfinder is a pattern matcher that finds the most similar line of \
text from a document to a set of words. The set of words can be provided as a \
file with each set on its own line, or as quoted sets of words on the command \
line.

EXAMPLES
\tlinefuzzyfinder -d ./lepanto.txt -i ./testInputs.txt
\t\tFinds the closest matching lines in "./lepanto.txt" to each set of words \
on each line of "./testInputs.txt".

\tlinefuzzyfinder -d ./lepanto.txt -c "his head a flag" "test word set two" "set three"
\t\tFinds the closest matching lines in "./lepanto.txt" to each set of words \
given in quotes.
"""


def _fail(message: str) -> int:
    print(message)
    print(USAGE)
    return 1


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="linefuzzyfinder",
                                description="Find the document line most similar to a set of words")
    p.add_argument("-d", dest="document", default=None, help="Document to search")
    g = p.add_mutually_exclusive_group()
    g.add_argument("-i", dest="input", default=None, help="File with one word set per line")
    g.add_argument("-c", dest="queries", nargs="+", default=None, help="Word sets given on the command line")
    p.add_argument("--json", action="store_true", help="Emit one JSON object per result")
    p.add_argument("--mode", choices=["serial", "threads", "procs"], default=None, help="Scan mode")
    p.add_argument("--workers", type=int, default=None, help="Pool size for threads/procs")
    p.add_argument("--verbose", action="store_true")
    return p


def _report(query: str, result: FindResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"query": query, **result.as_dict()}, ensure_ascii=False))
        return
    print(f'Searching for word set: "{query}"')
    print(f'Found line {result.line_no}: "{result.line}"')
    if not result.exact:
        print(f"Best score: {result.score:.6f}")


def _interactive(eng: Engine) -> int:
    # prompt first so the user can type while the document loads
    print(">", end="", flush=True)
    try:
        eng.load(CFG.DEFAULT_DOCUMENT)
    except DocumentLoadError:
        print()
        return _fail(f"Could not open default source file: {CFG.DEFAULT_DOCUMENT}")
    try:
        query = input()
    except EOFError:
        query = ""
    try:
        print(eng.find(query).line)
    except EmptyIndexError:
        return _fail(f"Default source file has no non-empty lines: {CFG.DEFAULT_DOCUMENT}")
    return 0


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    eng = Engine()
    try:
        if not argv:
            return _interactive(eng)

        args = _build_parser().parse_args(argv)
        if args.document is None:
            return _fail('Missing "-d" flag.')
        if args.input is None and args.queries is None:
            return _fail('Missing "-i" or "-c" flag.')

        try:
            eng.load(args.document, mode=args.mode, workers=args.workers, verbose=args.verbose)
        except DocumentLoadError:
            return _fail("Could not open source file")

        if args.input is not None:
            try:
                queries = read_queries(args.input)
            except DocumentLoadError:
                return _fail("Could not open input word set file")
        else:
            queries = args.queries

        if len(eng.index) == 0:
            return _fail("Source file has no non-empty lines")

        for q in queries:
            _report(q, eng.find(q), args.json)
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
