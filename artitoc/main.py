import argparse
import io
import sys
from datetime import datetime
from typing import Callable, List, Optional, TextIO

from .aggregator import AtocCollector
from .config import CONJUNCTIONS, DEFAULT_LANG
from .latex import render_author_index, render_toc
from .models import AtocIndex
from .parser import AtocFormatError, read_events
from .utils import ensure_parent_dir

# Bytes that are not UTF-8 (e.g. from inputenc latin1) are carried through
# unchanged. Lines end at "\n" only, so a stray "\r" stays inside its line.
ENCODING = "utf-8"
ERRORS = "surrogateescape"
NEWLINE = "\n"


def read_atoc(stream: TextIO, log_fn: Callable[[str], None]) -> AtocIndex:
    return AtocCollector().collect(read_events(stream, log_fn))


def read_stdin(log_fn: Callable[[str], None]) -> AtocIndex:
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return read_atoc(sys.stdin, log_fn)
    stream = io.TextIOWrapper(buffer, encoding=ENCODING, errors=ERRORS, newline=NEWLINE)
    try:
        return read_atoc(stream, log_fn)
    finally:
        # leave sys.stdin's buffer open
        stream.detach()


def write_output(text: str, path: Optional[str], log_fn: Callable[[str], None]) -> None:
    if not path:
        buffer = getattr(sys.stdout, "buffer", None)
        if buffer is None:
            sys.stdout.write(text)
            sys.stdout.flush()
            return
        sys.stdout.flush()
        buffer.write(text.encode(ENCODING, ERRORS))
        buffer.flush()
        return
    ensure_parent_dir(path)
    with open(path, "w", encoding=ENCODING, errors=ERRORS, newline=NEWLINE) as f:
        f.write(text)
    log_fn(f"Wrote {path}")


def cli_main(argv: Optional[List[str]] = None) -> int:
    """
    Generate a table of contents and an author index from a .atoc file.

    Examples:
      artitoc --toc toc.tex --authors authors.tex main.atoc
      artitoc --lang fr < main.atoc
    """
    parser = argparse.ArgumentParser(description="Generate table-of-contents and author index")
    parser.add_argument("atoc", nargs="?", default=None, help="Input .atoc file (default: stdin)")
    parser.add_argument("--toc", default=None, help="Output the table-of-contents to a file.")
    parser.add_argument("--authors", default=None, help="Output the author index to a file.")
    parser.add_argument(
        "--lang",
        choices=sorted(CONJUNCTIONS),
        default=DEFAULT_LANG,
        help=f"Conjunctions used between author names (default: {DEFAULT_LANG})",
    )
    parser.add_argument("--and", dest="and_text", default=None, help="Separator before the last of 3+ authors")
    parser.add_argument("--and2", dest="and2_text", default=None, help="Separator between exactly two authors")
    parser.add_argument(
        "--escape",
        action="store_true",
        help="Escape LaTeX special characters in titles and names (for plain-text input)",
    )
    parser.add_argument(
        "--no-links",
        action="store_true",
        help="Print plain page numbers instead of \\hyperlink{page.N}{N}",
    )
    parser.add_argument("--quiet", action="store_true", help="Only report problems")
    args = parser.parse_args(argv)

    def log_fn(msg: str) -> None:
        ts = datetime.now().strftime("%H:%M:%S")
        print(f"[{ts}] {msg}", file=sys.stderr)

    def info_fn(msg: str) -> None:
        if not args.quiet:
            log_fn(msg)

    and_text, and2_text = CONJUNCTIONS[args.lang]
    if args.and_text is not None:
        and_text = args.and_text
    if args.and2_text is not None:
        and2_text = args.and2_text

    # Everything is read before any output is opened.
    try:
        if args.atoc:
            with open(args.atoc, "r", encoding=ENCODING, errors=ERRORS, newline=NEWLINE) as f:
                index = read_atoc(f, log_fn)
        else:
            index = read_stdin(log_fn)
    except (AtocFormatError, OSError) as exc:
        log_fn(f"Error: {exc}")
        return 1

    info_fn(f"Read {len(index.articles)} articles, {len(index.author_pages)} authors")

    outputs = [
        (args.toc, lambda: render_toc(index.articles, and_text, and2_text, escape=args.escape)),
        (args.authors, lambda: render_author_index(index.author_pages, escape=args.escape, links=not args.no_links)),
    ]
    status = 0
    for path, render in outputs:
        try:
            write_output(render(), path, info_fn)
        except OSError as exc:
            log_fn(f"Error: {exc}")
            status = 1
    return status


def main() -> None:
    sys.exit(cli_main())
