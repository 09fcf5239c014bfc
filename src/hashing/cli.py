# src/hashing/cli.py
import os, sys, io, argparse
from typing import Iterator, List, Optional, TextIO, Tuple

from dotenv import load_dotenv
load_dotenv()

from ..utils.hash import EncodingError, sha1_chunks, sha1_text
from ..utils.log import get_logger

LOG_LEVEL = os.getenv("SHA1TEXT_LOG_LEVEL", "WARNING")
DEFAULT_CHUNK_SIZE = 65536

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ENCODING = 3


def chunk_size_from_env() -> int:
    """SHA1TEXT_CHUNK_SIZE as a positive int; ValueError otherwise."""
    raw = os.getenv("SHA1TEXT_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(f"SHA1TEXT_CHUNK_SIZE must be an integer, got {raw!r}")
    if size <= 0:
        raise ValueError(f"SHA1TEXT_CHUNK_SIZE must be positive, got {size}")
    return size


def iter_stream_chunks(stream: TextIO, size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    return iter(lambda: stream.read(size), "")


def strip_line_end(line: str) -> str:
    # one "\n", then at most one "\r"
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def utf8_stdin() -> io.TextIOWrapper:
    # stdin bytes are always UTF-8 here, whatever the locale or PYTHONIOENCODING says
    return io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="strict", newline="\n")


def digest_inputs(args, stream: TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[Tuple[str, Optional[str]]]:
    """(digest, label) pairs in input order. Label is None for a whole stream."""
    if args.text:
        return [(sha1_text(t), t) for t in args.text]
    try:
        if args.lines:
            out = []
            for line in stream:
                t = strip_line_end(line)
                out.append((sha1_text(t), t))
            return out
        return [(sha1_chunks(iter_stream_chunks(stream, chunk_size)), None)]
    except UnicodeDecodeError as e:
        raise EncodingError(f"stdin is not valid UTF-8 at byte {e.start}: {e.reason}") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sha1text",
        description="Print the SHA-1 hex digest of UTF-8 text (arguments, or stdin when none are given)."
    )
    ap.add_argument("text", nargs="*", help="text to hash; one digest per argument")
    ap.add_argument("--lines", action="store_true", help="with stdin: one digest per line")
    ap.add_argument("--label", action="store_true", help="print '<digest>  <text>'")
    ap.add_argument("--check", metavar="DIGEST", help="compare the single input against DIGEST")
    return ap


def main(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    log = get_logger(level=LOG_LEVEL)

    if args.lines and args.text:
        ap.error("--lines reads stdin; do not pass TEXT arguments")
    if args.check is not None and (len(args.text) > 1 or args.lines):
        ap.error("--check takes exactly one input")
    try:
        chunk_size = chunk_size_from_env()
    except ValueError as e:
        ap.error(str(e))

    wrapper = None
    if stream is None and not args.text:
        stream = wrapper = utf8_stdin()
    try:
        results = digest_inputs(args, stream, chunk_size)
    except EncodingError as e:
        log.error("cannot hash input: %s", e)
        return EXIT_ENCODING
    finally:
        if wrapper is not None:
            # leave sys.stdin.buffer open for the caller
            wrapper.detach()

    if args.check is not None:
        expected = args.check.strip().lower()
        actual = results[0][0] if results else ""
        if actual == expected:
            print("OK")
            return EXIT_OK
        print("FAILED")
        log.info("expected %s, got %s", expected, actual)
        return EXIT_MISMATCH

    for digest, label in results:
        if args.label:
            print(f"{digest}  {label if label is not None else '-'}")
        else:
            print(digest)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
