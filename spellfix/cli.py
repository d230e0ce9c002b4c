"""
Command line entry points.

    spellfix build <corpus.txt> <table.pkl>   build and save a frequency table
    spellfix cli <table.pkl>                  correct words typed on stdin
    spellfix ws <table.pkl>                   serve GET /correct/{word}
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import get_settings
from .corpus import CorpusError, build_corpus, load_table
from .spellcheck import SpellChecker

logger = logging.getLogger("spellfix")

EXIT_WORD = "!"


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="spellfix")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="build a frequency table from a text file")
    build.add_argument("source", help="corpus text file")
    build.add_argument("dest", help="where to write the table")

    cli = sub.add_parser("cli", help="interactive correction loop")
    cli.add_argument("table", help="table written by `build`")

    ws = sub.add_parser("ws", help="run the web service")
    ws.add_argument("table", nargs="?", default=settings.CORPUS_PATH,
                    help=f"table written by `build`, default = {settings.CORPUS_PATH}")
    ws.add_argument("--host", default=settings.HOST, help=f"default = {settings.HOST}")
    ws.add_argument("--port", type=int, default=settings.PORT, help=f"default = {settings.PORT}")

    return parser.parse_args(argv)


def run_build(source: str, dest: str, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print("Building corpus...", file=out)
    report = build_corpus(source, dest)
    print(f"Elapsed time: {report.elapsed_seconds:.6f}s", file=out)
    print(f"Corpus built. {report.unique_words} words found, {report.total_words} non-unique", file=out)


def run_interactive(checker: SpellChecker, inp: Optional[TextIO] = None,
                    out: Optional[TextIO] = None) -> None:
    """Read one word per line until `!` or EOF, printing each correction."""
    inp = inp or sys.stdin
    out = out or sys.stdout
    print(f"Enter {EXIT_WORD} to exit", file=out)
    print("Enter terms for correction", file=out)
    for line in inp:
        word = line.strip()
        if word == EXIT_WORD:
            break
        print(checker.correction(word), file=out, flush=True)


def run_server(table: str, host: str, port: int) -> None:
    import uvicorn
    from .api import create_app

    settings = get_settings()
    app = create_app(load_table(table), settings)
    logger.info(f"🚀 Web Service starting at {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=settings.LOG_LEVEL.lower())


def main(argv: Optional[List[str]] = None) -> int:
    args = get_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    try:
        if args.command == "build":
            run_build(args.source, args.dest)
        elif args.command == "cli":
            checker = SpellChecker(load_table(args.table), max_word_length=settings.max_word_length)
            run_interactive(checker)
        elif args.command == "ws":
            run_server(args.table, args.host, args.port)
    except CorpusError as e:
        logger.error(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
