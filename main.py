import argparse
import curses
import logging
import os
import sys

import config_paths
import delimiters
from app_state import AppState, Settings
from file_type_handler import FileTypeHandler, LoadError, ParseOptions
from history_manager import HistoryManager
from logger import setup_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _ascii_char(text):
    try:
        return delimiters.parse_char(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _terminator(text):
    try:
        return delimiters.parse_terminator(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _column_width(text):
    parts = text.split(",")
    try:
        low, high = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected MIN,MAX column widths, got '{text}'"
        ) from None
    if low < 1 or high < low:
        raise argparse.ArgumentTypeError("column widths need 1 <= MIN <= MAX")
    return low, high


def build_parser():
    parser = argparse.ArgumentParser(
        prog="greg",
        description="greg - a grid editor for CSV, TSV and other delimited text",
        epilog=(
            "Single-character options also accept the names nul..us for control "
            "characters and aliases such as sp, com, sem, pip, tic and del."
        ),
    )
    parser.add_argument("file", help="path to the file to edit")
    parser.add_argument("-s", "--separator", type=_ascii_char, default=",",
                        help="column separator (default: ,)")
    parser.add_argument("-r", "--terminator", type=_terminator, default=None,
                        help="record terminator; 'crlf' accepts \\r, \\n or \\r\\n (default: crlf)")
    parser.add_argument("-c", "--comment", type=_ascii_char, default=None,
                        help="skip lines beginning with this character")
    parser.add_argument("-H", "--headers", type=int, default=None,
                        help="number of header rows")
    parser.add_argument("-t", "--trim", type=delimiters.parse_trim, default="none",
                        help="trim whitespace from headers, fields or all (default: none)")
    parser.add_argument("-q", "--quote", type=_ascii_char, default='"',
                        help='quote character (default: ")')
    parser.add_argument("-i", "--ignore-quotes", action="store_true",
                        help="do not treat quotes specially")
    parser.add_argument("-d", "--ignore-double-quote", action="store_true",
                        help="do not read doubled quotes as a literal quote")
    parser.add_argument("-e", "--quote-escape", type=_ascii_char, default=None,
                        help="escape character for quotes")
    parser.add_argument("-w", "--column-width", type=_column_width, default=None,
                        help="MIN,MAX rendered column width")
    parser.add_argument("-v", "--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def build_settings(args, cfg, handler):
    headers = args.headers
    if headers is None:
        headers = handler.default_headers
    if headers is None:
        headers = cfg["HEADERS"]
    low, high = args.column_width or cfg["COLUMN_WIDTH"]
    return Settings(
        column_width_min=low, column_width_max=high, header_row_count=headers
    )


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config_paths.ensure_config_dirs()
    except OSError as exc:
        print(f"Cannot create {config_paths.CONFIG_DIR}: {exc}", file=sys.stderr)
    cfg = config_paths.load_config()
    setup_logging(cfg["LOG_LEVEL"])

    options = ParseOptions(
        separator=args.separator,
        terminator=args.terminator,
        comment=args.comment,
        quote=args.quote,
        ignore_quotes=args.ignore_quotes,
        ignore_double_quote=args.ignore_double_quote,
        escape=args.quote_escape,
        trim=args.trim,
    )
    handler = FileTypeHandler(args.file, options)

    try:
        settings = build_settings(args, cfg, handler)
        options.headers = settings.header_row_count
        matrix = handler.load()
    except (LoadError, ValueError) as exc:
        logger.error("load failed: %s", exc)
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    state = AppState(matrix, settings, file_path=args.file)
    state.undo_max_depth = cfg["UNDO_MAX_DEPTH"]

    history_mgr = HistoryManager(config_paths.HISTORY_PATH, max_items=100)
    history_mgr.load()

    def curses_main(stdscr):
        Orchestrator(stdscr, state, history_mgr=history_mgr).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
