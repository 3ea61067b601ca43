"""Inline translator console.

Recognises ``tr`` / ``translate`` commands, translates the query through the configured
engine and prints the result together with the highlighted input.

    tr fr: hello          -> translate "hello" into French
    tr en de: good night  -> translate from English into German
    tr: hola              -> translate with the configured default languages

Pass a query on the command line for a one-shot translation, or run without one to read
queries from standard input until end of file.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn

from config.loader import ConfigLoader, ConfigLoaderError
from core.shared_data import SharedData
from core.trans.interface import TranslateExceptionError
from core.version import VERSION
from utils.file_utils import FileUtils
from utils.highlight_utils import HighlightUtils
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config
    from models.search_models import SearchResult

CFG_FILE: Final[str] = "translator.ini"
PROMPT: Final[str] = "> "
NO_RESULTS: Final[str] = "No results"

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv (list[str] | None): Argument list, None reads ``sys.argv``.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        description="Translate text typed as 'tr [src] [tgt]: text'",
        epilog="Example: python translator.py tr en fr: good morning",
    )
    parser.add_argument("--config", dest="config", metavar="FILE", default=CFG_FILE, help="Configuration file")
    parser.add_argument("--source", dest="source", metavar="CODE", help="Override default source language")
    parser.add_argument("--target", dest="target", metavar="CODE", help="Override default target language")
    parser.add_argument("--debug", dest="debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--list-languages", dest="list_languages", action="store_true", help="Print supported languages and exit"
    )
    parser.add_argument("--no-color", dest="color", action="store_false", help="Disable highlighted output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("query", nargs="*", help="Translation command, e.g. 'tr fr: hello'")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load configuration file and apply CLI overrides.

    Raises:
        ConfigLoaderError: If configuration file cannot be loaded.
    """
    script_name: str = Path(sys.argv[0]).stem
    config_path: Path = FileUtils.find_config_file(args.config, sys.argv[0])
    return ConfigLoader(
        config_filename=str(config_path),
        script_name=script_name,
        debug=args.debug,
        source=args.source,
        target=args.target,
    ).config


def setup_logging(config: Config) -> None:
    log_file: str = ""
    if config.GENERAL.LOG_FILE:
        log_file = str(FileUtils.resolve_path(config.GENERAL.LOG_FILE))
    logger_utils = LoggerUtils(log_file)
    logger_utils.set_level("DEBUG" if config.GENERAL.DEBUG else "INFO")


def format_result(result: SearchResult, *, color: bool) -> str:
    """Render the highlighted input and the translation (or the no-result message)."""
    lines: list[str] = [HighlightUtils.render(result.search, result.highlight, color=color)]
    if result.intent is not None:
        lines.append(f"  [{result.intent.source_lang_code} > {result.intent.target_lang_code}]")
    lines.append(result.item.name if result.item is not None else NO_RESULTS)
    return "\n".join(lines)


def print_languages(shared_data: SharedData) -> None:
    for key in shared_data.registry.keys():
        descriptor = shared_data.registry.lookup(key)
        if descriptor is not None:
            print(f"{key:4} {descriptor.code:6} {descriptor.display_name}")


async def run_query(shared_data: SharedData, search: str, *, color: bool) -> None:
    result: SearchResult = await shared_data.search.search(search)
    print(format_result(result, color=color))


async def interactive_loop(shared_data: SharedData, *, color: bool) -> None:
    """Read queries from standard input until end of file."""
    while True:
        try:
            line: str = await asyncio.to_thread(input, PROMPT)
        except EOFError:
            print()
            break
        if not line.strip():
            continue
        await run_query(shared_data, line, color=color)


async def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit status.
    """
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return 1

    setup_logging(config)
    logger.debug("Translator %s started with configuration: %s", VERSION, config)

    shared_data = SharedData(config)
    if args.list_languages:
        print_languages(shared_data)
        return 0

    try:
        await shared_data.async_init()
    except TranslateExceptionError as err:
        print(f"\nError: {err}", file=sys.stderr)
        return 1

    try:
        if args.query:
            await run_query(shared_data, " ".join(args.query), color=args.color)
        else:
            await interactive_loop(shared_data, color=args.color)
    finally:
        await shared_data.shutdown()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)
