"""
module ghosttext.entrypoint

Contains the definition of the main() method that is invoked when
ghosttext is run directly as a module from the command line
"""

import argparse
import asyncio
import logging
from typing import List

from . import constants
from .config import GhostTextConfig, InvalidConfigException
from .editor import GhostTextEditor, UserExit
from .engine import SuggestionProvider
from .providers import DocumentWordProvider, load_provider, ProviderLoadException


def _build_argument_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog=constants.APPLICATION_NAME,
        description="Edit text with inline ghost text suggestions",
    )
    parser.add_argument(
        "--config",
        default=GhostTextConfig.default_path(),
        help="path of the JSON configuration file to use",
    )
    parser.add_argument(
        "--provider",
        default=None,
        help="suggestion provider to use, as 'package.module:attribute'",
    )
    parser.add_argument(
        "--debounce",
        type=int,
        default=None,
        help="milliseconds of caret stability before a suggestion is fetched",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="write debug logs of the suggestion lifecycle to this file",
    )

    return parser


def main(argv: List[str] | None = None) -> int:
    """
    Starts an interactive ghosttext editing session on the current terminal and
    prints the committed text once the user is done

    Args:
        argv (List[str] | None): The command line arguments to parse. Defaults
            to sys.argv

    Returns:
        int: Exit code to return to be returned to the system

    Raises:
        Nothing
    """

    arguments: argparse.Namespace = _build_argument_parser().parse_args(argv)

    if arguments.log_file is not None:
        logging.basicConfig(
            filename=arguments.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    # try reading a config instance from the provided config file. otherwise, construct
    # a default config
    config: GhostTextConfig | None = GhostTextConfig.from_file(arguments.config)
    if config is None:
        config = GhostTextConfig.make_default()

    if arguments.debounce is not None:
        config.debounce_ms = arguments.debounce
    if arguments.provider is not None:
        config.provider = arguments.provider

    provider: SuggestionProvider
    try:
        config.validate()
        provider = (
            load_provider(config.provider)
            if config.provider is not None
            else DocumentWordProvider()
        )
    except (InvalidConfigException, ProviderLoadException) as exc:
        print(f"{type(exc).__name__}: {exc}")
        return 1

    editor: GhostTextEditor = GhostTextEditor(config, provider)
    try:
        print(asyncio.run(editor.edit()))
    except UserExit:
        ...

    return 0
