"""Command-line interface for bgnode."""

import argparse
import logging

from bgnode import __version__
from bgnode.config import load_config
from bgnode.console import error, status
from bgnode.constants import (
    CONSENSUS_CLIENTS,
    DEFAULT_CONSENSUS_CLIENT,
    DEFAULT_EXECUTION_CLIENT,
    EXECUTION_CLIENTS,
)
from bgnode.errors import BgnodeError
from bgnode.node import run_node

log = logging.getLogger("bgnode")


def _choices(names: tuple[str, ...]) -> str:
    return " or ".join(f"'{name}'" for name in names)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bgnode",
        description="Install and run a local Ethereum execution + consensus client pair",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-e",
        dest="execution",
        metavar="<client>",
        default=DEFAULT_EXECUTION_CLIENT,
        help=f"Specify the execution client ({_choices(EXECUTION_CLIENTS)})",
    )
    parser.add_argument(
        "-c",
        dest="consensus",
        metavar="<client>",
        default=DEFAULT_CONSENSUS_CLIENT,
        help=f"Specify the consensus client ({_choices(CONSENSUS_CLIENTS)})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if args.execution not in EXECUTION_CLIENTS:
        error(f"Invalid option for -e. Use {_choices(EXECUTION_CLIENTS)}.")
        return 1
    if args.consensus not in CONSENSUS_CLIENTS:
        error(f"Invalid option for -c. Use {_choices(CONSENSUS_CLIENTS)}.")
        return 1

    try:
        config = load_config(args.execution, args.consensus)
        status(f"Execution client selected: {config.execution_client}")
        status(f"Consensus client selected: {config.consensus_client}\n")
        return run_node(config)
    except BgnodeError as e:
        log.debug("fatal: %r", e)
        error(f"Error: {e}")
        return 1


def entrypoint() -> None:
    raise SystemExit(main())
