"""CLI entrypoint for the license package generator."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator, PipelineError

USAGE_MESSAGE = "You must specify a license file name."


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="license-project-generator",
        description="Generate a License Project package from a license text file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a configuration file (defaults to ./{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "license_file",
        nargs="*",
        help="Path to the file holding the license text.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for the license package generator."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if len(args.license_file) != 1:
        parser.exit(1, f"{USAGE_MESSAGE}\n")

    verbose = bool(args.verbose)
    configure_logging(verbose=verbose)
    logger = get_logger("cli")

    try:
        config = load_config(args.config or Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    if config.log_file is not None:
        configure_logging(verbose=verbose, log_file=config.log_file)

    orchestrator = Orchestrator.from_config(config)
    try:
        result = orchestrator.run(Path(args.license_file[0]))
    except PipelineError as exc:
        if verbose:
            logger.exception("Generation aborted during %s", exc.state.value)
        parser.exit(
            1,
            f"license-project-generator failed: {exc}\nRun with --verbose for more details.\n",
        )
    except KeyboardInterrupt:
        parser.exit(1, "\nAborted.\n")

    rel_path = _relativize(result.artifacts.root)
    print(f"{result.identity.full_name} created at {rel_path}")
    print(f"Remote {result.repository.remote_name} -> {result.repository.remote_url}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
