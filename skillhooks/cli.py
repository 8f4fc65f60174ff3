"""CLI entrypoints for skillhooks commands."""

from __future__ import annotations

import argparse
import json
import sys
from typing import TextIO

from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator
from .report import ReportRenderer

_logger = get_logger("cli")


def _add_verbose_option(parser: argparse.ArgumentParser, default: object = False) -> None:
    # Subcommands pass SUPPRESS so a flag given before the subcommand survives.
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log debug details to stderr.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Project root (defaults to $CLAUDE_PROJECT_DIR, then the current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillhooks",
        description="Analyze projects and track edits for coding assistant hooks.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser(
        "setup",
        help="Create or check skill rules for the project (session-start hook).",
    )
    _add_verbose_option(setup_parser, argparse.SUPPRESS)
    _add_path_argument(setup_parser)
    setup_parser.add_argument(
        "--apply",
        action="store_true",
        help="Rewrite existing skill rules when they are out of date.",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Print detected technologies and project types without writing anything.",
    )
    _add_verbose_option(analyze_parser, argparse.SUPPRESS)
    _add_path_argument(analyze_parser)
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the analysis as JSON.",
    )

    track_parser = subparsers.add_parser(
        "track",
        help="Record an edited file from a hook payload on stdin (post-tool-use hook).",
    )
    _add_verbose_option(track_parser, argparse.SUPPRESS)
    track_parser.add_argument(
        "--project-dir",
        default=None,
        help="Project root (defaults to $CLAUDE_PROJECT_DIR, then the current directory).",
    )

    return parser


def main(argv: list[str] | None = None, *, stdin: TextIO | None = None) -> None:
    """CLI entrypoint for skillhooks commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    verbose = bool(getattr(args, "verbose", False))
    configure_logging(verbose=verbose)

    orchestrator = Orchestrator()

    if args.command == "setup":
        # Hook path: report problems but never fail the host.
        try:
            config = orchestrator.load_config(args.path)
            configure_logging(verbose=verbose, log_file=config.log_file)
            outcome = orchestrator.run_setup(config.root, apply=bool(args.apply))
            print(ReportRenderer().render_setup(outcome), end="")
        except Exception as exc:  # pragma: no cover - hook boundary
            _logger.error("skill rules setup failed: %s", exc)
            _logger.debug("setup failure details", exc_info=True)
    elif args.command == "track":
        try:
            config = orchestrator.load_config(args.project_dir)
            configure_logging(verbose=verbose, log_file=config.log_file)
            payload_text = (stdin or sys.stdin).read()
            orchestrator.run_track(payload_text, config.root)
        except Exception as exc:  # pragma: no cover - hook boundary
            _logger.error("edit tracking failed: %s", exc)
            _logger.debug("track failure details", exc_info=True)
    elif args.command == "analyze":
        try:
            analysis = orchestrator.run_analyze(args.path)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        if args.json:
            print(json.dumps(analysis.to_dict(), indent=2))
        else:
            print(ReportRenderer().render_analysis(analysis), end="")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
