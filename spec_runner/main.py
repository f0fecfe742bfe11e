"""Entry point for running a registered Spec.

Parses command-line options, runs the spec, streams progress, prints the
report and returns the exit code. A spec script typically ends with::

    if __name__ == "__main__":
        sys.exit(main(spec))
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import TextIO

from spec_runner.config import RunnerConfig
from spec_runner.execution.exit_code import EXIT_FAILURE, compute_exit_code
from spec_runner.reporting.reporter import ProgressReporter, write_yaml
from spec_runner.spec import Spec


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Spec runner - executes registered cases and reports results"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Print one line per case with its name and duration",
    )
    parser.add_argument(
        "-n",
        "--name",
        type=str,
        default=None,
        help="Only run cases whose name or description path matches this regex",
    )
    parser.add_argument(
        "--yaml-output",
        type=Path,
        default=None,
        help="Path to write a YAML report file",
    )
    parser.add_argument(
        "--config-file",
        type=Path,
        default=None,
        help="Path to the JSON runner config file",
    )
    return parser.parse_args(argv)


def main(spec: Spec, argv: list[str] | None = None, stream: TextIO | None = None) -> int:
    """Run a spec and report the results.

    Args:
        spec: A fully registered, not yet run Spec.
        argv: Command-line arguments (defaults to ``sys.argv[1:]``).
        stream: Where progress and the report are written (defaults to stdout).

    Returns:
        Exit code: 0 when there are no failures and no errors, 1 otherwise.
    """
    args = parse_args(argv)
    config = RunnerConfig(args.config_file)
    config.set_config(
        verbose=args.verbose,
        name_filter=args.name,
        yaml_output=args.yaml_output,
    )

    name_filter = config.name_filter
    if name_filter is not None:
        try:
            re.compile(name_filter)
        except re.error as e:
            print(f"Error: Invalid name filter '{name_filter}': {e}", file=sys.stderr)
            return EXIT_FAILURE

    reporter = ProgressReporter(stream, verbose=config.verbose)
    reporter.start()
    summary = spec.run(name_filter=name_filter, on_result=reporter.record)
    reporter.finish(summary)

    if config.yaml_output is not None:
        try:
            write_yaml(summary, config.yaml_output)
        except OSError as e:
            print(f"Warning: could not write YAML report: {e}", file=sys.stderr)

    return compute_exit_code(summary)
