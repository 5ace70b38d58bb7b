"""Command-line entry point: summarize, compare, t-test or fit samples."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from typing import List, Optional, Sequence

from . import __version__
from .data_processing import read_pairs, read_sample
from .errors import EmptySampleError
from .plotting.boxplot import comparison_plot, summary_plot
from .plotting.figures import plot_summaries
from .reporting import (
    format_regression,
    format_summary,
    format_t_test,
    save_summaries_csv,
)
from .stats.regression import LinearRegression
from .stats.significance import SigLevel
from .stats.summary import Summary
from .stats.ttest import DEFAULT_ALPHA, welch_t_test

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser."""
    parser = argparse.ArgumentParser(
        prog="dent",
        description=(
            "Summarize numeric samples, compare two samples with Welch's "
            "t-test, or fit a least-squares line."
        ),
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Path to one or more files of sample data, one value per line.",
    )
    parser.add_argument(
        "-s", "--stdin", action="store_true", help="Read and summarize data from stdin."
    )
    parser.add_argument(
        "-a",
        "--alpha",
        default=f"{DEFAULT_ALPHA.alpha:g}",
        help="Significance level α: .001, .005, .01, .025, .05 or .1 (default: .05).",
    )
    parser.add_argument(
        "--lax", action="store_true", help="Ignore non-numeric input lines."
    )
    parser.add_argument(
        "-p", "--plot", action="store_true", help="Print text boxplots."
    )
    parser.add_argument(
        "--ascii", action="store_true", help="Use only ASCII characters in boxplots."
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=None,
        help=f"Width of boxplot (default: terminal width, else {DEFAULT_WIDTH}).",
    )
    parser.add_argument(
        "--regress",
        action="store_true",
        help="Treat each input as 'x y' pairs and fit a least-squares line.",
    )
    parser.add_argument(
        "--csv", metavar="PATH", default=None, help="Also write summaries to a CSV file."
    )
    parser.add_argument(
        "--figure",
        metavar="PATH",
        default=None,
        help="Also save a range plot image (png, pdf or svg).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_width(requested: Optional[int]) -> int:
    if requested is not None:
        return requested
    return shutil.get_terminal_size(fallback=(DEFAULT_WIDTH, 24)).columns or DEFAULT_WIDTH


def _source_label(source: Optional[str]) -> str:
    return "<stdin>" if source is None else source


def _summarize(source: Optional[str], lax: bool) -> Summary:
    try:
        return Summary.from_sample(read_sample(source, lax=lax))
    except EmptySampleError as exc:
        raise EmptySampleError(f"{_source_label(source)}: no numeric data.") from exc


def _run_regression(sources: Sequence[Optional[str]], lax: bool) -> None:
    for i, source in enumerate(sources):
        if i > 0:
            print()
        pairs = read_pairs(source, lax=lax)
        try:
            model = LinearRegression.fit(pairs)
        except ValueError as exc:
            raise type(exc)(f"{_source_label(source)}: {exc}") from exc
        logger.info("Fitted %d pairs from %s", model.size, _source_label(source))
        print(format_regression(model))


def _run_summaries(args: argparse.Namespace, sources: Sequence[Optional[str]]) -> None:
    labels: List[str] = [_source_label(s) for s in sources]
    summaries = [_summarize(source, args.lax) for source in sources]
    logger.info("Summarized %d sample(s)", len(summaries))

    # Fail before printing anything if the comparison cannot be made.
    t_test = None
    if len(summaries) == 2:
        t_test = welch_t_test(summaries[0], summaries[1], SigLevel.parse(args.alpha))

    if args.plot:
        width = _resolve_width(args.width)
        if len(summaries) == 1:
            plot = summary_plot(summaries[0], width, ascii=args.ascii)
        else:
            plot = comparison_plot(summaries, width, ascii=args.ascii, axis=True)
        print(plot + "\n")

    for i, summary in enumerate(summaries):
        if i > 0:
            print()
        print(format_summary(summary))

    if t_test is not None:
        print()
        print(format_t_test(t_test))

    if args.csv:
        path = save_summaries_csv(summaries, args.csv, labels)
        logger.info("Saved summary table to %s", path)
    if args.figure:
        path = plot_summaries(summaries, args.figure, labels)
        logger.info("Saved summary figure to %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint; returns the process exit status."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if args.stdin and args.files:
        parser.error("FILE arguments cannot be combined with --stdin")
    if not args.stdin and not args.files:
        parser.error("at least one FILE is required unless --stdin is given")

    sources: List[Optional[str]] = [None] if args.stdin else list(args.files)
    try:
        if args.regress:
            _run_regression(sources, args.lax)
        else:
            _run_summaries(args, sources)
    except (OSError, ValueError) as exc:
        logger.debug("Aborting", exc_info=True)
        print(f"dent: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
