# imageset/__main__.py
import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Iterator, List

from imageset.core.errors import BadExpressionError
from imageset.core.image_file import ImageFile
from imageset.core.image_plane import ImagePlane
from imageset.core.string_cache import StringCache
from imageset.filter import Filter
from imageset.select import default_extractor, planes_for, select_candidates
from imageset.utils.logging_config import setup_logging

CANDIDATE_TYPES = {"plane": ImagePlane, "file": ImageFile}


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Select image files or planes with a filter expression "
        "and print their metadata"
    )

    parser.add_argument(
        "expression",
        help='Filter expression, e.g. \'and (file does endwith ".tif") '
        '(series does eq "0")\'',
    )
    parser.add_argument(
        "inputs", nargs="*", help="Image file paths or URLs to consider"
    )
    parser.add_argument(
        "--url-list",
        default=None,
        help="Text file with one path or URL per line",
    )
    parser.add_argument(
        "--candidate",
        choices=sorted(CANDIDATE_TYPES),
        default="plane",
        help="Filter whole files or individual planes",
    )
    parser.add_argument(
        "--series-count",
        type=int,
        default=1,
        help="Number of series per file when filtering planes",
    )
    parser.add_argument(
        "--frame-count",
        type=int,
        default=1,
        help="Number of frames per series when filtering planes",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write tab-separated results here instead of stdout",
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level",
    )
    parser.add_argument("--log-file", default=None, help="Path to the log file")

    return parser


def _validate_arguments(parser: argparse.ArgumentParser, args) -> None:
    """Validate command line arguments."""
    if args.series_count < 1:
        parser.error(f"Series count must be positive (got: {args.series_count})")
    if args.frame_count < 1:
        parser.error(f"Frame count must be positive (got: {args.frame_count})")
    if not args.inputs and args.url_list is None:
        parser.error("Give at least one input or --url-list")
    if args.url_list is not None and not Path(args.url_list).is_file():
        parser.error(f"URL list does not exist: {args.url_list}")
    if not args.expression.strip():
        parser.error("Filter expression cannot be empty")


def _validate_expression(parser: argparse.ArgumentParser, args) -> None:
    """Compile the expression once so syntax errors are reported up front."""
    try:
        Filter(args.expression, CANDIDATE_TYPES[args.candidate])
    except BadExpressionError as e:
        parser.error(f"Invalid filter expression: {e}")


def _read_inputs(args) -> List[str]:
    inputs = list(args.inputs)
    if args.url_list is not None:
        with open(args.url_list, encoding="utf-8") as f:
            inputs.extend(
                line.strip()
                for line in f
                if line.strip() and not line.lstrip().startswith("#")
            )
    return inputs


def _to_image_file(value: str) -> ImageFile:
    if "://" in value:
        return ImageFile(value)
    return ImageFile.from_path(value)


def _iter_candidates(args, inputs: List[str]) -> Iterator:
    for value in inputs:
        image_file = _to_image_file(value)
        if args.candidate == "file":
            yield image_file
        else:
            yield from planes_for(image_file, args.series_count, args.frame_count)


def _write_rows(result, stream) -> None:
    writer = csv.DictWriter(
        stream,
        fieldnames=list(result.metadata_keys),
        delimiter="\t",
        lineterminator="\n",
    )
    writer.writeheader()
    writer.writerows(result.rows)


def main() -> None:
    """Main entry point for the CLI."""
    parser = _create_argument_parser()
    args = parser.parse_args()

    _validate_arguments(parser, args)
    _validate_expression(parser, args)

    setup_logging(log_level=getattr(logging, args.log_level), log_file=args.log_file)

    inputs = _read_inputs(args)
    candidate_type = CANDIDATE_TYPES[args.candidate]
    string_cache = StringCache()
    candidates = list(_iter_candidates(args, inputs))

    result = select_candidates(
        args.expression,
        candidates,
        extractor=default_extractor(candidate_type, string_cache),
        candidate_type=candidate_type,
        show_progress=not args.no_progress,
    )

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            _write_rows(result, f)
        logging.getLogger("imageset").info(
            f"Wrote {result.n_selected} rows to {args.output}"
        )
    else:
        _write_rows(result, sys.stdout)


if __name__ == "__main__":
    main()
