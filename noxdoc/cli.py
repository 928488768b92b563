"""CLI entrypoint for noxdoc."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path

from . import __version__
from .config import OUTPUT_FORMATS, ConfigError, load_config
from .discovery import discover_sources
from .logging import configure_logging, get_logger
from .parser import ReadError, parse_files
from .render import render, write_output


def _package_version() -> str:
    try:
        return metadata.version("noxdoc")
    except metadata.PackageNotFoundError:
        return __version__


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noxdoc",
        usage="noxdoc [OPTIONS] [FILES]",
        description="Extract documentation from /** ... */ comment blocks.",
    )
    parser.add_argument(
        "sources",
        nargs="*",
        metavar="FILES",
        help="Files or directories to document; comma-separated lists are accepted "
        "(defaults to the configured sources, then 'lib').",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Directory where the documentation is written (prints to stdout when unset).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: json).",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=".",
        help="Path to .noxdoc.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--ext",
        action="append",
        metavar="EXTENSION",
        help="File extension to include when scanning directories; repeatable (default: .js).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of files parsed concurrently.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write debug logs to this file.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for noxdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file)
    logger = get_logger("cli")

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be a positive integer")

    try:
        config = load_config(Path(args.config)).merged(
            sources=args.sources or None,
            output_dir=args.output_dir,
            format=args.format,
            extensions=args.ext,
            workers=args.workers,
        )
    except ConfigError as exc:
        parser.exit(1, f"noxdoc: {exc}\n")

    try:
        paths = discover_sources(
            config.sources,
            root=config.root,
            extensions=config.extensions,
            exclude_paths=config.exclude_paths,
        )
    except FileNotFoundError as exc:
        parser.exit(1, f"noxdoc: {exc}\n")
    logger.info("Parsing %d source file(s)", len(paths))

    try:
        results = parse_files(paths, max_workers=config.workers)
    except ReadError as exc:
        logger.error("Error reading the source files")
        parser.exit(1, f"noxdoc: {exc}\n")

    if config.output_dir is None:
        sys.stdout.write(render(results, config.format, root=config.root))
        if config.format == "json":
            sys.stdout.write("\n")
        return

    target = write_output(results, config.output_dir, config.format, root=config.root)
    print(f"Documentation written to {_relativize(target)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
