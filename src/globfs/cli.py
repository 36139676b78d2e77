#!/usr/bin/env python3
"""
globfs: glob matching and bulk file operations

Common usage:
  globfs regex '*.{sto,fna}'
  globfs ls 'data/*.sto'
  globfs check 'data/*.sto'
  globfs check --explicit a.txt b.txt
  globfs mv 'data/*.log' archive/
  globfs ls --regex 'data/run-\\d+\\.log'
  globfs mktemp --directory

Quote glob arguments so the shell passes them through unexpanded.
"""

from __future__ import annotations

import argparse
import contextlib
import importlib.metadata
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from globfs.config import GlobfsConfig, find_config_file, load_config, merge_cli_with_config
from globfs.designators import DesignatorResolver
from globfs.errors import GlobfsError, NoSuchFilesError
from globfs.fileops import DEFAULT_TEMP_PREFIX, temp_dir, temp_file
from globfs.glob_compiler import glob_to_regex


@dataclass
class Options:
    """Command-line options for the globfs tool."""

    command: str | None
    args: list[str]
    regex: bool
    explicit: bool
    directory: bool
    verbose: bool
    version: bool
    exclude: list[str] | None
    respect_gitignore: bool | None
    temp_prefix: str | None


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    common.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Gitignore-style pattern for entries to skip when expanding globs "
        "and regexes. Can be repeated",
    )
    common.add_argument(
        "--respect-gitignore",
        action="store_true",
        default=None,
        dest="respect_gitignore",
        help="Also skip entries ignored by the searched directory's .gitignore",
    )
    return common


def _add_designator_options(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--regex",
        action="store_true",
        help="Treat the single argument as 'directory/filename-regex' instead of a glob",
    )
    group.add_argument(
        "--explicit",
        action="store_true",
        help="Treat the arguments as literal paths, even if there is only one",
    )


def _parse_args(args: list[str] | None = None) -> Options:
    """
    Parse command-line arguments. Config-backed options are `None` unless
    given on the command line.
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    common = _common_options()
    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("regex", parents=[common], help="Print the regex a glob compiles to")
    p.add_argument("args", nargs=1, metavar="PATTERN")

    p = sub.add_parser("ls", parents=[common], help="List the files a designator resolves to")
    p.add_argument("args", nargs="+", metavar="DESIGNATOR")
    _add_designator_options(p)

    p = sub.add_parser("check", parents=[common], help="Fail unless all designated files exist")
    p.add_argument("args", nargs="+", metavar="DESIGNATOR")
    _add_designator_options(p)

    p = sub.add_parser("mv", parents=[common], help="Move designated files into a directory")
    p.add_argument(
        "args",
        nargs="+",
        metavar="ARG",
        help="Designator argument(s) followed by the target directory",
    )
    _add_designator_options(p)

    p = sub.add_parser("mktemp", parents=[common], help="Create a temporary file or directory")
    p.add_argument("args", nargs="?", metavar="ROOT", default=None)
    p.add_argument("-d", "--directory", action="store_true", help="Create a directory")
    p.add_argument(
        "--temp-prefix",
        dest="temp_prefix",
        default=None,
        help=f"Name prefix (default: {DEFAULT_TEMP_PREFIX!r})",
    )

    opts = parser.parse_args(args)

    raw_args = getattr(opts, "args", None)
    if raw_args is None:
        raw_args = []
    elif isinstance(raw_args, str):
        raw_args = [raw_args]

    return Options(
        command=opts.command,
        args=list(raw_args),
        regex=getattr(opts, "regex", False),
        explicit=getattr(opts, "explicit", False),
        directory=getattr(opts, "directory", False),
        verbose=getattr(opts, "verbose", False),
        version=opts.version,
        exclude=getattr(opts, "exclude", None),
        respect_gitignore=getattr(opts, "respect_gitignore", None),
        temp_prefix=getattr(opts, "temp_prefix", None),
    )


def _designator(options: Options, values: list[str]) -> Any:
    """Build the designator argument the user described."""
    if options.regex:
        if len(values) != 1:
            raise ValueError("--regex takes exactly one 'directory/regex' argument")
        return re.compile(values[0])
    if options.explicit or len(values) > 1:
        return list(values)
    return values[0]


def _setup_logging(verbose: bool) -> int | None:
    """
    Send globfs debug logs to stderr. Returns the sink id so `main` can
    detach it; sinks the host program installed are left alone.
    """
    if not verbose:
        return None
    # loguru's own default stderr sink (id 0) would print everything twice.
    with contextlib.suppress(ValueError):
        logger.remove(0)
    sink_id = logger.add(sys.stderr, level="DEBUG", format="{level}: {message}", filter="globfs")
    logger.enable("globfs")
    return sink_id


def _run(options: Options, config: GlobfsConfig) -> int:
    resolver = DesignatorResolver(config.to_resolver_config())

    if options.command == "regex":
        print(glob_to_regex(options.args[0]))
        return 0

    if options.command == "ls":
        for path in resolver.resolve(_designator(options, options.args)):
            print(path)
        return 0

    if options.command == "check":
        try:
            resolver.assert_exist(_designator(options, options.args))
        except NoSuchFilesError as e:
            if e.unmatched:
                print(f"Error: nothing matches {e.designator.describe()}", file=sys.stderr)
            else:
                print("Error: no such files:", file=sys.stderr)
                for missing in e.missing:
                    print(f"  {missing}", file=sys.stderr)
            return 1
        return 0

    if options.command == "mv":
        if len(options.args) < 2:
            print(
                "Error: mv requires at least one designator and a target directory",
                file=sys.stderr,
            )
            return 1
        *values, target = options.args
        outcomes = resolver.move_all(_designator(options, values), target)
        failed = 0
        for outcome in outcomes:
            if outcome.ok:
                print(f"{outcome.source} -> {outcome.destination}")
            else:
                failed += 1
                print(
                    f"Error: {outcome.source} -> {outcome.destination}: {outcome.error}",
                    file=sys.stderr,
                )
        return 1 if failed else 0

    if options.command == "mktemp":
        root = options.args[0] if options.args else None
        if options.directory:
            print(temp_dir(root, prefix=config.temp_prefix))
        else:
            print(temp_file(prefix=config.temp_prefix, directory=root))
        return 0

    print("Error: No command given. Use --help for more options.", file=sys.stderr)
    return 1


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the globfs CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("globfs")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    sink_id = _setup_logging(options.verbose)
    try:
        config = GlobfsConfig()
        config_path = find_config_file(Path.cwd())
        if config_path:
            logger.debug(f"Using config {config_path}")
            config = load_config(config_path)
        config = merge_cli_with_config(
            config,
            {
                "exclude": options.exclude,
                "respect_gitignore": options.respect_gitignore,
                "temp_prefix": options.temp_prefix,
            },
        )
        return _run(options, config)
    except (GlobfsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    finally:
        if sink_id is not None:
            logger.remove(sink_id)
            logger.disable("globfs")


if __name__ == "__main__":
    sys.exit(main())
