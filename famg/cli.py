"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from famg.config import Config
from famg.flow import FlowStopped, main_flow

DEFAULT_TEMPLATES_DIR = "pkg/flow/templates"


def build_parser():
    """Return the argument parser for the ``famg`` command."""
    parser = argparse.ArgumentParser(
        prog="famg",
        description="FAMG - File and Git Management Tool",
    )
    parser.add_argument("--config-file", default="", help="Path to the config file")
    parser.add_argument(
        "--parent-path", default="", help="Parent path for the new folder"
    )
    parser.add_argument("--name", default="", help="Name of the folder to be created")
    parser.add_argument(
        "--fullname",
        dest="full_name",
        default="",
        help="Full name of the folder to be created",
    )
    parser.add_argument(
        "--templates-dir",
        default=DEFAULT_TEMPLATES_DIR,
        help="Directory holding the file templates",
    )
    return parser


def main(argv=None):
    """Run the command; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    if args.config_file:
        parser.error(
            "--config-file is not supported; use --parent-path, --name and --fullname"
        )

    if args.parent_path and args.name and args.full_name:
        config = Config.from_parent(args.parent_path, args.name, args.full_name)
        try:
            main_flow(config, args.templates_dir)
        except FlowStopped as exc:
            print(exc)
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())