#!/usr/bin/env python3
"""
env-guard: detect variables declared in .env.example but missing from .env,
and optionally fill them in interactively.
"""
import argparse
import logging
import os
import sys

from .checker import run_check
from .config_loader import TRIGGERS, dump_settings, load_settings
from .hooks import install_hook
from .output import (VERSION, check_response, missing_summary, print_check_report,
                     skipped_response, to_json)
from .wizard import run_input_wizard

logger = logging.getLogger("env_guard")


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser():
    parser = argparse.ArgumentParser(prog="env-guard",
        description="env-guard: find variables from the template env file that are missing in the actual env file")

    parser.add_argument("--root", "-r", default=".", help="workspace root containing the env files")
    parser.add_argument("--template", "-t", default=None, help="template file name (default from config: .env.example)")
    parser.add_argument("--env", "-e", default=None, help="env file name (default from config: .env)")
    parser.add_argument("--ignore", "-i", action="append", metavar="REGEX",
                        help="ignore keys matching REGEX (repeatable, unanchored search)")
    parser.add_argument("--json", action="store_true", help="Output results in JSON format for CI/CD.")
    parser.add_argument("--quiet", action="store_true", help="suppress OK output, only show problems")
    parser.add_argument("--verbose", action="store_true", help="verbose output for debugging")
    parser.add_argument("--version", action="store_true", help="print version")

    subparsers = parser.add_subparsers(dest="command")

    check_cmd = subparsers.add_parser("check", help="Report missing variables")
    check_cmd.add_argument("--trigger", choices=TRIGGERS, default="manual",
                           help="what caused this run; skipped if disabled in config")
    check_cmd.add_argument("--add", action="store_true", help="prompt for missing values right away")
    check_cmd.add_argument("--ask", action="store_true", help="ask whether to add missing values")

    subparsers.add_parser("add-missing", help="Prompt for every missing variable and append it to the env file")
    subparsers.add_parser("config", help="Print effective settings")

    hook_cmd = subparsers.add_parser("install-hook", help="Install git post-checkout hook (check on branch switch)")
    hook_cmd.add_argument("--overwrite", action="store_true", help="overwrite existing hook")
    return parser


def confirm(question: str) -> bool:
    try:
        answer = input(f"{question} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def add_missing(root, settings, result, color):
    run_input_wizard(result.missing, result.env_path)
    # re-check after appending
    result = run_check(root, settings)
    if result is None:
        return 0
    print_check_report(result, color=color)
    return 1 if result.missing else 0


def cmd_check(args, settings, color):
    if not settings.should_run(args.trigger):
        logger.info(f"Check on '{args.trigger}' disabled in config")
        return 0

    result = run_check(args.root, settings)
    if result is None:
        if args.json:
            print(to_json(skipped_response(settings.template_file), pretty=True))
        elif not args.quiet:
            print(f"Template file not found: {settings.template_file} (nothing to check)")
        return 0

    if args.json:
        print(to_json(check_response(result), pretty=True))
        return 1 if result.missing else 0

    print_check_report(result, quiet=args.quiet, color=color)
    if result.ok:
        return 0

    if args.add or (args.ask and confirm("Add now?")):
        print()
        return add_missing(args.root, settings, result, color)
    return 1


def cmd_add_missing(args, settings, color):
    result = run_check(args.root, settings)
    if result is None:
        print(f"Template file not found: {settings.template_file} (nothing to check)")
        return 0
    if result.ok:
        print("No missing variables found.")
        return 0

    print(missing_summary(result.missing))
    return add_missing(args.root, settings, result, color)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"env-guard {VERSION}")
        return 0

    setup_logging(args.verbose)

    if not os.path.isdir(args.root):
        print(f"ERROR: Root directory not found: {args.root}", file=sys.stderr)
        return 2

    settings = load_settings(args.root).with_overrides(
        template_file=args.template,
        env_file=args.env,
        ignore_patterns=args.ignore,
    )
    color = sys.stdout.isatty() and not args.json

    try:
        if args.command == "config":
            print(dump_settings(settings), end="")
            return 0

        if args.command == "install-hook":
            path = install_hook(args.root, overwrite=args.overwrite)
            print("✔ post-checkout hook written to", path)
            return 0

        if args.command == "add-missing":
            return cmd_add_missing(args, settings, color)

        # default command
        if args.command is None:
            args.trigger, args.add, args.ask = "manual", False, False
        return cmd_check(args, settings, color)
    except FileExistsError as e:
        print(f"ERROR: Hook already exists (use --overwrite): {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
