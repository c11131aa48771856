"""
Command line interface for the structural diary.

Commands:
    generate   Pick random questions and print or write them
    sections   Show how a questions file is split into sections
    settings   Show, change or reset stored preferences
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from structural_diary import __version__
from structural_diary.builder import (
    DiaryError,
    SelectionMode,
    generate_from_settings,
    partition,
    write_result,
)
from structural_diary.builder.selection import make_random
from structural_diary.common import load_question_source
from structural_diary.settings import SETTING_KEYS, DiarySettings, SettingsStore
from structural_diary.utils.logging_utils import configure_logging
from structural_diary.utils.paths import get_settings_path

logger = logging.getLogger(__name__)


def _open_store(args: argparse.Namespace) -> SettingsStore:
    path = Path(args.settings) if args.settings else get_settings_path()
    return SettingsStore(path)


def apply_overrides(args: argparse.Namespace, settings: DiarySettings) -> DiarySettings:
    """Settings for one run: stored values with command line options on top."""
    overrides = {}
    if args.file is not None:
        overrides["questions_file"] = args.file
    if args.mode:
        overrides["use_advanced_template"] = SelectionMode.parse(args.mode) is SelectionMode.TEMPLATE
    if args.count is not None:
        overrides["global_number_of_questions"] = args.count
    if args.template is not None:
        overrides["questions_template"] = args.template
    if args.headers is not None:
        overrides["show_headers"] = args.headers
    return replace(settings, **overrides)


def cmd_generate(args: argparse.Namespace) -> int:
    settings = apply_overrides(args, _open_store(args).get_settings())
    result = generate_from_settings(settings, make_random(args.seed))

    if args.output is None and not args.new_file:
        print(result.text)
        return 0

    try:
        write_result(result, target=args.output, directory=args.directory)
    except DiaryError as e:
        logger.error(str(e))
        return 1
    return 0


def cmd_sections(args: argparse.Namespace) -> int:
    source = args.file
    if source is None:
        source = _open_store(args).get_settings().questions_file
    sections = partition(load_question_source(source))

    for index, section in enumerate(sections, start=1):
        header = section.header or "(no heading)"
        print(f"{index:>3}  {section.line_count:>3}  {header}")
    return 0


def cmd_settings(args: argparse.Namespace) -> int:
    store = _open_store(args)

    if args.action == "set":
        try:
            store.update(**{args.key: args.value})
        except (KeyError, ValueError) as e:
            logger.error(str(e.args[0]) if e.args else str(e))
            return 2
    elif args.action == "reset":
        store.reset()

    for key, value in store.get_settings().to_dict().items():
        print(f"{key} = {'' if value is None else value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structural-diary",
        description="Pick random reflective questions from a sectioned Markdown file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--settings", help="Settings file (default: per-user config dir)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only show warnings and errors")

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Pick random questions")
    generate.add_argument("--file", "-f", help="Questions file (default: stored setting or built-in questions)")
    generate.add_argument("--mode", "-m", choices=[m.value for m in SelectionMode], help="Selection mode")
    generate.add_argument("--count", "-n", type=int, help="Number of questions in global mode")
    generate.add_argument("--template", "-t", help='Per-section quotas, e.g. "1-3;2-2"')
    generate.add_argument(
        "--headers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit section headings in template mode",
    )
    generate.add_argument("--seed", type=int, help="Seed for reproducible picks")
    generate.add_argument("--output", "-o", type=Path, help="Insert into this Markdown note")
    generate.add_argument("--new-file", action="store_true", help="Create a dated Markdown note")
    generate.add_argument("--directory", "-d", type=Path, help="Directory for new notes (default: cwd)")
    generate.set_defaults(func=cmd_generate)

    sections = subparsers.add_parser("sections", help="Show how a file splits into sections")
    sections.add_argument("--file", "-f", help="Questions file (default: stored setting or built-in questions)")
    sections.set_defaults(func=cmd_sections)

    settings = subparsers.add_parser("settings", help="Show or change stored preferences")
    settings_actions = settings.add_subparsers(dest="action")
    settings_actions.add_parser("show", help="Print stored settings")
    setter = settings_actions.add_parser("set", help="Change one setting")
    setter.add_argument("key", choices=SETTING_KEYS)
    setter.add_argument("value")
    settings_actions.add_parser("reset", help="Restore defaults")
    settings.set_defaults(func=cmd_settings, action="show")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    if getattr(args, "count", None) is not None and args.count < 0:
        parser.error(f"--count must be non-negative: {args.count}")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
