"""Command line entry point."""

import argparse
import sys
from typing import Optional

from pydantic import ValidationError

from captionsync import __version__
from captionsync.config import Settings, get_settings, validate_language_code
from captionsync.core import (
    associate_caption,
    generate_caption_candidates,
    get_caption_language,
    get_caption_path,
    merge_caption_language,
    parse_captions,
    read_captions,
    reconcile_languages,
)
from captionsync.utils import get_logger, setup_logging
from captionsync.utils.constants import ExitCode
from captionsync.utils.language_codes import get_language_name
from captionsync.utils.path_utils import check_file_permissions

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="captionsync",
        description="Locate, detect and reconcile caption files next to media items",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    path_cmd = subparsers.add_parser("path", help="Print caption paths for a media file")
    path_cmd.add_argument("media", help="Media file path")
    path_cmd.add_argument("lang", help="Language code (empty or 00 for none)")
    path_cmd.add_argument("--ext", action="append", help="Caption extension (repeatable)")

    detect_cmd = subparsers.add_parser("detect", help="Print the language of a caption file")
    detect_cmd.add_argument("caption", help="Caption file path")

    cand_cmd = subparsers.add_parser("candidates", help="Print sibling caption candidates")
    cand_cmd.add_argument("caption", help="Caption file path")
    cand_cmd.add_argument("--ext", action="append", help="Candidate extension (repeatable)")

    rec_cmd = subparsers.add_parser("reconcile", help="Drop languages without a caption file")
    rec_cmd.add_argument("media", help="Media file path")
    rec_cmd.add_argument("captions", help="Caption set, e.g. 'en|fr'")
    rec_cmd.add_argument(
        "--check", action="store_true", help="Exit with status 2 when the set changed"
    )

    add_cmd = subparsers.add_parser("add", help="Add a language to a caption set")
    add_cmd.add_argument("captions", help="Caption set, e.g. 'en|fr'")
    add_cmd.add_argument("lang", help="Language code to add")

    assoc_cmd = subparsers.add_parser("associate", help="Find the media file of a caption")
    assoc_cmd.add_argument("caption", help="Caption file path")

    info_cmd = subparsers.add_parser("info", help="Load a caption file and print a summary")
    info_cmd.add_argument("caption", help="Caption file path")

    return parser


def _cmd_path(args: argparse.Namespace, settings: Settings) -> int:
    for ext in args.ext or settings.caption_extensions_list:
        print(get_caption_path(args.media, args.lang, ext))
    return ExitCode.OK


def _cmd_detect(args: argparse.Namespace, settings: Settings) -> int:
    lang = get_caption_language(args.caption)
    name = get_language_name(lang)
    print(f"{lang}\t{name}" if name else lang)
    return ExitCode.OK


def _cmd_candidates(args: argparse.Namespace, settings: Settings) -> int:
    for candidate in generate_caption_candidates(
        args.caption, args.ext or settings.caption_extensions_list
    ):
        print(candidate)
    return ExitCode.OK


def _cmd_reconcile(args: argparse.Namespace, settings: Settings) -> int:
    result = reconcile_languages(
        args.media,
        parse_captions(args.captions),
        exts=settings.caption_extensions_list,
    )
    print(result.captions)

    if result.dropped:
        logger.info(f"Removed: {', '.join(result.dropped)}")

    if args.check and result.changed:
        return ExitCode.CHANGED
    return ExitCode.OK


def _cmd_add(args: argparse.Namespace, settings: Settings) -> int:
    lang = validate_language_code(args.lang)
    print(merge_caption_language(lang, args.captions))
    return ExitCode.OK


def _cmd_associate(args: argparse.Namespace, settings: Settings) -> int:
    association = associate_caption(args.caption, settings.media_extensions_list)
    if association is None:
        logger.warning(f"No media file found for {args.caption}")
        return ExitCode.ERROR

    print(f"{association.media_path}\t{association.language}")
    return ExitCode.OK


def _cmd_info(args: argparse.Namespace, settings: Settings) -> int:
    permissions = check_file_permissions(args.caption)
    if permissions["exists"] and not permissions["readable"]:
        logger.warning(f"Caption file is not readable: {args.caption}")

    subs = read_captions(args.caption, encoding=settings.caption_encoding)
    print(f"format: {subs.format}")
    print(f"events: {len(subs.events)}")
    print(f"language: {get_caption_language(args.caption)}")
    return ExitCode.OK


COMMANDS = {
    "path": _cmd_path,
    "detect": _cmd_detect,
    "candidates": _cmd_candidates,
    "reconcile": _cmd_reconcile,
    "add": _cmd_add,
    "associate": _cmd_associate,
    "info": _cmd_info,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return ExitCode.ERROR

    setup_logging(
        level=settings.log_level,
        use_colors=settings.log_use_colors,
        json_format=settings.log_json_format,
        log_file=settings.log_file,
    )

    try:
        return COMMANDS[args.command](args, settings)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
    except ValueError as e:
        logger.error(str(e))
    except Exception as e:
        logger.error(f"{args.command} failed: {e}")
    return ExitCode.ERROR


if __name__ == "__main__":
    sys.exit(main())
