"""keyloc command line: list or check the input languages of this machine.

Usage:
    keyloc list [--json]
    keyloc check CODE [--json]
    keyloc report [--json]

``check`` exits 0 when the language is supported and 1 when it is not; any
failure of the command machinery exits 2.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from keyloc.capabilities import normalize_language_code
from keyloc.cli.schema import CheckResult, LanguagesResult, ReportResult
from keyloc.errors import KeylocError
from keyloc.logging import StructuredLogger, create_logger
from keyloc.query import check_language, collect_report, get_languages

logger = logging.getLogger("keyloc.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="keyloc", description="Report the languages usable as keyboard input."
    )
    ap.add_argument("--platform", default=None, help="Platform to query (darwin, linux, win32)")
    ap.add_argument("--log-dir", default=None, help="Write a JSONL record of the query here")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log source activity")

    sub = ap.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List supported input languages")
    list_cmd.add_argument("--json", action="store_true")

    check_cmd = sub.add_parser("check", help="Check whether a language is supported")
    check_cmd.add_argument("code", help="Language tag, e.g. en, ko-KR, zh_Hant")
    check_cmd.add_argument("--json", action="store_true")

    report_cmd = sub.add_parser("report", help="Show what every language source returned")
    report_cmd.add_argument("--json", action="store_true")
    return ap


def _cmd_list(args: argparse.Namespace, slog: StructuredLogger) -> int:
    languages = get_languages(platform=args.platform)
    slog.info("query complete", command="list", languages=languages)

    if args.json:
        print(LanguagesResult(languages=languages).model_dump_json())
        return 0

    print("Supported keyboard languages or input sources:")
    for i, language in enumerate(languages, start=1):
        print(f"{i}. {language}")
    return 0


def _cmd_check(args: argparse.Namespace, slog: StructuredLogger) -> int:
    supported = check_language(args.code, platform=args.platform)
    slog.info("query complete", command="check", code=args.code, supported=supported)

    if args.json:
        result = CheckResult(
            code=args.code,
            normalized=normalize_language_code(args.code),
            supported=supported,
        )
        print(result.model_dump_json())
    elif supported:
        print(f"Language '{args.code}' is supported as a keyboard input.")
    else:
        print(f"Language '{args.code}' is not supported as a keyboard input.")
    return 0 if supported else 1


def _cmd_report(args: argparse.Namespace, slog: StructuredLogger) -> int:
    report = collect_report(platform=args.platform)
    slog.info("query complete", command="report", **report.to_dict())

    if args.json:
        print(ReportResult.from_report(report).model_dump_json())
        return 0

    print(f"Platform: {report.platform}")
    for source in report.sources:
        if source.available:
            found = ", ".join(source.languages) or "(none)"
            print(f"  {source.name}: {found}")
        else:
            print(f"  {source.name}: unavailable ({source.error})")
    print(f"Languages: {', '.join(report.languages) or '(none)'}")
    return 0


_COMMANDS = {
    "list": _cmd_list,
    "check": _cmd_check,
    "report": _cmd_report,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    slog = create_logger("cli", log_dir=args.log_dir)
    try:
        return _COMMANDS[args.command](args, slog)
    except KeylocError as e:
        slog.error("query failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2
    finally:
        slog.close()


if __name__ == "__main__":
    raise SystemExit(main())
