"""
Command-line interface for the KCSE scoreboard.

Usage:
    kcse-scoreboard subjects
    kcse-scoreboard grade 121 70
    kcse-scoreboard score --mark 101=80 --mark 102=78 --mark 121=70 \\
        --mark 231=66 --mark 232=33 --mark 233=28 --mark 311=88 \\
        --name "Jane Doe" --index 12345678 --pdf scoreboard.pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from kcse_scoreboard.catalog import list_subjects
from kcse_scoreboard.core.models import MarkEntry, StudentInfo
from kcse_scoreboard.errors import GradingError
from kcse_scoreboard.grading import compute_outcome, grade_for
from kcse_scoreboard.output import render_scoreboard_pdf, render_scoreboard_text
from kcse_scoreboard.session import parse_mark

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_GRADE = 1
EXIT_GRADING_ERROR = 2


def _parse_mark_arg(value: str) -> MarkEntry:
    code, sep, raw = value.partition("=")
    if not sep or not code.strip():
        raise argparse.ArgumentTypeError(f"expected CODE=MARK, got {value!r}")
    mark = parse_mark(raw)
    if mark is None:
        raise argparse.ArgumentTypeError(f"mark for {code.strip()} is not a number: {raw!r}")
    return MarkEntry(code=code.strip(), mark=mark)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kcse-scoreboard",
        description="Grade KCSE marks and print a best-seven scoreboard",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("subjects", help="List subject codes and names")

    grade = commands.add_parser("grade", help="Grade one mark")
    grade.add_argument("code", help="Subject code, e.g. 121")
    grade.add_argument("mark", help="Mark out of 100")

    score = commands.add_parser("score", help="Compute the best-seven scoreboard")
    score.add_argument(
        "--mark",
        dest="marks",
        action="append",
        type=_parse_mark_arg,
        required=True,
        metavar="CODE=MARK",
        help="Subject mark, repeat for each subject",
    )
    score.add_argument("--name", default=None, help="Student name")
    score.add_argument("--index", default=None, help="Index number")
    score.add_argument("--points", action="store_true", help="Show marks and points")
    score.add_argument("--pdf", type=Path, default=None, help="Write a printable PDF here")
    return parser


def _cmd_subjects() -> int:
    for subject in list_subjects():
        flag = "  (mandatory)" if subject.mandatory else ""
        print(f"{subject.code}  {subject.name}{flag}")
    return EXIT_OK


def _cmd_grade(code: str, raw_mark: str) -> int:
    result = grade_for(code, parse_mark(raw_mark))
    if result is None:
        print(f"No grade for subject {code} with mark {raw_mark}", file=sys.stderr)
        return EXIT_NO_GRADE
    print(f"{result.grade.value} ({result.points} points)")
    return EXIT_OK


def _cmd_score(args: argparse.Namespace) -> int:
    student = None
    if args.name is not None or args.index is not None:
        student = StudentInfo(args.name or "", args.index or "")
        for issue in student.issues():
            logger.warning(issue)

    try:
        outcome = compute_outcome(args.marks)
    except GradingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_GRADING_ERROR

    print(render_scoreboard_text(outcome, student, show_points=args.points))
    if args.pdf is not None:
        path = render_scoreboard_pdf(outcome, args.pdf, student)
        print(f"\nScoreboard written to {path}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "subjects":
        return _cmd_subjects()
    if args.command == "grade":
        return _cmd_grade(args.code, args.mark)
    return _cmd_score(args)


if __name__ == "__main__":
    raise SystemExit(main())
