"""
CLI (Command Line Interface).

    defenseschedule init-config [--config PATH]
    defenseschedule parse [--config PATH] [--out days.json]
    defenseschedule verify FOLDER --date "26 мая" [--config PATH | --days days.json]

Note:
- All parsing lives in defenseschedule/parse.py, this module only prints
- Errors are reported as one line and exit code 1
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from rich import box
from rich.console import Console
from rich.table import Table

from defenseschedule.config import DEFAULT_CONFIG_PATH, load_config, write_default_config
from defenseschedule.errors import ScheduleError
from defenseschedule.model import DaySchedule
from defenseschedule.parse import parse_schedule
from defenseschedule.storage import load_days, save_days
from defenseschedule.verify import StudentFileVerifier


console = Console()


def _day_table(day: DaySchedule) -> Table:
    """
    One table per day: meeting, number, student, consultant.
    """
    table = Table(title=day.date, box=box.SIMPLE_HEAVY)
    table.add_column("Meeting")
    table.add_column("#", justify="right")
    table.add_column("Student")
    table.add_column("Supervisor")
    table.add_column("Consultant")

    for meeting in day.commission_meetings:
        label = f"{meeting.time_and_auditorium}\n{meeting.meeting_info}"
        for work in meeting.student_works:
            table.add_row(label, str(work.number), work.student_name, work.supervisor, work.consultant or "-")
            label = ""

    return table


def _cmd_init_config(args: argparse.Namespace) -> int:
    """
    Write a configuration template if there is none yet.
    """
    path = Path(args.config)
    if write_default_config(path):
        print(f"Configuration template written to: {path}")
    else:
        print(f"Configuration already exists: {path}")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """
    Parse the schedule, print a summary and optionally save it as JSON.
    """
    config = load_config(args.config)
    days = parse_schedule(config)

    if not days:
        print("No defense meetings found.")
        return 0

    for day in days:
        console.print(_day_table(day))
        console.print("Commission: " + ", ".join(day.commission_members))
        console.print()

    if args.out:
        save_days(days, args.out)
        print(f"Saved {len(days)} days to: {args.out}")
    return 0


def _load_or_parse(args: argparse.Namespace) -> List[DaySchedule]:
    if args.days:
        return load_days(args.days)
    return parse_schedule(load_config(args.config))


def _cmd_verify(args: argparse.Namespace) -> int:
    """
    Check the files of a folder for one day and list works with missing files.
    """
    date = (args.date or "").strip()
    if not date:
        print("Please provide a date.")
        return 1

    days = _load_or_parse(args)
    day = next((d for d in days if d.date == date), None)
    if day is None:
        print(f"No day '{date}' in the schedule. Known days: {', '.join(d.date for d in days)}")
        return 1

    folder = Path(args.folder)
    if not folder.is_dir():
        print(f"Not a folder: {folder}")
        return 1

    verifier = StudentFileVerifier(day)
    files = [p.name for p in folder.iterdir() if p.is_file()]
    missing = verifier.works_with_missing_files(files)

    if not missing:
        print("All files are present.")
        return 0

    print(f"Works with missing files: {len(missing)}")
    for work in missing:
        lacking = [
            label
            for label, present in (
                ("report", work.has_report),
                ("presentation", work.has_presentation),
                ("supervisor review", work.has_supervisor_review),
                ("consultant review", work.has_consultant_review),
                ("reviewer review", work.has_reviewer_review),
            )
            if not present
        ]
        print(f"- {work.student_name}: {', '.join(lacking)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="defenseschedule", description="State exam defense schedule parser")
    sub = parser.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init-config", help="Write a configuration template")
    p_init.add_argument("--config", type=str, default=str(DEFAULT_CONFIG_PATH), help="Configuration file path")

    p_parse = sub.add_parser("parse", help="Parse the schedule and print it")
    p_parse.add_argument("--config", type=str, default=str(DEFAULT_CONFIG_PATH), help="Configuration file path")
    p_parse.add_argument("--out", type=str, default="", help="Save parsed days to this JSON file")

    p_verify = sub.add_parser("verify", help="Check student files of one day")
    p_verify.add_argument("folder", type=str, help="Folder with the students' PDF files")
    p_verify.add_argument("--date", type=str, required=True, help="Day as written in the schedule (e.g. '26 мая')")
    p_verify.add_argument("--config", type=str, default=str(DEFAULT_CONFIG_PATH), help="Configuration file path")
    p_verify.add_argument("--days", type=str, default="", help="Use days saved by 'parse --out' instead of parsing")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "init-config": _cmd_init_config,
        "parse": _cmd_parse,
        "verify": _cmd_verify,
    }

    try:
        raise SystemExit(handlers[args.command](args))
    except ScheduleError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)
