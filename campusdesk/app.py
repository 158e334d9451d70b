"""Main menu of the campus records desk and its command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from campusdesk.console import Console, InputClosed
from campusdesk.portal import Portal
from campusdesk.records import INVALID_OPTION, course_page, student_page, teacher_page
from campusdesk.registrations import course_registration_page, student_registration_page

EXIT_MESSAGE = "--------------------- EXITING PROGRAM ---------------------\n"
EXIT_CHOICE = -1

_WIDTH = 84


def _main_banner() -> str:
    lines = [
        "WELCOME TO MAIN PAGE",
        "SELECT YOUR CHOICE",
        "PRESS 1 TO ACCESS STUDENT PAGE",
        "PRESS 2 TO ACCESS TEACHER PAGE",
        "PRESS 3 TO ACCESS COURSE PAGE",
        "PRESS 4 FOR COURSE REGISTRATION",
        "PRESS 5 FOR STUDENT REGISTRATION",
        "PRESS -1 TO EXIT THE PROGRAM",
    ]
    rule = " " + "-" * (_WIDTH + 2)
    body = [f"| {f' {line} '.center(_WIDTH, '*')} |" for line in lines]
    return "\n".join([rule, *body, rule]) + "\n"


_MAIN_MENU = _main_banner()

_PAGES: dict[int, Callable[[Portal, Console], None]] = {
    1: student_page,
    2: teacher_page,
    3: course_page,
    4: course_registration_page,
    5: student_registration_page,
}


def main_page(portal: Portal, console: Console) -> None:
    """Run the main menu until the user chooses to exit."""
    while True:
        console.write(_MAIN_MENU)
        try:
            choice = console.read_int()
        except ValueError:
            console.write(INVALID_OPTION)
            continue
        if choice == EXIT_CHOICE:
            console.write(EXIT_MESSAGE)
            return
        page = _PAGES.get(choice)
        if page is None:
            console.write(INVALID_OPTION)
            continue
        page(portal, console)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive records desk on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="campusdesk",
        description="Keep student, teacher, course and registration records.",
    )
    parser.parse_args(argv)
    console = Console()
    try:
        main_page(Portal(), console)
    except (InputClosed, KeyboardInterrupt):
        console.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())