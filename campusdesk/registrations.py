"""Menu pages for assigning teachers to courses and enrolling students."""

from __future__ import annotations

from campusdesk.console import Console
from campusdesk.models import CourseRegistration, StudentRegistration
from campusdesk.portal import Portal, RecordNotFoundError
from campusdesk.records import _add, _delete, _run_menu, _show_all, _table, _update

_WIDTH = 86


def _banner(heading: str, noun: str) -> str:
    lines = [
        f"{heading} REGISTRATION PAGE",
        "SELECT AN OPTION",
        f"SELECT 1 TO DISPLAY {noun} REGISTRATION",
        f"SELECT 2 ADD IN {noun} REGISTRATION",
        f"SELECT 3 TO DELETE A {noun} REGISTRATION",
        f"SELECT 4 TO UPDATE A {noun} REGISTRATION",
        "SELECT 0 TO RETURN TO MAIN PAGE",
    ]
    rule = " " + "-" * (_WIDTH + 2)
    body = [f"| {f' {line} '.center(_WIDTH, '*')} |" for line in lines]
    return "\n".join([rule, *body, rule]) + "\n"


_COURSE_REGISTRATION_MENU = _banner("COURSE", "COURSE")
_STUDENT_REGISTRATION_MENU = _banner("STUDENT", "STUDENT")

_MISSING_LINKS = "The registered records could not be found.\n"


def format_course_registration(position: int, registration: CourseRegistration) -> str:
    """Render one course registration as a table entry numbered by position."""
    return _table(
        "COURSE REGISTRATION TABLE",
        position,
        [
            ("Teacher Id", registration.teacher_id),
            ("Course Id", registration.course_id),
        ],
    )


def format_student_registration(position: int, registration: StudentRegistration) -> str:
    """Render one student registration as a table entry numbered by position."""
    return _table(
        "STUDENT REGISTRATION TABLE",
        position,
        [
            ("Course Registration Id", registration.course_reg_id),
            ("Student Id", registration.student_id),
        ],
    )


def _read_course_registration(console: Console) -> CourseRegistration:
    return CourseRegistration(
        teacher_id=console.read_int("Enter Teacher Id: \n"),
        course_id=console.read_int("Enter The Course Id: "),
    )


def _read_student_registration(console: Console) -> StudentRegistration:
    return StudentRegistration(
        student_id=console.read_int("Enter Student Id: \n"),
        course_reg_id=console.read_int("Enter The Course Registration Id: "),
    )


def _store_course_registration(
    portal: Portal, console: Console, position: int, registration: CourseRegistration
) -> None:
    portal.update_course_registration(position, registration)
    try:
        course, teacher = portal.course_registration_details(position - 1)
    except RecordNotFoundError:
        console.write(_MISSING_LINKS)
        return
    console.write(f"Course Details: {course.course_name}\n")
    console.write(f"Teacher assigned is: {teacher.name}\n")


def _store_student_registration(
    portal: Portal, console: Console, position: int, registration: StudentRegistration
) -> None:
    portal.update_student_registration(position, registration)
    try:
        student, course, teacher = portal.student_registration_details(position - 1)
    except RecordNotFoundError:
        console.write(_MISSING_LINKS)
        return
    console.write(f"Course Details are: {student.name}\n")
    console.write(f"The course registered is: {course.course_name}\n")
    console.write(f"The teacher assigned is: {teacher.name}\n")


def course_registration_page(portal: Portal, console: Console) -> None:
    """Run the course registration menu until the user returns to the main page."""
    _run_menu(
        console,
        _COURSE_REGISTRATION_MENU,
        {
            1: lambda: _show_all(
                console,
                portal.course_registrations,
                format_course_registration,
                "No Course Registration Found",
            ),
            2: lambda: _add(
                console,
                "Enter the Details of the Course Registration to Add:\n",
                lambda: _read_course_registration(console),
                portal.add_course_registration,
                " COURSE REGISTRATION ADDED SUCCESSFULLY.\n",
            ),
            3: lambda: _delete(
                console,
                prompt="Enter The Index Of The Course Registration To Delete:  \n",
                count=lambda: len(portal.course_registrations),
                remove=portal.delete_course_registration,
                done="Course Registration Has Been Deleted Successfully.\n",
                missing="Course Registration not Found.\n",
            ),
            4: lambda: _update(
                console,
                prompt="Enter the index of the Course Registration to update: \n",
                count=lambda: len(portal.course_registrations),
                header="Enter the updated Course Registration Information: \n",
                read=lambda: _read_course_registration(console),
                store=lambda position, record: _store_course_registration(
                    portal, console, position, record
                ),
                done="Course Registration updated successfully.\n",
                missing="Course Registration not found.\n",
            ),
        },
    )


def student_registration_page(portal: Portal, console: Console) -> None:
    """Run the student registration menu until the user returns to the main page."""
    _run_menu(
        console,
        _STUDENT_REGISTRATION_MENU,
        {
            1: lambda: _show_all(
                console,
                portal.student_registrations,
                format_student_registration,
                "No Student Registration Found",
            ),
            2: lambda: _add(
                console,
                "Enter the Details of the Student Registration to Add:\n",
                lambda: _read_student_registration(console),
                portal.add_student_registration,
                " STUDENT REGISTRATION ADDED SUCCESSFULLY.\n",
            ),
            3: lambda: _delete(
                console,
                prompt="Enter The Index Of The Student Registration To Delete:  \n",
                count=lambda: len(portal.student_registrations),
                remove=portal.delete_student_registration,
                done="Student Registration Has Been Deleted Successfully.\n",
                missing="Student Registration not Found.\n",
            ),
            4: lambda: _update(
                console,
                prompt="Enter the index of the Student Registration to update: \n",
                count=lambda: len(portal.student_registrations),
                header="Enter the updated Student Registration Information: \n",
                read=lambda: _read_student_registration(console),
                store=lambda position, record: _store_student_registration(
                    portal, console, position, record
                ),
                done="Student Registration updated successfully.\n",
                missing="Student Registration not found.\n",
            ),
        },
    )