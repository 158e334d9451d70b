"""Menu pages that list, add, delete and update students, teachers and courses."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from campusdesk.console import Console
from campusdesk.models import Course, Student, Teacher
from campusdesk.portal import CapacityError, Portal

INVALID_OPTION = (
    "-------- YOU HAVE ENTERED AN INVALID OPTION -------------\n"
    "-------- ENTER A VALID OPTION --------\n"
)
INVALID_INDEX = "Invalid input. Please enter a valid index.\n"
INVALID_NUMBER = "Invalid input. Please enter a valid number.\n"

_WIDTH = 86


def _banner(heading: str, noun: str) -> str:
    lines = [
        f"{heading} RECORD PAGE",
        "SELECT AN OPTION",
        f"SELECT 1 TO DISPLAY {noun} RECORD",
        f"SELECT 2 TO ADD IN {noun} RECORD",
        f"SELECT 3 TO DELETE FROM {noun} RECORD",
        f"SELECT 4 TO UPDATE {noun} RECORD",
        "SELECT 0 TO RETURN TO MAIN PAGE",
    ]
    rule = " " + "-" * (_WIDTH + 2)
    body = [f"| {f' {line} '.center(_WIDTH, '*')} |" for line in lines]
    return "\n".join([rule, *body, rule]) + "\n"


def _table(title: str, position: int, rows: Sequence[tuple[str, Any]]) -> str:
    (first_label, first_value), *rest = rows
    lines = [
        f"--------------- {title} --------------",
        f"{position:<4}{first_label}: {first_value}",
        *(f"    {label}: {value}" for label, value in rest),
        "-" * 52,
    ]
    return "\n".join(lines) + "\n"


def format_student(position: int, student: Student) -> str:
    """Render one student as a table entry numbered by position."""
    return _table(
        "STUDENT RECORD TABLE",
        position,
        [
            ("Student Name", student.name),
            ("Student Roll Number", student.roll_no),
            ("Student Gender", student.gender),
            ("Student Age", student.age),
            ("Current Semester", student.semester),
            ("Student GPA", f"{student.gpa:g}"),
            ("Student Phone-Number", student.phone_number),
            ("Student Address", student.address),
            ("Student Email", student.email),
            ("Student Specialization", student.specialization),
        ],
    )


def format_teacher(position: int, teacher: Teacher) -> str:
    """Render one teacher as a table entry numbered by position."""
    return _table(
        "TEACHER RECORD TABLE",
        position,
        [
            ("Teacher Name", teacher.name),
            ("Teacher Gender", teacher.gender),
            ("Teacher ID", teacher.id),
            ("Teacher Age", teacher.age),
            ("Teacher Phone-Number", teacher.phone_number),
            ("Teacher Address", teacher.address),
            ("Teacher Email", teacher.email),
            ("Teacher Specialization", teacher.specialization),
        ],
    )


def format_course(position: int, course: Course) -> str:
    """Render one course as a table entry numbered by position."""
    return _table(
        "COURSE RECORD TABLE",
        position,
        [
            ("Course Code", course.code),
            ("Course Name", course.course_name),
            ("Credit Hours", course.credit_hours),
            ("Department", course.department),
        ],
    )


def _run_menu(console: Console, banner: str, actions: dict[int, Callable[[], None]]) -> None:
    while True:
        console.write(banner)
        try:
            option = console.read_int()
        except ValueError:
            option = None
        if option == 0:
            return
        action = actions.get(option) if option is not None else None
        if action is None:
            console.write(INVALID_OPTION)
            continue
        action()


def _show_all(
    console: Console,
    records: Iterable[Any],
    formatter: Callable[[int, Any], str],
    empty: str,
) -> None:
    entries = [formatter(position, record) for position, record in enumerate(records, 1)]
    if not entries:
        console.write(f"---------------- {empty} ----------------- \n")
        return
    console.write("".join(entries))


def _read_index(console: Console, prompt: str) -> int | None:
    try:
        return console.read_int(prompt)
    except ValueError:
        console.write(INVALID_INDEX)
        return None


def _add(
    console: Console,
    header: str,
    read: Callable[[], Any],
    store: Callable[[Any], None],
    done: str,
) -> None:
    console.write(header)
    try:
        record = read()
    except ValueError:
        console.write(INVALID_NUMBER)
        return
    try:
        store(record)
    except CapacityError as err:
        console.write(f"{err}\n")
        return
    console.write(done)


def _delete(
    console: Console,
    *,
    prompt: str,
    count: Callable[[], int],
    remove: Callable[[int], None],
    done: str,
    missing: str,
    retry: bool = False,
) -> None:
    while True:
        index = _read_index(console, prompt)
        if index is None:
            return
        if 0 <= index < count():
            remove(index)
            console.write(done)
            return
        console.write(missing)
        if not retry:
            return


def _update(
    console: Console,
    *,
    prompt: str,
    count: Callable[[], int],
    header: str,
    read: Callable[[], Any],
    store: Callable[[int, Any], None],
    done: str,
    missing: str,
) -> None:
    position = _read_index(console, prompt)
    if position is None:
        return
    if not 1 <= position <= count():
        console.write(missing)
        return
    console.write(header)
    try:
        record = read()
    except ValueError:
        console.write(INVALID_NUMBER)
        return
    store(position, record)
    console.write(done)


def _read_student(console: Console, prompt: Callable[[str], str]) -> Student:
    return Student(
        name=console.read_word(prompt("Name")),
        roll_no=console.read_int(prompt("Roll Number")),
        age=console.read_int(prompt("Age")),
        gender=console.read_word(prompt("Gender")),
        semester=console.read_int(prompt("Semester")),
        gpa=console.read_float(prompt("Gpa")),
        phone_number=console.read_word(prompt("Phone number")),
        address=console.read_line(prompt("Address")),
        email=console.read_line(prompt("Email")),
        specialization=console.read_word(prompt("Specialization")),
    )


def _read_teacher(console: Console, prompt: Callable[[str], str]) -> Teacher:
    return Teacher(
        name=console.read_word(prompt("Name")),
        gender=console.read_word(prompt("Gender")),
        id=console.read_int(prompt("ID")),
        age=console.read_int(prompt("Age")),
        phone_number=console.read_word(prompt("Phone number")),
        address=console.read_line(prompt("Address")),
        email=console.read_line(prompt("Email")),
        specialization=console.read_word(prompt("Specialization")),
    )


def _read_course(console: Console, prompts: Sequence[str]) -> Course:
    code_prompt, name_prompt, hours_prompt, department_prompt = prompts
    return Course(
        code=console.read_int(code_prompt),
        course_name=console.read_word(name_prompt),
        credit_hours=console.read_int(hours_prompt),
        department=console.read_word(department_prompt),
    )


def _plain_prompt(label: str) -> str:
    return f"{label}: "


_STUDENT_MENU = _banner("STUDENT", "STUDENT")
_TEACHER_MENU = _banner("TEACHER", "TEACHER")
_COURSE_MENU = _banner("COURSE", "COURSE")


def student_page(portal: Portal, console: Console) -> None:
    """Run the student record menu until the user returns to the main page."""
    _run_menu(
        console,
        _STUDENT_MENU,
        {
            1: lambda: _show_all(console, portal.students, format_student, "No Student Found"),
            2: lambda: _add(
                console,
                "Enter the Details of the Student to Add:\n",
                lambda: _read_student(console, lambda label: f"Enter The {label} of Student: "),
                portal.add_student,
                "STUDENT ADDED SUCCESSFULLY.\n",
            ),
            3: lambda: _delete(
                console,
                prompt="Enter The Index Of The Student To Delete:  \n",
                count=lambda: len(portal.students),
                remove=portal.delete_student,
                done="Student Has Been Deleted Successfully.\n",
                missing="Student not Found.\n",
                retry=True,
            ),
            4: lambda: _update(
                console,
                prompt="Enter the index of the student to update: \n",
                count=lambda: len(portal.students),
                header="Enter the updated student information: \n",
                read=lambda: _read_student(console, _plain_prompt),
                store=portal.update_student,
                done="STUDENT UPDATED SUCCESSFULLY.\n",
                missing="STUDENT NOT FOUND.\n",
            ),
        },
    )


def teacher_page(portal: Portal, console: Console) -> None:
    """Run the teacher record menu until the user returns to the main page."""
    _run_menu(
        console,
        _TEACHER_MENU,
        {
            1: lambda: _show_all(console, portal.teachers, format_teacher, "No Teacher Found"),
            2: lambda: _add(
                console,
                "Enter the Details of the Teacher to Add:\n",
                lambda: _read_teacher(console, lambda label: f"Enter The {label} of Teacher: "),
                portal.add_teacher,
                "TEACHER ADDED SUCCESSFULLY.\n",
            ),
            3: lambda: _delete(
                console,
                prompt="Enter The Index Of The Teacher To Delete:  \n",
                count=lambda: len(portal.teachers),
                remove=portal.delete_teacher,
                done="Teacher Has Been Deleted Successfully.\n",
                missing="Teacher not Found.\n",
            ),
            4: lambda: _update(
                console,
                prompt="Enter the index of the Teacher to update: \n",
                count=lambda: len(portal.teachers),
                header="Enter the updated Teacher Information: \n",
                read=lambda: _read_teacher(console, _plain_prompt),
                store=portal.update_teacher,
                done="Teacher updated successfully.\n",
                missing="Teacher not found.\n",
            ),
        },
    )


def course_page(portal: Portal, console: Console) -> None:
    """Run the course record menu until the user returns to the main page."""
    _run_menu(
        console,
        _COURSE_MENU,
        {
            1: lambda: _show_all(console, portal.courses, format_course, "No Course Found"),
            2: lambda: _add(
                console,
                "Enter the Details of the Course to Add:\n",
                lambda: _read_course(
                    console,
                    (
                        "Enter the Code of Course: \n",
                        "Enter The Course Name: ",
                        "Enter The Course Credit Hours: ",
                        "Enter The Department: ",
                    ),
                ),
                portal.add_course,
                " COURSE ADDED SUCCESSFULLY.\n",
            ),
            3: lambda: _delete(
                console,
                prompt="Enter The Index Of The Course To Delete:  \n",
                count=lambda: len(portal.courses),
                remove=portal.delete_course,
                done="Course Has Been Deleted Successfully.\n",
                missing="Course not Found.\n",
            ),
            4: lambda: _update(
                console,
                prompt="Enter the index of the Course to update: \n",
                count=lambda: len(portal.courses),
                header="Enter the updated Course Information: \n",
                read=lambda: _read_course(
                    console,
                    ("Code: \n", "Course Name: ", "Course Credit Hours: ", "Department: "),
                ),
                store=portal.update_course,
                done="Course updated successfully.\n",
                missing="Course not found.\n",
            ),
        },
    )