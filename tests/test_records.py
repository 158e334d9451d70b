import io

import pytest

from campusdesk.console import Console, InputClosed
from campusdesk.models import Course, Student, Teacher
from campusdesk.portal import Portal
from campusdesk.records import (
    course_page,
    format_course,
    format_student,
    format_teacher,
    student_page,
    teacher_page,
)

ALICE_INPUT = "Alice\n7\n20\nF\n3\n3.5\nnone\n12 Main Street\nalice@example.com\nCS\n"
ALICE = Student("Alice", 7, 20, "F", 3, 3.5, "none", "12 Main Street", "alice@example.com", "CS")
BOB = Teacher("Bob", "M", 11, 40, "none", "1 Hill Road", "bob@example.com", "Math")


def run(page, portal, text):
    out = io.StringIO()
    page(portal, Console(io.StringIO(text), out))
    return out.getvalue()


def test_format_student_lists_fields():
    text = format_student(1, ALICE)
    assert "Student Name: Alice" in text
    assert "Student Email: alice@example.com" in text
    assert "Student GPA: 3.5" in text
    assert text.splitlines()[1].startswith("1")


def test_format_student_gpa_drops_trailing_zero():
    text = format_student(2, Student(name="Cy", gpa=3.0))
    assert "Student GPA: 3\n" in text


def test_format_teacher_and_course():
    assert "Teacher ID: 11" in format_teacher(1, BOB)
    course_text = format_course(4, Course(101, "Algebra", 3, "Math"))
    assert "Course Name: Algebra" in course_text
    assert "Department: Math" in course_text
    assert course_text.splitlines()[1].startswith("4")


def test_add_student_through_menu():
    portal = Portal()
    output = run(student_page, portal, "2\n" + ALICE_INPUT + "0\n")
    assert portal.students == (ALICE,)
    assert "STUDENT ADDED SUCCESSFULLY." in output


def test_display_students_shows_each_record():
    portal = Portal()
    portal.add_student(ALICE)
    output = run(student_page, portal, "1\n0\n")
    assert format_student(1, ALICE) in output


def test_display_empty_courses():
    output = run(course_page, Portal(), "1\n0\n")
    assert "No Course Found" in output


def test_delete_student_retries_until_found():
    portal = Portal()
    portal.add_student(ALICE)
    output = run(student_page, portal, "3\n5\n0\n0\n")
    assert portal.students == ()
    assert "Student not Found." in output
    assert "Student Has Been Deleted Successfully." in output


def test_delete_with_non_integer_index():
    portal = Portal()
    portal.add_teacher(BOB)
    output = run(teacher_page, portal, "3\nabc\n0\n")
    assert portal.teachers == (BOB,)
    assert "Invalid input. Please enter a valid index." in output


def test_update_student_by_position():
    portal = Portal()
    portal.add_student(ALICE)
    replacement = "Dana\n8\n21\nF\n4\n3.9\nnone\n3 Lake Lane\ndana@example.com\nEE\n"
    output = run(student_page, portal, "4\n1\n" + replacement + "0\n")
    assert portal.students[0].name == "Dana"
    assert portal.students[0].address == "3 Lake Lane"
    assert "STUDENT UPDATED SUCCESSFULLY." in output


def test_update_teacher_out_of_range_changes_nothing():
    portal = Portal()
    portal.add_teacher(BOB)
    output = run(teacher_page, portal, "4\n3\n0\n")
    assert portal.teachers == (BOB,)
    assert "Teacher not found." in output


def test_add_and_delete_course():
    portal = Portal()
    output = run(course_page, portal, "2\n101\nAlgebra\n3\nMath\n0\n")
    assert portal.courses == (Course(101, "Algebra", 3, "Math"),)
    assert "COURSE ADDED SUCCESSFULLY." in output
    run(course_page, portal, "3\n0\n0\n")
    assert portal.courses == ()


def test_add_teacher_with_bad_number_is_rejected():
    portal = Portal()
    run(teacher_page, portal, "2\nBob\nM\nxx\n0\n")
    assert portal.teachers == ()


def test_add_beyond_capacity_is_refused():
    portal = Portal(capacity=0)
    output = run(course_page, portal, "2\n101\nAlgebra\n3\nMath\n0\n")
    assert portal.courses == ()
    assert "COURSE ADDED SUCCESSFULLY." not in output


def test_invalid_option_is_reported():
    output = run(teacher_page, Portal(), "9\n0\n")
    assert "YOU HAVE ENTERED AN INVALID OPTION" in output


def test_closed_input_ends_page():
    with pytest.raises(InputClosed):
        run(student_page, Portal(), "1\n")