import copy
from dataclasses import replace

import pytest

from campusdesk.models import (
    Course,
    CourseRegistration,
    Student,
    StudentRegistration,
    Teacher,
)


def make_student():
    return Student(
        "Ayesha",
        17,
        21,
        "female",
        4,
        3.5,
        "phone-one",
        "12 Garden Road",
        "ayesha@example.com",
        "AI",
    )


def make_teacher():
    return Teacher(
        "Bilal",
        "male",
        7,
        40,
        "phone-two",
        "3 Hill Street",
        "bilal@example.com",
        "Databases",
    )


def test_student_defaults_follow_source():
    s = Student()
    assert s.name == " "
    assert s.roll_no == 0
    assert s.age == 0
    assert s.gender == " "
    assert s.semester == 0
    assert s.gpa == 0.0
    assert s.phone_number == "0000-0000000"
    assert s.address == " "
    assert s.email == " "
    assert s.specialization == " "


def test_student_positional_order():
    s = make_student()
    assert s.name == "Ayesha"
    assert s.roll_no == 17
    assert s.age == 21
    assert s.gender == "female"
    assert s.semester == 4
    assert s.gpa == 3.5
    assert s.phone_number == "phone-one"
    assert s.address == "12 Garden Road"
    assert s.email == "ayesha@example.com"
    assert s.specialization == "AI"


def test_student_fields_are_mutable():
    s = make_student()
    s.semester = 5
    s.gpa = 3.75
    assert s.semester == 5
    assert s.gpa == 3.75
    assert s.name == "Ayesha"


def test_student_copy_is_independent():
    original = make_student()
    duplicate = copy.copy(original)
    assert duplicate == original
    duplicate.name = "Other"
    assert original.name == "Ayesha"
    assert duplicate != original


def test_teacher_defaults_follow_source():
    t = Teacher()
    assert t.name == " "
    assert t.gender == " "
    assert t.id == 0
    assert t.age == 0
    assert t.phone_number == "0000-0000000"
    assert t.address == " "
    assert t.email == " "
    assert t.specialization == " "


def test_teacher_positional_order():
    t = make_teacher()
    assert (t.name, t.gender, t.id, t.age) == ("Bilal", "male", 7, 40)
    assert t.phone_number == "phone-two"
    assert t.address == "3 Hill Street"
    assert t.email == "bilal@example.com"
    assert t.specialization == "Databases"


def test_teacher_replace_keeps_other_fields():
    t = make_teacher()
    updated = replace(t, age=41)
    assert updated.age == 41
    assert t.age == 40
    assert replace(updated, age=40) == t


def test_course_defaults_and_order():
    assert Course() == Course(0, " ", 0, " ")
    c = Course(101, "Calculus", 3, "Mathematics")
    assert c.code == 101
    assert c.course_name == "Calculus"
    assert c.credit_hours == 3
    assert c.department == "Mathematics"


def test_course_equality_depends_on_every_field():
    c = Course(101, "Calculus", 3, "Mathematics")
    assert c == Course(101, "Calculus", 3, "Mathematics")
    assert c != Course(102, "Calculus", 3, "Mathematics")
    assert c != Course(101, "Calculus", 4, "Mathematics")


@pytest.mark.parametrize(
    "cls, first, second",
    [
        (CourseRegistration, "teacher_id", "course_id"),
        (StudentRegistration, "student_id", "course_reg_id"),
    ],
)
def test_registration_defaults_and_order(cls, first, second):
    blank = cls()
    assert getattr(blank, first) == 0
    assert getattr(blank, second) == 0
    reg = cls(2, 5)
    assert getattr(reg, first) == 2
    assert getattr(reg, second) == 5


def test_registration_setters():
    reg = CourseRegistration(1, 2)
    reg.teacher_id = 3
    reg.course_id = 4
    assert reg == CourseRegistration(3, 4)
    sreg = StudentRegistration(1, 2)
    sreg.course_reg_id = 9
    assert sreg == StudentRegistration(1, 9)