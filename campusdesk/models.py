"""Record types kept by the portal: people, courses and registrations."""

from __future__ import annotations

from dataclasses import dataclass

BLANK = " "
DEFAULT_PHONE_NUMBER = "0000-0000000"


@dataclass
class Student:
    """A student enrolled at the institution."""

    name: str = BLANK
    roll_no: int = 0
    age: int = 0
    gender: str = BLANK
    semester: int = 0
    gpa: float = 0.0
    phone_number: str = DEFAULT_PHONE_NUMBER
    address: str = BLANK
    email: str = BLANK
    specialization: str = BLANK


@dataclass
class Teacher:
    """A member of the teaching staff."""

    name: str = BLANK
    gender: str = BLANK
    id: int = 0
    age: int = 0
    phone_number: str = DEFAULT_PHONE_NUMBER
    address: str = BLANK
    email: str = BLANK
    specialization: str = BLANK


@dataclass
class Course:
    """A course offered by a department."""

    code: int = 0
    course_name: str = BLANK
    credit_hours: int = 0
    department: str = BLANK


@dataclass
class CourseRegistration:
    """Assignment of a teacher to a course, both given by their record index."""

    teacher_id: int = 0
    course_id: int = 0


@dataclass
class StudentRegistration:
    """Enrolment of a student in a course registration, both by record index."""

    student_id: int = 0
    course_reg_id: int = 0