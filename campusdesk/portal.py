"""In-memory store for students, teachers, courses and registrations."""

from __future__ import annotations

from typing import Generic, TypeVar

from campusdesk.models import (
    Course,
    CourseRegistration,
    Student,
    StudentRegistration,
    Teacher,
)

DEFAULT_CAPACITY = 100

T = TypeVar("T")


class PortalError(Exception):
    """Base class for errors raised by the portal."""


class CapacityError(PortalError):
    """Raised when a table is already holding as many records as it may."""


class RecordNotFoundError(PortalError, LookupError):
    """Raised when an index does not name a stored record."""


class _Table(Generic[T]):
    """An ordered, bounded list of records of one kind."""

    def __init__(self, kind: str, capacity: int) -> None:
        self._kind = kind
        self._capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def snapshot(self) -> tuple[T, ...]:
        return tuple(self._items)

    def get(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise RecordNotFoundError(f"no {self._kind} at index {index}")
        return self._items[index]

    def add(self, item: T) -> None:
        if len(self._items) >= self._capacity:
            raise CapacityError(
                f"cannot hold more than {self._capacity} {self._kind} records"
            )
        self._items.append(item)

    def delete(self, index: int) -> None:
        self.get(index)
        del self._items[index]

    def update(self, position: int, item: T) -> None:
        index = position - 1
        self.get(index)
        self._items[index] = item


class Portal:
    """Holds every record the institution keeps, each kind in its own table.

    Records are deleted by their index counted from 0 and updated by their
    position counted from 1.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._students: _Table[Student] = _Table("student", capacity)
        self._teachers: _Table[Teacher] = _Table("teacher", capacity)
        self._courses: _Table[Course] = _Table("course", capacity)
        self._course_registrations: _Table[CourseRegistration] = _Table(
            "course registration", capacity
        )
        self._student_registrations: _Table[StudentRegistration] = _Table(
            "student registration", capacity
        )

    @property
    def students(self) -> tuple[Student, ...]:
        return self._students.snapshot()

    @property
    def teachers(self) -> tuple[Teacher, ...]:
        return self._teachers.snapshot()

    @property
    def courses(self) -> tuple[Course, ...]:
        return self._courses.snapshot()

    @property
    def course_registrations(self) -> tuple[CourseRegistration, ...]:
        return self._course_registrations.snapshot()

    @property
    def student_registrations(self) -> tuple[StudentRegistration, ...]:
        return self._student_registrations.snapshot()

    def add_student(self, student: Student) -> None:
        self._students.add(student)

    def delete_student(self, index: int) -> None:
        self._students.delete(index)

    def update_student(self, index: int, student: Student) -> None:
        self._students.update(index, student)

    def add_teacher(self, teacher: Teacher) -> None:
        self._teachers.add(teacher)

    def delete_teacher(self, index: int) -> None:
        self._teachers.delete(index)

    def update_teacher(self, index: int, teacher: Teacher) -> None:
        self._teachers.update(index, teacher)

    def add_course(self, course: Course) -> None:
        self._courses.add(course)

    def delete_course(self, index: int) -> None:
        self._courses.delete(index)

    def update_course(self, index: int, course: Course) -> None:
        self._courses.update(index, course)

    def add_course_registration(self, registration: CourseRegistration) -> None:
        self._course_registrations.add(registration)

    def delete_course_registration(self, index: int) -> None:
        self._course_registrations.delete(index)

    def update_course_registration(
        self, index: int, registration: CourseRegistration
    ) -> None:
        self._course_registrations.update(index, registration)

    def add_student_registration(self, registration: StudentRegistration) -> None:
        self._student_registrations.add(registration)

    def delete_student_registration(self, index: int) -> None:
        self._student_registrations.delete(index)

    def update_student_registration(
        self, index: int, registration: StudentRegistration
    ) -> None:
        self._student_registrations.update(index, registration)

    def course_registration_details(self, index: int) -> tuple[Course, Teacher]:
        """Return the course and teacher named by the course registration at index."""
        registration = self._course_registrations.get(index)
        course = self._courses.get(registration.course_id)
        teacher = self._teachers.get(registration.teacher_id)
        return course, teacher

    def student_registration_details(
        self, index: int
    ) -> tuple[Student, Course, Teacher]:
        """Return the student, course and teacher behind a student registration."""
        registration = self._student_registrations.get(index)
        student = self._students.get(registration.student_id)
        course, teacher = self.course_registration_details(registration.course_reg_id)
        return student, course, teacher