# campusdesk

An interactive console program that keeps school records in memory:
students, teachers, courses, course registrations (a teacher assigned to a
course) and student registrations (a student enrolled in a course
registration).

## Installing

```
pip install .
```

## Running

```
campusdesk
```

The command reads from standard input and writes to standard output. It
takes no options besides `--help`. It stops when you choose `-1` on the main
page, when input runs out, or on Ctrl-C.

The main page offers:

| Key | Page |
|-----|------|
| 1 | Student records |
| 2 | Teacher records |
| 3 | Course records |
| 4 | Course registration |
| 5 | Student registration |
| -1 | Exit |

Every page offers the same choices:

| Key | Action |
|-----|--------|
| 1 | Display every entry, numbered from 1 |
| 2 | Add an entry |
| 3 | Delete an entry |
| 4 | Update an entry |
| 0 | Return to the main page |

Any other choice prints a message and shows the page again.

How entries are referred to:

- **Delete** asks for the entry's index counted from **0**. On the student
  page an index that is out of range asks again; on the other pages it
  reports that the entry was not found.
- **Update** asks for the entry's position counted from **1**, the number
  shown beside it in the listing.
- A course registration names its teacher and course, and a student
  registration names its student and course registration, by their index
  counted from **0**.

Answers are read word by word, so several can be typed on one line.
Names, genders, phone numbers, specializations, course names and departments
are single words; addresses and e-mail addresses are read as whole lines.
A number that cannot be read cancels the action with a message.

After a registration is updated the page prints the course and teacher (and,
for a student registration, the student's name) that it now refers to, or
says that they could not be found.

## What it does not do

Nothing is written to disk: all records are lost when the program exits.
There is no search, no sorting and no check that a registration refers to
records that exist when it is added.

## Using it from Python

The record store can be used without the console:

```python
from campusdesk.models import Course, CourseRegistration, Teacher
from campusdesk.portal import Portal

portal = Portal()
portal.add_teacher(Teacher(name="Ada", gender="F", id=1, age=40))
portal.add_course(Course(code=101, course_name="Algebra", credit_hours=3, department="Maths"))
portal.add_course_registration(CourseRegistration(teacher_id=0, course_id=0))

course, teacher = portal.course_registration_details(0)
print(course.course_name, teacher.name)   # Algebra Ada

portal.update_teacher(1, Teacher(name="Grace", gender="F", id=1, age=45))
portal.delete_course_registration(0)
print(portal.teachers)
```

`campusdesk.models` holds the record types `Student`, `Teacher`, `Course`,
`CourseRegistration` and `StudentRegistration`, all dataclasses with
defaults for every field.

`campusdesk.portal.Portal` keeps one table per kind of record and offers
`add_*`, `delete_*` (index from 0) and `update_*` (position from 1) for
`student`, `teacher`, `course`, `course_registration` and
`student_registration`. The read-only properties `students`, `teachers`,
`courses`, `course_registrations` and `student_registrations` return the
stored records as tuples. `course_registration_details(index)` returns the
`(course, teacher)` behind a course registration, and
`student_registration_details(index)` returns `(student, course, teacher)`
behind a student registration.

Each table holds at most `capacity` records (100 by default, set with
`Portal(capacity)`); going past that raises `CapacityError`, and an index
that does not name a stored record raises `RecordNotFoundError`. Both derive
from `PortalError`.

The menus can be driven from any text streams with
`campusdesk.console.Console`:

```python
import io

from campusdesk.app import main_page
from campusdesk.console import Console
from campusdesk.portal import Portal

out = io.StringIO()
main_page(Portal(), Console(io.StringIO("3 2 101 Algebra 3 Maths 1 0 -1\n"), out))
print(out.getvalue())
```

`Console.read_*` raises `InputClosed` when input runs out.

## Running the tests

```
pip install .[test]
pytest
```