[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "campusdesk"
version = "0.1.0"
description = "Console record keeper for students, teachers, courses and registrations"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "students", "teachers", "courses", "registration", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
campusdesk = "campusdesk.app:main"

[tool.setuptools.packages.find]
include = ["campusdesk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
