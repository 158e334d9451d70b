"""In-memory records of students, teachers, courses and registrations, with console menus."""

__version__ = "0.1.0"
__all__ = ["__version__"]