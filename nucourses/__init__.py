"""
nucourses – client for the Northwestern University course data API.
"""

from pathlib import Path

from nucourses.client import BASE_URL, DEFAULT_TIMEOUT, Client
from nucourses.config import BuildingsConfig, CoursesConfig, RoomsConfig, SubjectsConfig
from nucourses.exceptions import DecodeError, NUCoursesError, TransportError
from nucourses.model import Building, Course, Instructor, Room, School, Subject, Term

__version__ = (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()

__all__ = [
    "BASE_URL",
    "DEFAULT_TIMEOUT",
    "Client",
    "SubjectsConfig",
    "CoursesConfig",
    "BuildingsConfig",
    "RoomsConfig",
    "NUCoursesError",
    "TransportError",
    "DecodeError",
    "Term",
    "School",
    "Subject",
    "Course",
    "Instructor",
    "Building",
    "Room",
]
