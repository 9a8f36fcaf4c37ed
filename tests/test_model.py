"""
Unit tests for record decoding.

Decoding contract:
- missing keys -> None, unknown keys ignored
- values kept as sent (no coercion)
- records are immutable
"""

import dataclasses
import unittest

from nucourses.exceptions import DecodeError
from nucourses.model import Building, Course, Instructor, Room, Term


class TestRecordDecoding(unittest.TestCase):
    def test_full_course(self) -> None:
        data = {
            "id": 61234,
            "title": "Data Structures & Algorithms",
            "term": "2024 Fall",
            "instructor": "Jane Doe",
            "subject": "COMP_SCI",
            "catalog_num": "214-0",
            "section": "20",
            "room": "Tech Institute LR3",
            "meeting_days": "MoWeFr",
            "start_time": "10:00",
            "end_time": "10:50",
            "seats": 120,
            "topic": None,
            "component": "LEC",
            "class_num": 14021,
            "course_id": 4095,
        }
        c = Course.from_dict(data)
        self.assertEqual(dataclasses.asdict(c), data)

    def test_missing_fields_become_none(self) -> None:
        t = Term.from_dict({"id": 4720, "name": "2024 Fall"})
        self.assertEqual(t.id, 4720)
        self.assertEqual(t.name, "2024 Fall")
        self.assertIsNone(t.start_date)
        self.assertIsNone(t.end_date)

    def test_unknown_keys_ignored(self) -> None:
        r = Room.from_dict({"id": 7, "building_id": 3, "name": "101", "capacity": 40})
        self.assertEqual(r, Room(id=7, building_id=3, name="101"))

    def test_building_without_coordinates(self) -> None:
        b = Building.from_dict({"id": 1, "name": "Annenberg Hall", "nu_maps_link": None})
        self.assertIsNone(b.lat)
        self.assertIsNone(b.lon)
        self.assertIsNone(b.nu_maps_link)

    def test_instructor_subjects_keep_order(self) -> None:
        i = Instructor.from_dict({"id": 3, "name": "A. Smith", "subjects": ["MATH", "COMP_SCI", "ECON"]})
        self.assertEqual(i.subjects, ("MATH", "COMP_SCI", "ECON"))

    def test_instructor_subjects_must_be_list(self) -> None:
        with self.assertRaises(DecodeError):
            Instructor.from_dict({"subjects": "MATH"})

    def test_non_object_rejected(self) -> None:
        with self.assertRaises(DecodeError):
            Term.from_dict(["4720", "2024 Fall"])

    def test_wrong_int_type_rejected(self) -> None:
        with self.assertRaises(DecodeError) as ctx:
            Course.from_dict({"id": "not-an-int", "title": "Calculus"})
        self.assertIn("Course.id", ctx.exception.message)

    def test_object_value_rejected(self) -> None:
        with self.assertRaises(DecodeError):
            Course.from_dict({"id": 1, "seats": {"x": 1}})

    def test_bool_is_not_an_int(self) -> None:
        with self.assertRaises(DecodeError):
            Room.from_dict({"id": True})

    def test_number_is_not_a_string(self) -> None:
        with self.assertRaises(DecodeError):
            Term.from_dict({"id": 4720, "name": 4720})

    def test_float_field_accepts_int(self) -> None:
        b = Building.from_dict({"id": 2, "lat": 42, "lon": -87.675})
        self.assertEqual(b.lat, 42)
        self.assertEqual(b.lon, -87.675)

    def test_float_field_rejects_string(self) -> None:
        with self.assertRaises(DecodeError):
            Building.from_dict({"lat": "42.05"})

    def test_instructor_subject_items_must_be_strings(self) -> None:
        with self.assertRaises(DecodeError) as ctx:
            Instructor.from_dict({"subjects": ["MATH", 7]})
        self.assertIn("subjects", ctx.exception.message)

    def test_null_values_allowed_everywhere(self) -> None:
        c = Course.from_dict({"id": None, "seats": None, "title": None})
        self.assertEqual(c, Course())

    def test_records_are_frozen(self) -> None:
        t = Term.from_dict({"id": 1})
        with self.assertRaises(dataclasses.FrozenInstanceError):
            t.name = "changed"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
