"""
Record definitions for the course data API.

Each class mirrors one JSON resource returned by the API so that:
- all callers share the same field names as the wire format (snake_case)
- missing keys simply become None instead of raising
- decoded records cannot be modified afterwards
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from nucourses.exceptions import DecodeError


R = TypeVar("R", bound="_Record")


# JSON types accepted per annotated field type; bool is rejected separately
_ACCEPTED: Dict[Any, Tuple[type, ...]] = {
    int: (int,),
    float: (int, float),
    str: (str,),
}


def _field_type(hint: Any) -> Any:
    """
    Strip Optional[...] from a field annotation.
    """
    args = [a for a in get_args(hint) if a is not type(None)]
    return args[0] if get_origin(hint) is Union and len(args) == 1 else hint


def _check_value(owner: str, name: str, value: Any, hint: Any) -> None:
    """
    Raise DecodeError unless value fits the field's declared type.
    """
    expected = _field_type(hint)
    if get_origin(expected) is tuple:
        (item_type, _) = get_args(expected)
        if not isinstance(value, list):
            raise DecodeError(f"Expected list for {owner}.{name}, got {type(value).__name__}")
        for item in value:
            _check_value(owner, f"{name}[]", item, item_type)
        return
    if isinstance(value, bool) or not isinstance(value, _ACCEPTED[expected]):
        raise DecodeError(f"Expected {expected.__name__} for {owner}.{name}, got {type(value).__name__}")


class _Record:
    """
    Mixin providing from_dict() for the flat record dataclasses below.
    """

    @classmethod
    def from_dict(cls: Type[R], data: Any) -> R:
        """
        Build a record from one decoded JSON object.

        Unknown keys are ignored, missing keys (and null) become None.
        Every other value must match the field's type: int, float (int
        accepted), str, or a list of str for Instructor.subjects.
        Values are not coerced.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Expected JSON object for {cls.__name__}, got {type(data).__name__}")

        hints = get_type_hints(cls)
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is not None:
                _check_value(cls.__name__, f.name, value, hints[f.name])
            kwargs[f.name] = value
        return cls(**cls._normalize(kwargs))

    @classmethod
    def _normalize(cls, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        return kwargs


@dataclass(frozen=True)
class Term(_Record):
    """
    An academic term (e.g. "2024 Fall").
    """

    id: Optional[int] = None
    name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


@dataclass(frozen=True)
class School(_Record):
    symbol: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Subject(_Record):
    symbol: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Course(_Record):
    """
    One scheduled course offering.

    term / instructor / subject / room are plain strings as sent by the API;
    they reference other resources by convention only.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    term: Optional[str] = None
    instructor: Optional[str] = None
    subject: Optional[str] = None
    catalog_num: Optional[str] = None
    section: Optional[str] = None
    room: Optional[str] = None
    meeting_days: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    seats: Optional[int] = None
    topic: Optional[str] = None
    component: Optional[str] = None
    class_num: Optional[int] = None
    course_id: Optional[int] = None


@dataclass(frozen=True)
class Instructor(_Record):
    """
    An instructor. subjects lists every subject symbol the instructor has
    ever taught, in server order.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    bio: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    office_hours: Optional[str] = None
    subjects: Optional[Tuple[str, ...]] = None

    @classmethod
    def _normalize(cls, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        if kwargs.get("subjects") is not None:
            kwargs["subjects"] = tuple(kwargs["subjects"])
        return kwargs


@dataclass(frozen=True)
class Building(_Record):
    """
    A campus building. lat/lon are missing for some buildings and
    nu_maps_link may be null.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    nu_maps_link: Optional[str] = None


@dataclass(frozen=True)
class Room(_Record):
    id: Optional[int] = None
    building_id: Optional[int] = None
    name: Optional[str] = None
