"""
Request configurations.

Every config turns into a list of (name, value) query parameters with one
uniform rule: a parameter is only sent if the caller gave a non-empty value.

Range filtering (e.g. start_time__gte, seats__lt, lat__gt) is a naming
convention of the server. Such parameters go into `extra` and are passed
through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union


Params = List[Tuple[str, str]]

# a single value or several values for a repeatable parameter (e.g. id)
Value = Union[str, int, float, Sequence[Union[str, int]], None]

C = TypeVar("C", bound="_Config")


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _add_param(params: Params, name: str, value: Any) -> None:
    """
    Append name=value to params, expanding lists/tuples into repeated
    parameters and skipping empty values.
    """
    if isinstance(value, (list, tuple)):
        for item in value:
            _add_param(params, name, item)
        return
    if _is_empty(value):
        return
    params.append((name, str(value)))


class _Config:
    """
    Shared behaviour of all request configs.
    """

    extra: Dict[str, Value]

    def to_params(self) -> Params:
        """
        Return the query parameters in field declaration order, then extra.
        """
        params: Params = []
        for f in fields(self):  # type: ignore[arg-type]
            if f.name == "extra":
                continue
            _add_param(params, f.name, getattr(self, f.name))
        for name, value in self.extra.items():
            _add_param(params, name, value)
        return params

    @classmethod
    def from_kwargs(cls: Type[C], **kwargs: Value) -> C:
        """
        Build a config from keyword arguments.

        Known field names are set directly; everything else (typically
        range-suffixed names like start_time__gte) goes into extra.
        """
        names = {f.name for f in fields(cls)} - {"extra"}  # type: ignore[arg-type]
        known = {k: v for k, v in kwargs.items() if k in names}
        extra = {k: v for k, v in kwargs.items() if k not in names}
        return cls(**known, extra=extra)

    @classmethod
    def resolve(cls: Type[C], config: Optional[C], filters: Mapping[str, Value]) -> C:
        """
        Combine an optional config object with keyword filters.

        Keyword filters override fields of the config; the config itself is
        never modified.
        """
        if config is None:
            return cls.from_kwargs(**filters)
        if not isinstance(config, cls):
            raise TypeError(f"Expected {cls.__name__}, got {type(config).__name__}")
        if not filters:
            return config
        merged: Dict[str, Value] = {f.name: getattr(config, f.name) for f in fields(config) if f.name != "extra"}
        merged.update(config.extra)
        merged.update(filters)
        return cls.from_kwargs(**merged)


@dataclass(frozen=True)
class SubjectsConfig(_Config):
    """
    Filters for /subjects. Filtering by term is recommended because subject
    codes have changed over the years.
    """

    term: Value = None
    school: Value = None
    extra: Dict[str, Value] = field(default_factory=dict)


@dataclass(frozen=True)
class CoursesConfig(_Config):
    """
    Filters for /courses.

    The server requires one of these minimum combinations (not checked here):
        instructor
        id (multiple accepted, up to 200)
        term + subject
        term + room

    start_time, end_time, start_date, end_date and seats match exactly; use
    extra={"seats__gte": 5} etc. for range filters.

    Attributes:
        id: id of the course; uniquely identifies a course, used only by this API
        term: id of the term
        subject: subject symbol, e.g. BIOL_SCI, PHIL
        instructor: id of the instructor who teaches the course
        room: id of the room in which the course is held
        catalog_num: departmental catalog number, including the sequence number
        meeting_days: days of the week when the course meets
        start_time: HH:MM (24-hour clock) time of day when the course starts
        end_time: HH:MM (24-hour clock) time of day when the course stops
        start_date: YYYY-MM-DD date when the course starts
        end_date: YYYY-MM-DD date when the course stops
        seats: number of seats available
        component: part of the course, e.g. LEC, LAB
        section: a particular occurrence of the course; tells offerings apart
            when several instructors or times exist in one term
        class_num: the University's class number for the course (not unique)
        course_id: the University's id number for the course (not unique)
        extra: additional parameters passed through as-is (range filters)
    """

    id: Value = None
    term: Value = None
    subject: Value = None
    instructor: Value = None
    room: Value = None
    catalog_num: Value = None
    meeting_days: Value = None
    start_time: Value = None
    end_time: Value = None
    start_date: Value = None
    end_date: Value = None
    seats: Value = None
    component: Value = None
    section: Value = None
    class_num: Value = None
    course_id: Value = None
    extra: Dict[str, Value] = field(default_factory=dict)


@dataclass(frozen=True)
class BuildingsConfig(_Config):
    """
    Filters for /buildings. Without any filter all buildings are returned.
    lat / lon accept the __lt, __gt, __lte, __gte suffixes via extra.
    """

    id: Value = None
    lat: Value = None
    lon: Value = None
    extra: Dict[str, Value] = field(default_factory=dict)


@dataclass(frozen=True)
class RoomsConfig(_Config):
    """
    Filters for /rooms: a building id, or one or more room ids.
    """

    id: Value = None
    building: Value = None
    extra: Dict[str, Value] = field(default_factory=dict)
