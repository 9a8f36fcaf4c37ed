"""
HTTP client for the Northwestern course data API.

Every public method follows the same shape:

    build params -> attach key -> GET base_url + path -> decode JSON array -> records

No caching, retries or pagination: each call is one independent round trip
and either returns the full list of records or raises.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar
from urllib.parse import quote, quote_plus

import requests

from nucourses.config import BuildingsConfig, CoursesConfig, Params, RoomsConfig, SubjectsConfig, Value
from nucourses.exceptions import DecodeError, TransportError
from nucourses.model import Building, Course, Instructor, Room, School, Subject, Term


logger = logging.getLogger(__name__)

BASE_URL = "http://api.asg.northwestern.edu/"
DEFAULT_TIMEOUT = 30

T = TypeVar("T")


def _redact(params: Sequence[Tuple[str, str]]) -> List[Tuple[str, str]]:
    return [(k, "***" if k == "key" else v) for k, v in params]


class Client:
    """
    Northwestern course data API client.

    Args:
        key: access key, sent as the "key" query parameter on every request
        session: requests.Session (or compatible) used as transport; a new one
            is created (and owned by this client) if omitted
        base_url: API root, must end with "/"
        timeout: seconds passed to the transport per request (None = no timeout)
    """

    def __init__(
        self,
        key: str,
        session: Optional[requests.Session] = None,
        base_url: str = BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> None:
        self._key = key
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._timeout = timeout

    @property
    def key(self) -> str:
        return self._key

    @property
    def base_url(self) -> str:
        return self._base_url

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    def close(self) -> None:
        """
        Close the underlying session if this client created it.
        """
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -----------------------------------------------------------------------
    # Core request / decode
    # -----------------------------------------------------------------------

    def _scrub(self, text: str) -> str:
        """
        Replace every occurrence of the access key (raw or URL-encoded) with ***.
        """
        if not self._key:
            return text
        for variant in {self._key, quote_plus(self._key), quote(self._key, safe="")}:
            text = text.replace(variant, "***")
        return text

    def _get(self, path: str, params: Params, decode: Callable[[Any], T]) -> List[T]:
        url = self._base_url + path
        query: Params = [("key", self._key)] + list(params)

        logger.debug("GET %s params=%s", url, _redact(query))
        try:
            resp = self._session.get(url, params=query, timeout=self._timeout)
        except requests.exceptions.RequestException as e:
            # requests puts the full URL (query string included) into its messages
            reason = self._scrub(f"{type(e).__name__}: {e}")
            logger.warning("Request to %s failed: %s", url, reason)
            raise TransportError(f"Request failed: {reason}", url=url, cause=e) from e

        # status is not checked: error responses carry a non-array body
        # and surface as DecodeError below
        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("Invalid JSON from %s (status %s)", url, resp.status_code)
            raise DecodeError(
                "Response body is not valid JSON",
                url=url,
                cause=e,
                status_code=resp.status_code,
                body=resp.text,
            ) from e

        if not isinstance(data, list):
            logger.warning("Expected JSON array from %s, got %s (status %s)", url, type(data).__name__, resp.status_code)
            raise DecodeError(
                f"Expected JSON array, got {type(data).__name__}",
                url=url,
                status_code=resp.status_code,
                body=resp.text,
            )

        out: List[T] = []
        for item in data:
            try:
                out.append(decode(item))
            except DecodeError as e:
                logger.warning("Malformed item from %s: %s", url, e.message)
                raise DecodeError(e.message, url=url, status_code=resp.status_code, body=resp.text) from e

        logger.debug("GET %s -> %d records", url, len(out))
        return out

    # -----------------------------------------------------------------------
    # Endpoints
    # -----------------------------------------------------------------------

    def terms(self) -> List[Term]:
        """
        Return all terms for which course data is available.
        """
        return self._get("terms", [], Term.from_dict)

    def schools(self) -> List[School]:
        """
        Return all schools at Northwestern University.
        """
        return self._get("schools", [], School.from_dict)

    def subjects(self, config: Optional[SubjectsConfig] = None, **filters: Value) -> List[Subject]:
        """
        Return subjects, optionally filtered by term and/or school.

        Filtering by term is recommended because subjects have changed over the years.
        """
        cfg = SubjectsConfig.resolve(config, filters)
        return self._get("subjects", cfg.to_params(), Subject.from_dict)

    def courses(self, config: Optional[CoursesConfig] = None, **filters: Value) -> List[Course]:
        """
        Return courses.

        The server requires one of: instructor; id (up to 200); term + subject;
        term + room. Range filters are passed as suffixed names, e.g.

            client.courses(term="4720", subject="COMP_SCI", start_time__gte="12:00")
        """
        cfg = CoursesConfig.resolve(config, filters)
        return self._get("courses", cfg.to_params(), Course.from_dict)

    def instructors(self, subject: str) -> List[Instructor]:
        """
        Return instructors who have taught in the given subject.

        subject is required by the API and is always sent.
        """
        return self._get("instructors", [("subject", str(subject))], Instructor.from_dict)

    def buildings(self, config: Optional[BuildingsConfig] = None, **filters: Value) -> List[Building]:
        """
        Return buildings; all of them when called without filters.
        """
        cfg = BuildingsConfig.resolve(config, filters)
        return self._get("buildings", cfg.to_params(), Building.from_dict)

    def rooms(self, config: Optional[RoomsConfig] = None, **filters: Value) -> List[Room]:
        """
        Return rooms of a building (building=...) or specific rooms (id=...).
        """
        cfg = RoomsConfig.resolve(config, filters)
        return self._get("rooms", cfg.to_params(), Room.from_dict)
