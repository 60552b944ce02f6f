from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from movieShipper import settings
from movieShipper.utils import log_debug
from movieShipper.metadata.core.errors import ParseError, TransportError
from movieShipper.metadata.core.flatten import (
    ACTOR_LIMIT, DIRECTOR_LIMIT, GENRE_LIMIT, NATION_LIMIT, RATING_LIMIT,
    flatten_named_list, require, require_text,
)
from movieShipper.metadata.core.models import Movie

_LIST_PATH = "movieListResult.movieList"
_INFO_PATH = "movieInfoResult.movieInfo"


class KoficClient:
    """
    Thin wrapper around the KOBIS open API (Korean Film Council).

    One list call per page, then one detail call per non-adult entry,
    strictly in sequence. Every failure is raised to the caller; a page
    is returned whole or not at all.
    """

    # ────────────────────────────────────────────────────────────────
    # Construction
    # ────────────────────────────────────────────────────────────────
    def __init__(
        self,
        api_key: str | None = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: float | None = None,
        base_url: str | None = None,
    ):
        self.api_key = api_key or settings.KOFIC_API_KEY
        if not self.api_key:
            raise RuntimeError("KOFIC_API_KEY not set and no api_key passed")
        self.session  = session or requests.Session()
        self.timeout  = timeout or settings.REQUEST_TIMEOUT
        self.base_url = (base_url or settings.KOFIC_BASE_URL).rstrip("/")

    # ────────────────────────────────────────────────────────────────
    # Internal – one GET, decoded JSON payload
    # ────────────────────────────────────────────────────────────────
    def _get(self, path: str, **params) -> Dict[str, Any]:
        params["key"] = self.api_key
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            log_debug(f"KOBIS network error on {path}: {exc}")
            status = getattr(getattr(exc, "response", None), "status_code", None)
            raise TransportError(f"GET {url} failed: {exc}", url=url, status=status) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ParseError(f"{path} did not return JSON") from exc
        if not isinstance(payload, dict):
            raise ParseError(f"{path} returned {type(payload).__name__}, expected an object")

        # bad key / quota errors come back as HTTP 200 + faultInfo
        if fault := payload.get("faultInfo"):
            message = fault.get("message") if isinstance(fault, dict) else fault
            log_debug(f"KOBIS fault on {path}: {message}")
            raise TransportError(f"KOBIS rejected {path}: {message}", url=url, status=resp.status_code)
        return payload

    @staticmethod
    def _page_number(page: str | int) -> int:
        if isinstance(page, bool) or not isinstance(page, (int, str)):
            raise ValueError(f"Page must be a positive integer, got {page!r}")
        try:
            number = int(page)
        except ValueError:
            raise ValueError(f"Page must be a positive integer, got {page!r}") from None
        if number < 1:
            raise ValueError(f"Page must be a positive integer, got {page!r}")
        return number

    # ────────────────────────────────────────────────────────────────
    # List endpoint
    # ────────────────────────────────────────────────────────────────
    def fetch_movie_list(self, page: str | int) -> List[dict]:
        """Return the raw ``movieList`` entries of one list page."""
        number = self._page_number(page)
        payload = self._get(
            settings.MOVIE_LIST_PATH,
            openStartDt=settings.OPEN_START_DT,
            openEndDt=settings.OPEN_END_DT,
            itemPerPage=str(settings.ITEMS_PER_PAGE),
            curPage=str(number),
        )
        result  = require(payload, "movieListResult", "")
        entries = require(result, "movieList", "movieListResult")
        if not isinstance(entries, list):
            raise ParseError(f"Field '{_LIST_PATH}' is not an array", field=_LIST_PATH)
        log_debug(f"KOBIS list page {number} → {len(entries)} entries")
        return entries

    @staticmethod
    def is_adult(entry: dict) -> bool:
        """True when the list entry carries the adult-content genre marker."""
        return entry.get("genreAlt") == settings.ADULT_GENRE

    def fetch_movies_by_page(self, page: str | int) -> List[Movie]:
        """
        Fetch one list page and the detail record of every non-adult entry.

        Upstream order is kept. A failing detail call aborts the page.
        """
        number  = self._page_number(page)
        entries = self.fetch_movie_list(number)

        movies: List[Movie] = []
        skipped = 0
        for i, entry in enumerate(entries):
            where = f"{_LIST_PATH}[{i}]"
            if not isinstance(entry, dict):
                raise ParseError(f"Expected an object at '{where}'", field=where)
            if self.is_adult(entry):
                skipped += 1
                continue
            movies.append(self.fetch_movie_detail(require_text(entry, "movieCd", where)))

        log_debug(f"KOBIS page {number}: {len(movies)} movies, {skipped} adult skipped")
        return movies

    # ────────────────────────────────────────────────────────────────
    # Detail endpoint
    # ────────────────────────────────────────────────────────────────
    def fetch_movie_detail(self, movie_code: str) -> Movie:
        payload = self._get(settings.MOVIE_INFO_PATH, movieCd=movie_code)
        result  = require(payload, "movieInfoResult", "")
        info    = require(result, "movieInfo", "movieInfoResult")
        if not isinstance(info, dict):
            raise ParseError(f"Field '{_INFO_PATH}' is not an object", field=_INFO_PATH)

        movie = self._to_movie(str(movie_code), info)
        log_debug(f"KOBIS detail {movie.movie_code} → {movie.name}")
        return movie

    @staticmethod
    def _to_movie(movie_code: str, info: dict) -> Movie:
        w = _INFO_PATH

        def names(key: str, name_key: str, limit: Optional[int]) -> str:
            return flatten_named_list(require(info, key, w), name_key, limit, where=f"{w}.{key}")

        name_en = require_text(info, "movieNmEn", w)
        return Movie(
            movie_code      = movie_code,
            name            = require_text(info, "movieNm", w),
            name_en         = name_en,
            actor           = names("actors",    "peopleNm",     ACTOR_LIMIT),
            director        = names("directors", "peopleNm",     DIRECTOR_LIMIT),
            genre           = names("genres",    "genreNm",      GENRE_LIMIT),
            nation          = names("nations",   "nationNm",     NATION_LIMIT),
            rating          = names("audits",    "watchGradeNm", RATING_LIMIT),
            open_date       = require_text(info, "openDt", w),
            show_time       = _show_time(require(info, "showTm", w)),
            type            = require_text(info, "typeNm", w),
            status          = require_text(info, "prdtStatNm", w),
            production_year = require_text(info, "prdtYear", w),
            # known quirk: company is filled from movieNmEn, `companys` is never read;
            # the intended mapping is unknown
            company         = name_en,
        )


def _show_time(raw: Any) -> int:
    """Running time in minutes; KOBIS sends ``""`` when unknown."""
    path = f"{_INFO_PATH}.showTm"
    if isinstance(raw, bool):
        raise ParseError(f"Field '{path}' is not a number", field=path)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0
        if text.isdecimal():
            return int(text)
    raise ParseError(f"Field '{path}' is not a number: {raw!r}", field=path)
