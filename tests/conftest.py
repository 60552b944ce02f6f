"""
Shared fixtures: an in-memory stand-in for requests.Session plus
canned KOBIS payloads. No test touches the network.
"""
import copy
import json

import pytest
import requests

from movieShipper import settings, utils

ADULT = "성인물(에로)"


class FakeResponse:
    def __init__(self, payload=None, *, status_code=200, text=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload, ensure_ascii=False)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """
    Routes GETs by endpoint:

    * list endpoint   → ``list_response``
    * detail endpoint → ``details[movieCd]``
    * anything else   → ``pages[url]``

    A value that is an exception instance is raised instead of returned.
    """

    def __init__(self, list_response=None, details=None, pages=None):
        self.list_response = list_response
        self.details = details or {}
        self.pages = pages or {}
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if url.endswith(settings.MOVIE_LIST_PATH):
            result = self.list_response
        elif url.endswith(settings.MOVIE_INFO_PATH):
            result = self.details[params["movieCd"]]
        else:
            result = self.pages[url]
        if isinstance(result, Exception):
            raise result
        return result

    # helpers
    def detail_codes(self):
        return [c["params"]["movieCd"] for c in self.calls if c["url"].endswith(settings.MOVIE_INFO_PATH)]


def list_payload(entries):
    return FakeResponse({"movieListResult": {"totCnt": len(entries), "movieList": entries}})


def detail_payload(info):
    return FakeResponse({"movieInfoResult": {"movieInfo": info, "source": "영화진흥위원회"}})


MOVIE_INFO = {
    "movieCd": "20124079",
    "movieNm": "광해, 왕이 된 남자",
    "movieNmEn": "Masquerade",
    "movieNmOg": "",
    "showTm": "131",
    "prdtYear": "2012",
    "openDt": "20120913",
    "prdtStatNm": "개봉",
    "typeNm": "장편",
    "nations": [{"nationNm": "한국"}],
    "genres": [{"genreNm": "사극"}, {"genreNm": "드라마"}],
    "directors": [{"peopleNm": "추창민", "peopleNmEn": "CHOO Chang-min"}],
    "actors": [
        {"peopleNm": "이병헌", "peopleNmEn": "LEE Byung-hun", "cast": "광해/하선"},
        {"peopleNm": "류승룡", "peopleNmEn": "RYU Seung-ryong", "cast": "허균"},
        {"peopleNm": "한효주", "peopleNmEn": "HAN Hyo-joo", "cast": "중전"},
    ],
    "companys": [{"companyCd": "20100603", "companyNm": "(주)리얼라이즈픽쳐스", "companyPartNm": "제작사"}],
    "audits": [{"auditNo": "2012-MF01183", "watchGradeNm": "15세이상관람가"}],
    "staffs": [],
}


@pytest.fixture
def movie_info():
    return copy.deepcopy(MOVIE_INFO)


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    monkeypatch.setattr(utils, "LOG_PATH", tmp_path / "debug.log")
    monkeypatch.setattr(settings, "KOFIC_API_KEY", None)
