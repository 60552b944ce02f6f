from __future__ import annotations

import re
from typing import Optional

import requests
from bs4 import BeautifulSoup

from movieShipper import settings
from movieShipper.utils import log_debug
from movieShipper.metadata.core.errors import NotFoundError, TransportError

# ---------- Regex patterns--------------------------------------
_IMAGE_PATH_RE = re.compile(r"/.*jpg")


class KobisScraper:
    """
    Pull the poster path out of the KOBIS HTML detail page.

    The first ``.rollList1 a`` anchor carries an ``onclick`` handler whose
    argument ends in the ``.jpg`` path we want. Best-effort only: nothing
    else in the package depends on it.
    """

    DETAIL_URL = settings.KOBIS_DETAIL_PAGE_URL

    def __init__(self, *, session: Optional[requests.Session] = None, timeout: float | None = None):
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent":
                "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
                "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
            }
        )
        self.timeout = timeout or settings.REQUEST_TIMEOUT

    # ------------------------------------------------------------------ public
    def fetch_image_url(self, movie_code: str) -> str:
        """Return the image path for *movie_code* or raise NotFoundError."""
        html = self._get_html(movie_code)
        image = self.extract_image_path(html)
        if image is None:
            log_debug(f"KOBIS image: nothing found for {movie_code}")
            raise NotFoundError(f"No poster image on detail page of {movie_code}")
        return image

    def find_image_url(self, movie_code: str) -> Optional[str]:
        """Like :meth:`fetch_image_url` but ``None`` on a miss."""
        try:
            return self.fetch_image_url(movie_code)
        except NotFoundError:
            return None

    # --------------------------------------------------------- network
    def _get_html(self, movie_code: str) -> str:
        url = self.DETAIL_URL.format(code=movie_code)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            log_debug(f"KOBIS page network error: {exc}")
            status = getattr(getattr(exc, "response", None), "status_code", None)
            raise TransportError(f"GET {url} failed: {exc}", url=url, status=status) from exc
        return resp.text

    # ----------------------------------------------------------- parsing bits
    @staticmethod
    def extract_image_path(html: str) -> Optional[str]:
        soup = BeautifulSoup(html, "html.parser")
        anchor = soup.select_one(".rollList1 a")
        if anchor is None:
            return None
        onclick = anchor.get("onclick") or ""
        m = _IMAGE_PATH_RE.search(onclick)
        return m.group() if m else None
