import json
from pathlib import Path
from typing import Iterable, List

from ..metadata.core.models import Movie
from ..utils import log_debug


def page_file(folder: Path, page: int) -> Path:
    """Return the JSON path used for one shipped page."""
    return folder / f"movies_page_{page}.json"


def write_movies_json(path: Path, movies: Iterable[Movie]) -> int:
    """
    Write *movies* as a JSON array of flat objects, UTF-8, Hangul kept as-is.
    Returns the number of records written.
    """
    rows = [m.as_dict() for m in movies]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(rows, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    log_debug(f"Wrote {len(rows)} movies → {path.name}")
    return len(rows)


def load_movies_json(path: Path) -> List[Movie]:
    """Read a file produced by :func:`write_movies_json` back into Movies."""
    rows = json.loads(path.read_text(encoding="utf-8"))
    return [Movie.from_dict(row) for row in rows]
