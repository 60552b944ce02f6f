# Movie dataclass
from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

@dataclass(frozen=True, slots=True)
class Movie:
    movie_code: str
    name: str
    name_en: str
    actor: str
    director: str
    genre: str
    nation: str
    rating: str
    open_date: str
    show_time: int
    type: str
    status: str
    production_year: str
    # known quirk: filled from movieNmEn, not a company field; intended mapping unknown
    company: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Movie:
        """Inverse of :meth:`as_dict`; unknown keys are ignored."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})
