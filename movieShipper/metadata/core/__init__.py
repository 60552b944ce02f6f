"""
metadata.core
~~~~~~~~~~~~~
Domain layer – the Movie dataclass, error types and field flatteners.
"""

from .errors  import KoficError, TransportError, ParseError, NotFoundError
from .models  import Movie
from .flatten import flatten_named_list

__all__ = [
    "Movie",
    "KoficError",
    "TransportError",
    "ParseError",
    "NotFoundError",
    "flatten_named_list",
]
