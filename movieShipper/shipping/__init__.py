# shipping/__init__.py

from . import json_functions

__all__ = [
    "json_functions",
]
