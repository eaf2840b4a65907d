"""Core layer — tokenizing, coercion, alias resolution and accessors.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Lookups never raise; absence is ``None``.
"""

from flagparse.core.aliases import AliasTable
from flagparse.core.args import Args
from flagparse.core.coercion import coerce, coerce_all
from flagparse.core.models import ParseResult, ValidationEntry
from flagparse.core.protocols import TextConverter
from flagparse.core.tokenizer import parse
from flagparse.core.validator import Validator

__all__: list[str] = [
    "AliasTable",
    "Args",
    "ParseResult",
    "TextConverter",
    "ValidationEntry",
    "Validator",
    "coerce",
    "coerce_all",
    "parse",
]
