"""flagparse — typed, alias-aware command-line token parsing.

Classifies a raw token sequence into options, positionals and a skipped
tail in one pass, then serves typed lookups over the result.
"""

from flagparse.core import AliasTable, Args, ParseResult, Validator, parse
from flagparse.exceptions import AliasConflictError, FlagParseError, InvalidAliasError
from flagparse.version import __version__

__all__: list[str] = [
    "AliasConflictError",
    "AliasTable",
    "Args",
    "FlagParseError",
    "InvalidAliasError",
    "ParseResult",
    "Validator",
    "__version__",
    "parse",
]
