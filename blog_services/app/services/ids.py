"""
Random identifier generation.

Identifiers are drawn from a CSPRNG and rendered as lowercase hex.  With
the default of 4 bytes there are 2**32 possible values, so collisions
are rare but possible.  Callers pass the identifiers already in use and
the generator redraws on a clash instead of overwriting a record.
"""

import secrets
from typing import Container, Optional

from ..core.errors import IdentifierExhaustedError

DEFAULT_ID_BYTES = 4
MAX_ATTEMPTS = 16


def generate_id(nbytes: int = DEFAULT_ID_BYTES, taken: Optional[Container[str]] = None) -> str:
    """Return a new hex identifier of ``2 * nbytes`` characters.

    If ``taken`` is given, the result is guaranteed not to be a member
    of it.  ``IdentifierExhaustedError`` is raised after
    ``MAX_ATTEMPTS`` consecutive clashes.
    """
    if nbytes < 1:
        raise ValueError("nbytes must be a positive integer")
    for _ in range(MAX_ATTEMPTS):
        candidate = secrets.token_hex(nbytes)
        if taken is None or candidate not in taken:
            return candidate
    raise IdentifierExhaustedError(
        f"Could not generate an unused identifier after {MAX_ATTEMPTS} attempts"
    )
