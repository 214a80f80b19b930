"""Shell-style variable expansion against the process environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

# A reference is "$" followed by one of: a braced name, a lone "{" (bad
# syntax), a single special shell character, or a run of alphanumerics.
_REFERENCE = re.compile(
    r"\$(?:\{([^}]*)\}|(\{)|([*#$@!?\-0-9])|([A-Za-z0-9_]*))"
)


def expand_with_map(text: str, env: Mapping[str, str] | None = None) -> str:
    """Expand ``$NAME`` and ``${NAME}`` using the OS environment plus ``env``.

    Values in ``env`` take precedence over the OS environment.  ``$$``
    yields a literal dollar sign and undefined variables expand to nothing.
    """
    full_env: dict[str, str] = {"$": "$"}
    full_env.update(os.environ)
    if env:
        full_env.update(env)

    def lookup(name: str) -> str:
        return full_env.get(name, "")

    def replace(match: re.Match[str]) -> str:
        braced, lone_brace, special, name = match.groups()
        if braced is not None:
            # "${}" is bad syntax and is dropped.
            return lookup(braced) if braced else ""
        if lone_brace is not None:
            return ""
        if special is not None:
            return lookup(special)
        # A dollar not followed by a name is kept as is.
        return lookup(name) if name else "$"

    return _REFERENCE.sub(replace, text)


def expand(text: str) -> str:
    """Expand variables using only the OS environment."""
    return expand_with_map(text, None)