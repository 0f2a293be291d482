from __future__ import annotations
from pathlib import Path, PurePosixPath
import re

#: Path component separator
SEP = "/"


def abbreviate_segment(name: str) -> str:
    """
    Shorten a single path component to its leading non-word characters (if
    any) plus the first word character, e.g., ``.local`` becomes ``.l``.  A
    component without any word characters is returned unchanged.
    """
    if m := re.match(r"\W*\w", name):
        return m.group()
    return name


def abbreviate(path: str, keep: int) -> str:
    """
    Shorten every component of ``path`` with `abbreviate_segment()` except for
    the last ``keep`` components
    """
    if keep < 0:
        raise ValueError(f"keep must be nonnegative: {keep}")
    segments = path.split(SEP)
    limit = max(len(segments) - keep, 0)
    return SEP.join(
        abbreviate_segment(seg) if i < limit else seg
        for i, seg in enumerate(segments)
    )


def tildify(path: str, home: str | None = None) -> str:
    """
    If ``path`` is at or under the user's home directory (or ``home``, if
    given), replace the home directory portion with ``~``
    """
    p = PurePosixPath(path)
    try:
        rel = p.relative_to(home if home is not None else Path.home())
    except (ValueError, RuntimeError):
        # RuntimeError: the home directory could not be determined
        return path
    return "~" if rel == PurePosixPath(".") else f"~{SEP}{rel}"
