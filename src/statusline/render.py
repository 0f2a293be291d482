from __future__ import annotations
from .git import AheadBehind, RepoSummary, WorkTreeStatus
from .styles import (
    AHEAD,
    AHEAD_GLYPH,
    BEHIND,
    BEHIND_GLYPH,
    ICON,
    NO_UPSTREAM,
    RESET,
    STAGED,
    UNMERGED,
    UNSTAGED,
    UNTRACKED,
)


def render_ahead_behind(ab: AheadBehind | None) -> str:
    """
    Show the commits ahead of & behind the upstream.  If there is no upstream,
    show a warning glyph instead.
    """
    if ab is None:
        return NO_UPSTREAM
    s = ""
    if ab.ahead > 0:
        s += f"{AHEAD}{AHEAD_GLYPH}{ab.ahead}"
    if ab.behind > 0:
        s += f"{BEHIND}{BEHIND_GLYPH}{ab.behind}"
    if s:
        s += RESET
    return s


def render_status(status: WorkTreeStatus) -> str:
    if not status.has_changes():
        return ""
    s = ""
    for count, color in [
        (status.unmerged, UNMERGED),
        (status.staged, STAGED),
        (status.unstaged, UNSTAGED),
        (status.untracked, UNTRACKED),
    ]:
        if count > 0:
            s += f"{color}{count}"
    return s + RESET


def render_stash(count: int) -> str:
    return f"{{{count}}}" if count > 0 else ""


def render_summary(summary: RepoSummary) -> str:
    """
    Construct & return the Git portion of the prompt: icon, branch,
    ahead/behind counts, working tree counts in parentheses, and stash count
    in braces
    """
    s = ICON + summary.branch + render_ahead_behind(summary.ahead_behind)
    if status := render_status(summary.status):
        s += f"({status})"
    return s + render_stash(summary.stash_count)
