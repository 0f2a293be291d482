from __future__ import annotations
from dataclasses import dataclass, field
import logging
import re
import subprocess
from typing import Protocol

log = logging.getLogger(__name__)

#: The branch name that ``git status --porcelain=v2`` reports for a detached
#: ``HEAD``
DETACHED = "(detached)"


class GitError(RuntimeError):
    pass


@dataclass(frozen=True)
class AheadBehind:
    #: The number of commits by which ``HEAD`` is ahead of ``@{upstream}``
    ahead: int

    #: The number of commits by which ``HEAD`` is behind ``@{upstream}``
    behind: int


@dataclass(frozen=True)
class WorkTreeStatus:
    #: The number of paths with merge conflicts
    unmerged: int = 0

    #: The number of paths with changes staged to be committed
    staged: int = 0

    #: The number of paths with unstaged changes in the working tree
    unstaged: int = 0

    #: The number of untracked paths in the working tree
    untracked: int = 0

    def has_changes(self) -> bool:
        return (self.unmerged + self.staged + self.unstaged + self.untracked) > 0


@dataclass(frozen=True)
class RepoSummary:
    #: The name of the current branch, `DETACHED` if ``HEAD`` is detached, or
    #: the empty string if Git did not report a branch
    branch: str = ""

    #: Divergence from the upstream branch, or `None` if there is no upstream
    ahead_behind: AheadBehind | None = None

    status: WorkTreeStatus = field(default_factory=WorkTreeStatus)

    #: The number of stash entries
    stash_count: int = 0


def parse_status(report: str) -> RepoSummary:
    """
    Parse the output of ``git status --porcelain=v2 --branch --show-stash``
    into a `RepoSummary`.

    Lines that cannot be understood (unknown headers, unknown entry types,
    malformed values) are skipped so that output from newer Git versions still
    parses.
    """
    branch = ""
    ahead_behind: AheadBehind | None = None
    stash_count = 0
    unmerged = staged = unstaged = untracked = 0
    for line in report.splitlines():
        if not line:
            continue
        if line[0] == "#":
            key, *values = line[1:].split() or [""]
            if key == "branch.head" and values:
                branch = values[0]
            elif key == "branch.ab" and len(values) >= 2:
                m1 = re.fullmatch(r"\+(\d+)", values[0])
                m2 = re.fullmatch(r"-(\d+)", values[1])
                if m1 and m2:
                    ahead_behind = AheadBehind(
                        ahead=int(m1[1]), behind=int(m2[1])
                    )
            elif key == "stash" and values and re.fullmatch(r"\d+", values[0]):
                stash_count = int(values[0])
        elif line[0] == "u":
            unmerged += 1
        elif line[0] in "12" and len(line) >= 4:
            # Ordinary & renamed/copied entries: "1 XY ..." / "2 XY ..."
            if line[2] != ".":
                staged += 1
            if line[3] != ".":
                unstaged += 1
        elif line[0] == "?":
            untracked += 1
    return RepoSummary(
        branch=branch,
        ahead_behind=ahead_behind,
        status=WorkTreeStatus(
            unmerged=unmerged,
            staged=staged,
            unstaged=unstaged,
            untracked=untracked,
        ),
        stash_count=stash_count,
    )


class VCS(Protocol):
    def root_dir(self) -> str | None: ...

    def status_report(self) -> str: ...

    def summary(self) -> RepoSummary: ...


class GitGateway:
    """
    Queries the Git repository containing the current directory.  `branch()`
    and `stashes()` query those values independently of `status_report()`.
    """

    def root_dir(self) -> str | None:
        """
        Return the absolute path to the top of the current work tree, or
        `None` if the current directory is not inside a work tree
        """
        return git("rev-parse", "--show-toplevel")

    def status_report(self) -> str:
        r = git("status", "--porcelain=v2", "--branch", "--show-stash")
        if r is None:
            raise GitError("`git status` failed")
        return r

    def summary(self) -> RepoSummary:
        return parse_status(self.status_report())

    def branch(self) -> str:
        """
        Return the name of the current branch, `DETACHED` if ``HEAD`` is
        detached, or the empty string if there are no commits yet
        """
        head = git("rev-parse", "--abbrev-ref", "HEAD")
        if head is None:
            return ""
        elif head == "HEAD":
            return DETACHED
        else:
            return head

    def stashes(self) -> int:
        """Return the number of stash entries"""
        count = git("rev-list", "--walk-reflogs", "--count", "refs/stash")
        return int(count) if count else 0


def git(*args: str) -> str | None:
    """
    Run a Git command (suppressing stderr) and return its stdout with trailing
    whitespace stripped.  If the command fails, return `None`.  If Git cannot
    be run at all, or if its output is not UTF-8, raise `GitError`.
    """
    log.debug("Running: git %s", " ".join(args))
    try:
        r = subprocess.run(
            ["git", *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            encoding="utf-8",
        )
    except OSError as e:
        raise GitError(f"Could not run git: {e}") from e
    except UnicodeDecodeError as e:
        raise GitError(f"git {args[0]} output is not UTF-8") from e
    if r.returncode != 0:
        log.debug("git %s exited with status %d", args[0], r.returncode)
        return None
    return r.stdout.rstrip()
