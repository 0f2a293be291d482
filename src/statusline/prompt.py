from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from .git import VCS, RepoSummary
from .paths import SEP, abbreviate, tildify
from .render import render_summary

log = logging.getLogger(__name__)


@dataclass
class PromptInfo:
    #: The absolute path to the current working directory
    cwd: str

    #: The top of the Git work tree containing `cwd`, or `None` if `cwd` is
    #: not in a work tree
    root: str | None

    #: The state of the repository at `root`; non-`None` iff `root` is
    summary: RepoSummary | None

    @classmethod
    def get(cls, vcs: VCS, cwd: str) -> PromptInfo:
        root = vcs.root_dir()
        if root is None:
            log.debug("%s is not inside a Git work tree", cwd)
            summary = None
        else:
            summary = vcs.summary()
        return cls(cwd=cwd, root=root, summary=summary)

    def display(self) -> str:
        """Construct & return the prompt string for the current directory"""
        if self.root is None or self.summary is None:
            return abbreviate(tildify(self.cwd), 1)
        # Contract the root to start with ``~`` only after checking that it
        # really is a parent of the current directory
        common, remainder = split_at_root(self.cwd, self.root)
        root = tildify(common)
        return assemble(root + remainder, root, render_summary(self.summary))


def split_at_root(current_path: str, root: str) -> tuple[str, str]:
    """
    Split ``current_path`` into the repository root ``root`` and the rest of
    the path

    :raises ValueError: if ``root`` is not ``current_path`` or one of its
        parent directories
    """
    cut = len(root)
    if not (
        current_path.startswith(root)
        and (
            cut == len(current_path)
            or root.endswith(SEP)
            or current_path[cut] == SEP
        )
    ):
        raise ValueError(
            f"Repository root {root!r} is not a parent of {current_path!r}"
        )
    return current_path[:cut], current_path[cut:]


def assemble(current_path: str, root: str, summary_render: str) -> str:
    """
    Split ``current_path`` at the end of the repository root ``root`` and
    return the shortened root path, ``summary_render``, and the shortened
    remainder of the path, in that order

    :raises ValueError: if ``root`` is not ``current_path`` or one of its
        parent directories
    """
    common, remainder = split_at_root(current_path, root)
    return abbreviate(common, 1) + summary_render + abbreviate(remainder, 1)


def statusline(vcs: VCS) -> str:
    """
    Return the prompt string for the current working directory, or the empty
    string if the current directory cannot be determined
    """
    try:
        cwd = os.getcwd()
    except OSError as e:
        log.debug("Could not determine current directory: %s", e)
        return ""
    return PromptInfo.get(vcs, cwd).display()
