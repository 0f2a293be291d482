from __future__ import annotations
import re
from typing import Protocol

#: Select Graphic Rendition sequences used when rendering the prompt
RESET = "\x1B[m"
ALERT = "\x1B[91;1m"
AHEAD = "\x1B[32m"
BEHIND = "\x1B[31m"
UNMERGED = "\x1B[91;1m"
STAGED = "\x1B[32m"
UNSTAGED = "\x1B[31m"
UNTRACKED = "\x1B[90m"

#: Powerline branch symbol in orange; leads every Git status string
ICON = "\x1B[38;5;202m\uE0A0" + RESET

AHEAD_GLYPH = "↑"
BEHIND_GLYPH = "↓"

#: Shown in place of the ahead/behind counts when the branch has no upstream
NO_UPSTREAM = ALERT + "↯" + RESET

SGR_RGX = re.compile(r"(\x1B\[[0-9;]*m)")


class Styler(Protocol):
    def __call__(self, s: str) -> str: ...


class ANSIStyler:
    """Class for passing prompt strings through for display in the terminal"""

    def __call__(self, s: str) -> str:
        return s


class BashStyler:
    """Class for escaping prompt strings for use in Bash's PS1 variable"""

    def __call__(self, s: str) -> str:
        r"""
        Return the string ``s`` escaped for use in a PS1 variable.  Every SGR
        escape sequence in ``s`` is wrapped in ``\[ ... \]`` so that Bash does
        not count it towards the width of the prompt.
        """
        return "".join(
            rf"\[{part}\]" if i % 2 else self.escape(part)
            for i, part in enumerate(SGR_RGX.split(s))
        )

    def escape(self, s: str) -> str:
        """
        Escape characters in the string ``s`` that have special meaning in a
        PS1 variable
        """
        return s.replace("\\", r"\\")


class ZshStyler:
    """Class for escaping prompt strings for use in zsh's PS1 variable"""

    def __call__(self, s: str) -> str:
        """
        Return the string ``s`` escaped for use in a zsh PS1 variable, with
        every SGR escape sequence wrapped in ``%{ ... %}``
        """
        return "".join(
            f"%{{{part}%}}" if i % 2 else self.escape(part)
            for i, part in enumerate(SGR_RGX.split(s))
        )

    def escape(self, s: str) -> str:
        return s.replace("%", "%%")
