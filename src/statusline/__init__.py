"""
Compact Git-aware shell prompt segment

``statusline`` prints a single line summarizing the current directory and the
Git repository it lives in, packed as tightly as possible:

- Every directory above the repository root and above the current directory
  is shortened to its first letter (keeping any leading dots or tildes)
- Shows the current branch, colored commit counts ahead of & behind the
  upstream, and a warning glyph if there is no upstream at all
- Shows counts of conflicted, staged, unstaged, and untracked files
- Shows the number of stashed changes
- Output can be escaped for use in Bash's or zsh's PS1
"""

__version__ = "0.1.0"
__license__ = "MIT"
