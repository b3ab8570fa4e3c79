"""rmd - a safety layer in front of file removal.

Targets are classified, protected paths are refused, and everything else
is moved to the freedesktop trash unless the user explicitly asks for a
permanent delete.
"""

__version__ = "1.0.0"
