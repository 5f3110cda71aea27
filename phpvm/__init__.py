"""Switch between Homebrew PHP versions, per project and per shell."""

__version__ = "1.1.1"