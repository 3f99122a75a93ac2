"""Console front end for a sea battle game: a task menu, text buffer and terminal output."""

__version__ = "0.1.0"