"""Two-stack integer sorting with a fixed operation set, plus a checker."""

__version__ = "1.0.0"