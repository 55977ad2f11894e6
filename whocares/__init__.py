"""Professional silence tracker: a Flask counter page with generated Open Graph images."""

__version__ = "0.1.0"