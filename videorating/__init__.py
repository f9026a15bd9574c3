"""A console catalog of movies and series episodes with user ratings."""

__version__ = "0.1.0"
__all__ = ["catalog", "menu", "videos"]