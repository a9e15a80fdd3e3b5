"""QVerse: Quran reference resolution and verse assembly."""

__version__ = "0.1.0"
