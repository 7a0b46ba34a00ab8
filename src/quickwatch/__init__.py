"""QuickWatch: nearby movie showtimes ranked for watching right now."""

__version__ = "0.1.0"
