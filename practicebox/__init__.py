"""Small console programs, games and language demonstrations for learners."""

__version__ = "0.1.0"