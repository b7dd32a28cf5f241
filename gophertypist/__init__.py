"""A typing game with quick and timed hard modes and a local leaderboard."""

__version__ = "0.1.0"