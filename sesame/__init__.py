"""Stream clustering benchmark pieces: points, random numbers, queues, timers, clustering and metrics."""

__version__ = "0.1.0"