"""Book Sentiment Analyzer - chapter-level sentiment trajectories for novels."""

__version__ = "0.1.0"
