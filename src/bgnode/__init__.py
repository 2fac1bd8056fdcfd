"""Bootstrap and supervise a local execution + consensus client pair."""

__version__ = "0.1.0"
