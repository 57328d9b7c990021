"""Domain Guard: match declarative guard rules against pull-request diffs."""

__version__ = "0.1.0"
