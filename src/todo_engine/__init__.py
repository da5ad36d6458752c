"""Local-first task list: a pure state engine with pluggable persistence."""

__version__ = "0.1.0"
