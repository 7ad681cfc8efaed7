"""z-command - install AI coding assistant skills and agents."""

__version__ = "1.1.0"
