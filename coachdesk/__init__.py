"""Executive coaching workspace: clients, sessions and AI session analysis."""

__version__ = "0.1.0"
