"""Per-user mind map document store with realtime socket tokens."""

__version__ = "0.1.0"
