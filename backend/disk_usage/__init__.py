"""disk-usage: disk statistics sidecar for a single mount."""

__version__ = "1.0.0"
