"""pcos-companion: personal PCOS health-tracking backend."""

__version__ = "0.1.0"
