"""healthlog — personal health check-in log with duplicate checks and a static dashboard."""

__version__ = "0.1.0"
