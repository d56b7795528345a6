from searchbridge.observability.logging import setup_logging

__all__ = ["setup_logging"]
