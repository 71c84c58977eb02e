"""Latest order-book depth snapshots per stream from a combined futures depth feed."""

__version__ = "0.1.0"
__all__ = ["feed", "streams"]