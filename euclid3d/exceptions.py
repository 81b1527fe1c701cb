"""Custom exception types to more accurately represent difficulties"""

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Error subtype for when an argument is absent or violates a geometric precondition"""
