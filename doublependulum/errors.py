"""
errors.py

Exceptions raised by the double pendulum core.
"""


class UnwiredCounterpartError(RuntimeError):
    """Raised when a link is used before its counterpart has been attached."""
