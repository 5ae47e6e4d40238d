"""
Exceptions raised by evonet.
"""

class ShapeMismatchError(ValueError):
    """
    Raised when a vector or a network does not have the shape an operation requires.

    This signals a bug in the calling code (wrong input length, crossing over
    networks of different shapes) and is never corrected silently.
    """
