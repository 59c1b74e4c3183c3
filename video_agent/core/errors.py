"""
Errors raised by the Video Agent.
"""


class InvalidBriefError(ValueError):
    """A required brief field is missing, empty or out of range."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid brief field '{field}': {reason}")
