from __future__ import annotations


class IllegalStateError(Exception):
    """An operation was invoked in a state that forbids it."""
    def __init__(self, message:str) -> None:
        self.message = message
        super().__init__(message)


class InvalidIniFileError(ValueError):
    def __init__(self, path:str, details:str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"invalid ini file: path='{path}', details={details}")
