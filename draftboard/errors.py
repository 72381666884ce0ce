# draftboard/errors.py


class DraftboardError(Exception):
    """Base class for all draftboard errors."""


class StoreUnavailable(DraftboardError):
    """Raised when the backing row store is missing or cannot be opened."""


class StoreWriteError(DraftboardError):
    """Raised when appending a record to the row store fails."""


class SubmissionError(DraftboardError):
    """Raised when a match submission cannot be turned into a row."""


class MissingFieldError(SubmissionError):
    """Raised when a submission lacks a required nested object."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Missing required field: {path}")


class InvalidFieldError(SubmissionError):
    """Raised when a submission field holds a value outside its allowed set."""

    def __init__(self, path: str, value: object):
        self.path = path
        self.value = value
        super().__init__(f"Invalid value for {path}: {value!r}")
