from typing import Optional


class SelectionError(Exception):
    """Base error for anything that makes test selection unavailable.

    ``selected_count`` is filled in by ``read_tests_to_run`` with the number of
    candidates, i.e. the count to use when falling back to running everything.
    """

    def __init__(self, message: str, selected_count: Optional[int] = None):
        super().__init__(message)
        self.selected_count = selected_count


class StoreConnectionError(SelectionError):
    """The object store could not be reached or authenticated against."""


class ObjectNotFoundError(SelectionError):
    """The statistics blob does not exist or could not be opened."""


class StatisticsReadError(SelectionError):
    """The statistics blob could not be fully read."""


class StatisticsParseError(SelectionError):
    """The statistics payload is not a well formed 4 column CSV."""
