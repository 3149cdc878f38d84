"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, I/O errors, etc.).

    CorruptHistoryError:
        Raised when a persisted history slot cannot be decoded.
        HistoryStore recovers from it and never lets it reach callers.

Example:
    >>> from slink.dao.exceptions import CorruptHistoryError
    >>> raise CorruptHistoryError('History slot does not hold a JSON array.')
    Traceback (most recent call last):
        ...
    slink.dao.exceptions.CorruptHistoryError: History slot does not hold a JSON array.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, unwritable files, etc.
    """

    pass


class CorruptHistoryError(DAOError):
    """Exception raised when a persisted history slot holds malformed data."""

    pass
