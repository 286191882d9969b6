'''
Outcome of evaluating one expression: exactly one of Success or Error.
'''

from typing import NamedTuple

from .util import ErrorKind


class Success(NamedTuple):
    value: float
    # Display form, e.g. 4 rather than 4.0
    formatted: str

    @property
    def ok(self):
        return True

    def __str__(self):
        return self.formatted


class Error(NamedTuple):
    kind: ErrorKind
    message: str

    @property
    def ok(self):
        return False

    def __str__(self):
        return '{}: {}'.format(self.kind, self.message)
