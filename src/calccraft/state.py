'''
Calculator UI state, history entries, and the intents that change them.

All of these are immutable; the reducer returns new values.
'''

from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from .results import Error, Success


class Destination(Enum):
    CALCULATOR = 'calculator'
    HISTORY = 'history'


class HistoryEntry(NamedTuple):
    id: str
    # Epoch milliseconds
    timestamp: int
    expression: str
    result: Union[Success, Error]


class CalculatorState(NamedTuple):
    current_expression: str = ''
    # '= <formatted>' of the latest success
    last_result: Optional[str] = None
    error_message: Optional[str] = None
    # Newest first
    history: Tuple[HistoryEntry, ...] = ()
    destination: Destination = Destination.CALCULATOR


class Append(NamedTuple):
    text: str


class Delete(NamedTuple):
    pass


class Clear(NamedTuple):
    pass


class Evaluate(NamedTuple):
    pass


class ClearHistory(NamedTuple):
    pass


class SwitchDestination(NamedTuple):
    destination: Union[str, Destination]


class UseHistoryEntry(NamedTuple):
    entry_id: str
