'''
Infix calculator.

Supports plain old arithmetic, percent, a handful of Python's mathematical
functions (sin, cos, tan, log, sqrt, pow), and the constants pi and e. Not
intended to be anything more!

Expressions go text -> tokens -> postfix -> float -> formatted result. A pure
reducer folds keypad-style intents (append, delete, clear, evaluate, ...) into
calculator state, keeping an in-memory history of every evaluation.
'''

from .cli import CLI
from .engine import ExpressionEngine, evaluate, format_result
from .lexer import Lexer, tokenize
from .machine import Machine
from .reducer import reduce
from .results import Error, Success
from .session import Calculator
from .shunting import to_postfix
from .state import (Append, CalculatorState, Clear, ClearHistory, Delete,
                    Destination, Evaluate, HistoryEntry, SwitchDestination,
                    UseHistoryEntry)
from .util import CalcError, ErrorKind, EvaluationError


__all__ = (
    'CLI', 'Calculator', 'ExpressionEngine', 'Lexer', 'Machine',
    'evaluate', 'format_result', 'reduce', 'to_postfix', 'tokenize',
    'Error', 'Success', 'ErrorKind', 'CalcError', 'EvaluationError',
    'CalculatorState', 'Destination', 'HistoryEntry',
    'Append', 'Delete', 'Clear', 'Evaluate', 'ClearHistory',
    'SwitchDestination', 'UseHistoryEntry',
)
