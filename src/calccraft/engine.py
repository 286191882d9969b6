from decimal import Decimal
import logging

from .lexer import tokenize
from .shunting import to_postfix
from .machine import Machine
from .results import Error, Success
from .util import ErrorKind, EvaluationError


logger = logging.getLogger(__name__)


def format_result(value):
    '''
    Format a float for display.

    Integral values lose the decimal point; others keep the shortest digits
    that read back as the same float. Never in exponent form, so the text
    lexes back as a number.
    '''
    if value == 0:
        # Not -0
        return '0'
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


class ExpressionEngine:
    '''
    Facade over lexer, shunting-yard converter, and machine.

    Holds no state between evaluations.
    '''

    EMPTY_MESSAGE = 'Expression is empty'

    def evaluate(self, expression):
        '''
        Evaluate an infix expression to a Success or an Error.

        Never raises for bad user input; the first failing stage decides the
        error kind.
        '''
        if not expression or not expression.strip():
            return Error(ErrorKind.INVALID_SYNTAX, type(self).EMPTY_MESSAGE)
        try:
            tokens = tokenize(expression)
            postfix = to_postfix(tokens)
            value = Machine().run(postfix)
        except EvaluationError as e:
            logger.debug('Evaluating %r failed: %s', expression, e)
            return Error(e.kind, e.message)
        return Success(value, format_result(value))


def evaluate(expression):
    return ExpressionEngine().evaluate(expression)
