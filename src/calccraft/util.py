from enum import Enum
from functools import wraps


class ErrorKind(Enum):
    '''
    Recoverable evaluation failures, one per pipeline stage concern.
    '''
    DIVIDE_BY_ZERO = 'DivideByZero'
    DOMAIN_ERROR = 'DomainError'
    STACK_UNDERFLOW = 'StackUnderflow'
    INVALID_SYNTAX = 'InvalidSyntax'
    MISMATCHED_PARENTHESES = 'MismatchedParentheses'
    UNKNOWN_TOKEN = 'UnknownToken'

    def __str__(self):
        return self.value


class CalcError(Exception):
    pass


class EvaluationError(CalcError):
    '''
    Raised by the lexer, converter, and machine; caught by the engine.
    '''

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return '{}: {}'.format(self.kind, self.message)


def wrap_user_errors(kind, fmt):
    '''
    Decorator that converts Python math exceptions to EvaluationErrors.

    Passes through EvaluationErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except EvaluationError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise EvaluationError(kind,
                                      fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
