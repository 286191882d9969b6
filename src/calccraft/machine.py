from collections import deque
from inspect import signature as getsignature, Parameter
import logging
import operator
import math

from .tokens import Operator, TokenKind
from .util import CalcError, ErrorKind, EvaluationError, wrap_user_errors


logger = logging.getLogger(__name__)


# FIXME: *really* dirty hack around getsignature not working on some
# builtins.
def _unary(f):
    '''
    Dirty hack to work around 1-arg builtins failing inspect.getsignature.
    '''
    def wrapped(only):
        return f(only)
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


def _binary(f):
    '''
    Dirty hack to work around 2-arg builtins failing inspect.getsignature.
    '''
    def wrapped(left, right):
        return f(left, right)
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


def _divide(left, right):
    if right == 0.0:
        raise EvaluationError(ErrorKind.DIVIDE_BY_ZERO, 'Division by zero')
    return left / right


def _percent(only):
    return only / 100.0


def _log(only):
    '''
    Natural logarithm.
    '''
    if only <= 0:
        raise EvaluationError(ErrorKind.DOMAIN_ERROR,
                              'Logarithm argument must be positive')
    return math.log(only)


def _sqrt(only):
    if only < 0:
        raise EvaluationError(ErrorKind.DOMAIN_ERROR,
                              'Square root argument must be non-negative')
    return math.sqrt(only)


class Machine:
    '''
    Arithmetic stack machine.

    Takes postfix tokens and runs them, leaving a single float.
    '''

    CONSTANTS = {
        'pi': math.pi,
        'e': math.e,
    }

    OPERATORS = {
        Operator.ADD: _binary(operator.__add__),
        Operator.SUBTRACT: _binary(operator.__sub__),
        Operator.MULTIPLY: _binary(operator.__mul__),
        Operator.DIVIDE: _divide,
        Operator.PERCENT: _percent,
        Operator.UNARY_MINUS: _unary(operator.__neg__),
    }

    FUNCTIONS = {
        'sin': _unary(math.sin),
        'cos': _unary(math.cos),
        'tan': _unary(math.tan),
        'log': _log,
        'sqrt': _sqrt,
        # Base is the left (deeper) operand.
        'pow': _binary(math.pow),
    }

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()

    def run(self, postfix):
        '''
        Run all postfix tokens on an empty stack and return the result.

        :raises EvaluationError: on any failure, with its kind.
        '''
        self.stack.clear()
        for token in postfix:
            self.feed(token)
        return self.result()

    def feed(self, token):
        '''
        Stack or run a single token.
        '''
        if token.kind is TokenKind.NUMBER:
            self._pshstack(token.value)
        elif token.kind is TokenKind.CONSTANT:
            try:
                self._pshstack(type(self).CONSTANTS[token.value])
            except KeyError:
                # Lexer only produces known constants.
                raise CalcError('Unknown constant {!r}'.format(token.value))
        elif token.kind is TokenKind.OPERATOR:
            self._apply(token.value.symbol,
                        type(self).OPERATORS[token.value])
        elif token.kind is TokenKind.FUNCTION:
            self._apply(token.value, type(self).FUNCTIONS[token.value])
        else:
            raise EvaluationError(ErrorKind.INVALID_SYNTAX,
                                  "Unexpected '{}'".format(token))

    def result(self):
        '''
        Pop the one and only value left on the stack.

        It has to be finite.
        '''
        if len(self.stack) != 1:
            raise EvaluationError(ErrorKind.INVALID_SYNTAX,
                                  'Expected a single value, {} left on stack'
                                  .format(len(self.stack)))
        value = self.stack.pop()
        if not math.isfinite(value):
            raise EvaluationError(ErrorKind.DOMAIN_ERROR,
                                  'Result is not a finite number')
        logger.debug('Result: %r', value)
        return value

    def _arity(self, f):
        '''
        Return number of non-default positional arguments.
        '''
        parameters = getsignature(f).parameters.values()
        positionals = [parameter
                       for parameter
                       in parameters
                       if parameter.kind == Parameter.POSITIONAL_OR_KEYWORD and
                          parameter.default == Parameter.empty]
        return len(positionals)

    @wrap_user_errors(ErrorKind.DOMAIN_ERROR, 'Cannot evaluate {1}')
    def _apply(self, name, f):
        '''
        Apply callable to stack, popping arguments as needed.
        '''
        # If you don't reverse, you'll do 3**2 when you say pow(2, 3).
        args = reversed(self._popstack(self._arity(f)))
        self._pshstack(f(*args))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise EvaluationError(ErrorKind.STACK_UNDERFLOW,
                                  'Less than {} operand(s) on stack'
                                  .format(n))
        return [self.stack.pop() for _ in range(n)]


def evaluate(postfix):
    '''
    Evaluate postfix tokens to a float.
    '''
    return Machine().run(postfix)
