'''
Tokens shared by the lexer, the shunting-yard converter, and the machine.
'''

from enum import Enum
from typing import NamedTuple, Optional, Union


class TokenKind(Enum):
    NUMBER = 'number'
    OPERATOR = 'operator'
    FUNCTION = 'function'
    CONSTANT = 'constant'
    LEFT_PAREN = 'left_paren'
    RIGHT_PAREN = 'right_paren'
    COMMA = 'comma'


class Operator(Enum):
    '''
    Operators with their fixed precedence and associativity.

    Higher precedence binds tighter.
    '''
    ADD = ('+', 2, True)
    SUBTRACT = ('-', 2, True)
    MULTIPLY = ('*', 3, True)
    DIVIDE = ('/', 3, True)
    # Postfix, but left-associative as far as shunting-yard cares
    PERCENT = ('%', 4, True)
    # ~ only ever shows up in dumps; the lexer reads a unary -
    UNARY_MINUS = ('~', 5, False)

    def __init__(self, symbol, precedence, left_associative):
        self.symbol = symbol
        self.precedence = precedence
        self.left_associative = left_associative

    def __str__(self):
        return self.symbol


class Token(NamedTuple):
    '''
    Immutable lexeme.

    ``value`` holds the float for numbers, the Operator for operators, and
    the name for functions and constants. Punctuation carries no value.
    '''
    kind: TokenKind
    value: Optional[Union[float, Operator, str]] = None

    def __str__(self):
        if self.kind is TokenKind.NUMBER:
            return repr(self.value)
        elif self.value is not None:
            return str(self.value)
        return _PUNCTUATION_SYMBOLS[self.kind]


_PUNCTUATION_SYMBOLS = {
    TokenKind.LEFT_PAREN: '(',
    TokenKind.RIGHT_PAREN: ')',
    TokenKind.COMMA: ',',
}


def number(value):
    return Token(TokenKind.NUMBER, float(value))


def operator(op):
    return Token(TokenKind.OPERATOR, op)


def function(name):
    return Token(TokenKind.FUNCTION, name)


def constant(name):
    return Token(TokenKind.CONSTANT, name)


LEFT_PAREN = Token(TokenKind.LEFT_PAREN)
RIGHT_PAREN = Token(TokenKind.RIGHT_PAREN)
COMMA = Token(TokenKind.COMMA)
