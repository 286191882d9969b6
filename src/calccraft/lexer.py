from functools import reduce
import logging
import operator

import regex

from . import tokens
from .tokens import Operator, TokenKind
from .util import ErrorKind, EvaluationError


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for the infix expression *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    FUNCTIONS = frozenset({'sin', 'cos', 'tan', 'log', 'sqrt', 'pow'})
    CONSTANTS = frozenset({'pi', 'e'})

    # Number. Digits and at most one decimal point.
    NUMBER = r'''
              (?:
                  # 1, 12, 12. (notice trailing dot), 1.3
                  \d+
                  (?:
                      \.
                      \d*
                  )?
              )|(?:
                  # .2, read as 0.2. A lone . is not a number.
                  \.
                  \d+
              )
              '''
    # Function or constant name; checked against the tables after matching.
    IDENTIFIER = r'\p{L}+'
    OPERATOR = r'[-+*/%]'
    PUNCTUATION = r'[(),]'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<identifier>' + IDENTIFIER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<punctuation>' + PUNCTUATION + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, FLAGS)
    # What the user probably meant as a single literal, for error messages.
    LITERAL = regex.compile(r'[\d.]+')

    BINARY = {
        '+': Operator.ADD,
        '-': Operator.SUBTRACT,
        '*': Operator.MULTIPLY,
        '/': Operator.DIVIDE,
        '%': Operator.PERCENT,
    }

    PUNCTUATION_TOKENS = {
        '(': tokens.LEFT_PAREN,
        ')': tokens.RIGHT_PAREN,
        ',': tokens.COMMA,
    }

    def lex(self, line):
        '''
        Take a line and yield all tokens.

        Stops on the first bad lexeme with an UnknownToken EvaluationError.
        '''
        previous = None
        position = 0
        while position < len(line):
            match = type(self).PATTERN.match(line, position)
            if match is None:
                raise EvaluationError(ErrorKind.UNKNOWN_TOKEN,
                                      "Unknown character '{}'"
                                      .format(line[position]))
            position = match.end()
            if match.group('space'):
                continue
            token = self.parse(match, previous)
            # 1.2.3 is one bad literal, not 1.2 followed by .3
            if token.kind is TokenKind.NUMBER and \
               line.startswith('.', position):
                literal = type(self).LITERAL.match(line, match.start())
                raise EvaluationError(ErrorKind.UNKNOWN_TOKEN,
                                      "Malformed number '{}'"
                                      .format(literal.group(0)))
            yield token
            previous = token

    def parse(self, match, previous):
        '''
        Turn one lexeme match into a token.

        :param previous: Token lexed before this one, if any. Decides
                         whether - is subtraction or negation.
        '''
        lexeme = match.group(0)
        if match.group('number'):
            return tokens.number(lexeme)
        elif match.group('identifier'):
            if lexeme in type(self).FUNCTIONS:
                return tokens.function(lexeme)
            elif lexeme in type(self).CONSTANTS:
                return tokens.constant(lexeme)
            raise EvaluationError(ErrorKind.UNKNOWN_TOKEN,
                                  "Unknown identifier '{}'".format(lexeme))
        elif match.group('operator'):
            if lexeme == '-' and self.isunary(previous):
                return tokens.operator(Operator.UNARY_MINUS)
            return tokens.operator(type(self).BINARY[lexeme])
        return type(self).PUNCTUATION_TOKENS[lexeme]

    def isunary(self, previous):
        '''
        Return True if a - following this token negates rather than subtracts.
        '''
        return previous is None or previous.kind in {TokenKind.OPERATOR,
                                                     TokenKind.LEFT_PAREN,
                                                     TokenKind.COMMA}


def tokenize(text):
    '''
    Lex a whole expression into a list of tokens.
    '''
    result = list(Lexer().lex(text))
    logger.debug('Tokens for %r: %s', text, ' '.join(map(str, result)))
    return result
