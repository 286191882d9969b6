'''
Infix to postfix conversion, by Dijkstra's shunting-yard algorithm.
'''

from collections import deque
import logging

from .tokens import TokenKind
from .util import ErrorKind, EvaluationError


logger = logging.getLogger(__name__)


def _outranks(top, incoming):
    '''
    Return True if the operator on the side-stack should be output before
    pushing the incoming one.
    '''
    return (top.precedence > incoming.precedence or
            top.precedence == incoming.precedence and
            incoming.left_associative)


def _istop(stack, kind):
    return bool(stack) and stack[-1].kind is kind


def to_postfix(tokens):
    '''
    Reorder infix tokens into postfix (RPN) order.

    Does not check function arity; the machine finds out when it runs short
    of, or is left with extra, operands.

    :raises EvaluationError: MismatchedParentheses on unbalanced
                             parentheses, InvalidSyntax on a stray comma.
    '''
    output = []
    stack = deque()
    for token in tokens:
        kind = token.kind
        if kind in {TokenKind.NUMBER, TokenKind.CONSTANT}:
            output.append(token)
        elif kind in {TokenKind.FUNCTION, TokenKind.LEFT_PAREN}:
            stack.append(token)
        elif kind is TokenKind.COMMA:
            while stack and not _istop(stack, TokenKind.LEFT_PAREN):
                output.append(stack.pop())
            if not stack:
                raise EvaluationError(ErrorKind.INVALID_SYNTAX,
                                      'Misplaced comma')
        elif kind is TokenKind.OPERATOR:
            while _istop(stack, TokenKind.OPERATOR) and \
                  _outranks(stack[-1].value, token.value):
                output.append(stack.pop())
            stack.append(token)
        elif kind is TokenKind.RIGHT_PAREN:
            while stack and not _istop(stack, TokenKind.LEFT_PAREN):
                output.append(stack.pop())
            if not stack:
                raise EvaluationError(ErrorKind.MISMATCHED_PARENTHESES,
                                      "Missing '('")
            stack.pop()
            # Function call: the function follows its arguments.
            if _istop(stack, TokenKind.FUNCTION):
                output.append(stack.pop())

    while stack:
        token = stack.pop()
        if token.kind is TokenKind.LEFT_PAREN:
            raise EvaluationError(ErrorKind.MISMATCHED_PARENTHESES,
                                  "Missing ')'")
        output.append(token)

    logger.debug('Postfix: %s', ' '.join(map(str, output)))
    return output
