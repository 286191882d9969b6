'''
Keyboard to intent mapping.
'''

import regex

from .lexer import Lexer
from .state import Append, Clear, Delete, Evaluate


APPENDABLE = frozenset('0123456789+-*/%(),.') | Lexer.FUNCTIONS | \
             Lexer.CONSTANTS

ACTIONS = {
    'enter': Evaluate,
    '=': Evaluate,
    'backspace': Delete,
    'escape': Clear,
    # Forward delete clears too
    'delete': Clear,
}

# Letter runs are one key, so sqrt is a single Append.
KEYSTROKE = regex.compile(r'\p{L}+|\S')


def map_key(key):
    '''
    Return the intent for a key name or typed character, or None if the key
    means nothing to the calculator.
    '''
    if key in ACTIONS:
        return ACTIONS[key]()
    elif key in APPENDABLE:
        return Append(key)
    return None


def keystrokes(line):
    '''
    Split typed text into key names, dropping whitespace.
    '''
    return KEYSTROKE.findall(line)
