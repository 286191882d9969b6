'''
Pure state transitions for the calculator.

``reduce`` never raises; intents it cannot honour leave the state as is.
Evaluation, time, and id generation are passed in by the caller.
'''

import time
import uuid

import regex

from .results import Success
from .state import (Append, Clear, ClearHistory, Delete, Destination,
                    Evaluate, HistoryEntry, SwitchDestination,
                    UseHistoryEntry)


OPERATORS = frozenset('+-*/%')
# Whatever follows the last of these is the number being typed.
SEGMENT_SEPARATOR = regex.compile(r'[-+*/%()]')
RESULT_PREFIX = '= '


def epoch_millis():
    return time.time_ns() // 1000000


def new_entry_id():
    return str(uuid.uuid4())


def _append(state, text):
    if not text or not isinstance(text, str):
        return state

    if text == '.':
        segment = SEGMENT_SEPARATOR.split(state.current_expression)[-1]
        if '.' in segment:
            return state

    expression = state.current_expression
    showing_result = state.last_result == RESULT_PREFIX + expression
    # A failed expression is only kept for Delete; typing starts over.
    if showing_result and text not in OPERATORS or \
       state.error_message is not None:
        expression = ''
    if expression == '0' and text != '.':
        expression = ''

    last = expression.rstrip()[-1:]
    if text == '(' and (last.isdigit() or last == ')'):
        text = '*('

    return state._replace(current_expression=expression + text,
                          error_message=None)


def _delete(state):
    if not state.current_expression:
        return state
    return state._replace(current_expression=state.current_expression[:-1],
                          error_message=None)


def _clear(state):
    # last_result stays until the next evaluation
    return state._replace(current_expression='', error_message=None)


def _evaluate(state, evaluate, clock, new_id):
    expression = state.current_expression.strip()
    if not expression:
        return state

    result = evaluate(expression)
    entry = HistoryEntry(id=new_id(),
                         timestamp=clock(),
                         expression=expression,
                         result=result)
    history = (entry,) + state.history

    if isinstance(result, Success):
        return state._replace(current_expression=result.formatted,
                              last_result=RESULT_PREFIX + result.formatted,
                              error_message=None,
                              history=history)
    # Keep the expression so it can be fixed.
    return state._replace(error_message=result.message, history=history)


def _switch_destination(state, destination):
    try:
        destination = Destination(destination)
    except ValueError:
        return state
    return state._replace(destination=destination)


def _use_history_entry(state, entry_id):
    entry = next((entry
                  for entry
                  in state.history
                  if entry.id == entry_id),
                 None)
    if entry is None:
        return state
    if isinstance(entry.result, Success):
        last_result = RESULT_PREFIX + entry.result.formatted
    else:
        last_result = None
    return state._replace(current_expression=entry.expression,
                          destination=Destination.CALCULATOR,
                          error_message=None,
                          last_result=last_result)


def reduce(state, intent, evaluate, *,
           clock=epoch_millis, new_id=new_entry_id):
    '''
    Return the state following intent.

    :param evaluate: Callable taking an expression, returning a Success or an
                     Error. Only called for Evaluate.
    :param clock: Callable returning the current epoch milliseconds, for new
                  history entries.
    :param new_id: Callable returning a fresh history entry id.
    '''
    if isinstance(intent, Append):
        return _append(state, intent.text)
    elif isinstance(intent, Delete):
        return _delete(state)
    elif isinstance(intent, Clear):
        return _clear(state)
    elif isinstance(intent, Evaluate):
        return _evaluate(state, evaluate, clock, new_id)
    elif isinstance(intent, ClearHistory):
        return state._replace(history=())
    elif isinstance(intent, SwitchDestination):
        return _switch_destination(state, intent.destination)
    elif isinstance(intent, UseHistoryEntry):
        return _use_history_entry(state, intent.entry_id)
    return state
