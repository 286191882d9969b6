import logging

from .engine import evaluate as evaluate_expression
from .reducer import epoch_millis, new_entry_id, reduce
from .state import CalculatorState


logger = logging.getLogger(__name__)


class Calculator:
    '''
    Holder of the one current calculator state.

    Every intent replaces the state wholesale through ``reduce``.
    '''

    def __init__(self, evaluate=evaluate_expression, *,
                 clock=epoch_millis, new_id=new_entry_id, state=None):
        self.evaluate = evaluate
        self.clock = clock
        self.new_id = new_id
        self.state = state if state is not None else CalculatorState()

    def dispatch(self, intent):
        '''
        Apply intent and return the new state.
        '''
        logger.debug('Dispatching %r', intent)
        self.state = reduce(self.state, intent, self.evaluate,
                            clock=self.clock, new_id=self.new_id)
        return self.state

    @property
    def history(self):
        return self.state.history

    @property
    def display(self):
        '''
        The two display lines: the expression being edited, then the error
        or, failing that, the last result.
        '''
        state = self.state
        if state.error_message is not None:
            secondary = state.error_message
        else:
            secondary = state.last_result or ''
        return state.current_expression, secondary
