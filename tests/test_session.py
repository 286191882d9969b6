'''
Session and keyboard mapping tests
'''

from calccraft.keys import keystrokes, map_key
from calccraft.state import (Append, CalculatorState, Clear, Delete,
                             Destination, Evaluate, SwitchDestination)


def press(calculator, *keys):
    for key in keys:
        calculator.dispatch(map_key(key))
    return calculator.state


def test_keystrokes():
    assert keystrokes('sqrt(16)') == ['sqrt', '(', '1', '6', ')']
    assert keystrokes(' 1 + 2 ') == ['1', '+', '2']
    assert keystrokes('2pi') == ['2', 'pi']


def test_map_key():
    assert map_key('7') == Append('7')
    assert map_key('.') == Append('.')
    assert map_key('pow') == Append('pow')
    assert isinstance(map_key('enter'), Evaluate)
    assert isinstance(map_key('='), Evaluate)
    assert isinstance(map_key('backspace'), Delete)
    assert isinstance(map_key('escape'), Clear)
    assert isinstance(map_key('delete'), Clear)


def test_unmapped_keys():
    for key in '$', 'tab', 'f1', 'x':
        assert map_key(key) is None


def test_starts_empty(calculator):
    assert calculator.state == CalculatorState()
    assert calculator.display == ('', '')


def test_typing_and_evaluating(calculator):
    state = press(calculator, *keystrokes('2(3+4)'), 'enter')
    assert state.current_expression == '14'
    assert calculator.display == ('14', '= 14')
    [entry] = calculator.history
    assert entry.expression == '2*(3+4)'
    assert entry.id == 'entry-1'
    assert entry.timestamp == 1_000_000


def test_chaining_from_result(calculator):
    press(calculator, *keystrokes('6/4'), 'enter')
    state = press(calculator, '*', '2', '=')
    assert state.current_expression == '3'
    assert [entry.expression for entry in calculator.history] == ['1.5*2',
                                                                  '6/4']


def test_error_takes_display_priority(calculator):
    press(calculator, *keystrokes('3'), 'enter')
    press(calculator, *keystrokes('1/0'), 'enter')
    assert calculator.display == ('1/0', 'Division by zero')
    press(calculator, 'backspace', 'backspace', 'enter')
    assert calculator.display == ('1', '= 1')


def test_escape_clears_but_keeps_result(calculator):
    state = press(calculator, '9', 'enter', '+', '1', 'escape')
    assert state.current_expression == ''
    assert calculator.display == ('', '= 9')


def test_dispatch_returns_new_state(calculator):
    before = calculator.state
    after = calculator.dispatch(SwitchDestination('history'))
    assert after is calculator.state
    assert after.destination is Destination.HISTORY
    assert before.destination is Destination.CALCULATOR
