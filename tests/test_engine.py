'''
Expression engine tests
'''

import math

from calccraft.engine import ExpressionEngine, evaluate, format_result
from calccraft.results import Error, Success
from calccraft.util import ErrorKind

from pytest import approx, mark


def value(expression):
    result = evaluate(expression)
    assert isinstance(result, Success), result
    return result.value


def kind(expression):
    result = evaluate(expression)
    assert isinstance(result, Error), result
    return result.kind


@mark.parametrize('expression, expected', [
    ('1 + 1', 2.0),
    ('5 / 2', 2.5),
    ('2 + 3 * 4', 14.0),
    ('2*3+4*5', 26.0),
    ('(2 + 3) * 4', 20.0),
    ('10 - (6 / 2)', 7.0),
    ('2*(3+4)*5', 70.0),
    ('1.5 * 2.5', 3.75),
    ('.5 * 2', 1.0),
    ('-5', -5.0),
    ('10 * -2', -20.0),
    ('-(2 + 3)', -5.0),
    ('5 - -3', 8.0),
    ('-(-5)', 5.0),
    ('50%', 0.5),
    ('200 * 10%', 20.0),
])
def test_arithmetic(expression, expected):
    assert value(expression) == approx(expected)


def test_percent_applies_to_what_precedes_it():
    assert value('(10+10)%') == approx(0.2)
    assert value('1 + 5%') == approx(1.05)


def test_constants_and_functions():
    assert value('pi') == math.pi
    assert value('2 * pi') == 2 * math.pi
    assert value('sqrt(16)') == 4.0
    assert value('pow(2, 3)') == 8.0
    assert value('cos(pi)') == approx(-1.0)
    assert value('log(e)') == approx(1.0)
    assert value('sqrt(pow(2, 4))') == 4.0
    assert value('2 * (3 + sin(pi/2))') == approx(8.0)
    assert value('log(pow(e, 2))') == approx(2.0)
    assert value('-pi * (2 + sqrt(16))') == approx(-math.pi * 6)
    assert value('100 / pow(2, 3) - 0.5') == approx(12.0)


def test_tan_asymptote_is_finite_in_floating_point():
    assert evaluate('tan(pi/2)').ok


@mark.parametrize('expression, expected', [
    ('1 / 0', ErrorKind.DIVIDE_BY_ZERO),
    ('1 / (2 - 2)', ErrorKind.DIVIDE_BY_ZERO),
    ('5 % / 0', ErrorKind.DIVIDE_BY_ZERO),
    ('sqrt(-1)', ErrorKind.DOMAIN_ERROR),
    ('log(0)', ErrorKind.DOMAIN_ERROR),
    ('log(-5)', ErrorKind.DOMAIN_ERROR),
    ('pow(10, 400)', ErrorKind.DOMAIN_ERROR),
    ('pow(2)', ErrorKind.STACK_UNDERFLOW),
    ('sin()', ErrorKind.STACK_UNDERFLOW),
    ('1 +', ErrorKind.STACK_UNDERFLOW),
    ('pow(2,3,4)', ErrorKind.INVALID_SYNTAX),
    ('sqrt(4, 5)', ErrorKind.INVALID_SYNTAX),
    ('1 2', ErrorKind.INVALID_SYNTAX),
    ('()', ErrorKind.INVALID_SYNTAX),
    ('1, 2', ErrorKind.INVALID_SYNTAX),
    ('(1 + 2', ErrorKind.MISMATCHED_PARENTHESES),
    ('1 + 2)', ErrorKind.MISMATCHED_PARENTHESES),
    ('((1)', ErrorKind.MISMATCHED_PARENTHESES),
    ('abc', ErrorKind.UNKNOWN_TOKEN),
    ('1 $ 2', ErrorKind.UNKNOWN_TOKEN),
    ('1 # 2', ErrorKind.UNKNOWN_TOKEN),
    ('1.2.3', ErrorKind.UNKNOWN_TOKEN),
])
def test_errors(expression, expected):
    assert kind(expression) is expected


def test_first_failing_stage_wins():
    # Unknown token, although the parentheses never close either
    assert kind('(1 / 0 + abc') is ErrorKind.UNKNOWN_TOKEN
    # Unbalanced, although it would also divide by zero
    assert kind('(1 / 0') is ErrorKind.MISMATCHED_PARENTHESES


def test_empty_expression():
    for blank in '', '   ', '\t\n':
        assert evaluate(blank) == Error(ErrorKind.INVALID_SYNTAX,
                                        'Expression is empty')


def test_error_message():
    assert evaluate('1 / 0') == Error(ErrorKind.DIVIDE_BY_ZERO,
                                      'Division by zero')
    assert str(evaluate('1 / 0')) == 'DivideByZero: Division by zero'


def test_formatted_output():
    assert evaluate('2+2') == Success(4.0, '4')
    assert evaluate('1/4').formatted == '0.25'
    assert evaluate('1.0 + 2.0').formatted == '3'
    assert evaluate('0.1 + 0.2').formatted == '0.30000000000000004'
    assert evaluate('1/3').formatted == '0.3333333333333333'
    assert evaluate('-0').formatted == '0'
    assert evaluate('1/100000').formatted == '0.00001'
    assert evaluate('100000000 * 100000000').formatted == \
        '10000000000000000'


def test_format_result():
    assert format_result(-3.0) == '-3'
    assert format_result(2.5) == '2.5'
    assert format_result(-0.0) == '0'
    assert format_result(123456789.0) == '123456789'
    assert format_result(1e16) == '10000000000000000'
    assert format_result(1e-07) == '0.0000001'
    assert format_result(-1.5e-05) == '-0.000015'


def test_engine_is_reusable():
    engine = ExpressionEngine()
    assert engine.evaluate('1 +').kind is ErrorKind.STACK_UNDERFLOW
    assert engine.evaluate('1 + 1').value == 2.0
