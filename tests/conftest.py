from itertools import count

from pytest import Item, fixture

from calccraft import Calculator


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP and enable_assertion_pass_hook.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def clock():
    '''
    Epoch milliseconds, one second apart per call.
    '''
    ticks = count(start=1_000_000, step=1000)
    return lambda: next(ticks)


@fixture
def new_id():
    ids = count(start=1)
    return lambda: 'entry-{}'.format(next(ids))


@fixture
def calculator(clock, new_id):
    return Calculator(clock=clock, new_id=new_id)
