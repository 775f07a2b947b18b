from sympy import ceiling
from sympy import log


def comparison_bound(n):
    '''
    Return ceil(log2(n)) + 1, the most element comparisons a membership
    search over n sorted items may make.

    Computed symbolically so that exact powers of two are not subject to
    floating point rounding.
    '''
    if n < 1:
        raise ValueError("comparison bound needs n >= 1, got {}".format(n))
    return int(ceiling(log(n, 2))) + 1


def subsequent_pairs(the_iterable):
    '''
    Given an iterable (a, b, c, d, ...) return a generator over
    pairs (a, b), (b, c), (c, d), ...

    Return an empty iterable if there are fewer than two items.
    '''
    it = iter(the_iterable)

    try:
        pair_first = next(it)
        pair_second = next(it)
    except StopIteration:
        return

    while True:
        yield (pair_first, pair_second)
        try:
            pair_first = pair_second
            pair_second = next(it)
        except StopIteration:
            return
