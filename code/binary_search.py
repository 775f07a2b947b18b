from dataclasses import dataclass


@dataclass
class BinarySearchHint:
    '''Class representing the inremental step of a binary search test.'''

    '''True if the tested value is exactly the target of the search.'''
    found: bool = False

    '''True if the tested value was determined to be too low.'''
    tooLow: bool = False


@dataclass
class BinarySearchResult:
    '''Class representing the output of a binary search.'''

    '''True if the test at `value` reported found=True.

    Always False when value is one past the end of the search range, since
    no test is run there.
    '''
    found: bool = False

    '''The first value in the search range whose test was not tooLow, or the
    end of the range if every tested value was too low.
    '''
    value: int = 0


def find_midpoint(l, r):
    '''Return the midpoint of [l, r], rounding down.

    Written as low + (high - low) / 2 so that a fixed-width translation
    cannot overflow when r is near the largest representable integer.
    '''
    return l + (r - l) // 2


def binary_search(test, param_min=0, param_max=1, callback=None):
    '''
    Perform a binary search over the half-open integer range
    [param_min, param_max).

    Args:
    - test: a callable int -> BinarySearchHint. It must be monotone: once
      a value is not tooLow, no larger value is tooLow.
    - param_min: the smallest legal value of the parameter being searched for
    - param_max: one past the largest legal value of the parameter
    - callback: an arbitrary callback executed at the start of each search loop

    Returns:
      An instance of BinarySearchResult
    '''
    current_min = param_min
    current_max = param_max
    boundary_hint = None

    while current_min < current_max:
        tested_value = find_midpoint(current_min, current_max)
        if callback:
            callback(dict(
                current_min=current_min,
                current_max=current_max,
                tested_value=tested_value
            ))
        hint = test(tested_value)
        if hint.tooLow:
            current_min = tested_value + 1
        else:
            current_max = tested_value
            boundary_hint = hint

    # current_max only ever moves onto a tested value, so the last hint
    # that moved it was taken at current_min.
    found = current_min < param_max and boundary_hint is not None and boundary_hint.found
    return BinarySearchResult(found=found, value=current_min)
