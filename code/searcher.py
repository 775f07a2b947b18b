'''
A binary searcher over a sorted sequence of integers.
'''

from typing import Sequence

from binary_search import BinarySearchHint
from binary_search import binary_search
from binary_search import find_midpoint
from utils import subsequent_pairs


class InvalidInput(ValueError):
    '''Raised when a Searcher is constructed without data to search.'''


class OutOfOrder(ValueError):
    '''Raised by Searcher.validate on the first adjacent inversion.'''


class Searcher:
    '''Search a sorted, non-empty sequence of integers.

    The sequence is borrowed, not copied, and must not be mutated while the
    Searcher is in use. Sort order is only checked by validate(); searching
    unsorted data gives unspecified results.
    '''

    find_midpoint = staticmethod(find_midpoint)

    def __init__(self, data: Sequence[int]):
        if data is None:
            raise InvalidInput("Cannot search a missing sequence")
        if len(data) == 0:
            raise InvalidInput("Cannot search an empty sequence")
        self.data = data

    def validate(self):
        '''Ensure the data is in non-decreasing order.'''
        for i, (left, right) in enumerate(subsequent_pairs(self.data)):
            if left > right:
                raise OutOfOrder(
                    "Out of order at index {}: {} > {}".format(i, left, right))

    def compare(self, index: int, element: int) -> BinarySearchHint:
        value = self.data[index]
        return BinarySearchHint(found=value == element, tooLow=value < element)

    def find_lower_bound(self, element: int, callback=None) -> int:
        '''Return the first index whose value is >= element, or len(data).'''
        result = binary_search(
            lambda index: self.compare(index, element),
            param_min=0,
            param_max=len(self.data),
            callback=callback,
        )
        return result.value

    def find(self, element: int, callback=None) -> bool:
        '''Return True if element occurs in the data.

        The lower bound, clamped to the last index, is the only place element
        can be. Narrowing [0, last) finds it; the comparison made at the
        candidate already says whether it matches, except when the candidate
        is the last index, which the narrowing never tests.
        '''
        last = len(self.data) - 1
        result = binary_search(
            lambda index: self.compare(index, element),
            param_min=0,
            param_max=last,
            callback=callback,
        )
        if result.value < last:
            return result.found
        return self.compare(last, element).found

    def __len__(self):
        return len(self.data)

    def __repr__(self):
        return 'Searcher(n={}, first={}, last={})'.format(
            len(self.data), self.data[0], self.data[-1])
