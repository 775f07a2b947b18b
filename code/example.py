from searcher import *

from utils import comparison_bound


data = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19]
searcher = Searcher(data)
searcher.validate()

print("Input: {}".format(searcher))
print("At most {} comparisons per membership search".format(comparison_bound(len(data))))

for target in [7, 8, 0, 20]:
    print("Searching for {}".format(target))
    found = searcher.find(target, callback=print)
    lower_bound = searcher.find_lower_bound(target)
    print("found={} lower_bound={}".format(found, lower_bound))

duplicates = [1, 2, 2, 2, 3, 4, 4, 5, 6, 6, 6, 6, 7]
print("First 6 at index {}".format(Searcher(duplicates).find_lower_bound(6)))

unsorted = Searcher([0, 1, 2, 4, 3])
try:
    unsorted.validate()
except OutOfOrder as e:
    print("Rejected {}: {}".format(unsorted, e))
