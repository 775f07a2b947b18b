'''Constants shared by the searcher and its tests.'''

# The 32-bit signed range. Midpoints are checked against it so that the
# arithmetic stays valid for fixed-width integers.
MAX_INT = 2**31 - 1
MIN_INT = -2**31
