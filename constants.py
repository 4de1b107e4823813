"""
Global constants used throughout the project
"""

# Binary alphabet of Thompson's groups F, T and V
DEFAULT_ALPHABET = "01"

# DFS shape markers, independent of the alphabet symbols
INTERNAL_MARKER = "1"
LEAF_MARKER = "0"

# DFS triple: "{<domain>,<range>,<p0 p1 ...>}"
DFS_OPEN = "{"
DFS_CLOSE = "}"
DFS_FIELD_SEPARATOR = ","
PERMUTATION_SEPARATOR = " "

# Canonical string: "{D: [<path> <label>], ... || R: ...}"
DOMAIN_TAG = "D:"
RANGE_TAG = "R:"
SIDE_SEPARATOR = " || "
LEAF_SEPARATOR = ", "

# Characters the text forms reserve; alphabets may not use them
RESERVED_SYMBOLS = "[]{},|"
