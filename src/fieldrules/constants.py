"""Constants for rule annotations.

The rule vocabulary is fixed; the evaluators are registered in
``rules.RULES``.
"""

# Default annotation key looked up on each field
DEFAULT_TAG_KEY = "validate"

# Separates rule kind from rule argument: "len:5"
RULE_SEPARATOR = ":"

# Separates candidate literals of an "in" rule: "in:a,b,c"
CANDIDATE_SEPARATOR = ","

RULE_LEN = "len"
RULE_MIN = "min"
RULE_MAX = "max"
RULE_IN = "in"

# Rule arguments are confined to signed 64-bit integers
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Configuration file searched for in the working directory and its parents
CONFIG_FILENAME = ".fieldrules.json"
