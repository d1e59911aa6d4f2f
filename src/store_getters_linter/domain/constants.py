"""
Store Getters Command: rule constants
"""

# STORE-GETTERS: ANSI Yellow (\033[33m)
_YELLOW: str = "\033[33m"
_RESET: str = "\033[0m"
STORE_GETTERS_BANNER: str = _YELLOW + "[STORE-GETTERS]" + _RESET

RULE_CODE: str = "W9701"
RULE_SYMBOL: str = "getter-state-mutation"
RULE_SEVERITY: str = "problem"

# Name under which a store keeps its read-only accessors.
ACCESSOR_GROUP_KEY: str = "getters"

# Receiver a getter reaches the store through when it declares no parameter.
IMPLICIT_RECEIVER: str = "self"

DEEP_COPY_MODULE: str = "copy"
DEEP_COPY_FUNCTION: str = "deepcopy"

# In-place methods of list, collections.deque and bytearray.
MUTATING_SEQUENCE_METHODS: frozenset[str] = frozenset(
    {
        "append",
        "extend",
        "insert",
        "pop",
        "remove",
        "clear",
        "sort",
        "reverse",
        "appendleft",
        "extendleft",
        "popleft",
        "rotate",
    }
)

METHOD_PLACEHOLDER: str = "{{method}}"
MESSAGE_TEMPLATE: str = (
    "Avoid calling {{method}} on store state inside a getter: "
    "it mutates the state in place. Copy it first."
)
RULE_DESCRIPTION: str = (
    "Getters are read-only views of the store. Sorting, reversing or "
    "otherwise mutating a state sequence in place from a getter changes the "
    "store as a side effect of reading it."
)
