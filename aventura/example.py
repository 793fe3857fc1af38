"""A small integer helper kept as a sanity check for the test setup."""

import operator


def do_something(x):
    """Return ``x`` as a plain integer.

    Raises TypeError when ``x`` is not an integer-like value.
    """
    value = operator.index(x)
    if isinstance(value, bool):
        value = int(value)
    return value