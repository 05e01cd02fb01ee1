"""Formal dispatch invariants.

Which type tags each resolver accepts. This is the reviewer anchor for the
tables in ``pixcore.convert``; the test suite checks the two agree.
"""

DISPATCH_SUPPORT = {
    "scalar_converter": ("BYTE", "INT", "FLOAT", "DOUBLE"),
    "array_converter": ("BYTE", "INT", "FLOAT", "DOUBLE"),
    "array_writer": ("INT", "DOUBLE"),
    "array_subtractor": ("FLOAT", "INT", "DOUBLE"),
}

# Element widths in bytes (native C unsigned char, int, float, double)
ELEMENT_SIZES = {
    "BYTE": 1,
    "INT": 4,
    "FLOAT": 4,
    "DOUBLE": 8,
}

# Resolvers that record an error detail when they reject a tag
SETS_ERROR_DETAIL = {
    "scalar_converter": False,
    "array_converter": False,
    "array_writer": False,
    "array_subtractor": True,
}
