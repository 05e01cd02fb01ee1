"""`pixcore` - runtime pixel-type dispatch for image-processing algorithms.

Modules:
- dtypes: Type tag registry and numpy dtype mapping
- convert: Scalar/array converters, array writers and subtractors
- status: Status codes, messages and exceptions
- errdetail: Per-thread error detail slot
- median: Destructive order-statistic helper
- schemas: Pydantic configuration
"""

import logging

from pixcore.dtypes import PIXTYPE, TypeTag, tag_for_dtype
from pixcore.convert import (
    Dispatch,
    resolve_scalar_converter,
    resolve_array_converter,
    resolve_array_writer,
    resolve_array_subtractor,
)
from pixcore.status import Status, StatusError, IllegalDTypeError, status_to_message, check_status
from pixcore.errdetail import put_errdetail, get_errdetail
from pixcore.median import median, median_copy

__version__ = "1.2.0"
version_string = __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "PIXTYPE",
    "TypeTag",
    "tag_for_dtype",
    "Dispatch",
    "resolve_scalar_converter",
    "resolve_array_converter",
    "resolve_array_writer",
    "resolve_array_subtractor",
    "Status",
    "StatusError",
    "IllegalDTypeError",
    "status_to_message",
    "check_status",
    "put_errdetail",
    "get_errdetail",
    "median",
    "median_copy",
    "version_string",
]
