"""Error codes shared by use cases and the API layer."""

from enum import Enum


class ErrorCode(str, Enum):
    """Tagged error variants.

    HTTP mapping (see src/api/error.py):
        VALIDATION_FAILED  -> 422
        CONFLICT           -> 422
        NOT_FOUND          -> 404
        INVALID_CREDENTIAL -> 422
        EXPIRED            -> 404
        INTERNAL           -> 500
    """

    VALIDATION_FAILED = "VALIDATION_FAILED"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    EXPIRED = "EXPIRED"
    INTERNAL = "INTERNAL"
