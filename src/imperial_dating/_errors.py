"""Exception hierarchy for Imperial Dating conversion."""


class ConversionError(Exception):
    """Base exception for a failed Imperial date or timestamp conversion.

    ``str(err)`` is a fixed description of the failure kind, safe to show to
    whoever typed the date. ``internal()`` names the offending value and is
    what the public converters log before returning a failed result.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class MalformedInputError(ConversionError):
    """Raised when a date or timestamp cannot be interpreted."""


class MalformedImperialDateError(ConversionError):
    """Raised when a string does not have the Imperial date shape."""


class InvalidParameterError(ConversionError):
    """Raised when a conversion parameter has the wrong type or value."""


class DateOutOfRangeError(ConversionError):
    """Raised when a result cannot be represented as a datetime."""


# Sanitized user-facing error message constants
ERR_MSG_UNRECOGNIZED_INPUT = "unrecognized date or timestamp"
ERR_MSG_MALFORMED_IMPERIAL = "malformed imperial date"
ERR_MSG_CHECK_NUMBER = "check number must be numeric"
ERR_MSG_FLAG_NOT_BOOL = "flag must be a boolean"
ERR_MSG_TIMESTAMP_UNIT = "unknown timestamp unit"
ERR_MSG_OUT_OF_RANGE = "date out of datetime range"
ERR_MSG_MILLENNIUM_TOO_LARGE = "millennium too large"
ERR_MSG_FIELD_RANGE = "imperial date field out of range"
