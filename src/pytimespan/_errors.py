"""Exception hierarchy for time span operations."""


class TimeSpanError(Exception):
    """Base exception for time span errors.

    Provides dual messaging: a short user-facing message and
    internal details for logging.
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


class UnsupportedComponentsError(TimeSpanError):
    """Raised when a time string asks for more fields than the clock ladder has."""


class TimeSpanConversionError(TimeSpanError):
    """Raised when a time span cannot be represented by another duration type."""


# Sanitized user-facing error message constants
ERR_MSG_UNSUPPORTED_COMPONENTS = "unsupported number of time string components"
ERR_MSG_NOT_REPRESENTABLE = "time span is not representable"
ERR_MSG_OUT_OF_RANGE = "time span out of range"
