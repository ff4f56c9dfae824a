"""Exception hierarchy for duration construction, parsing and formatting."""


class DurationError(Exception):
    """Base exception for duration errors.

    ``str(err)`` is a one-line message naming the field and rejected value.
    ``internal()`` returns the longer diagnostic, such as the lark error
    text for a malformed token or the raw ISO 8601 input, since the
    library itself does not log. ``wrapped`` holds the underlying exception.
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


class InvalidValueError(DurationError):
    """Raised when a numeric input is negative, zero where positive is required, or not a number."""


class NonFiniteValueError(DurationError):
    """Raised when a numeric input is NaN or infinite."""


class ParseError(DurationError):
    """Raised when a human-readable duration token is malformed."""


class FormatError(DurationError):
    """Raised when an ISO 8601 duration string is malformed."""


# Sanitized user-facing error message constants
ERR_MSG_NEGATIVE_VALUE = "value must be non-negative"
ERR_MSG_NON_POSITIVE_VALUE = "value must be positive"
ERR_MSG_NON_FINITE_VALUE = "value must be finite"
ERR_MSG_NOT_A_NUMBER = "value must be a number"
ERR_MSG_INVALID_TOKEN = "invalid time string part"
ERR_MSG_INVALID_ISO8601 = "invalid ISO 8601 duration: must start with 'P'"
