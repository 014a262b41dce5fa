"""Exception hierarchy for WebVTT timestamp and settings conversion."""


class WebVTTError(Exception):
    """Base exception for timestamp and cue-settings conversion errors.

    ``str(err)`` is a fixed message safe to show next to a caption file;
    ``internal()`` carries the offending timestamp text or setting for logs.
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


class TimestampFormatError(WebVTTError):
    """Raised when text cannot be interpreted as a WebVTT timestamp."""


class UnsupportedUnitError(WebVTTError):
    """Raised in strict mode when a setting uses a unit WebVTT cannot express."""


# Sanitized user-facing error message constants
ERR_MSG_MALFORMED_TIMESTAMP = "malformed timestamp"
ERR_MSG_TIMESTAMP_TOO_SHORT = "timestamp too short"
ERR_MSG_TIMESTAMP_OUT_OF_RANGE = "timestamp field out of range"
ERR_MSG_UNSUPPORTED_UNIT = "unsupported unit for setting"
