"""Exception hierarchy for overthink."""


class OverthinkError(Exception):
    """Base exception for all overthink errors."""


class EmptyPoolError(OverthinkError):
    """A candidate pool was empty. Indicates a configuration defect."""


class ThinkerError(OverthinkError):
    """An external analysis backend failed to produce a result."""


class LLMClientError(ThinkerError):
    """Raised when LLM API calls fail after exhausting retries."""


class RetryableError(LLMClientError):
    """Timeouts, connection failures, 5xx — should be retried."""


class NonRetryableError(LLMClientError):
    """Auth errors, bad requests, unknown models — fail immediately."""


class ThinkerTimeoutError(ThinkerError):
    """The external backend did not answer within the configured timeout."""


class JSONParseError(ThinkerError):
    """LLM response could not be parsed as JSON."""

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class ResponseValidationError(ThinkerError):
    """LLM response parsed but does not form a valid analysis record."""
