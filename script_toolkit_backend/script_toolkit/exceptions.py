"""
Error taxonomy shared by the generators, the orchestrator and the HTTP layer.
Transport failures are not wrapped: the openai SDK exceptions propagate as-is.
"""


class ConfigurationError(RuntimeError):
    """Required configuration is missing. Raised at startup, never recovered."""


class SchemaViolationError(ValueError):
    """Structured output was requested but the remote reply could not be parsed into it."""

    def __init__(self, kind: str, detail: str = ""):
        self.kind = kind
        self.detail = detail
        message = "invalid format returned by remote service"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class EmptyResponseError(ValueError):
    """A free-text generator received no text back."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"remote service returned an empty {kind} response")
