from __future__ import annotations


class OutreachError(Exception):
    """Base error; rendered to clients as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class Unauthorized(OutreachError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ProfileNotFound(OutreachError):
    status_code = 500

    def __init__(self, message: str = "Profile not found"):
        super().__init__(message)


class PaymentRequired(OutreachError):
    status_code = 402

    def __init__(self, message: str = "No credits remaining. Please upgrade to Pro."):
        super().__init__(message)


class InvalidInput(OutreachError):
    status_code = 400

    def __init__(self, messages: list[str]):
        self.messages = list(messages) or ["Invalid request data"]
        super().__init__(", ".join(self.messages))


class NotFound(OutreachError):
    status_code = 404


class RateLimited(OutreachError):
    status_code = 429

    def __init__(self, message: str = "AI rate limit exceeded. Please try again in a moment."):
        super().__init__(message)


class UpstreamCreditsExhausted(OutreachError):
    status_code = 402

    def __init__(self, message: str = "AI credits exhausted."):
        super().__init__(message)


class GenerationFailed(OutreachError):
    status_code = 500

    def __init__(self, message: str = "AI generation failed"):
        super().__init__(message)
