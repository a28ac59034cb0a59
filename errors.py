from typing import Optional


class PrecommitReviewError(Exception):
    """Base class for failures the hook reports instead of crashing on."""


class DiffCollectionError(PrecommitReviewError):
    """git could not produce the staged diff."""


class ReviewerError(PrecommitReviewError):
    """The chat-completion call failed (transport error or non-2xx status)."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
