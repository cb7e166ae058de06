"""
leadscore/errors.py — Domain exceptions raised by the scoring services.

The HTTP layer maps these to status codes; nothing in here knows about HTTP.

    LeadScoringError
    ├── ValidationError          bad offer / upload input
    ├── NotFoundError            unknown offer, or no leads to score
    ├── AIProviderOverloaded     provider signalled overload; aborts a batch
    └── AIClassificationError    per-lead failure; a batch records it and moves on
        ├── AIResponseError      payload absent or not a JSON object
        └── AIProviderError      any other provider-side API error
"""


class LeadScoringError(Exception):
    """Base class for all domain errors."""


class ValidationError(LeadScoringError):
    """Required input is missing or empty."""


class NotFoundError(LeadScoringError):
    """A referenced record does not exist."""


class AIProviderOverloaded(LeadScoringError):
    """The AI provider is overloaded or temporarily unavailable."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AIClassificationError(LeadScoringError):
    """Intent classification failed for a single lead."""


class AIResponseError(AIClassificationError):
    """The AI provider returned no usable structured payload."""


class AIProviderError(AIClassificationError):
    """The AI provider rejected or failed the request."""
