from typing import List

from core.errors import EmptyResult, ProviderError, RateLimitExceeded
from core.models import ProviderFailure, RepositoryEdge, ResponseEnvelope, SearchResults


def validate_envelope(envelope: ResponseEnvelope) -> List[RepositoryEdge]:
    """
    Return the edges of an accepted reply or raise the matching SearchError.

    Checks run in order and the first match wins: exhausted rate limit,
    empty result set, missing result set.
    """
    rate_limit = envelope.rate_limit
    if rate_limit is not None and rate_limit.remaining == 0:
        raise RateLimitExceeded(reset_at=rate_limit.reset_at)

    if isinstance(envelope, SearchResults):
        if not envelope.edges:
            raise EmptyResult()
        return list(envelope.edges)

    if isinstance(envelope, ProviderFailure) and envelope.message:
        raise ProviderError(f"GitHub Error: {envelope.message}")
    raise ProviderError()
