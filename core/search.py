from typing import List

from loguru import logger

from core.errors import SearchError
from core.models import DisplayRecord, RepositoryEdge, SearchRequest, parse_envelope
from core.queries import build_search_query
from core.transform import transform_edges
from core.validation import validate_envelope
from infrastructure.github_api import GraphQLClient


class SearchPipeline:
    """
    Runs one repository search against the GitHub GraphQL API.

    ``fetch_edges`` exposes every failure as a typed SearchError.
    ``get_display_records`` never raises one: any failure is logged and
    reported as an empty list.
    """

    def __init__(self, expression: str, credential: str, transport=None):
        self.request = SearchRequest(expression=expression, credential=credential)
        self.transport = transport if transport is not None else GraphQLClient(credential)

    def fetch_edges(self) -> List[RepositoryEdge]:
        query = build_search_query(self.request.expression)
        logger.debug(f"🔍 Query: {self.request.expression}")
        raw = self.transport.execute(query)
        edges = validate_envelope(parse_envelope(raw))
        logger.info(f"Fetched {len(edges)} repositories for '{self.request.expression}'")
        return edges

    def get_display_records(self) -> List[DisplayRecord]:
        try:
            edges = self.fetch_edges()
        except SearchError as e:
            logger.warning(f"⚠️ Search '{self.request.expression}' failed: {e}")
            return []
        except Exception:
            logger.exception(f"❌ Unexpected error searching '{self.request.expression}'")
            return []
        return transform_edges(edges)
