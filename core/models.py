from dataclasses import dataclass, field, asdict
from typing import List, Optional, Union


@dataclass(frozen=True)
class SearchRequest:
    expression: str
    credential: str


@dataclass(frozen=True)
class RateLimit:
    """Query budget reported alongside a GraphQL reply."""
    cost: int
    remaining: Optional[int]
    reset_at: Optional[str] = None

    @classmethod
    def from_github(cls, raw: dict):
        return cls(
            cost=raw.get("cost") or 0,
            remaining=raw.get("remaining"),
            reset_at=raw.get("resetAt"),
        )


@dataclass(frozen=True)
class RepositoryEdge:
    """Domain model for one repository returned by the search."""
    name: str
    full_name: str
    url: str
    homepage_url: Optional[str]
    description: Optional[str]
    parent_full_name: Optional[str]
    languages: List[str] = field(default_factory=list)
    release_tags: List[str] = field(default_factory=list)
    fork_count: int = 0
    star_count: int = 0
    disk_usage_kb: int = 0
    created_at: Optional[str] = None
    topics: List[str] = field(default_factory=list)

    @property
    def is_fork(self) -> bool:
        return bool(self.parent_full_name)

    @classmethod
    def from_github_node(cls, node: dict):
        """Factory method to create a RepositoryEdge from a search edge node."""
        parent = _object(node, "parent")
        return cls(
            name=node["name"],
            full_name=node["nameWithOwner"],
            url=node["url"],
            homepage_url=node.get("homepageUrl"),
            description=node.get("description"),
            parent_full_name=parent.get("nameWithOwner"),
            languages=[lang["name"] for lang in _nodes(node, "languages")],
            release_tags=[release["tagName"] for release in _nodes(node, "releases")],
            fork_count=node.get("forkCount") or 0,
            star_count=_object(node, "stargazers").get("totalCount") or 0,
            disk_usage_kb=node.get("diskUsage") or 0,
            created_at=node.get("createdAt"),
            topics=[t["topic"]["name"] for t in _nodes(node, "repositoryTopics")],
        )


def _mapping(value) -> dict:
    return value if isinstance(value, dict) else {}


def _object(node: dict, key: str) -> dict:
    value = node.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"{key} is not an object")
    return value


def _nodes(node: dict, key: str) -> list:
    nodes = _object(node, key).get("nodes") or []
    if not isinstance(nodes, list):
        raise TypeError(f"{key}.nodes is not a list")
    return nodes


@dataclass(frozen=True)
class DisplayRecord:
    """Everything a renderer needs to show one repository."""
    title: str
    subtitle: str
    link: str
    description: Optional[str]
    language_tags: List[str]
    release_tag: Optional[str]
    star_count: int
    fork_count: int
    disk_usage_kb: int
    topic_tags: List[str]
    platform: str = "github"

    @property
    def disk_usage_label(self) -> str:
        return f"{self.disk_usage_kb} KB"

    def to_dict(self) -> dict:
        return asdict(self)


# A parsed reply is exactly one of the two shapes below.

@dataclass(frozen=True)
class SearchResults:
    edges: List[RepositoryEdge]
    rate_limit: Optional[RateLimit] = None


@dataclass(frozen=True)
class ProviderFailure:
    message: Optional[str] = None
    rate_limit: Optional[RateLimit] = None


ResponseEnvelope = Union[SearchResults, ProviderFailure]


def parse_envelope(raw) -> ResponseEnvelope:
    """
    Map a decoded GraphQL reply onto SearchResults or ProviderFailure.

    rateLimit is accepted at the top level or under ``data``; GitHub puts it
    under ``data`` while error bodies may carry neither.
    """
    if not isinstance(raw, dict):
        return ProviderFailure()

    data = _mapping(raw.get("data"))
    rate_raw = _mapping(raw.get("rateLimit")) or _mapping(data.get("rateLimit"))
    rate_limit = RateLimit.from_github(rate_raw) if rate_raw else None

    search = data.get("search")
    edges = search.get("edges") if isinstance(search, dict) else None
    if isinstance(edges, list):
        try:
            parsed = [RepositoryEdge.from_github_node(edge["node"]) for edge in edges]
        except (KeyError, TypeError, AttributeError) as e:
            return ProviderFailure(message=f"Malformed search edge: {e!r}", rate_limit=rate_limit)
        return SearchResults(edges=parsed, rate_limit=rate_limit)

    return ProviderFailure(message=_error_message(raw), rate_limit=rate_limit)


def _error_message(raw: dict) -> Optional[str]:
    if raw.get("message"):
        return raw["message"]
    errors = raw.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return errors[0].get("message")
    return None
