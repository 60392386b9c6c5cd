from typing import Iterable, List, Optional

from core.models import DisplayRecord, RepositoryEdge

SUBTITLE_PREFIX = "github.com > "


def to_display_record(edge: RepositoryEdge) -> Optional[DisplayRecord]:
    """Build the display record for ``edge``, or None when it is a fork."""
    if edge.is_fork:
        return None

    return DisplayRecord(
        title=edge.name,
        subtitle=SUBTITLE_PREFIX + edge.full_name,
        link=edge.url,
        description=edge.description if edge.description else None,
        language_tags=[lang.upper() for lang in edge.languages],
        # releases(last: 1) already narrows this to the latest tag
        release_tag=edge.release_tags[0] if edge.release_tags else None,
        star_count=edge.star_count,
        fork_count=edge.fork_count,
        disk_usage_kb=edge.disk_usage_kb,
        topic_tags=list(edge.topics),
    )


def transform_edges(edges: Iterable[RepositoryEdge]) -> List[DisplayRecord]:
    records = []
    for edge in edges:
        record = to_display_record(edge)
        if record is not None:
            records.append(record)
    return records
