import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during a test."""
    messages = []
    sink_id = logger.add(lambda m: messages.append(m.record), level="DEBUG")
    yield messages
    logger.remove(sink_id)


def make_node(name="x", owner="o", **overrides):
    """Build a raw GraphQL search node shaped like GitHub's reply."""
    node = {
        "name": name,
        "nameWithOwner": f"{owner}/{name}",
        "url": f"https://github.com/{owner}/{name}",
        "homepageUrl": "",
        "description": None,
        "parent": None,
        "languages": {"nodes": []},
        "releases": {"nodes": []},
        "forkCount": 0,
        "stargazers": {"totalCount": 0},
        "diskUsage": 0,
        "createdAt": "2020-01-01T00:00:00Z",
        "repositoryTopics": {"nodes": []},
    }
    node.update(overrides)
    return node


def make_envelope(*nodes, remaining=4999, rate_limit=True):
    envelope = {"data": {"search": {"edges": [{"node": n} for n in nodes]}}}
    if rate_limit:
        envelope["rateLimit"] = {"cost": 1, "remaining": remaining, "resetAt": "2026-01-01T00:00:00Z"}
    return envelope


@pytest.fixture(name="make_node")
def make_node_fixture():
    return make_node


@pytest.fixture(name="make_envelope")
def make_envelope_fixture():
    return make_envelope
