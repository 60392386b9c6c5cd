import json
from unittest.mock import patch

import pytest

from app import main as app_main
from config import settings
from core.models import DisplayRecord


@pytest.fixture
def quiet_logging():
    with patch.object(app_main, "configure_logging") as configure:
        yield configure


def make_record(title="x"):
    return DisplayRecord(
        title=title,
        subtitle=f"github.com > o/{title}",
        link="u",
        description=None,
        language_tags=["GO"],
        release_tag="v1",
        star_count=5,
        fork_count=0,
        disk_usage_kb=10,
        topic_tags=["cli"],
    )


def test_prints_records_as_json(monkeypatch, capsys, quiet_logging):
    monkeypatch.setattr(settings, "GITHUB_TOKEN", "tok")
    with patch.object(app_main, "SearchPipeline") as pipeline_cls:
        pipeline_cls.return_value.get_display_records.return_value = [make_record("a"), make_record("b")]
        assert app_main.main(["language:go", "stars:>10"]) == 0

    pipeline_cls.assert_called_once_with("language:go stars:>10", "tok")
    output = json.loads(capsys.readouterr().out)
    assert [r["title"] for r in output] == ["a", "b"]
    assert output[0]["platform"] == "github"


def test_requires_expression(capsys):
    assert app_main.main([]) == 2
    assert "usage" in capsys.readouterr().err


def test_requires_token(monkeypatch, quiet_logging):
    monkeypatch.setattr(settings, "GITHUB_TOKEN", None)
    with pytest.raises(EnvironmentError):
        app_main.main(["anything"])
