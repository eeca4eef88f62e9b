from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import respx
from httpx import Response
from typer.testing import CliRunner

from exa_client import ExaNotFoundError, __version__
from exa_client.cli import app
from exa_client.models import ResearchTask

runner = CliRunner()


@pytest.fixture(autouse=True)
def _api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXA_API_KEY", "test-key")
    monkeypatch.delenv("EXA_BASE_URL", raising=False)


def _search_payload() -> dict[str, object]:
    return {
        "requestId": "req_123",
        "results": [
            {"id": "doc_1", "url": "https://example.com/ai", "title": "AI News", "score": 0.9}
        ],
        "costDollars": {"total": 0.005},
    }


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"exa-client v{__version__}" in result.stdout


def test_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("search", "similar", "contents", "answer", "research", "websets"):
        assert command in result.stdout


def test_search_missing_exa_key_exits_with_error() -> None:
    exa_error = ValueError("EXA_API_KEY is required")
    with patch("exa_client.client.ExaClient.from_env", side_effect=exa_error):
        result = runner.invoke(app, ["search", "test"])

    assert result.exit_code == 1
    assert "EXA_API_KEY" in result.stdout
    assert "Set EXA_API_KEY" in result.stdout


def test_invalid_timeout_reports_timeout_without_api_key_hint(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    monkeypatch.setenv("EXA_TIMEOUT", "soon")

    result = runner.invoke(app, ["search", "test"])

    assert result.exit_code == 1
    assert "EXA_TIMEOUT" in result.stdout
    assert "Set EXA_API_KEY" not in result.stdout


@respx.mock
def test_search_table_output() -> None:
    route = respx.post("https://api.exa.ai/search").mock(
        return_value=Response(200, json=_search_payload())
    )

    result = runner.invoke(app, ["search", "latest AI", "-n", "3", "--type", "neural"])

    assert result.exit_code == 0
    assert "AI News" in result.stdout
    assert "Cost: $0.0050" in result.stdout
    assert json.loads(route.calls[0].request.content) == {
        "query": "latest AI",
        "type": "neural",
        "numResults": 3,
        "contents": {"text": {"maxCharacters": 10000}},
    }


@respx.mock
def test_search_json_no_contents() -> None:
    route = respx.post("https://api.exa.ai/search").mock(
        return_value=Response(200, json=_search_payload())
    )

    result = runner.invoke(app, ["search", "latest AI", "--no-contents", "--json"])

    assert result.exit_code == 0
    assert '"requestId": "req_123"' in result.stdout
    assert "contents" not in json.loads(route.calls[0].request.content)


@respx.mock
def test_search_api_error_exits_with_error() -> None:
    respx.post("https://api.exa.ai/search").mock(
        return_value=Response(401, json={"message": "Invalid API key"})
    )

    result = runner.invoke(app, ["search", "test"])

    assert result.exit_code == 1
    assert "Invalid API key" in result.stdout


@respx.mock
def test_similar_excludes_source_domain() -> None:
    route = respx.post("https://api.exa.ai/findSimilar").mock(
        return_value=Response(200, json=_search_payload())
    )

    result = runner.invoke(app, ["similar", "https://example.com", "--exclude-source-domain"])

    assert result.exit_code == 0
    assert json.loads(route.calls[0].request.content)["excludeSourceDomain"] is True


@respx.mock
def test_contents_prints_text_and_failures() -> None:
    route = respx.post("https://api.exa.ai/contents").mock(
        return_value=Response(
            200,
            json={
                "results": [
                    {"id": "https://a.example", "url": "https://a.example", "text": "Hello"}
                ],
                "statuses": [
                    {"id": "https://a.example", "status": "success"},
                    {
                        "id": "https://b.example",
                        "status": "error",
                        "error": {"tag": "CRAWL_NOT_FOUND"},
                    },
                ],
            },
        )
    )

    result = runner.invoke(
        app, ["contents", "https://a.example", "https://b.example", "--max-characters", "500"]
    )

    assert result.exit_code == 0
    assert "Hello" in result.stdout
    assert "CRAWL_NOT_FOUND" in result.stdout
    assert json.loads(route.calls[0].request.content) == {
        "urls": ["https://a.example", "https://b.example"],
        "text": {"maxCharacters": 500},
    }


@respx.mock
def test_answer_prints_sources() -> None:
    respx.post("https://api.exa.ai/answer").mock(
        return_value=Response(
            200,
            json={
                "answer": "Yes.",
                "citations": [{"id": "c1", "url": "https://src.example", "title": "Src"}],
            },
        )
    )

    result = runner.invoke(app, ["answer", "Is it?"])

    assert result.exit_code == 0
    assert "Yes." in result.stdout
    assert "https://src.example" in result.stdout


@respx.mock
def test_research_create_without_wait() -> None:
    route = respx.post("https://api.exa.ai/research/v0/tasks").mock(
        return_value=Response(201, json={"id": "task_1"})
    )

    result = runner.invoke(app, ["research", "create", "Summarize fusion news"])

    assert result.exit_code == 0
    assert "Created research task task_1" in result.stdout
    assert json.loads(route.calls[0].request.content)["model"] == "exa-research"


@respx.mock
def test_research_create_with_schema_file(tmp_path: Path) -> None:
    schema_file = tmp_path / "schema.json"
    schema_file.write_text(json.dumps({"type": "object"}), encoding="utf-8")
    route = respx.post("https://api.exa.ai/research/v0/tasks").mock(
        return_value=Response(201, json={"id": "task_1"})
    )

    result = runner.invoke(
        app, ["research", "create", "Summarize", "--schema", str(schema_file), "--json"]
    )

    assert result.exit_code == 0
    assert '"id": "task_1"' in result.stdout
    assert json.loads(route.calls[0].request.content)["output"]["schema"] == {"type": "object"}


def test_research_create_rejects_non_object_schema(tmp_path: Path) -> None:
    schema_file = tmp_path / "schema.json"
    schema_file.write_text("[1, 2]", encoding="utf-8")

    result = runner.invoke(app, ["research", "create", "Summarize", "--schema", str(schema_file)])

    assert result.exit_code == 1
    assert "must be an object" in result.stdout


def test_research_wait_renders_task() -> None:
    task = ResearchTask(
        id="task_1",
        status="completed",
        instructions="Summarize fusion news",
        data={"headline": "ITER milestone"},
    )
    mock_exa = AsyncMock()
    mock_exa.__aenter__.return_value = mock_exa
    mock_exa.research.poll_task = AsyncMock(return_value=task)

    with patch("exa_client.client.ExaClient.from_env", return_value=mock_exa):
        result = runner.invoke(app, ["research", "wait", "task_1", "--timeout", "5"])

    assert result.exit_code == 0
    assert "ITER milestone" in result.stdout
    assert mock_exa.research.poll_task.await_args.args == ("task_1",)
    assert mock_exa.research.poll_task.await_args.kwargs["timeout_seconds"] == 5.0


def test_websets_get_not_found_exits_with_error() -> None:
    mock_exa = AsyncMock()
    mock_exa.__aenter__.return_value = mock_exa
    mock_exa.websets.get = AsyncMock(side_effect=ExaNotFoundError("Webset not found"))

    with patch("exa_client.client.ExaClient.from_env", return_value=mock_exa):
        result = runner.invoke(app, ["websets", "get", "ws_missing"])

    assert result.exit_code == 1
    assert "Webset not found" in result.stdout


@respx.mock
def test_websets_items_respects_limit() -> None:
    item = {
        "id": "item_1",
        "source": "search",
        "sourceId": "s1",
        "websetId": "ws_1",
        "properties": {"url": "https://acme.example"},
        "evaluations": [{"criterion": "EU", "satisfied": "yes"}],
        "createdAt": "2025-01-01T00:00:00Z",
        "updatedAt": "2025-01-01T00:00:00Z",
    }
    route = respx.get("https://api.exa.ai/websets/v0/websets/ws_1/items").mock(
        return_value=Response(
            200,
            json={"data": [item, {**item, "id": "item_2"}], "hasMore": True, "nextCursor": "c"},
        )
    )

    result = runner.invoke(app, ["websets", "items", "ws_1", "--limit", "1", "--json"])

    assert result.exit_code == 0
    assert '"id": "item_1"' in result.stdout
    assert "item_2" not in result.stdout
    assert route.call_count == 1
