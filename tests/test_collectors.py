"""Tests for src.retrieval.collectors covering release listing and activity lookups.

Run with coverage to exercise the data collection logic:
    pytest tests/test_collectors.py --maxfail=1 -v --cov=src.retrieval.collectors --cov-report=term-missing
"""

import json
from unittest.mock import MagicMock, patch

import requests

from src.retrieval import collectors


def _resp(status=200, payload=None):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload if payload is not None else {}
    resp.text = json.dumps(payload or {})
    return resp


@patch("src.retrieval.collectors.paged_get", return_value=[{"id": 1}])
def test_fetch_all_pages_targets_release_listing(mock_paged):
    assert collectors.fetch_all_pages("o", "r") == [{"id": 1}]
    mock_paged.assert_called_once_with("https://api.github.com/repos/o/r/releases")


@patch("src.retrieval.collectors.request", return_value=_resp(200, {"total_commits": 12}))
def test_get_commit_count_reads_total_commits(mock_request):
    assert collectors.get_commit_count("o", "r", "v1.0.0", "main") == 12
    url = mock_request.call_args.args[1]
    assert url == "https://api.github.com/repos/o/r/compare/v1.0.0...main"


@patch("src.retrieval.collectors.request", return_value=_resp(404, {"message": "Not Found"}))
def test_get_commit_count_degrades_to_zero(mock_request, capsys):
    assert collectors.get_commit_count("o", "r", "a", "b") == 0
    out = capsys.readouterr().out
    assert "[warn]" in out and "a...b" in out and "404" in out


@patch("src.retrieval.collectors.request", side_effect=requests.Timeout("slow"))
def test_get_commit_count_survives_transport_error(mock_request, capsys):
    assert collectors.get_commit_count("o", "r", "a", "b") == 0
    assert "slow" in capsys.readouterr().out


@patch("src.retrieval.collectors.request")
def test_get_commit_count_skips_missing_refs(mock_request, capsys):
    assert collectors.get_commit_count("o", "r", "", "main") == 0
    mock_request.assert_not_called()
    assert "missing ref" in capsys.readouterr().out


def test_build_search_query_per_item_type():
    issue_q = collectors.build_search_query("o", "r", "2024-01-01", "2024-01-08", collectors.ITEM_TYPE_ISSUE)
    pr_q = collectors.build_search_query("o", "r", "2024-01-01", "2024-01-08", collectors.ITEM_TYPE_PULL_REQUEST)
    assert issue_q == "repo:o/r is:issue is:closed closed:2024-01-01..2024-01-08"
    assert pr_q == "repo:o/r is:pr is:closed closed:2024-01-01..2024-01-08"


@patch("src.retrieval.collectors.request", return_value=_resp(200, {"total_count": 4, "items": []}))
def test_get_closed_count_reads_total_count(mock_request):
    count = collectors.get_closed_count("o", "r", "2024-01-01", "2024-01-08", collectors.ITEM_TYPE_ISSUE)
    assert count == 4
    assert mock_request.call_args.args[1] == "https://api.github.com/search/issues"
    params = mock_request.call_args.kwargs["params"]
    assert params["q"].startswith("repo:o/r is:issue")


@patch("src.retrieval.collectors.request", return_value=_resp(422, {"message": "Validation Failed"}))
def test_get_closed_count_degrades_to_zero(mock_request, capsys):
    count = collectors.get_closed_count("o", "r", "2024-01-01", "2024-01-08", collectors.ITEM_TYPE_PULL_REQUEST)
    assert count == 0
    out = capsys.readouterr().out
    assert "2024-01-01..2024-01-08" in out and "422" in out


def _resp_with_bad_json(status=200):
    resp = MagicMock()
    resp.status_code = status
    resp.json.side_effect = ValueError("Expecting value")
    resp.text = "<html>oops</html>"
    return resp


@patch("src.retrieval.collectors.request", return_value=_resp_with_bad_json())
def test_get_commit_count_non_json_body_degrades_to_zero(mock_request, capsys):
    assert collectors.get_commit_count("o", "r", "a", "b") == 0
    assert "invalid JSON" in capsys.readouterr().out


@patch("src.retrieval.collectors.request", return_value=_resp(200, [1]))
def test_get_commit_count_non_object_body_degrades_to_zero(mock_request, capsys):
    assert collectors.get_commit_count("o", "r", "a", "b") == 0
    assert "expected a JSON object" in capsys.readouterr().out


@patch("src.retrieval.collectors.request", return_value=_resp_with_bad_json())
def test_get_closed_count_non_json_body_degrades_to_zero(mock_request, capsys):
    count = collectors.get_closed_count("o", "r", "2024-01-01", "2024-01-08", collectors.ITEM_TYPE_ISSUE)
    assert count == 0
    assert "invalid JSON" in capsys.readouterr().out


@patch("src.retrieval.collectors.request", return_value=_resp(200, [1]))
def test_get_closed_count_non_object_body_degrades_to_zero(mock_request, capsys):
    count = collectors.get_closed_count("o", "r", "2024-01-01", "2024-01-08", collectors.ITEM_TYPE_PULL_REQUEST)
    assert count == 0
    assert "expected a JSON object" in capsys.readouterr().out
