"""Tests for report generation."""

import json
from pathlib import Path

import pytest

from corsprobe.errors import ReportWriteError
from corsprobe.modules.report import (
    render_text_report,
    write_json_report,
    write_report,
    write_text_report,
)
from corsprobe.modules.scanner import ScanResult


@pytest.fixture
def results() -> list[ScanResult]:
    return [
        ScanResult(
            url="http://a.test/",
            status_code=200,
            headers={
                "Access-Control-Allow-Origin": "http://a.test-test.cors.com",
                "Server": "nginx",
            },
            cors_headers=("Access-Control-Allow-Origin",),
            has_cors=True,
            timestamp="2026-10-19T12:00:00+00:00",
            origin_sent="http://a.test-test.cors.com",
        ),
        ScanResult.failure("http://b.test/", "Request failed: timed out"),
    ]


class TestTextReport:
    def test_block_layout(self, results):
        text = render_text_report(results)
        blocks = text.split("=" * 80 + "\n")

        assert len(blocks) == 3
        first = blocks[1]
        assert "URL: http://a.test/\n" in first
        assert "Timestamp: 2026-10-19T12:00:00+00:00\n" in first
        assert "Status Code: 200\n" in first
        assert "Has CORS: true\n" in first
        assert "CORS Headers Found:\n" in first
        assert "  - Access-Control-Allow-Origin: http://a.test-test.cors.com\n" in first
        assert "All Headers:\n" in first
        assert "  Server: nginx\n" in first
        assert "Error:" not in first

    def test_failed_target_has_error_and_no_headers(self, results):
        block = render_text_report(results).split("=" * 80 + "\n")[2]

        assert "Status Code: 0\n" in block
        assert "Has CORS: false\n" in block
        assert "Error: Request failed: timed out\n" in block
        assert "CORS Headers Found" not in block
        assert block.endswith("All Headers:\n\n")

    def test_write_text_report(self, results, temp_dir: Path):
        path = write_text_report(results, temp_dir / "out.txt")

        assert path.read_text().startswith("=" * 80)

    def test_write_failure_raises_report_error(self, results, temp_dir: Path):
        with pytest.raises(ReportWriteError):
            write_text_report(results, temp_dir / "no-such-dir" / "out.txt")


class TestJsonReport:
    def test_json_document(self, results, temp_dir: Path):
        path = write_json_report(results, temp_dir / "out.json")
        data = json.loads(path.read_text())

        assert data["report_metadata"]["tool"] == "corsprobe"
        assert data["summary"] == {
            "total": 2,
            "successful": 1,
            "with_cors": 1,
            "success_rate": 50.0,
        }
        first, second = data["results"]
        assert first["has_cors"] is True
        assert first["cors_headers"] == ["Access-Control-Allow-Origin"]
        assert "error" not in first
        assert second["error"] == "Request failed: timed out"
        assert second["status_code"] == 0


class TestWriteReport:
    def test_dispatches_by_format(self, results, temp_dir: Path):
        text_path = write_report(results, temp_dir / "r.txt", "text")
        json_path = write_report(results, temp_dir / "r.json", "JSON")

        assert text_path.read_text().startswith("=" * 80)
        assert json.loads(json_path.read_text())["summary"]["total"] == 2

    def test_unknown_format(self, results, temp_dir: Path):
        with pytest.raises(ValueError, match="Unknown report format"):
            write_report(results, temp_dir / "r.xml", "xml")
