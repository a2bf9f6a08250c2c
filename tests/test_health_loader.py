import json
import logging

from workout_progress.io.health_loader import count_health_entries


def test_sample_file_has_eight_entries(sample_health_json):
    result = count_health_entries(str(sample_health_json))
    assert result == 8
    assert isinstance(result, int)


def test_count_is_logged(sample_health_json, caplog):
    caplog.set_level(logging.INFO)
    count_health_entries(str(sample_health_json))
    assert "Total health entries: 8" in caplog.text


def test_entry_shape_does_not_matter(write_file):
    doc = {"metrics": [1, "two", None, {"a": 1}, [5]]}
    path = write_file("metrics.json", json.dumps(doc))
    assert count_health_entries(path) == 5


def test_document_without_metrics_counts_zero(write_file, caplog):
    path = write_file("no_metrics.json", json.dumps({"user": "Alex"}))
    assert count_health_entries(path) == 0
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_non_list_metrics_counts_zero(write_file):
    path = write_file("odd.json", json.dumps({"metrics": {"steps": 100}}))
    assert count_health_entries(path) == 0


def test_non_object_document_counts_zero(write_file):
    assert count_health_entries(write_file("list.json", "[1, 2, 3]")) == 0
    assert count_health_entries(write_file("null.json", "null")) == 0


def test_missing_file_returns_zero(tmp_path, caplog):
    missing = str(tmp_path / "non-existent.json")
    assert count_health_entries(missing) == 0
    assert f"Health metrics file not found at {missing}" in caplog.text


def test_invalid_json_logs_format_message(write_file, caplog):
    path = write_file("invalid.json", "{ invalid json content }")
    assert count_health_entries(path) == 0
    assert f"Invalid JSON format in {path}" in caplog.text
    assert "Error reading health metrics file" not in caplog.text


def test_undecodable_content_is_a_format_error(write_file, caplog):
    path = write_file("binary.json", b"\xff\xfe{\x00")
    assert count_health_entries(path) == 0
    assert "Invalid JSON format" in caplog.text


def test_other_errors_use_generic_message(tmp_path, caplog):
    assert count_health_entries(str(tmp_path)) == 0
    assert "Error reading health metrics file" in caplog.text


def test_repeated_calls_are_identical(sample_health_json):
    assert count_health_entries(str(sample_health_json)) == count_health_entries(str(sample_health_json))
