"""Tests for the sample data loader and the console demo."""

import logging

import pytest
import yaml

from autograde.tools.grading_feedback.cli import main
from autograde.tools.grading_feedback.data_manager import GradingDataManager
from autograde.tools.grading_feedback.sample_data import load_sample_data


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_load_sample_data():
    manager = load_sample_data(GradingDataManager())

    assert [s.name for s in manager.students] == ["Alice Johnson", "Bob Smith", "Carol Davis"]
    assert len(manager.assignments) == 1
    assert manager.assignments[0].max_score == 100.0
    assert len(manager.submissions) == 2
    assert not any(s.is_graded for s in manager.submissions)

    assignment_id = manager.assignments[0].id
    assert all(s.assignment_id == assignment_id for s in manager.submissions)


def test_sample_data_grades_detailed_answer_higher():
    manager = load_sample_data(GradingDataManager())
    outcomes = manager.grade_all()

    assert all(o.success for o in outcomes)
    alice, bob = manager.submissions
    assert alice.score > bob.score
    assert "expanding" in bob.feedback


def test_main_prints_before_and_after(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "Alice Johnson (alice@example.com)" in out
    assert "Algorithm Analysis" in out
    assert "Submissions before grading:" in out
    assert "Not graded" in out
    assert "Submissions after grading:" in out
    assert "/100" in out
    assert "•" in out


def test_main_writes_summary(tmp_path, capsys):
    summary_path = tmp_path / "summary.yaml"

    assert main(["--summary", str(summary_path)]) == 0

    summary = yaml.safe_load(summary_path.read_text(encoding="utf-8"))
    assert summary['total_submissions'] == 2
    assert summary['successful'] == 2
    assert summary['failed'] == 0
    assert all(r['feedback'] for r in summary['results'])
    assert all(0 <= r['score'] <= 100 for r in summary['results'])


def test_summary_reports_component_scores(tmp_path, capsys):
    summary_path = tmp_path / "summary.yaml"

    assert main(["--summary", str(summary_path)]) == 0

    summary = yaml.safe_load(summary_path.read_text(encoding="utf-8"))
    for entry in summary['results']:
        components = entry['components']
        assert set(components) == {'length', 'keyword', 'grammar'}
        assert all(0 <= value <= 1 for value in components.values())
    # Both sample answers are well under 500 characters.
    assert all(entry['components']['length'] < 1 for entry in summary['results'])


def test_main_with_custom_config(tmp_path, capsys):
    config_path = tmp_path / "weights.yaml"
    config_path.write_text(yaml.dump({
        'logging': {'level': 'WARNING'},
        'grading': {'heuristic': {'keywords': ['quicksort']}}
    }))
    summary_path = tmp_path / "summary.yaml"

    assert main(["--config", str(config_path), "--summary", str(summary_path)]) == 0

    summary = yaml.safe_load(summary_path.read_text(encoding="utf-8"))
    # Both sample answers mention quicksort, so neither gets the keyword advice.
    assert all("technical terms" not in r['feedback'] for r in summary['results'])


def test_main_rejects_unknown_heuristic_setting(tmp_path, capsys):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(yaml.dump({'grading': {'heuristic': {'weight_of_vibes': 1.0}}}))

    assert main(["--config", str(config_path)]) == 1
    assert "Submissions after grading" not in capsys.readouterr().out


def test_main_missing_config(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
