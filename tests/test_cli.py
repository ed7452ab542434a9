"""
Tests for the kcse-scoreboard command line.
"""

import pytest

from kcse_scoreboard.cli import EXIT_GRADING_ERROR, EXIT_NO_GRADE, EXIT_OK, build_parser, main

SCENARIO_ARGS = [
    "--mark", "101=80", "--mark", "102=78", "--mark", "121=70",
    "--mark", "231=65", "--mark", "232=30", "--mark", "233=25", "--mark", "311=75",
]


class TestSubjectsCommand:
    """Tests for `subjects`."""

    def test_subjects_when_run_then_lists_catalog(self, capsys):
        """Every subject is listed, mandatory ones flagged."""
        assert main(["subjects"]) == EXIT_OK

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 14
        assert lines[0] == "101  ENGLISH  (mandatory)"
        assert "231  BIOLOGY" in lines


class TestGradeCommand:
    """Tests for `grade`."""

    def test_grade_when_valid_then_prints_grade(self, capsys):
        """A known subject and mark print the grade and points."""
        assert main(["grade", "121", "70"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "A (12 points)"

    @pytest.mark.parametrize("code, mark", [("999", "50"), ("101", "abc"), ("101", "101")])
    def test_grade_when_no_grade_then_exit_one(self, capsys, code, mark):
        """Unknown subjects and unusable marks exit with 1."""
        assert main(["grade", code, mark]) == EXIT_NO_GRADE
        assert "No grade" in capsys.readouterr().err


class TestScoreCommand:
    """Tests for `score`."""

    def test_score_when_scenario_then_mean_grade_b(self, capsys):
        """The scoreboard is printed to stdout."""
        assert main(["score", *SCENARIO_ARGS, "--name", "Jane Wanjiku", "--index", "12345678"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "MEAN GRADE: B" in out
        assert "Jane Wanjiku" in out

    def test_score_when_points_flag_then_totals_shown(self, capsys):
        """--points adds totals."""
        main(["score", *SCENARIO_ARGS, "--points"])
        assert "Total points: 66" in capsys.readouterr().out

    def test_score_when_pdf_requested_then_file_written(self, capsys, tmp_path):
        """--pdf writes the printable scoreboard."""
        target = tmp_path / "board.pdf"
        assert main(["score", *SCENARIO_ARGS, "--pdf", str(target)]) == EXIT_OK

        assert target.read_bytes().startswith(b"%PDF")
        assert "Scoreboard written to" in capsys.readouterr().out

    def test_score_when_too_few_subjects_then_exit_two(self, capsys):
        """Grading errors are reported on stderr."""
        code = main(["score", "--mark", "101=80", "--mark", "102=78", "--mark", "121=70"])

        assert code == EXIT_GRADING_ERROR
        err = capsys.readouterr().err
        assert err.startswith("Error: At least 7 graded subjects are required, got 3")

    def test_score_when_unknown_subject_then_exit_two(self, capsys):
        """Unknown codes are grading errors."""
        assert main(["score", *SCENARIO_ARGS, "--mark", "999=50"]) == EXIT_GRADING_ERROR
        assert "Unknown subject code: '999'" in capsys.readouterr().err


class TestParser:
    """Tests for argument parsing."""

    @pytest.mark.parametrize("bad", ["101", "=80", "101=abc"])
    def test_parser_when_mark_malformed_then_exits(self, bad, capsys):
        """Malformed --mark values are argparse errors."""
        with pytest.raises(SystemExit) as info:
            build_parser().parse_args(["score", "--mark", bad])
        assert info.value.code == 2

    def test_parser_when_mark_valid_then_entry(self):
        """--mark values become MarkEntry records."""
        args = build_parser().parse_args(["score", "--mark", " 121 = 70.5"])
        assert args.marks[0].code == "121"
        assert args.marks[0].mark == 70.5

    def test_parser_when_no_command_then_exits(self, capsys):
        """A command is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
