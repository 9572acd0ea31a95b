"""
Integration Tests for the Command Line Interface.

Tests cover:
    - Successful runs writing the default output file
    - Usage, input, output and configuration error reporting
    - Binary exit status
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from spreader_detector.cli import EXIT_FAILURE, EXIT_SUCCESS, main
from spreader_detector.reporting.report_writer import ReportWriter


@pytest.fixture(autouse=True)
def run_in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from a scratch directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCli:
    """Integration tests for main()."""

    def test_writes_default_output_file(self, data_dir: Path, tmp_path: Path) -> None:
        """
        SCENARIO: Two valid input paths
        EXPECTED: Exit 0 and SpreaderDetectorAnalysis.out in the working directory
        """
        # Act
        status = main([str(data_dir / "people.in"), str(data_dir / "meetings.in")])

        # Assert
        assert status == EXIT_SUCCESS
        lines = (tmp_path / "SpreaderDetectorAnalysis.out").read_text().splitlines()
        assert lines == [
            "Hospitalization Required: Alice 1.",
            "Hospitalization Required: Bob 2.",
            "14-days-Quarantine Required: Carol 3.",
        ]

    def test_output_flag(self, data_dir: Path, tmp_path: Path) -> None:
        """
        SCENARIO: --output given
        EXPECTED: Output written to that path instead
        """
        target = tmp_path / "custom.out"

        status = main(
            [str(data_dir / "people.in"), str(data_dir / "meetings.in"), "--output", str(target)]
        )

        assert status == EXIT_SUCCESS
        assert target.exists()
        assert not (tmp_path / "SpreaderDetectorAnalysis.out").exists()

    @pytest.mark.parametrize("argv", [[], ["only_one.in"], ["a", "b", "c"]])
    def test_wrong_arity_is_usage_error(
        self, argv: list, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: Zero, one or three positional arguments
        EXPECTED: Exit 1 with the usage message
        """
        status = main(argv)

        assert status == EXIT_FAILURE
        assert "USAGE:" in capsys.readouterr().err

    def test_missing_input_file(
        self, data_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: People file does not exist
        EXPECTED: Exit 1, input error message, no output file
        """
        status = main([str(tmp_path / "missing.in"), str(data_dir / "meetings.in")])

        assert status == EXIT_FAILURE
        assert "Error in input files." in capsys.readouterr().err
        assert not (tmp_path / "SpreaderDetectorAnalysis.out").exists()

    def test_unwritable_output(
        self, data_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: Output path is an existing directory
        EXPECTED: Exit 1 with the output error message
        """
        status = main(
            [str(data_dir / "people.in"), str(data_dir / "meetings.in"), "--output", str(tmp_path)]
        )

        assert status == EXIT_FAILURE
        assert "Error in output file." in capsys.readouterr().err

    def test_config_file_messages(
        self, data_dir: Path, write_file, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: Config overrides the input error message
        EXPECTED: Custom message printed on an input failure
        """
        config = write_file("config.yaml", "messages:\n  input_file: bad input\n")

        status = main(
            [str(data_dir / "people.in"), "missing.in", "--config", str(config)]
        )

        assert status == EXIT_FAILURE
        assert "bad input" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "content",
        [
            "model:\n  max_time: -1\n",
            "model: [unclosed\n",
            "output:\n  hospitalization_message: \"Hosp {name} {id} {extra}\"\n",
        ],
    )
    def test_invalid_config(
        self,
        data_dir: Path,
        write_file,
        tmp_path: Path,
        content: str,
        capsys: pytest.CaptureFixture,
    ) -> None:
        """
        SCENARIO: Config fails validation or is not valid YAML
        EXPECTED: Exit 1 with the input error message, no output file
        """
        config = write_file("config.yaml", content)

        status = main(
            [str(data_dir / "people.in"), str(data_dir / "meetings.in"), "--config", str(config)]
        )

        assert status == EXIT_FAILURE
        assert "Error in input files." in capsys.readouterr().err
        assert not (tmp_path / "SpreaderDetectorAnalysis.out").exists()

    def test_missing_config_file(self, data_dir: Path, tmp_path: Path) -> None:
        """
        SCENARIO: --config names a missing file
        EXPECTED: Exit 1
        """
        status = main(
            [
                str(data_dir / "people.in"),
                str(data_dir / "meetings.in"),
                "--config",
                str(tmp_path / "none.yaml"),
            ]
        )

        assert status == EXIT_FAILURE

    def test_usage_error_logs_no_error_record(
        self, capsys: pytest.CaptureFixture, caplog: pytest.LogCaptureFixture
    ) -> None:
        """
        SCENARIO: Wrong arity
        EXPECTED: Only the usage message reported, no ERROR log record
        """
        status = main(["only_one.in"])

        assert status == EXIT_FAILURE
        assert capsys.readouterr().err.strip().startswith("USAGE:")
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]

    def test_memory_error_reported_as_library_error(
        self, data_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: Memory runs out while rendering the report
        EXPECTED: Exit 1 with the standard library message, no traceback
        """
        with patch.object(ReportWriter, "render", side_effect=MemoryError):
            status = main([str(data_dir / "people.in"), str(data_dir / "meetings.in")])

        assert status == EXIT_FAILURE
        assert "Standard library error." in capsys.readouterr().err
        assert not (tmp_path / "SpreaderDetectorAnalysis.out").exists()
