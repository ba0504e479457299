"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from error_log_monitor import cli

LONG_TYPE = "X" * 101


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text("1 100 CPU 5.0\n2 CPU\n")
    return path


class TestMain:
    """Tests for cli.main."""

    def test_paths_from_arguments(
        self, input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        output_file = tmp_path / "output.txt"

        assert cli.main([str(input_file), str(output_file)]) == 0

        out = capsys.readouterr().out
        assert f"All the output is written to the file: {output_file}" in out
        assert output_file.read_text().splitlines() == [
            "No output",
            "Min Severity: 5, Max Severity: 5, Mean Severity: 5",
        ]

    def test_paths_from_prompts(
        self,
        input_file: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        output_file = tmp_path / "output.txt"
        answers = iter([str(input_file), str(output_file)])
        prompts = []

        def fake_ask(prompt: str, *args, **kwargs) -> str:
            prompts.append(prompt)
            return next(answers)

        monkeypatch.setattr(cli.Prompt, "ask", fake_ask)

        assert cli.main([]) == 0
        assert prompts == [
            "Enter the name of the input file",
            "Enter the name of the output file",
        ]
        assert output_file.exists()
        assert "All the output is written to the file" in capsys.readouterr().out

    def test_completion_message_keeps_path_as_typed(
        self,
        input_file: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)

        assert cli.main(["./input.txt", "./output.txt"]) == 0

        out = capsys.readouterr().out
        assert "All the output is written to the file: ./output.txt\n" in out
        assert (tmp_path / "output.txt").exists()

    def test_end_of_input_at_prompt(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def closed_stdin(prompt: str, *args, **kwargs) -> str:
            raise EOFError

        monkeypatch.setattr(cli.Prompt, "ask", closed_stdin)

        assert cli.main([]) == 1

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "All the output is written" not in captured.out

    def test_missing_input_exits_with_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = cli.main([str(tmp_path / "missing.txt"), str(tmp_path / "output.txt")])

        captured = capsys.readouterr()
        assert code == 1
        assert "All the output is written" not in captured.out
        assert "Error:" in captured.err

    def test_rejected_lines_are_listed(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        input_file = tmp_path / "input.txt"
        input_file.write_text(f"1 100 {LONG_TYPE} 5.0\n2 CPU\n")

        assert cli.main([str(input_file), str(tmp_path / "output.txt")]) == 0

        err = capsys.readouterr().err
        assert "line 1" in err
        assert "cannot exceed 100 characters" in err

    def test_strict_flag(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        input_file = tmp_path / "input.txt"
        input_file.write_text(f"1 100 {LONG_TYPE} 5.0\n2 CPU\n")

        code = cli.main(["--strict", str(input_file), str(tmp_path / "output.txt")])

        assert code == 1
        assert "Error: line 1" in capsys.readouterr().err

    def test_summary_flag(
        self, input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert cli.main(["--summary", str(input_file), str(tmp_path / "output.txt")]) == 0

        err = capsys.readouterr().err
        assert "Error Log Monitor" in err
        assert "Lines written" in err
        assert "completed" in err


class TestRunBatch:
    """Each batch run gets its own index."""

    def test_runs_do_not_share_state(self, input_file: Path, tmp_path: Path) -> None:
        query_file = tmp_path / "query.txt"
        query_file.write_text("2 CPU\n")
        cli.run_batch(input_file, tmp_path / "first.txt")

        cli.run_batch(query_file, tmp_path / "second.txt")

        assert (tmp_path / "second.txt").read_text() == (
            "Min Severity: 0.0, Max Severity: 0.0, Mean Severity: 0.0\n"
        )
