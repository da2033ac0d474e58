"""Test the command-line entrypoint."""
from pathlib import Path

import pytest

from keypad_calculator.main import build_output_path, main, parse_args


@pytest.mark.parametrize("name,expected", [
    ("keys.txt", "keys_txt_results.txt"),
    ("keys.7z", "keys_7z_results.txt"),
    ("keys.tar.xz", "keys_tar_xz_results.txt"),
    ("keys", "keys_results.txt"),
])
def test_build_output_path(name, expected) -> None:
    """The results file sits next to the input with a suffix-safe name."""
    assert build_output_path(Path("scripts") / name) == Path("scripts") / expected


def test_parse_args_keys() -> None:
    """--keys alone is a valid invocation."""
    args = parse_args(["--keys", "1 + 1 =", "--log-level", "debug"])
    assert args.keys == "1 + 1 ="
    assert args.file_path is None
    assert args.log_level == "DEBUG"


@pytest.mark.parametrize("argv", [
    [],
    ["--keys", "1", "missing.txt"],
    ["does_not_exist.txt"],
    ["--keys", "1", "--max-operand-length", "0"],
    ["--keys", "1", "--log-level", "loud"],
])
def test_parse_args_invalid(argv) -> None:
    """Invalid argument combinations exit through argparse."""
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_main_keys_prints_result(capsys) -> None:
    """A --keys session prints its result line."""
    assert main(["--keys", "12 + 3 ="]) == 0
    assert capsys.readouterr().out.strip() == "12 + 3 = = 15"


def test_main_keys_failure_exit_status(capsys) -> None:
    """A failed session exits with status 1."""
    assert main(["--keys", "1 foo"]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_main_file_writes_results(tmp_path) -> None:
    """Every script of the input gets one line in the results file."""
    input_file = tmp_path / "keys.txt"
    input_file.write_text("12 + 3 =\n9 ÷ 0 =\n\n3 + 4 = × 2 =\n", encoding="utf-8")

    assert main([str(input_file)]) == 0

    output_file = tmp_path / "keys_txt_results.txt"
    assert output_file.read_text(encoding="utf-8").splitlines() == [
        "12 + 3 = = 15",
        "9 ÷ 0 = = inf",
        "3 + 4 = × 2 = = 14",
    ]


def test_main_file_with_failures(tmp_path) -> None:
    """Failed scripts are reported in the results file and the exit status."""
    input_file = tmp_path / "keys.txt"
    input_file.write_text("1 + 1 =\n7 / 2 = + 1 =\n", encoding="utf-8")

    assert main([str(input_file), "--max-operand-length", "4"]) == 1

    lines = (tmp_path / "keys_txt_results.txt").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "1 + 1 = = 2"
    assert lines[1].startswith("7 / 2 = + 1 = -> ERROR:")


def test_main_unsupported_input(tmp_path) -> None:
    """Unreadable inputs exit with status 1."""
    input_file = tmp_path / "keys.rar"
    input_file.write_text("1 + 1 =")

    assert main([str(input_file)]) == 1


@pytest.mark.parametrize("name", ["keys.zip", "keys.tar.xz", "keys.7z"])
def test_main_corrupt_archive(tmp_path, name, caplog) -> None:
    """Corrupt archives exit with status 1 instead of a traceback."""
    input_file = tmp_path / name
    input_file.write_bytes(b"not an archive at all")

    assert main([str(input_file)]) == 1
    assert "Could not read key scripts" in caplog.text
