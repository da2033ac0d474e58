"""
Command-line entrypoint.

This script either:
- Replays a single key script given with --keys and prints the result
- Replays every key script of a file (or archive) and writes a results file next to it

Each key script runs on a fresh evaluator, one key press at a time, the
same way the keypad drives it.
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError, field_validator, model_validator

from keypad_calculator.common.loader import ARCHIVE_ERRORS, KeyScriptLoader
from keypad_calculator.common.logger import LOG_LEVELS, logger, set_level
from keypad_calculator.common.models import EvaluatorConfig, SessionResult
from keypad_calculator.core.session import run_session


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath, optional
        Path to the file containing key scripts.
    keys : str, optional
        A single key script.
    max_operand_length : int, optional
        Digit cap per operand.
    log_level : str
        Logger level name.
    """

    file_path: Optional[FilePath] = None
    keys: Optional[str] = None
    max_operand_length: Optional[int] = Field(default=None, ge=1)
    log_level: str = "INFO"

    @field_validator("log_level")
    def log_level_must_be_known(cls, v: str) -> str:
        """Normalize the level name and ensure logging knows it."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @model_validator(mode="after")
    def exactly_one_source(self) -> "CliArgs":
        """Ensure that either a file or a key script is given, not both."""
        if (self.file_path is None) == (self.keys is None):
            raise ValueError("Provide either a key script file or --keys, not both")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Replay calculator key presses"
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        help="Path to a .txt, .zip, .tar.xz or .7z file with one key script per line",
    )
    parser.add_argument(
        "--keys",
        help='Single key script, e.g. "12 + 3 ="',
    )
    parser.add_argument(
        "--max-operand-length",
        type=int,
        help="Ignore digits beyond this length in each operand",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            file_path=args.file_path,
            keys=args.keys,
            max_operand_length=args.max_operand_length,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: scripts/keys.7z
    output: scripts/keys_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def run_file(input_path: Path, output_path: Path, config: EvaluatorConfig) -> List[SessionResult]:
    """
    Replay every key script of the input and write one result line per script.

    :param Path input_path: Key script file or archive
    :param Path output_path: Results file to (over)write
    :param EvaluatorConfig config: Evaluator tunables

    :return: Results in input order
    :rtype: List[SessionResult]
    """
    scripts: List[str] = KeyScriptLoader().load(input_path)
    results: List[SessionResult] = []

    with output_path.open("w", encoding="utf-8") as f_out:
        for script in scripts:
            result = run_session(script, config)
            results.append(result)
            f_out.write(result.to_line() + "\n")

    failed = sum(not r.succeeded for r in results)
    logger.info(f"✅ Wrote {len(results)} results to {output_path} ({failed} failed)")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function.

    :return: Process exit status, 1 when any session failed
    :rtype: int
    """
    cli_args = parse_args(argv)
    set_level(cli_args.log_level)
    config = EvaluatorConfig(max_operand_length=cli_args.max_operand_length)

    if cli_args.keys is not None:
        result = run_session(cli_args.keys, config)
        print(result.to_line())
        return 0 if result.succeeded else 1

    input_path: Path = Path(cli_args.file_path)
    try:
        results = run_file(input_path, build_output_path(input_path), config)
    except (ValueError, *ARCHIVE_ERRORS) as exc:
        logger.error(f"📄❌ Could not read key scripts: {exc}")
        return 1
    return 0 if all(r.succeeded for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
