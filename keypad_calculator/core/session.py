"""Replay key scripts through the evaluator."""
from typing import List, Optional

from keypad_calculator.common.logger import logger
from keypad_calculator.common.models import EvaluatorConfig, SessionResult
from keypad_calculator.core.evaluator import Evaluator


def tokenize(script: str) -> List[str]:
    """
    Split a key script into single key labels.

    Labels are whitespace-separated; a run of digits ("12") stands for one
    press per digit.

    :param str script: Key script, e.g. "12 + 3 =" or "n1 n2 add n3 calculate"

    :return: One label per key press
    :rtype: List[str]
    """
    labels: List[str] = []
    for token in script.split():
        if token.isdigit():
            labels.extend(token)
        else:
            labels.append(token)
    return labels


def run_session(script: str, config: Optional[EvaluatorConfig] = None) -> SessionResult:
    """
    Press every key of a script on a fresh evaluator.

    The session stops at the first key that fails (unknown label or a
    calculate that cannot parse its operands); the error is logged and
    reported in the result together with the state reached before it.

    :param str script: Key script
    :param EvaluatorConfig config: Evaluator tunables, defaults when None

    :return: Final display, state and error if any
    :rtype: SessionResult
    """
    evaluator = Evaluator(config=config or EvaluatorConfig())
    logger.debug(f"🧮🏁 Session started: {script!r}")

    error = None
    for label in tokenize(script):
        try:
            evaluator.apply_input(label)
        except ValueError as exc:
            logger.error(f"🧮❌ Session failed on key {label!r}: {exc}")
            error = str(exc)
            break

    result = SessionResult(
        script=script,
        display=evaluator.display(),
        state=evaluator.state,
        error=error,
    )
    if result.succeeded:
        logger.debug(f"🧮✅ Session finished: {result.display}")
    return result
