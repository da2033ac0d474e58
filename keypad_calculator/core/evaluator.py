"""State machine driven by the calculator keypad."""
from typing import Dict, Union

from pydantic import BaseModel, Field

from keypad_calculator.common.arithmetic import compute
from keypad_calculator.common.buttons import Button, parse_label
from keypad_calculator.common.logger import logger
from keypad_calculator.common.models import EvaluatorConfig, EvaluatorState, Operator


# Keys that select an operator
OPERATOR_KEYS: Dict[Button, Operator] = {
    Button.ADD: Operator.ADD,
    Button.SUBTRACT: Operator.SUBTRACT,
    Button.MULTIPLY: Operator.MULTIPLY,
    Button.DIVIDE: Operator.DIVIDE,
}


class Evaluator(BaseModel):
    """
    Calculator evaluator fed one key press at a time.

    State cycle:
        Empty -> entering left -> operator chosen -> entering right
        -> calculate -> result in left operand (ready to seed the next operation)

    Rules:
        - Digits go to the right operand once an operator is chosen, to the left one otherwise
        - An operator is accepted only while the right operand is empty
        - Calculate does nothing unless both operands and the operator are set
        - Clear returns to the empty state
        - Delete removes the last entered character (right digit, then operator, then left digit)
        - Decimal point and percent are accepted but ignored

    A key that fails (malformed operand at calculate time) raises and leaves the state untouched.
    """

    config: EvaluatorConfig = Field(default_factory=EvaluatorConfig, description="Evaluator tunables")
    state: EvaluatorState = Field(default_factory=EvaluatorState, description="Current operands and operator")

    def apply_input(self, label: Union[str, Button]) -> EvaluatorState:
        """
        Advance the state machine with one key press.

        :param label: Key label, see ``parse_label`` for accepted spellings

        :return: State after the key press
        :rtype: EvaluatorState
        :raises ValueError: If the label is not part of the button catalog
        :raises EvaluationError: If calculate cannot parse an operand
        """
        button: Button = parse_label(label)

        if button is Button.CLEAR:
            new_state = EvaluatorState()
        elif button.is_digit:
            new_state = self._append_digit(button.value)
        elif button in OPERATOR_KEYS:
            new_state = self._select_operator(OPERATOR_KEYS[button])
        elif button is Button.CALCULATE:
            new_state = self._calculate()
        elif button is Button.DELETE:
            new_state = self._delete_last()
        else:
            logger.debug(f"Key {button.name} has no effect, ignored")
            new_state = self.state

        self.state = new_state
        return new_state

    def reset(self) -> None:
        """Return to the empty state."""
        self.state = EvaluatorState()

    def display(self) -> str:
        """Text currently shown on the calculator screen."""
        return self.state.display()

    def _append_digit(self, digit: str) -> EvaluatorState:
        field = "left_operand" if self.state.operator is Operator.NONE else "right_operand"
        current: str = getattr(self.state, field)

        limit = self.config.max_operand_length
        if limit is not None and len(current) >= limit:
            logger.debug(f"Operand already has {limit} digits, {digit!r} ignored")
            return self.state

        return self.state.model_copy(update={field: current + digit})

    def _select_operator(self, op: Operator) -> EvaluatorState:
        # Operator is locked once the right operand has started
        if self.state.right_operand:
            return self.state
        return self.state.model_copy(update={"operator": op})

    def _calculate(self) -> EvaluatorState:
        if not self.state.can_compute:
            return self.state

        s = self.state
        result: str = compute(s.left_operand, s.operator, s.right_operand)
        logger.debug(f"{s.left_operand} {s.operator.value} {s.right_operand} = {result}")
        return EvaluatorState(left_operand=result)

    def _delete_last(self) -> EvaluatorState:
        s = self.state
        if s.right_operand:
            return s.model_copy(update={"right_operand": s.right_operand[:-1]})
        if s.operator is not Operator.NONE:
            return s.model_copy(update={"operator": Operator.NONE})
        return s.model_copy(update={"left_operand": s.left_operand[:-1]})
