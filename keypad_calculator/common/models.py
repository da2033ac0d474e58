"""Pydantic models for the evaluator state, its configuration and session results."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Operator(str, Enum):
    """Pending arithmetic operation. The value is the symbol shown on the display."""

    NONE = ""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"


class EvaluatorState(BaseModel):
    """
    Snapshot of the calculator: two operand strings and the pending operator.

    An empty operand string means the number has not been entered yet.
    """

    model_config = ConfigDict(frozen=True)

    left_operand: str = Field(default="", description="First number being entered, or the last result")
    operator: Operator = Field(default=Operator.NONE, description="Pending operator")
    right_operand: str = Field(default="", description="Second number being entered")

    @property
    def is_empty(self) -> bool:
        return not self.left_operand and self.operator is Operator.NONE and not self.right_operand

    @property
    def can_compute(self) -> bool:
        """True when both operands and the operator are present."""
        return bool(self.left_operand) and self.operator is not Operator.NONE and bool(self.right_operand)

    def display(self) -> str:
        """
        Text shown on the calculator screen.

        :return: Concatenated operands and operator symbol, or "0" when nothing was entered
        :rtype: str
        """
        text = f"{self.left_operand}{self.operator.value}{self.right_operand}"
        return text or "0"


class EvaluatorConfig(BaseModel):
    """Tunables of the evaluator."""

    model_config = ConfigDict(frozen=True)

    max_operand_length: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of digits per operand, unbounded when None",
    )


class SessionResult(BaseModel):
    """Outcome of replaying one key script through a fresh evaluator."""

    script: str = Field(..., description="Key script as read from the input")
    display: str = Field(..., description="Screen text after the last handled key")
    state: EvaluatorState = Field(..., description="Evaluator state after the last handled key")
    error: Optional[str] = Field(default=None, description="Reason the session stopped early")

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_line(self) -> str:
        """Render the result as one line of a results file."""
        if self.succeeded:
            return f"{self.script} = {self.display}"
        return f"{self.script} -> ERROR: {self.error}"
