"""Button catalog of the calculator keypad."""
from enum import Enum
from typing import Dict, Tuple, Union


class Button(str, Enum):
    """
    Every key the keypad can send to the evaluator.

    Members are declared in grid order (four keys per row) and their value
    is the text printed on the key.
    """

    CLEAR = "C"
    DELETE = "D"
    PERCENT = "%"
    DIVIDE = "Ã·"
    N7 = "7"
    N8 = "8"
    N9 = "9"
    MULTIPLY = "Ã"
    N4 = "4"
    N5 = "5"
    N6 = "6"
    SUBTRACT = "-"
    N1 = "1"
    N2 = "2"
    N3 = "3"
    ADD = "+"
    N0 = "0"
    DECIMAL_POINT = "."
    CALCULATE = "="

    @property
    def is_digit(self) -> bool:
        return self.value.isdigit()


class ButtonRole(str, Enum):
    """Visual family of a key."""

    WIDE_DIGIT = "wide_digit"
    CONTROL = "control"
    ACTION = "action"
    DIGIT = "digit"


BUTTON_ORDER: Tuple[Button, ...] = tuple(Button)

DIGITS: Tuple[Button, ...] = tuple(b for b in Button if b.is_digit)

FACES: Dict[str, Button] = {b.value: b for b in Button}

# Catalog names used by key scripts ("n7", "decimalPoint", ...)
CATALOG_NAMES: Dict[str, Button] = {
    "clear": Button.CLEAR,
    "delete": Button.DELETE,
    "percent": Button.PERCENT,
    "divide": Button.DIVIDE,
    "multiply": Button.MULTIPLY,
    "subtract": Button.SUBTRACT,
    "add": Button.ADD,
    "decimalpoint": Button.DECIMAL_POINT,
    "calculate": Button.CALCULATE,
    **{f"n{b.value}": b for b in DIGITS},
}

# Keyboard-friendly spellings of the operator keys
ALIASES: Dict[str, Button] = {
    "*": Button.MULTIPLY,
    "x": Button.MULTIPLY,
    "/": Button.DIVIDE,
    "−": Button.SUBTRACT,
}


def button_role(button: Button) -> ButtonRole:
    """
    Classify a key into its visual family.

    :param Button button: Key to classify

    :return: Role of the key
    :rtype: ButtonRole
    """
    if button is Button.N0:
        return ButtonRole.WIDE_DIGIT
    if button in (Button.DELETE, Button.CLEAR):
        return ButtonRole.CONTROL
    if button in (
        Button.PERCENT,
        Button.MULTIPLY,
        Button.ADD,
        Button.SUBTRACT,
        Button.DIVIDE,
        Button.CALCULATE,
    ):
        return ButtonRole.ACTION
    return ButtonRole.DIGIT


def parse_label(label: Union[str, Button]) -> Button:
    """
    Resolve a key label to its Button.

    Accepted spellings, in lookup order:
        - a Button member
        - the key face text ("7", "Ã·", "=")
        - the catalog name, case-insensitive ("n7", "decimalPoint")
        - an ASCII alias ("*", "x", "/")

    :param label: Label to resolve

    :return: Matching key
    :rtype: Button
    :raises ValueError: If the label is not part of the catalog
    """
    if isinstance(label, Button):
        return label

    token: str = label.strip()
    button = (
        FACES.get(token)
        or CATALOG_NAMES.get(token.lower())
        or ALIASES.get(token.lower())
    )
    if button is None:
        raise ValueError(f"Unknown button label: {label!r}")
    return button
