"""
Contains the exceptions raised by this package
"""
import json
from typing import Any, Literal, TypeAlias

Expectation: TypeAlias = Literal["valid", "invalid"]


class InvalidArgumentError(ValueError):
    """
    Raised if a function of this package is called with arguments violating its preconditions. This always
    indicates a bug in the test code and not in the code under test.
    """


class FieldAssertionError(AssertionError):
    """
    Raised if the values tested for a field do not meet the expectation. Since it is an `AssertionError` any test
    framework will report it as a regular test failure.
    """

    def __init__(self, field: str, values: list[Any], expectation: Expectation):
        self.field = field
        self.values = values
        self.expectation = expectation
        super().__init__(
            f'Expected the following values to be {expectation} for "{field}": '
            f"{', '.join(inspect_value(value) for value in values)}"
        )


def inspect_value(value: Any) -> str:
    """
    Returns the debug representation of a value used in failure messages. Strings are rendered as double-quoted
    literals, also inside lists, tuples and dicts. Everything else is rendered by `repr`.
    """
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if type(value) is list:  # pylint: disable=unidiomatic-typecheck
        return f"[{', '.join(inspect_value(item) for item in value)}]"
    if type(value) is tuple:  # pylint: disable=unidiomatic-typecheck
        if len(value) == 1:
            return f"({inspect_value(value[0])},)"
        return f"({', '.join(inspect_value(item) for item in value)})"
    if type(value) is dict:  # pylint: disable=unidiomatic-typecheck
        return f"{{{', '.join(f'{inspect_value(key)}: {inspect_value(item)}' for key, item in value.items())}}}"
    return repr(value)
