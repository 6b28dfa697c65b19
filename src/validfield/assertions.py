"""
Contains the assertion functions. All of them raise a FieldAssertionError if the validator function of the context
does not agree with the expectation. The single field assertions return the context to allow chained calls.
"""
import logging
from typing import Any, Optional

from .context import TrialContext
from .errors import Expectation, FieldAssertionError, InvalidArgumentError
from .evaluation import evaluate_all
from .types import FieldT

_logger = logging.getLogger(__name__)


def _values_or_current(context: TrialContext, field: FieldT, values: Optional[list[Any]]) -> list[Any]:
    if values is None:
        return [context.accessor(context.base_record, field)]
    return values


def _fail_if_any(field: str, offending_values: list[Any], expectation: Expectation) -> None:
    if offending_values:
        _logger.debug("%d value(s) not %s for %s", len(offending_values), expectation, field)
        raise FieldAssertionError(field, offending_values, expectation)


def assert_valid_field(context: TrialContext, field: FieldT, values: Optional[list[Any]] = None) -> TrialContext:
    """
    Raises a FieldAssertionError if any of `values` is invalid for `field`. If `values` is omitted the current value
    of the field on the record is tested.
    ```
    with_context(Person()).assert_valid_field("first_name", [None, ""])
    # FieldAssertionError: Expected the following values to be valid for "first_name": None, ""
    ```
    """
    results = evaluate_all(context, field, _values_or_current(context, field, values))
    _fail_if_any(results.field, results.invalid_values, "valid")
    return context


def assert_invalid_field(context: TrialContext, field: FieldT, values: Optional[list[Any]] = None) -> TrialContext:
    """
    Raises a FieldAssertionError if any of `values` is valid for `field`. If `values` is omitted the current value
    of the field on the record is tested.
    ```
    with_context(Person()).assert_invalid_field("first_name", ["Test"])
    # FieldAssertionError: Expected the following values to be invalid for "first_name": "Test"
    ```
    """
    results = evaluate_all(context, field, _values_or_current(context, field, values))
    _fail_if_any(results.field, results.valid_values, "invalid")
    return context


def assert_all_valid(context: TrialContext, field: FieldT, values: list[Any]) -> TrialContext:
    """Batch form of `assert_valid_field`, `values` is required."""
    return assert_valid_field(context, field, values)


def assert_all_invalid(context: TrialContext, field: FieldT, values: list[Any]) -> TrialContext:
    """Batch form of `assert_invalid_field`, `values` is required."""
    return assert_invalid_field(context, field, values)


def assert_field(
    context: TrialContext, field: FieldT, valid_values: list[Any], invalid_values: list[Any]
) -> TrialContext:
    """
    Combines `assert_valid_field` and `assert_invalid_field` into a single call. The invalid values are only tested
    if all valid values passed.
    """
    assert_valid_field(context, field, valid_values)
    return assert_invalid_field(context, field, invalid_values)


def _check_field_list(fields: Any) -> None:
    if not isinstance(fields, (list, tuple)):
        raise InvalidArgumentError(f"fields must be a list, got {type(fields).__name__}")


def assert_valid_fields(context: TrialContext, fields: list[FieldT]) -> None:
    """
    Tests the current values of all `fields` on the record to be valid.
    Only the first failing field is reported, the remaining fields are not tested.
    """
    _check_field_list(fields)
    for field in fields:
        assert_valid_field(context, field)


def assert_invalid_fields(context: TrialContext, fields: list[FieldT]) -> None:
    """
    Tests the current values of all `fields` on the record to be invalid.
    Only the first failing field is reported, the remaining fields are not tested.
    """
    _check_field_list(fields)
    for field in fields:
        assert_invalid_field(context, field)
