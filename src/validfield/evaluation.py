"""
Contains the functionality to run the validator function for single values of a field and to collect the outcomes
"""
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterator, NamedTuple, Optional, Sequence, overload

from .context import TrialContext
from .errors import InvalidArgumentError
from .types import FieldT
from .utils.keys import field_name, normalize_keys

_logger = logging.getLogger(__name__)


class TrialOutcome(NamedTuple):
    """
    The outcome of a single trial: the tested value and whether the validator reported an error for the field.
    """

    value: Any
    invalid: bool


def _error_fields(errors: Any) -> Iterator[Any]:
    """
    Yields the keys contained in the errors of a validation result. `errors` may be a mapping keyed by field,
    or an iterable of `(field, ...)` tuples or of bare field names. Enum members are converted to their name, any
    other key is yielded as is and simply never matches a field name.
    """
    entries = errors.keys() if isinstance(errors, Mapping) else errors
    for entry in entries:
        if isinstance(entry, tuple) and len(entry) > 0:
            entry = entry[0]
        yield entry.name if isinstance(entry, Enum) else entry


def is_invalid(context: TrialContext, field: FieldT, value: Any) -> bool:
    """
    Runs the validator function of the context with the baseline parameters and `value` set for `field`.
    Returns True if the validation result contains an error for `field`.
    """
    name = field_name(field)
    params = normalize_keys(context.baseline_params)
    params[name] = normalize_keys(value)
    result = context.validate(context.base_record, params)
    try:
        errors = result.errors
    except AttributeError as error:
        raise InvalidArgumentError(
            f"The validator returned {type(result).__name__} which has no 'errors' attribute"
        ) from error
    invalid = name in _error_fields(errors)
    _logger.debug("Trial %s=%r: %s", name, value, "invalid" if invalid else "valid")
    return invalid


class TrialResults(Sequence[TrialOutcome]):
    """
    The function `evaluate_all` will return an instance of this class. It contains the outcome of every trial in
    the order of the tested values. The partitions into valid and invalid values are calculated only if you use them.
    """

    def __init__(self, field: FieldT, outcomes: list[TrialOutcome]):
        self.field = field_name(field)
        self._outcomes = outcomes
        self._valid_values: Optional[list[Any]] = None
        self._invalid_values: Optional[list[Any]] = None

    def _partition(self):
        """Splits the tested values into valid and invalid ones while keeping their order"""
        self._valid_values = []
        self._invalid_values = []
        for outcome in self._outcomes:
            if outcome.invalid:
                self._invalid_values.append(outcome.value)
            else:
                self._valid_values.append(outcome.value)

    @overload
    def __getitem__(self, index: int) -> TrialOutcome:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[TrialOutcome]:
        ...

    def __getitem__(self, index):
        return self._outcomes[index]

    def __len__(self) -> int:
        return len(self._outcomes)

    def __eq__(self, other):
        if isinstance(other, TrialResults):
            return self.field == other.field and self._outcomes == other._outcomes
        return self._outcomes == other

    def __repr__(self):
        return f"TrialResults({self.field!r}, {self._outcomes!r})"

    @property
    def valid_values(self) -> list[Any]:
        """List of tested values which were accepted by the validator"""
        if self._valid_values is None:
            self._partition()
            assert self._valid_values is not None
        return self._valid_values

    @property
    def invalid_values(self) -> list[Any]:
        """List of tested values for which the validator reported an error on the field"""
        if self._invalid_values is None:
            self._partition()
            assert self._invalid_values is not None
        return self._invalid_values


def evaluate_all(context: TrialContext, field: FieldT, values: list[Any]) -> TrialResults:
    """
    Tests every value in `values` for `field` independently and returns the outcomes in the same order.
    """
    return TrialResults(field, [TrialOutcome(value, is_invalid(context, field, value)) for value in values])
