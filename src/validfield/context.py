"""
Contains the TrialContext which bundles a record with the validator function used to test values for its fields.
"""
import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from frozendict import frozendict
from typeguard import TypeCheckError, check_type

from .errors import InvalidArgumentError
from .types import FieldAccessor, FieldT, ValidatorFunction
from .utils.record_access import current_value

if TYPE_CHECKING:
    from .evaluation import TrialResults

# Name of the attribute on the record's type which is used as validator if none is given explicitly
DEFAULT_VALIDATOR_ATTRIBUTE = "changeset"


def _check_two_argument_callable(func: Any, arg_name: str) -> None:
    """
    Raises an InvalidArgumentError if `func` is not a callable accepting exactly two positional arguments.
    """
    try:
        check_type(func, Callable[[Any, Any], Any])
    except TypeCheckError as error:
        raise InvalidArgumentError(f"{arg_name} must be a callable accepting two arguments: {error}") from error


@dataclass(frozen=True)
class TrialContext:
    """
    An immutable bundle of the record under test, the validator function and the baseline parameters which are
    merged into the parameters of every single trial. Use `with_context` to create an instance.
    The assertion methods return the context itself, so calls can be chained:
    ```
    with_context(Person()).assert_valid_field("first_name", ["Test"]).assert_invalid_field("first_name", [None, ""])
    ```
    """

    base_record: Any
    validate: ValidatorFunction
    baseline_params: frozendict[str, Any] = field(default_factory=frozendict)
    accessor: FieldAccessor = current_value

    def add_baseline_params(self, params: Mapping[str, Any]) -> "TrialContext":
        """See `validfield.context.add_baseline_params`"""
        return add_baseline_params(self, params)

    def evaluate_all(self, field_: FieldT, values: list[Any]) -> "TrialResults":
        """See `validfield.evaluation.evaluate_all`"""
        # pylint: disable=import-outside-toplevel, cyclic-import
        from .evaluation import evaluate_all

        return evaluate_all(self, field_, values)

    def assert_valid_field(self, field_: FieldT, values: Optional[list[Any]] = None) -> "TrialContext":
        """See `validfield.assertions.assert_valid_field`"""
        # pylint: disable=import-outside-toplevel, cyclic-import
        from .assertions import assert_valid_field

        return assert_valid_field(self, field_, values)

    def assert_invalid_field(self, field_: FieldT, values: Optional[list[Any]] = None) -> "TrialContext":
        """See `validfield.assertions.assert_invalid_field`"""
        # pylint: disable=import-outside-toplevel, cyclic-import
        from .assertions import assert_invalid_field

        return assert_invalid_field(self, field_, values)

    def assert_field(self, field_: FieldT, valid_values: list[Any], invalid_values: list[Any]) -> "TrialContext":
        """See `validfield.assertions.assert_field`"""
        # pylint: disable=import-outside-toplevel, cyclic-import
        from .assertions import assert_field

        return assert_field(self, field_, valid_values, invalid_values)

    def assert_valid_fields(self, fields: list[FieldT]) -> None:
        """See `validfield.assertions.assert_valid_fields`"""
        # pylint: disable=import-outside-toplevel, cyclic-import
        from .assertions import assert_valid_fields

        assert_valid_fields(self, fields)

    def assert_invalid_fields(self, fields: list[FieldT]) -> None:
        """See `validfield.assertions.assert_invalid_fields`"""
        # pylint: disable=import-outside-toplevel, cyclic-import
        from .assertions import assert_invalid_fields

        assert_invalid_fields(self, fields)


def with_context(
    record: Any, validate: Optional[ValidatorFunction] = None, *, accessor: Optional[FieldAccessor] = None
) -> TrialContext:
    """
    Returns a TrialContext to be used with the assertion functions.
    If `validate` is omitted the record is expected to be an instance of a class defining a `changeset` function
    which is called with the record and the parameter dict, e.g.:
    ```
    class Person:
        def changeset(self, params):
            ...

    with_context(Person()).assert_invalid_field("first_name", [None])
    ```
    Otherwise `validate` must accept two arguments, the first being the record provided to `with_context`, the
    second being the dict of parameters to be applied.
    The optional `accessor` is used to read the current value of a field from the record. By default mappings are
    queried by key and other records by attribute.
    """
    if validate is None:
        try:
            validate = getattr(type(record), DEFAULT_VALIDATOR_ATTRIBUTE)
        except AttributeError as error:
            raise InvalidArgumentError(
                f"{type(record).__name__} has no '{DEFAULT_VALIDATOR_ATTRIBUTE}' function, "
                "provide the validator function explicitly"
            ) from error
    _check_two_argument_callable(validate, "validate")
    if accessor is None:
        return TrialContext(base_record=record, validate=validate)
    _check_two_argument_callable(accessor, "accessor")
    return TrialContext(base_record=record, validate=validate, accessor=accessor)


def add_baseline_params(context: TrialContext, params: Mapping[str, Any]) -> TrialContext:
    """
    Returns a copy of `context` whose baseline parameters are replaced by `params`. These values will be set in the
    parameters of every trial, the tested field always overrides them.
    """
    if not isinstance(context, TrialContext):
        raise InvalidArgumentError(f"Expected a TrialContext, got {type(context).__name__}")
    if not isinstance(params, Mapping):
        raise InvalidArgumentError(f"Baseline parameters must be a mapping, got {type(params).__name__}")
    return dataclasses.replace(context, baseline_params=frozendict(params))
