"""
Contains the types used to describe the validator, result and record contracts
"""
from enum import Enum
from typing import Any, Callable, Mapping, Protocol, TypeAlias


class ValidationResult(Protocol):
    """
    A protocol for the object returned by a validator function. The only thing this package relies on is the
    `errors` attribute which has to be queryable for field names.
    """

    @property
    def errors(self) -> Any:
        ...


FieldT: TypeAlias = str | Enum
Params: TypeAlias = Mapping[str, Any]
ValidatorFunction: TypeAlias = Callable[[Any, Params], ValidationResult]
FieldAccessor: TypeAlias = Callable[[Any, FieldT], Any]
