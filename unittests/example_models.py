"""
Contains the models and validator functions the tests are run against
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class PersonField(Enum):
    first_name = "first name"
    last_name = "last name"
    age = "age"


class StrPersonField(str, Enum):
    first_name = "first name"
    last_name = "last name"


@dataclass
class Changeset:
    params: dict[str, Any]
    errors: dict[str, str] = field(default_factory=dict)


@dataclass
class Person:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None

    def changeset(self, params: dict[str, Any]) -> Changeset:
        """first_name and last_name are required, age is optional but must not be negative"""
        result = Changeset(params=params)
        for name in ("first_name", "last_name"):
            value = params.get(name, getattr(self, name))
            if not value:
                result.errors[name] = "can't be blank"
        age = params.get("age", self.age)
        if age is not None and (not isinstance(age, int) or age < 0):
            result.errors["age"] = "must be a non-negative integer"
        return result


@dataclass
class Company:
    name: Optional[str] = None

    @classmethod
    def changeset(cls, record: "Company", params: dict[str, Any]) -> Changeset:
        result = Changeset(params=params)
        if not params.get("name", record.name):
            result.errors["name"] = "can't be blank"
        return result


class RecordingValidator:
    """
    A validator function which records every call and rejects the values listed in `rejected` for every field.
    """

    def __init__(self, rejected: tuple[Any, ...] = (None, "")):
        self.rejected = rejected
        self.calls: list[tuple[Any, dict[str, Any]]] = []

    def __call__(self, record: Any, params: dict[str, Any]) -> Changeset:
        self.calls.append((record, params))
        result = Changeset(params=params)
        for key, value in params.items():
            if value in self.rejected:
                result.errors[key] = "is rejected"
        return result
