from dataclasses import dataclass
from typing import Any

import pytest

from unittests.example_models import Person, PersonField, RecordingValidator, StrPersonField
from validfield import InvalidArgumentError, TrialOutcome, evaluate_all, is_invalid, with_context


@dataclass
class _Result:
    errors: Any


def _validator_returning(errors: Any):
    def validate(record, params):
        return _Result(errors=errors)

    return validate


class TestIsInvalid:
    def test_valid_and_invalid_value(self):
        context = with_context(Person(last_name="Doe"))
        assert is_invalid(context, "first_name", "Test") is False
        assert is_invalid(context, "first_name", "") is True
        assert is_invalid(context, "first_name", None) is True

    def test_only_the_tested_field_counts(self):
        # last_name is blank and therefore has an error, but first_name is tested
        context = with_context(Person())
        assert is_invalid(context, "first_name", "Test") is False

    def test_enum_field(self):
        context = with_context(Person())
        assert is_invalid(context, PersonField.first_name, None) is True
        assert is_invalid(context, PersonField.first_name, "Test") is False

    def test_params_passed_to_validator(self):
        validator = RecordingValidator()
        person = Person()
        context = with_context(person, validator).add_baseline_params({"first_name": "x", PersonField.age: 3})
        is_invalid(context, PersonField.first_name, "z")
        assert validator.calls == [(person, {"first_name": "z", "age": 3})]

    def test_str_enum_field_is_passed_by_name(self):
        validator = RecordingValidator()
        person = Person()
        assert is_invalid(with_context(person, validator), StrPersonField.first_name, None) is True
        assert validator.calls == [(person, {"first_name": None})]
        assert all(type(key) is str for key in validator.calls[0][1])

    def test_nested_value_keys_are_normalized(self):
        validator = RecordingValidator()
        context = with_context(Person(), validator)
        is_invalid(context, "address", {PersonField.first_name: {"city": "Berlin"}})
        assert validator.calls[0][1] == {"address": {"first_name": {"city": "Berlin"}}}

    def test_baseline_params_are_not_mutated(self):
        validator = RecordingValidator()
        context = with_context(Person(), validator).add_baseline_params({"last_name": "Doe"})
        is_invalid(context, "first_name", "a")
        is_invalid(context, "first_name", "b")
        assert context.baseline_params == {"last_name": "Doe"}
        assert validator.calls[0][1] == {"last_name": "Doe", "first_name": "a"}
        assert validator.calls[1][1] == {"last_name": "Doe", "first_name": "b"}
        assert validator.calls[0][1] is not validator.calls[1][1]

    @pytest.mark.parametrize(
        "errors, expected",
        [
            pytest.param({"first_name": "is blank"}, True, id="dict"),
            pytest.param({}, False, id="empty dict"),
            pytest.param([("first_name", ("can't be blank", []))], True, id="keyword list"),
            pytest.param([("last_name", "can't be blank")], False, id="other field in keyword list"),
            pytest.param({"first_name", "age"}, True, id="set of names"),
            pytest.param({PersonField.first_name: "is blank"}, True, id="enum keys"),
            pytest.param([], False, id="empty list"),
            pytest.param({0: "row error", "first_name": "is blank"}, True, id="mixed keys"),
            pytest.param({0: "row error", None: "form error"}, False, id="only foreign keys"),
            pytest.param([None, ["first_name"], "first_name"], True, id="foreign entries in list"),
        ],
    )
    def test_error_collections(self, errors, expected):
        context = with_context(Person(), _validator_returning(errors))
        assert is_invalid(context, "first_name", "Test") is expected

    def test_result_without_errors(self):
        context = with_context(Person(), lambda record, params: params)
        with pytest.raises(InvalidArgumentError, match="returned dict which has no 'errors' attribute"):
            is_invalid(context, "first_name", "Test")

    def test_validator_exceptions_propagate(self):
        def validate(record, params):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            is_invalid(with_context(Person(), validate), "first_name", "Test")


class TestEvaluateAll:
    def test_keeps_order(self):
        context = with_context(Person())
        results = evaluate_all(context, "first_name", ["a", None, "b", ""])
        assert list(results) == [
            TrialOutcome("a", False),
            TrialOutcome(None, True),
            TrialOutcome("b", False),
            TrialOutcome("", True),
        ]
        assert results.field == "first_name"
        assert results.valid_values == ["a", "b"]
        assert results.invalid_values == [None, ""]

    def test_one_call_per_value(self):
        validator = RecordingValidator()
        results = evaluate_all(with_context(Person(), validator), PersonField.age, [1, 2, 3])
        assert len(validator.calls) == 3
        assert len(results) == 3
        assert results.field == "age"
        assert results[0] == (1, False)

    def test_empty_values(self):
        validator = RecordingValidator()
        results = evaluate_all(with_context(Person(), validator), "first_name", [])
        assert results == []
        assert results.valid_values == []
        assert results.invalid_values == []
        assert validator.calls == []

    def test_method_on_context(self):
        results = with_context(Person()).evaluate_all("age", [-1, 5])
        assert results.invalid_values == [-1]
