"""
This package enables you to easily test which values a validator function (e.g. the `changeset` function of a model)
accepts or rejects for a field, without writing the boilerplate to call it and to inspect its errors in every test.
"""

from .assertions import (
    assert_all_invalid,
    assert_all_valid,
    assert_field,
    assert_invalid_field,
    assert_invalid_fields,
    assert_valid_field,
    assert_valid_fields,
)
from .context import TrialContext, add_baseline_params, with_context
from .errors import FieldAssertionError, InvalidArgumentError
from .evaluation import TrialOutcome, TrialResults, evaluate_all, is_invalid
from .utils import normalize_keys
