"""
Contains the default accessor used to read the current value of a field from a record.
"""
from typing import Any, Mapping

from .keys import field_name


def current_value(record: Any, field: Any) -> Any:
    """
    Returns the current value of `field` on `record`. Mappings are queried by key, first with the field as given
    and then with its string form. Any other record is queried by attribute.
    Missing fields resolve to `None` like an unset attribute on a freshly created model.
    """
    if isinstance(record, Mapping):
        if field in record:
            return record[field]
        return record.get(field_name(field))
    return getattr(record, field_name(field), None)
