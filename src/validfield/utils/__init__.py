"""
Contains utility functions used to build the parameters and to read values from records.
"""
from .keys import field_name, normalize_keys
from .record_access import current_value
