from __future__ import annotations

import logging
import math
from datetime import date, datetime, time
from numbers import Integral, Real
from typing import Any, Dict, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

log = logging.getLogger(__name__)

PropertyValue = Union[
    None, bool, int, float, str, List["PropertyValue"], Dict[str, "PropertyValue"]
]


def to_property_value(value: Any) -> PropertyValue:
    """
    Convert any value into a property value that can be written as JSON.

    Property values are limited to null, booleans, integers, floats, strings, lists and
    maps with string keys. Numpy scalars and arrays, pandas missing values, tuples, sets and
    dates are converted to the closest of these. Any other value is converted to its string
    representation.

    Args:
        value: The value to convert

    Returns:
        The converted value

    Examples:
        >>> import numpy as np
        >>> to_property_value(np.int64(5))
        5
        >>> to_property_value((1, float("nan")))
        [1, None]
        >>> to_property_value({1: "a"})
        {'1': 'a'}
    """
    if value is None or value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        value = float(value)
        return None if math.isnan(value) else value
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return {str(k): to_property_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset, np.ndarray, pd.Series)):
        return [to_property_value(v) for v in value]
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()

    log.warning(
        f"property value of type {type(value).__name__} is written as a string"
    )
    return str(value)


def normalize_properties(
    properties: Optional[Mapping[str, Any]],
) -> Dict[str, PropertyValue]:
    """
    Convert a mapping of properties into a new dictionary of property values.

    Args:
        properties: The properties to convert, None is read as no properties

    Returns:
        A new dictionary with string keys and converted values
    """
    if properties is None:
        return {}
    return {str(k): to_property_value(v) for k, v in properties.items()}
