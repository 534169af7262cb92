from datetime import date, datetime
from unittest import TestCase

import numpy as np
import pandas as pd

from geotext.constructs.properties import normalize_properties, to_property_value


class TestPropertyValues(TestCase):
    def test_scalars(self):
        self.assertIsNone(to_property_value(None))
        self.assertIs(to_property_value(True), True)
        self.assertEqual(to_property_value(3), 3)
        self.assertEqual(to_property_value("x"), "x")

    def test_numpy_scalars(self):
        value = to_property_value(np.int64(5))
        self.assertEqual(value, 5)
        self.assertIs(type(value), int)

        value = to_property_value(np.float32(1.5))
        self.assertEqual(value, 1.5)
        self.assertIs(type(value), float)

        self.assertIs(to_property_value(np.bool_(False)), False)

    def test_missing_values(self):
        self.assertIsNone(to_property_value(float("nan")))
        self.assertIsNone(to_property_value(np.nan))
        self.assertIsNone(to_property_value(pd.NA))
        self.assertIsNone(to_property_value(pd.NaT))

    def test_containers(self):
        self.assertEqual(to_property_value((1, 2)), [1, 2])
        self.assertEqual(to_property_value(np.array([1, 2])), [1, 2])
        self.assertEqual(to_property_value({1: {"a": (1,)}}), {"1": {"a": [1]}})

    def test_dates(self):
        self.assertEqual(to_property_value(date(2020, 1, 2)), "2020-01-02")
        self.assertEqual(
            to_property_value(datetime(2020, 1, 2, 3, 4, 5)), "2020-01-02T03:04:05"
        )

    def test_other_values_become_strings(self):
        class Thing:
            def __str__(self):
                return "thing"

        with self.assertLogs("geotext.constructs.properties", level="WARNING"):
            self.assertEqual(to_property_value(Thing()), "thing")

    def test_normalize_properties(self):
        self.assertEqual(normalize_properties(None), {})
        self.assertEqual(normalize_properties({1: np.int32(2)}), {"1": 2})
