"""
Test cases for IEEE 754 special values and number handling.

These tests cover how NaN and the infinities are accepted, restored and
rejected, and that ordinary numbers decode exactly as json.loads() decodes them.
"""

import json
import math
import unittest

import jsonsalvage
from jsonsalvage import JSONParseError, ParseOptions


class TestIEEE754EdgeCases(unittest.TestCase):
    """Test IEEE 754 floating point edge cases."""

    def test_infinity_values(self) -> None:
        result = jsonsalvage.loads('{"inf": Infinity}')
        self.assertEqual(result["inf"], float("inf"))

        result = jsonsalvage.loads('{"ninf": -Infinity}')
        self.assertEqual(result["ninf"], float("-inf"))

    def test_nan_values(self) -> None:
        result = jsonsalvage.loads('{"nan": NaN}')
        self.assertIsInstance(result["nan"], float)
        self.assertTrue(math.isnan(result["nan"]))

    def test_case_variations_rejected(self) -> None:
        """Only the exact JavaScript spellings are accepted."""
        for literal in ("nan", "infinity", "INFINITY", "+Infinity"):
            with self.subTest(literal=literal):
                with self.assertRaises(JSONParseError):
                    jsonsalvage.loads(f'{{"value": {literal}}}')

    def test_nested_special_values(self) -> None:
        result = jsonsalvage.loads(
            '{"stats": {"min": -Infinity, "max": Infinity, "mean": NaN}, "n": 0}'
        )
        self.assertEqual(result["stats"]["min"], float("-inf"))
        self.assertEqual(result["stats"]["max"], float("inf"))
        self.assertTrue(math.isnan(result["stats"]["mean"]))
        self.assertEqual(result["n"], 0)

    def test_special_values_with_other_repairs(self) -> None:
        result = jsonsalvage.loads("{'score': NaN, 'limit': Infinity,} // stats")
        self.assertTrue(math.isnan(result["score"]))
        self.assertEqual(result["limit"], float("inf"))

    def test_special_values_disabled(self) -> None:
        options = ParseOptions(allow_nan=False, allow_infinity=False)
        with self.assertRaises(JSONParseError):
            jsonsalvage.parse_json('{"inf": Infinity}', options)
        # Sentinel strings are plain strings
        self.assertEqual(
            jsonsalvage.parse_json("{'inf': 'Infinity'}", options), {"inf": "Infinity"}
        )

    def test_overflow_matches_json(self) -> None:
        """Numbers that overflow behave as they do with json.loads()."""
        for document in ('{"big": 1e309}', '{"small": -1e309}', '{"tiny": 1e-400}'):
            with self.subTest(document=document):
                self.assertEqual(jsonsalvage.loads(document), json.loads(document))

    def test_integer_precision(self) -> None:
        result = jsonsalvage.loads('{"big": 123456789012345678901234567890}')
        self.assertEqual(result["big"], 123456789012345678901234567890)

    def test_negative_zero(self) -> None:
        result = jsonsalvage.loads('{"z": -0.0}')
        self.assertEqual(math.copysign(1.0, result["z"]), -1.0)


if __name__ == "__main__":
    unittest.main()
