import unittest
import sys
import os

# Ensure src is in path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from surql import LegacyOracle, NullOracle, LEGACY_ORACLE, quote_plain_str


class TestLegacyOracle(unittest.TestCase):
    def setUp(self):
        self.oracle = LegacyOracle()

    def test_uuid(self):
        self.assertTrue(self.oracle.looks_like_uuid("'e72bee20-f49b-11ec-b939-0242ac120002'"))
        self.assertTrue(self.oracle.looks_like_uuid('"E72BEE20-F49B-11EC-B939-0242AC120002"'))
        self.assertFalse(self.oracle.looks_like_uuid("'e72bee20-f49b-11ec-b939'"))
        self.assertFalse(self.oracle.looks_like_uuid('e72bee20-f49b-11ec-b939-0242ac120002'))

    def test_datetime(self):
        for text in ("'2021-01-01'", "'2021-01-01T00:00:00Z'",
                     "'2021-01-01T10:30:15.123456Z'", "'2021-01-01T10:30:15+01:00'",
                     "'2020-02-29'"):
            with self.subTest(text=text):
                self.assertTrue(self.oracle.looks_like_datetime(text))

    def test_not_datetime(self):
        for text in ("'2021-02-29'", "'2021-13-01'", "'2021-01-32'",
                     "'2021-01-01T24:00:00Z'", "'2021-01-01T00:00:00'",
                     "'2021-01-01 extra'", "2021-01-01", "'"):
            with self.subTest(text=text):
                self.assertFalse(self.oracle.looks_like_datetime(text))

    def test_record_id(self):
        for text in ("'person:tobie'", "'person:100'", "'person:-5'",
                     "'person:⟨tobie jaffey⟩'", "'`my table`:x'",
                     "'city:[\"London\", 2021]'", "'city:{ name: \"London\" }'"):
            with self.subTest(text=text):
                self.assertTrue(self.oracle.looks_like_record_id(text))

    def test_not_record_id(self):
        for text in ("'person'", "'person:'", "':tobie'", "'a b:c'", "person:tobie"):
            with self.subTest(text=text):
                self.assertFalse(self.oracle.looks_like_record_id(text))

    def test_mismatched_delimiters(self):
        self.assertFalse(self.oracle.looks_like_record_id('\'person:tobie"'))

    def test_logs_prefixing(self):
        with self.assertLogs('surql.literals', level='DEBUG') as cm:
            self.assertEqual(quote_plain_str('person:tobie', LEGACY_ORACLE), "s'person:tobie'")
        self.assertIn("'person:tobie'", cm.output[0])


class TestNullOracle(unittest.TestCase):
    def test_never_matches(self):
        oracle = NullOracle()
        text = "'2021-01-01T00:00:00Z'"
        self.assertFalse(oracle.looks_like_uuid(text))
        self.assertFalse(oracle.looks_like_datetime(text))
        self.assertFalse(oracle.looks_like_record_id(text))
        self.assertEqual(quote_plain_str('2021-01-01T00:00:00Z', oracle), text)

if __name__ == '__main__':
    unittest.main()
