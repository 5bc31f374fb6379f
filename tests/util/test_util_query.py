import unittest

from gdriveclient.util.query import (
    build_contains_query,
    build_parent_query,
    escape_query_value,
)


class TestUtilQuery(unittest.TestCase):
    def test_escape(self) -> None:
        self.assertEqual(escape_query_value("it's"), "it\\'s")
        self.assertEqual(escape_query_value("a\\b"), "a\\\\b")

    def test_parent_query(self) -> None:
        self.assertEqual(
            build_parent_query("P1", include_trashed=False),
            "('P1' in parents) and trashed=false",
        )
        self.assertEqual(build_parent_query("P1", include_trashed=True), "'P1' in parents")

    def test_contains_query(self) -> None:
        self.assertEqual(build_contains_query("name", "rep'ort"), "name contains 'rep\\'ort'")
        self.assertEqual(
            build_contains_query("fullText", "budget"),
            "fullText contains 'budget'",
        )


if __name__ == "__main__":
    unittest.main()
