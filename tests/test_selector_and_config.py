import unittest
from replacer_json.core.config import RenderOptions
from replacer_json.core.selector import KeyList, TransformFn, make_selector


class TestMakeSelector(unittest.TestCase):
    """
    Tests for how the raw `replacer` argument is interpreted:
      - callables become TransformFn
      - iterables of names become KeyList (strings and numbers only, deduplicated)
      - None, strings and other values mean no selector
    """

    def test_callable_becomes_transform(self):
        fn = lambda key, value, owner: value
        selector = make_selector(fn)
        self.assertIsInstance(selector, TransformFn)
        self.assertIs(selector.fn, fn)

    def test_names_become_key_list(self):
        selector = make_selector(["a", 1, 1.5, "a", True, None, {"x": 1}])
        self.assertIsInstance(selector, KeyList)
        self.assertEqual(selector.keys, ("a", "1", "1.5"))

    def test_existing_selector_passes_through(self):
        keys = KeyList(("a",))
        self.assertIs(make_selector(keys), keys)

    def test_unsupported_replacers_ignored(self):
        self.assertIsNone(make_selector(None))
        self.assertIsNone(make_selector("title"))
        self.assertIsNone(make_selector(42))


class TestRenderOptions(unittest.TestCase):
    def test_numeric_indent_clamped(self):
        self.assertEqual(RenderOptions.from_indent(2).indent_unit, "  ")
        self.assertEqual(RenderOptions.from_indent(20).indent_unit, " " * 10)
        self.assertEqual(RenderOptions.from_indent(-3).indent_unit, "")
        self.assertEqual(RenderOptions.from_indent(float("inf")).indent_unit, " " * 10)
        self.assertEqual(RenderOptions.from_indent(float("nan")).indent_unit, "")

    def test_string_indent_truncated(self):
        self.assertEqual(RenderOptions.from_indent("\t").indent_unit, "\t")
        self.assertEqual(RenderOptions.from_indent("abcdefghijkl").indent_unit, "abcdefghij")

    def test_other_values_compact(self):
        self.assertTrue(RenderOptions.from_indent(None).compact)
        self.assertTrue(RenderOptions.from_indent(True).compact)
        self.assertTrue(RenderOptions.from_indent(0).compact)
        self.assertFalse(RenderOptions.from_indent(1).compact)


if __name__ == '__main__':
    unittest.main()
