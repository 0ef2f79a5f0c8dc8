import unittest
from replacer_json.core.values import OMIT
from replacer_json.persistence.serializer import dumps


def make_meetup():
    room = {"number": 23}
    meetup = {
        "title": "Conference",
        "participants": [{"name": "John"}, {"name": "Alice"}],
        "place": room,
    }
    room["occupiedBy"] = meetup
    return meetup, room


class TestKeyListReplacer(unittest.TestCase):
    """
    Tests for the allow-list form of the replacer. The list applies at every depth, so
    nested objects lose members that are not listed, and members follow the list order.
    """

    def test_list_applies_to_nested_objects(self):
        meetup, _ = make_meetup()
        self.assertEqual(
            dumps(meetup, ["title", "participants"]),
            '{"title":"Conference","participants":[{},{}]}',
        )

    def test_list_excluding_back_reference_breaks_cycle(self):
        meetup, _ = make_meetup()
        self.assertEqual(
            dumps(meetup, ["title", "participants", "place", "name", "number"]),
            '{"title":"Conference","participants":[{"name":"John"},{"name":"Alice"}],"place":{"number":23}}',
        )

    def test_members_follow_list_order(self):
        self.assertEqual(dumps({"b": 1, "a": 2, "c": 3}, ["a", "b"]), '{"a":2,"b":1}')

    def test_missing_names_skipped_and_numbers_matched(self):
        self.assertEqual(dumps({"1": "x", "2": "y"}, [2, "missing"]), '{"2":"y"}')
        self.assertEqual(dumps({2: "y"}, ["2"]), '{"2":"y"}')

    def test_arrays_unaffected(self):
        self.assertEqual(dumps([1, {"a": 1, "b": 2}], ["a"]), '[1,{"a":1}]')


class TestTransformReplacer(unittest.TestCase):
    def test_omit_key_breaks_cycle(self):
        meetup, _ = make_meetup()
        replacer = lambda key, value, owner: OMIT if key == "occupiedBy" else value
        self.assertEqual(
            dumps(meetup, replacer),
            '{"title":"Conference","participants":[{"name":"John"},{"name":"Alice"}],"place":{"number":23}}',
        )

    def test_visits_every_pair_in_pre_order_with_owner(self):
        data = {"title": "Conf", "list": [{"n": "J"}]}
        calls = []

        def replacer(key, value, owner):
            calls.append((key, value, owner))
            return value

        dumps(data, replacer)
        self.assertEqual([c[0] for c in calls], ["", "title", "list", "0", "n"])
        # root is visited with no owner
        self.assertIs(calls[0][1], data)
        self.assertIsNone(calls[0][2])
        self.assertIs(calls[1][2], data)
        self.assertIs(calls[3][2], data["list"])
        self.assertIs(calls[4][2], data["list"][0])

    def test_omitted_elements_keep_their_slot(self):
        replacer = lambda key, value, owner: OMIT if value == 2 else value
        self.assertEqual(dumps([1, 2, 3], replacer), "[1,null,3]")

    def test_replaced_values_are_encoded(self):
        replacer = lambda key, value, owner: value * 2 if isinstance(value, int) else value
        self.assertEqual(dumps({"a": 1, "b": [2]}, replacer), '{"a":2,"b":[4]}')

    def test_replacing_root(self):
        self.assertIsNone(dumps({"a": 1}, lambda key, value, owner: OMIT if key == "" else value))
        self.assertEqual(dumps({"a": 1}, lambda key, value, owner: "x" if key == "" else value), '"x"')

    def test_errors_from_replacer_propagate(self):
        def replacer(key, value, owner):
            if key == "bad":
                raise KeyError("bad")
            return value

        with self.assertRaises(KeyError):
            dumps({"ok": 1, "bad": 2}, replacer)


if __name__ == '__main__':
    unittest.main()
