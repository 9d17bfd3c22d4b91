# tests/test_json_extractor.py

import unittest

from city_guide.services.json_extractor import extract_json_array


class TestExtractJsonArray(unittest.TestCase):
    def test_plain_array(self):
        items = extract_json_array('[{"name": "A"}, {"name": "B"}]')
        self.assertEqual(items, [{"name": "A"}, {"name": "B"}])

    def test_array_wrapped_in_prose_and_fences(self):
        text = 'Sure!\n```json\n[{"name": "Louvre", "secondaryInfo": "Art"}]\n```\nEnjoy.'
        self.assertEqual(
            extract_json_array(text), [{"name": "Louvre", "secondaryInfo": "Art"}]
        )

    def test_nested_arrays_are_kept_whole(self):
        text = '[{"name": "A", "tags": ["x", "y"]}]'
        self.assertEqual(extract_json_array(text), [{"name": "A", "tags": ["x", "y"]}])

    def test_no_array_returns_none(self):
        self.assertIsNone(extract_json_array("I cannot help with that."))

    def test_empty_or_missing_text_returns_none(self):
        self.assertIsNone(extract_json_array(""))
        self.assertIsNone(extract_json_array(None))

    def test_malformed_json_returns_none(self):
        self.assertIsNone(extract_json_array('[{"name": "A",}'))
        self.assertIsNone(extract_json_array('[{"name": "A"}, oops]'))

    def test_greedy_span_across_two_arrays_is_unusable(self):
        # first "[" to last "]" covers both arrays plus the prose between them
        self.assertIsNone(extract_json_array('[{"a": 1}] and also [{"b": 2}]'))

    def test_deeply_nested_brackets_return_none(self):
        self.assertIsNone(extract_json_array("[" * 5000 + "]" * 5000))

    def test_non_object_entries_are_dropped(self):
        self.assertEqual(extract_json_array('["x", {"name": "A"}, 3]'), [{"name": "A"}])

    def test_array_without_objects_returns_none(self):
        self.assertIsNone(extract_json_array('["Louvre", "Eiffel Tower"]'))
        self.assertIsNone(extract_json_array("[]"))


if __name__ == "__main__":
    unittest.main()
