import unittest

from settings_loader.context import InterpolationWarning, Interpolator


class InterpolatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.messages: list[str] = []
        self.interpolator = Interpolator(self.messages.append)

    def test_empty_context(self) -> None:
        self.assertEqual(self.interpolator.interpolate({}), {})

    def test_no_interpolation(self) -> None:
        context = {'key1': 'value1', 'key2': 'value2'}
        self.assertEqual(self.interpolator.interpolate(context), context)
        self.assertEqual(self.messages, [])

    def test_simple_interpolation(self) -> None:
        context = {'key1': '{{ key2 }}', 'key2': 'value2'}
        self.assertEqual(
            self.interpolator.interpolate(context),
            {'key1': 'value2', 'key2': 'value2'},
        )

    def test_multiple_interpolation(self) -> None:
        context = {
            'key1': '{{key2}} {{key3}}',
            'key2': '{{key3}} OK!',
            'key3': 'OK',
        }
        self.assertEqual(
            self.interpolator.interpolate(context),
            {'key1': 'OK OK! OK', 'key2': 'OK OK!', 'key3': 'OK'},
        )

    def test_weird_patterns(self) -> None:
        context = {
            'key1': '{{key9}} {{ key9 }} {{key9 }} {{ key9}} {{   key9     }}',
            'key2': '{{ {{ key9 }} }}',
            'key9': 'X',
        }
        self.assertEqual(
            self.interpolator.interpolate(context),
            {'key1': 'X X X X X', 'key2': '{{ X }}', 'key9': 'X'},
        )

    def test_stray_brace_belongs_to_key(self) -> None:
        context = {'key1': '{{what}ever}}', 'what}ever': 'found'}
        self.assertEqual(self.interpolator.interpolate(context)['key1'], 'found')

    def test_input_is_not_modified(self) -> None:
        context = {'key1': '{{ key2 }}', 'key2': 'value2'}
        self.interpolator.interpolate(context)
        self.assertEqual(context, {'key1': '{{ key2 }}', 'key2': 'value2'})

    def test_idempotent(self) -> None:
        context = {'key1': '{{key2}} {{key3}}', 'key2': 'a', 'key3': 'b'}
        once = self.interpolator.interpolate(context)
        self.assertEqual(self.interpolator.interpolate(once), once)

    def test_keeps_key_order(self) -> None:
        context = {'b': '{{ a }}', 'a': 'x', 'c': 'y'}
        self.assertEqual(
            list(self.interpolator.interpolate(context)), ['b', 'a', 'c'])

    def test_undefined_key(self) -> None:
        context = {'key1': 'He{{ key2 }}llo'}
        self.assertEqual(self.interpolator.interpolate(context), {'key1': 'Hello'})
        self.assertEqual(self.messages, ['Undefined key: "key2"'])

    def test_none_value_counts_as_undefined(self) -> None:
        context = {'key1': '<{{ key2 }}>', 'key2': None}
        self.assertEqual(self.interpolator.interpolate(context)['key1'], '<>')
        self.assertIn('Undefined key: "key2"', self.messages)

    def test_cyclic_recursion(self) -> None:
        context = {
            'key1': '1 = {{key2}}',
            'key2': '2 = {{key3}}',
            'key3': '3 = {{key1}}',
        }
        self.assertEqual(
            self.interpolator.interpolate(context),
            {'key1': '1 = 2 = 3 = ', 'key2': '2 = 3 = ', 'key3': '3 = '},
        )
        self.assertEqual(
            self.messages,
            ['Cyclic recursion: key1 -> key2 -> key3 -> key1'],
        )

    def test_self_reference(self) -> None:
        context = {'key': 'a{{ key }}b'}
        self.assertEqual(self.interpolator.interpolate(context), {'key': 'ab'})
        self.assertEqual(self.messages, ['Cyclic recursion: key -> key'])

    def test_array_interpolation(self) -> None:
        context = {'key': '({{arrayKey}})', 'arrayKey': [1, 2, 3, 4]}
        self.assertEqual(
            self.interpolator.interpolate(context),
            {'key': '(<array>)', 'arrayKey': [1, 2, 3, 4]},
        )
        self.assertEqual(self.messages, ['Array interpolation: "arrayKey"'])

    def test_mapping_interpolation(self) -> None:
        context = {'key': '({{ m }})', 'm': {'a': '1'}}
        self.assertEqual(
            self.interpolator.interpolate(context),
            {'key': '(<array>)', 'm': {'a': '1'}},
        )
        self.assertEqual(self.messages, ['Array interpolation: "m"'])

    def test_object_interpolation(self) -> None:
        obj = object()
        context = {'key': '({{objectKey}})', 'objectKey': obj}
        result = self.interpolator.interpolate(context)
        self.assertEqual(result['key'], '(<object>)')
        self.assertIs(result['objectKey'], obj)
        self.assertEqual(self.messages, ['Object interpolation: "objectKey"'])

    def test_number_is_substituted_as_text(self) -> None:
        context = {'key': 'port {{ port }}', 'port': 8080}
        self.assertEqual(
            self.interpolator.interpolate(context),
            {'key': 'port 8080', 'port': 8080},
        )
        self.assertEqual(self.messages, [])

    def test_default_reporter_warns(self) -> None:
        with self.assertWarns(InterpolationWarning) as cm:
            result = Interpolator().interpolate({'key1': '{{ nope }}'})
        self.assertEqual(result, {'key1': ''})
        self.assertEqual(str(cm.warning), 'Undefined key: "nope"')


if __name__ == "__main__":
    unittest.main()
