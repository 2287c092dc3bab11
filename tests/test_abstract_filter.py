"""
Tests for the AbstractFilter configuration and invocation contract.
"""

import pytest
import numpy as np
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from unittest.mock import Mock
from strainer.exceptions import InvalidArgumentError
from strainer.infrastructure.filters import AbstractFilter


@dataclass
class TargetOptions:
    target: str = '.'
    mode: str = 'append'


class TargetFilter(AbstractFilter):
    """Filter with raw options only."""

    options_class = TargetOptions

    def filter(self, value):
        return f"{self.options['target']}:{value}"


@dataclass
class KeyOptions:
    public_key: str = ''
    checked: bool = False


class KeyFilter(AbstractFilter):
    """Filter with a setter that shadows a raw option."""

    options_class = KeyOptions

    def __init__(self, options=None):
        self.setter_calls = []
        super().__init__(options)

    def set_public_key(self, value):
        self.setter_calls.append(value)
        self.options['public_key'] = value.strip()
        self.options['checked'] = True
        return self

    def get_public_key(self):
        return self.options['public_key']

    def filter(self, value):
        return value


class UpperFirst(AbstractFilter):
    """Filter upper-casing the first letter through the selective applier."""

    def __init__(self, options=None):
        self.callback = Mock(side_effect=self._upper_first)
        super().__init__(options)

    @staticmethod
    def _upper_first(value):
        if isinstance(value, list):
            return [item[:1].upper() + item[1:] if isinstance(item, str) else item for item in value]
        return value[:1].upper() + value[1:]

    def filter(self, value):
        return self.apply_to_stringable_values(value, self.callback)


class TestOptionResolver:
    """Tests for set_options() and get_options()"""

    def test_defaults_from_options_class(self):
        """Test that declared options start at their defaults."""
        assert TargetFilter().get_options() == {'target': '.', 'mode': 'append'}

    def test_raw_option_is_updated(self):
        """Test that a key without setter overwrites its options entry."""
        f = TargetFilter()
        result = f.set_options({'target': 'out.txt'})

        assert result is f
        assert f.get_options() == {'target': 'out.txt', 'mode': 'append'}

    def test_constructor_forwards_options(self):
        """Test that constructor options are applied."""
        f = TargetFilter({'mode': 'replace'})
        assert f.get_options() == {'target': '.', 'mode': 'replace'}

    def test_iterable_of_pairs(self):
        """Test that an iterable of key/value pairs is accepted in order."""
        f = TargetFilter([('target', 'a'), ('target', 'b')])
        assert f.get_options()['target'] == 'b'

        f.set_options(iter([('mode', 'x')]))
        assert f.get_options()['mode'] == 'x'

    def test_unknown_key_raises(self):
        """Test that an unknown key fails and names the key."""
        f = TargetFilter()
        with pytest.raises(InvalidArgumentError, match='missing') as exc_info:
            f.set_options({'missing': 1})

        assert 'set_missing' in str(exc_info.value)
        assert 'options[missing]' in str(exc_info.value)

    def test_unknown_key_is_not_added(self):
        """Test that the options key set never grows."""
        f = TargetFilter()
        with pytest.raises(InvalidArgumentError):
            f.set_options({'other': 1})

        assert 'other' not in f.get_options()

    def test_non_string_key_raises(self):
        """Test that non-string keys are always rejected."""
        f = TargetFilter()
        with pytest.raises(InvalidArgumentError, match='"0"'):
            f.set_options({0: 'out.txt'})

    def test_keys_before_failure_stay_applied(self):
        """Test that a failing key does not roll back earlier keys."""
        f = TargetFilter()
        with pytest.raises(InvalidArgumentError):
            f.set_options([('target', 'first'), ('missing', 1), ('mode', 'never')])

        assert f.get_options() == {'target': 'first', 'mode': 'append'}

    @pytest.mark.parametrize('options', ['target', b'target', 42, None, 1.5, object()])
    def test_invalid_options_type_raises(self, options):
        """Test that values other than mappings and iterables are rejected."""
        with pytest.raises(InvalidArgumentError, match='expects a mapping'):
            TargetFilter().set_options(options)

    def test_non_pair_items_raise(self):
        """Test that iterable items must be key/value pairs."""
        with pytest.raises(InvalidArgumentError, match='pairs'):
            TargetFilter().set_options([('target', 'a', 'b')])

    def test_setter_takes_precedence_over_raw_option(self):
        """Test that a setter is preferred even when the key exists in options."""
        f = KeyFilter({'public_key': '  abc  '})

        assert f.setter_calls == ['  abc  ']
        assert f.get_public_key() == 'abc'
        assert f.get_options()['checked'] is True

    def test_setter_equivalent_to_direct_call(self):
        """Test that set_options with a setter key matches calling the setter."""
        configured = KeyFilter().set_options({'public_key': ' k '})
        direct = KeyFilter().set_public_key(' k ')

        assert configured.get_options() == direct.get_options()

    def test_setter_key_variants(self):
        """Test that camel case and different capitalization reach the same setter."""
        for key in ('public_key', 'publicKey', 'PUBLIC_KEY', 'Public Key'):
            f = KeyFilter({key: 'x'})
            assert f.setter_calls == ['x']

    def test_repeated_set_options_is_idempotent(self):
        """Test that applying the same configuration twice changes nothing."""
        config = {'target': 'out.txt', 'mode': 'replace'}
        f = TargetFilter(config)
        once = f.get_options()
        f.set_options(config)

        assert f.get_options() == once

    def test_get_options_returns_copy(self):
        """Test that mutating the returned mapping does not affect the filter."""
        f = TargetFilter()
        options = f.get_options()
        options['target'] = 'changed'

        assert f.get_options()['target'] == '.'

    def test_instances_do_not_share_options(self):
        """Test that each instance gets its own options mapping."""
        first = TargetFilter({'target': 'a'})
        second = TargetFilter()

        assert second.get_options()['target'] == '.'
        assert first.get_options()['target'] == 'a'

    def test_options_class_must_be_dataclass(self):
        """Test that a non-dataclass options declaration is rejected."""
        class Broken(AbstractFilter):
            options_class = dict

            def filter(self, value):
                return value

        with pytest.raises(TypeError, match='must be a dataclass'):
            Broken()

    def test_is_options(self):
        """Test detection of acceptable configuration values."""
        assert AbstractFilter.is_options({})
        assert AbstractFilter.is_options([])
        assert AbstractFilter.is_options(iter(()))
        assert not AbstractFilter.is_options('a')
        assert not AbstractFilter.is_options(None)


class TestInvocation:
    """Tests for the callable convention"""

    def test_call_equals_filter(self):
        """Test that f(x) == f.filter(x)."""
        f = TargetFilter({'target': 'out'})
        for value in ('a', 1, None):
            assert f(value) == f.filter(value)

    def test_call_propagates_errors(self):
        """Test that errors raised by filter() reach the caller unchanged."""
        class Failing(AbstractFilter):
            def filter(self, value):
                raise KeyError(value)

        with pytest.raises(KeyError):
            Failing()('boom')

    def test_abstract_filter_cannot_be_instantiated(self):
        """Test that filter() must be implemented."""
        with pytest.raises(TypeError):
            AbstractFilter()


class TestSelectiveApplier:
    """Tests for apply_to_stringable_values()"""

    def test_scalar_string(self):
        """Test that a string is passed to the callback once."""
        f = UpperFirst()
        assert f('hello') == 'Hello'
        f.callback.assert_called_once_with('hello')

    def test_scalar_numbers_are_coerced(self):
        """Test that numbers and booleans are converted to strings."""
        f = UpperFirst()
        assert f(123) == '123'
        assert f(1.5) == '1.5'
        assert f(True) == 'True'
        assert f(np.int64(7)) == '7'

    def test_list_is_passed_in_one_call(self):
        """Test that a list is coerced and handed over as a whole."""
        f = UpperFirst()
        assert f(['hello', 'world']) == ['Hello', 'World']
        f.callback.assert_called_once_with(['hello', 'world'])

    def test_list_scalars_coerced_nested_untouched(self):
        """Test that scalar items are stringified and nested items passed through."""
        nested = ['x']
        marker = object()
        callback = Mock(return_value='done')

        result = AbstractFilter.apply_to_stringable_values([1, 2.5, nested, marker, None], callback)

        assert result == 'done'
        callback.assert_called_once_with(['1', '2.5', nested, marker, None])

    def test_tuple_and_dict(self):
        """Test that tuples and dicts keep their shape."""
        callback = Mock(side_effect=lambda value: value)

        assert AbstractFilter.apply_to_stringable_values((1, 'a'), callback) == ('1', 'a')
        assert AbstractFilter.apply_to_stringable_values({'k': 2, 'n': None}, callback) == {'k': '2', 'n': None}
        assert callback.call_count == 2

    @pytest.mark.parametrize('value', [None, object(), b'bytes', {1, 2}])
    def test_other_values_pass_through(self, value):
        """Test that non-scalar, non-compound values are returned untouched."""
        f = UpperFirst()
        assert f(value) is value
        f.callback.assert_not_called()

    @pytest.mark.parametrize('value, expected', [
        (Decimal('1.5'), '1.5'),
        (Fraction(1, 2), '1/2'),
        (2j, '2j'),
    ])
    def test_other_numbers_are_scalars(self, value, expected):
        """Test that Decimal, Fraction and complex values are coerced like int and float."""
        callback = Mock(side_effect=lambda item: item)

        assert AbstractFilter.apply_to_stringable_values(value, callback) == expected
        callback.assert_called_once_with(expected)

    def test_other_numbers_coerced_inside_list(self):
        """Test that Decimal, Fraction and complex list items become strings."""
        callback = Mock(side_effect=lambda items: items)

        result = AbstractFilter.apply_to_stringable_values([Decimal('1.5'), Fraction(1, 2), 2j], callback)

        assert result == ['1.5', '1/2', '2j']
        callback.assert_called_once_with(['1.5', '1/2', '2j'])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
