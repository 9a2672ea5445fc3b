# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for JSON interchange and the marshalling registry."""

import pytest

from genro_props import (
    InvalidPathError,
    MarshallRegistry,
    NullArgumentError,
    Properties,
    UnmarshallError,
    register_properties,
)
from genro_props.marshalling import from_json, marshall, to_json, unmarshall


def sample():
    return Properties.EMPTY.set('key.222', 'value222').set('key.111', 'value111')


class TestMarshall:
    """Tests for Properties to JSON."""

    def test_marshall(self):
        """Test a flat object keyed by dotted text."""
        assert marshall(sample()) == {'key.111': 'value111', 'key.222': 'value222'}

    def test_marshall_order(self):
        """Test names follow path order."""
        assert list(marshall(sample())) == ['key.111', 'key.222']

    def test_marshall_empty(self):
        """Test EMPTY is an empty object."""
        assert marshall(Properties.EMPTY) == {}

    def test_marshall_raw_values(self):
        """Test values are not escaped."""
        props = Properties.EMPTY.set('a', 'line\nbreak\\')
        assert marshall(props) == {'a': 'line\nbreak\\'}

    def test_marshall_none_raises(self):
        """Test None is rejected."""
        with pytest.raises(NullArgumentError):
            marshall(None)


class TestUnmarshall:
    """Tests for JSON to Properties."""

    def test_unmarshall(self):
        """Test a flat object becomes Properties."""
        assert unmarshall({'key.111': 'value111', 'key.222': 'value222'}) == sample()

    def test_unmarshall_empty(self):
        """Test an empty object gives EMPTY."""
        assert unmarshall({}) is Properties.EMPTY

    def test_unmarshall_invalid_path_raises(self):
        """Test names are validated as paths."""
        with pytest.raises(InvalidPathError):
            unmarshall({'a..b': 'x'})

    def test_unmarshall_non_string_raises(self):
        """Test values must be strings."""
        with pytest.raises(UnmarshallError, match='must be a string'):
            unmarshall({'a': 1})

    def test_unmarshall_non_object_raises(self):
        """Test the node must be an object."""
        with pytest.raises(UnmarshallError, match='Expected JSON object'):
            unmarshall(['a'])

    def test_json_text(self):
        """Test JSON text in both directions."""
        props = Properties.EMPTY.set('a.b', '\0é\n').set('c', '')
        assert from_json(to_json(props)) == props
        assert to_json(sample()) == '{"key.111": "value111", "key.222": "value222"}'


class TestMarshallRegistry:
    """Tests for MarshallRegistry."""

    def test_new_registry_is_empty(self):
        """Test nothing is registered implicitly."""
        registry = MarshallRegistry()
        assert len(registry) == 0
        assert Properties not in registry

    def test_register_properties(self):
        """Test register_properties adds the properties type."""
        registry = register_properties(MarshallRegistry())
        assert 'properties' in registry
        assert Properties in registry
        assert registry.type_name(Properties) == 'properties'

    def test_registries_are_independent(self):
        """Test registering in one registry does not affect another."""
        register_properties(MarshallRegistry())
        assert Properties not in MarshallRegistry()

    def test_marshall_and_unmarshall(self):
        """Test marshalling through the registry."""
        registry = register_properties(MarshallRegistry())
        node = registry.marshall(sample())
        assert node == {'key.111': 'value111', 'key.222': 'value222'}
        assert registry.unmarshall(node, Properties) == sample()

    def test_with_type(self):
        """Test typed marshalling round trip."""
        registry = register_properties(MarshallRegistry())
        node = registry.marshall_with_type(sample())
        assert node == {
            'type': 'properties',
            'value': {'key.111': 'value111', 'key.222': 'value222'},
        }
        assert registry.unmarshall_with_type(node) == sample()

    def test_unknown_type_raises(self):
        """Test unmarshalling an unregistered type name."""
        registry = MarshallRegistry()
        with pytest.raises(UnmarshallError, match='Unknown type'):
            registry.unmarshall_with_type({'type': 'properties', 'value': {}})

    def test_malformed_typed_node_raises(self):
        """Test typed nodes need type and value."""
        registry = register_properties(MarshallRegistry())
        with pytest.raises(UnmarshallError):
            registry.unmarshall_with_type({'value': {}})

    def test_unregistered_value_raises(self):
        """Test marshalling a value of an unregistered type."""
        with pytest.raises(TypeError):
            MarshallRegistry().marshall(sample())

    def test_duplicate_registration_raises(self):
        """Test a type can be registered once."""
        registry = register_properties(MarshallRegistry())
        with pytest.raises(ValueError):
            register_properties(registry)

    def test_register_none_raises(self):
        """Test register_properties rejects None."""
        with pytest.raises(NullArgumentError):
            register_properties(None)
