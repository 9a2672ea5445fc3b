# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for PropertiesName and PropertiesPath."""

import pytest

from genro_props import (
    InvalidNameError,
    InvalidPathError,
    NullArgumentError,
    PropertiesName,
    PropertiesPath,
)


class TestPropertiesName:
    """Tests for PropertiesName."""

    def test_value(self):
        """Test the name keeps its text."""
        name = PropertiesName('property-1')
        assert name.value == 'property-1'
        assert str(name) == 'property-1'

    def test_empty_raises(self):
        """Test an empty name is rejected."""
        with pytest.raises(InvalidNameError, match="empty"):
            PropertiesName('')

    def test_separator_raises(self):
        """Test a name containing the separator is rejected."""
        with pytest.raises(InvalidNameError, match="cannot contain"):
            PropertiesName('a.b')

    def test_none_raises(self):
        """Test None is rejected before validation."""
        with pytest.raises(NullArgumentError):
            PropertiesName(None)

    def test_invalid_name_is_value_error(self):
        """Test InvalidNameError can be caught as ValueError."""
        with pytest.raises(ValueError):
            PropertiesName('')

    def test_equality_is_case_sensitive(self):
        """Test names compare case-sensitively."""
        assert PropertiesName('abc') == PropertiesName('abc')
        assert PropertiesName('abc') != PropertiesName('ABC')

    def test_ordering(self):
        """Test names order lexicographically."""
        names = [PropertiesName('b'), PropertiesName('a'), PropertiesName('B')]
        assert [n.value for n in sorted(names)] == ['B', 'a', 'b']

    def test_hashable(self):
        """Test equal names hash equally."""
        assert len({PropertiesName('x'), PropertiesName('x')}) == 1

    def test_repr(self):
        """Test string representation."""
        assert repr(PropertiesName('x')) == "PropertiesName('x')"


class TestPropertiesPathParse:
    """Tests for PropertiesPath.parse."""

    def test_parse_flat(self):
        """Test a single segment path is a root."""
        path = PropertiesPath.parse('xyz')
        assert path.value == 'xyz'
        assert path.is_root is True
        assert path.parent is None
        assert path.name == PropertiesName('xyz')

    def test_parse_hierarchical(self):
        """Test a dotted path has a parent."""
        path = PropertiesPath.parse('ab.cd')
        assert path.value == 'ab.cd'
        assert path.is_root is False
        assert path.name == PropertiesName('cd')
        assert path.parent.value == 'ab'

    def test_parse_names(self):
        """Test the segments are available root first."""
        path = PropertiesPath.parse('one.two.three')
        assert [n.value for n in path.names] == ['one', 'two', 'three']
        assert [n.value for n in path] == ['one', 'two', 'three']
        assert len(path) == 3

    @pytest.mark.parametrize('text', ['before..after', '.leading', 'trailing.', '.', '..'])
    def test_parse_empty_component_raises(self, text):
        """Test paths with an empty component are rejected."""
        with pytest.raises(InvalidPathError):
            PropertiesPath.parse(text)

    def test_parse_empty_raises(self):
        """Test the empty string is not a path."""
        with pytest.raises(InvalidPathError, match="empty"):
            PropertiesPath.parse('')

    def test_parse_none_raises(self):
        """Test None is rejected."""
        with pytest.raises(NullArgumentError):
            PropertiesPath.parse(None)

    def test_parse_value_round_trip(self):
        """Test parsing a path's value gives an equal path."""
        path = PropertiesPath.parse('a.b-c.d e')
        assert PropertiesPath.parse(path.value) == path

    def test_coerce(self):
        """Test coerce accepts paths and text only."""
        path = PropertiesPath.parse('a.b')
        assert PropertiesPath.coerce(path) is path
        assert PropertiesPath.coerce('a.b') == path
        with pytest.raises(TypeError):
            PropertiesPath.coerce(1)


class TestPropertiesPathHierarchy:
    """Tests for parent, name and append."""

    def test_general(self):
        """Test walking up to the root."""
        path = PropertiesPath.parse('one.two.three')

        parent = path.parent
        assert parent.value == 'one.two'
        assert parent.is_root is False
        assert parent is path.parent
        assert parent.name == PropertiesName('two')

        grand_parent = parent.parent
        assert grand_parent.value == 'one'
        assert grand_parent.is_root is True
        assert grand_parent.name == PropertiesName('one')

    def test_append_name(self):
        """Test appending a name adds one segment."""
        path = PropertiesPath.parse('one.two.three').append(PropertiesName('four'))
        assert path.name == PropertiesName('four')
        assert path.value == 'one.two.three.four'
        assert path.parent.value == 'one.two.three'

    def test_append_path(self):
        """Test appending a path adds all its segments."""
        path = PropertiesPath.parse('one.two.three').append(
            PropertiesPath.parse('four.five')
        )
        assert path.name == PropertiesName('five')
        assert path.value == 'one.two.three.four.five'
        assert path.parent.value == 'one.two.three.four'

    def test_append_text(self):
        """Test appending dotted text parses it."""
        path = PropertiesPath.parse('a').append('b.c')
        assert path.value == 'a.b.c'

    def test_append_leaves_original(self):
        """Test append returns a new path."""
        path = PropertiesPath.parse('a')
        path.append(PropertiesName('b'))
        assert path.value == 'a'

    def test_append_none_raises(self):
        """Test appending None is rejected."""
        with pytest.raises(NullArgumentError):
            PropertiesPath.parse('a').append(None)

    def test_append_invalid_text_raises(self):
        """Test appending text with an empty component is rejected."""
        with pytest.raises(InvalidPathError):
            PropertiesPath.parse('a').append('b..c')


class TestPropertiesPathComparison:
    """Tests for equality, ordering and hashing."""

    def test_equality(self):
        """Test paths are equal by value."""
        assert PropertiesPath.parse('a.b') == PropertiesPath.parse('a').append('b')
        assert PropertiesPath.parse('a.b') != PropertiesPath.parse('different.property')

    def test_equality_is_case_sensitive(self):
        """Test paths compare case-sensitively."""
        assert PropertiesPath.parse('Key.a') != PropertiesPath.parse('key.a')

    def test_not_equal_to_text(self):
        """Test a path is not equal to its text."""
        assert PropertiesPath.parse('a') != 'a'

    def test_ordering_is_lexicographic(self):
        """Test paths order by their dotted text."""
        paths = [PropertiesPath.parse(t) for t in ['b', 'a.z', 'a', 'a-b']]
        assert [p.value for p in sorted(paths)] == ['a', 'a-b', 'a.z', 'b']

    def test_hashable(self):
        """Test paths work as dict keys."""
        mapping = {PropertiesPath.parse('a.b'): 1}
        assert mapping[PropertiesPath.parse('a.b')] == 1

    def test_str_and_repr(self):
        """Test string representations."""
        path = PropertiesPath.parse('a.b')
        assert str(path) == 'a.b'
        assert repr(path) == "PropertiesPath('a.b')"
