"""
Tests for the variable-type taxonomy.
"""

import pytest

from namecraft.naming.errors import UnknownStyleOrTypeError
from namecraft.naming.taxonomy import VariableType, categories, get_variable_type, type_ids


class TestCatalog:
    def test_has_24_unique_types(self):
        ids = type_ids()
        assert len(ids) == 24
        assert len(set(ids)) == 24

    def test_category_order(self):
        assert categories() == ["basic", "scope", "purpose", "data-type", "semantic"]

    def test_decorations(self):
        assert VariableType.MEMBER.prefix == "m_"
        assert VariableType.GLOBAL.prefix == "g_"
        assert VariableType.POINTER.prefix == "p"
        assert VariableType.DWORD.prefix == "dw"
        assert VariableType.COUNT.suffix == "Count"
        assert VariableType.ARRAY.suffix == "Array"
        assert VariableType.NORMAL.prefix == VariableType.NORMAL.suffix == ""

    def test_only_const_is_constant(self):
        assert [t for t in VariableType if t.is_constant] == [VariableType.CONST]

    def test_category_sizes(self):
        sizes = {}
        for vtype in VariableType:
            sizes[vtype.category] = sizes.get(vtype.category, 0) + 1
        assert sizes == {"basic": 1, "scope": 3, "purpose": 6, "data-type": 13, "semantic": 1}


class TestLookup:
    def test_get_by_id(self):
        assert get_variable_type("count") is VariableType.COUNT
        assert get_variable_type(VariableType.INT) is VariableType.INT

    def test_unknown_type(self):
        with pytest.raises(UnknownStyleOrTypeError, match="Unknown type 'matrix'"):
            get_variable_type("matrix")
