import pytest
from swig_lls.parsers.items import (ItemKind, ClassItem, NamespaceItem, FunctionItem, Overload,
                                    Parameter, VariableItem, TypedefItem, EnumItem, EnumValue)


class TestBaseItem:
    def test_symbolic_name_falls_back_to_last_name_component(self):
        var = VariableItem('Physics::gravity', 'float')
        assert var.symbolic_name == 'gravity'

    def test_explicit_symbolic_name_wins(self):
        lclass = ClassItem('std::vector< double >', 'DoubleVector')
        assert lclass.symbolic_name == 'DoubleVector'

    def test_qualified_name_at_root_is_symbolic_name(self):
        lclass = ClassItem('Foo', 'Foo')
        assert lclass.qualified_name == 'Foo'

    def test_qualified_name_joins_parent_path(self):
        namespace = NamespaceItem('Physics')
        body = ClassItem('Body', 'Body')
        body.parent = namespace
        func = FunctionItem('mass', 'mass', [Overload()])
        func.parent = body
        assert func.qualified_name == 'Physics.Body.mass'

    def test_children_of_global_namespace_are_not_prefixed(self):
        root = NamespaceItem()
        lclass = ClassItem('Foo', 'Foo')
        lclass.parent = root
        assert lclass.qualified_name == 'Foo'
        assert lclass.native_name == 'Foo'

    def test_native_name_uses_declared_names(self):
        namespace = NamespaceItem('Physics')
        lclass = ClassItem('vector< double >', 'DoubleVector')
        lclass.parent = namespace
        assert lclass.native_name == 'Physics::vector< double >'

    def test_native_name_does_not_repeat_qualified_prefix(self):
        outer = ClassItem('Shape', 'Shape')
        lenum = EnumItem('Shape::Kind', 'Kind')
        lenum.parent = outer
        assert lenum.native_name == 'Shape::Kind'

    def test_parent_is_not_owned(self):
        lclass = ClassItem('Foo', 'Foo')
        lclass.parent = NamespaceItem('Gone')
        assert lclass.parent is None

    def test_leaf_items_have_no_children(self):
        assert FunctionItem('f', 'f').children is None
        assert TypedefItem('Real', 'float').children is None
        assert EnumItem('Color', 'Color').children is None


class TestClassItem:
    def test_rejects_non_container_kind(self):
        with pytest.raises(ValueError) as exc_info:
            ClassItem('Foo', 'Foo', kind=ItemKind.ENUM)
        assert "CLASS or NAMESPACE" in str(exc_info.value)

    def test_add_dispatches_by_kind(self):
        lclass = ClassItem('Foo', 'Foo')
        lclass.add(FunctionItem('f', 'f'))
        lclass.add(ClassItem('Inner', 'Inner'))
        lclass.add(VariableItem('x', 'int'))
        lclass.add(TypedefItem('Real', 'float'))
        lclass.add(EnumItem('Color', 'Color'))
        assert len(lclass.functions) == 1
        assert len(lclass.classes) == 1
        assert len(lclass.variables) == 1
        assert len(lclass.typedefs) == 1
        assert len(lclass.enums) == 1

    def test_children_emission_order(self):
        lclass = ClassItem('Foo', 'Foo')
        lenum = EnumItem('Color', 'Color')
        func = FunctionItem('f', 'f')
        inner = ClassItem('Inner', 'Inner')
        lclass.add(lenum)
        lclass.add(func)
        lclass.add(inner)
        assert lclass.children == [inner, func, lenum]

    def test_single_enum_wrapper(self):
        lclass = ClassItem('Color', 'Color')
        lclass.add(EnumItem('Enum', 'Enum'))
        assert lclass.is_single_enum_wrapper()

    def test_class_with_functions_is_not_enum_wrapper(self):
        lclass = ClassItem('Color', 'Color')
        lclass.add(EnumItem('Enum', 'Enum'))
        lclass.add(FunctionItem('f', 'f'))
        assert not lclass.is_single_enum_wrapper()

    def test_sort_items_leaves_typedefs_and_enums_alone(self):
        lclass = ClassItem('Foo', 'Foo')
        for name in ('b', 'a'):
            lclass.add(FunctionItem(name, name))
            lclass.add(TypedefItem(name, 'int'))
            lclass.add(EnumItem(name, name))
        lclass.sort_items()
        assert [f.symbolic_name for f in lclass.functions] == ['a', 'b']
        assert [t.symbolic_name for t in lclass.typedefs] == ['b', 'a']
        assert [e.symbolic_name for e in lclass.enums] == ['b', 'a']


class TestNamespaceItem:
    def test_global_namespace(self):
        assert NamespaceItem().is_global
        assert NamespaceItem().kind == ItemKind.NAMESPACE

    def test_named_namespace(self):
        namespace = NamespaceItem('Physics')
        assert not namespace.is_global
        assert namespace.symbolic_name == 'Physics'


class TestFunctionItem:
    def test_merge_appends_overloads(self):
        first = FunctionItem('Bar', 'Bar', [Overload([Parameter('int', 'x')])])
        second = FunctionItem('Bar', 'Bar', [Overload([Parameter('float', 'x'), Parameter('float', 'y')])])
        first.merge(second)
        assert len(first.overloads) == 2
        assert first.overloads[1].parameters[1].name == 'y'


class TestEnumItem:
    def test_values_start_empty(self):
        assert EnumItem('Color', 'Color').values == []

    def test_enum_value_defaults_to_unresolved(self):
        assert EnumValue('Red').value == -1
