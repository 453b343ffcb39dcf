from swig_lls.parsers import ModelBuilder, collect_namespaces
from swig_lls.parsers.items import (ClassItem, FunctionItem, Overload, Parameter, VariableItem,
                                    TypedefItem, EnumItem, ItemKind)


def make_function(name, *param_types):
    overload = Overload([Parameter(t, f"p{i}") for i, t in enumerate(param_types)])
    return FunctionItem(name, name.split('::')[-1] if name else None, [overload])


def raw_root(*items):
    root = ClassItem()
    for item in items:
        root.add(item)
    return root


class TestNamespaceSynthesis:
    def test_qualified_items_move_into_namespace(self):
        body = ClassItem('Physics::Body', 'Body')
        step = make_function('Physics::step', 'float')
        foo = ClassItem('Foo', 'Foo')
        root = ModelBuilder().build(raw_root(body, step, foo))

        assert root.kind == ItemKind.NAMESPACE
        assert root.is_global
        assert root.classes == [foo]
        assert len(root.namespaces) == 1
        physics = root.namespaces[0]
        assert physics.declared_name == 'Physics'
        assert physics.classes == [body]
        assert physics.functions == [step]
        assert body.declared_name == 'Body'
        assert step.declared_name == 'step'

    def test_all_kinds_are_rehomed(self):
        root = ModelBuilder().build(raw_root(
            VariableItem('Physics::gravity', 'float'),
            TypedefItem('Physics::Real', 'float'),
            EnumItem('Physics::Shape', 'Shape'),
        ))
        physics = root.namespaces[0]
        assert len(physics.variables) == 1
        assert len(physics.typedefs) == 1
        assert len(physics.enums) == 1
        assert root.variables == [] and root.typedefs == [] and root.enums == []

    def test_one_namespace_per_prefix(self):
        root = ModelBuilder().build(raw_root(ClassItem('A::X', 'X'), ClassItem('B::Y', 'Y'), ClassItem('A::Z', 'Z')))
        assert [ns.declared_name for ns in root.namespaces] == ['A', 'B']
        assert [c.symbolic_name for c in root.namespaces[0].classes] == ['X', 'Z']

    def test_only_first_separator_is_split(self):
        deep = ClassItem('A::B::C', 'C')
        root = ModelBuilder().build(raw_root(deep))
        assert [ns.declared_name for ns in root.namespaces] == ['A']
        assert deep.declared_name == 'B::C'
        assert deep.native_name == 'A::B::C'
        assert deep.qualified_name == 'A.C'


class TestOverloadConsolidation:
    def test_same_named_functions_merge(self):
        lclass = ClassItem('Foo', 'Foo')
        lclass.add(make_function('Bar', 'int'))
        lclass.add(make_function('Baz'))
        lclass.add(make_function('Bar', 'float', 'float'))
        ModelBuilder().build(raw_root(lclass))

        bars = [f for f in lclass.functions if f.declared_name == 'Bar']
        assert len(bars) == 1
        assert len(bars[0].overloads) == 2
        assert [p.type_token for p in bars[0].overloads[1].parameters] == ['float', 'float']

    def test_first_occurrence_is_canonical(self):
        first = make_function('f', 'int')
        second = make_function('f', 'double')
        root = ModelBuilder().build(raw_root(first, second))
        assert root.functions == [first]

    def test_namespaced_overloads_merge_after_synthesis(self):
        root = ModelBuilder().build(raw_root(make_function('Physics::step', 'float'),
                                             make_function('Physics::step', 'float', 'int')))
        funcs = root.namespaces[0].functions
        assert len(funcs) == 1
        assert len(funcs[0].overloads) == 2

    def test_nameless_functions_are_dropped(self):
        lclass = ClassItem('Foo', 'Foo')
        lclass.add(FunctionItem(None, None, [Overload()]))
        lclass.add(make_function('f'))
        ModelBuilder().build(raw_root(lclass))
        assert [f.declared_name for f in lclass.functions] == ['f']

    def test_functions_in_different_classes_stay_apart(self):
        a = ClassItem('A', 'A')
        b = ClassItem('B', 'B')
        a.add(make_function('run'))
        b.add(make_function('run'))
        ModelBuilder().build(raw_root(a, b))
        assert len(a.functions[0].overloads) == 1
        assert len(b.functions[0].overloads) == 1


class TestParentsAndSorting:
    def test_every_item_gets_its_parent(self):
        lclass = ClassItem('Physics::Body', 'Body')
        func = make_function('mass')
        lclass.add(func)
        root = ModelBuilder().build(raw_root(lclass))

        physics = root.namespaces[0]
        assert root.parent is None
        assert physics.parent is root
        assert lclass.parent is physics
        assert func.parent is lclass
        assert func.qualified_name == 'Physics.Body.mass'

    def test_siblings_are_sorted_by_symbolic_name(self):
        lclass = ClassItem('Foo', 'Foo')
        for name in ('zeta', 'alpha', 'mid'):
            lclass.add(make_function(name))
            lclass.add(VariableItem(name, 'int'))
            lclass.add(ClassItem(name.upper(), name.upper()))
        root = ModelBuilder().build(raw_root(ClassItem('Z', 'Z'), lclass))

        assert [f.symbolic_name for f in lclass.functions] == ['alpha', 'mid', 'zeta']
        assert [v.symbolic_name for v in lclass.variables] == ['alpha', 'mid', 'zeta']
        assert [c.symbolic_name for c in lclass.classes] == ['ALPHA', 'MID', 'ZETA']
        assert [c.symbolic_name for c in root.classes] == ['Foo', 'Z']


class TestCollectNamespaces:
    def test_global_namespace_is_not_collected(self):
        root = ModelBuilder().build(raw_root(ClassItem('Foo', 'Foo'), ClassItem('Physics::Body', 'Body')))
        assert [ns.symbolic_name for ns in collect_namespaces(root)] == ['Physics']
