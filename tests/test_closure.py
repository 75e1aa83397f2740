import pytest

from rpcgen.closure import TypeClosureResolver
from rpcgen.exceptions import UnmappableTypeError
from rpcgen.type_mapper import TypeRegistry
from rpcgen.types import Member, INT, STRING, primitive, composite, enumeration, generic, list_of, parameter


def resolve(*seeds):
    return TypeClosureResolver(TypeRegistry.typescript()).resolve(seeds)


def names(closure):
    return [t.name for t in closure.types]


def test_builtins_need_no_declaration():
    closure = resolve(primitive(INT), primitive(STRING), list_of(primitive(INT)))
    assert closure.types == ()
    assert closure.registry.non_builtin_entries == ()


def test_dependencies_are_emitted_before_dependents():
    address = composite('Address', [Member('street', primitive(STRING))])
    person = composite('Person', [Member('name', primitive(STRING)), Member('home', address)])

    assert names(resolve(person)) == ['Address', 'Person']


def test_direct_self_reference_terminates():
    node = composite('Node')
    node.fields.append(Member('next', node))
    node.fields.append(Member('children', list_of(node)))

    assert names(resolve(node)) == ['Node']


def test_mutual_reference_declares_each_once():
    b = composite('B')
    c = composite('C')
    b.fields.append(Member('c', c))
    c.fields.append(Member('b', b))
    a = composite('A')
    a.fields.append(Member('self', a))
    a.fields.append(Member('b', b))

    closure = resolve(a, b, c)

    assert sorted(names(closure)) == ['A', 'B', 'C']
    assert names(closure) == ['A', 'B', 'C']


def test_sibling_reached_through_field_is_not_redeclared():
    shared = composite('Shared', [Member('id', primitive(INT))])
    first = composite('First', [Member('shared', shared)])

    assert names(resolve(first, shared)) == ['First', 'Shared']


def test_duplicate_seeds_are_declared_once():
    widget = composite('Widget')
    assert names(resolve(widget, widget, list_of(widget))) == ['Widget']


def test_generic_argument_is_declared_but_not_the_instantiation():
    widget = composite('Widget', [Member('label', primitive(STRING))])
    closure = resolve(list_of(widget))

    assert names(closure) == ['Widget']
    assert closure.registry.map(list_of(widget)) == 'Array<Widget>'


def test_generic_template_and_argument_are_independent():
    page = composite('Page', [Member('items', list_of(parameter('T')))], type_parameters=['T'])
    widget = composite('Widget')

    assert names(resolve(generic(page, widget))) == ['Page', 'Widget']


def test_enumeration_contributes_no_seeds():
    color = enumeration('Color', ['Red', 'Green'])
    shape = composite('Shape', [Member('color', color)])

    assert names(resolve(shape)) == ['Color', 'Shape']


def test_unmapped_primitive_is_fatal():
    decimal = primitive('decimal')
    invoice = composite('Invoice', [Member('amount', decimal)])

    with pytest.raises(UnmappableTypeError) as excinfo:
        resolve(invoice)
    assert excinfo.value.identity == 'decimal'


def test_input_registry_is_not_modified():
    registry = TypeRegistry.typescript()
    widget = composite('Widget')

    closure = TypeClosureResolver(registry).resolve([widget])

    assert closure.registry.is_known(widget)
    assert not registry.is_known(widget)


def test_resolution_is_deterministic():
    def graph():
        leaf = enumeration('Leaf', ['X'])
        mid = composite('Mid', [Member('leaf', leaf)])
        return composite('Root', [Member('mid', mid), Member('mids', list_of(mid))])

    assert names(resolve(graph())) == names(resolve(graph())) == ['Leaf', 'Mid', 'Root']


def test_fields_of_a_generic_argument_are_followed():
    tag = enumeration('Tag', ['Hot', 'Cold'])
    item = composite('Item', [Member('tag', tag)])
    page = composite('Page', [Member('items', list_of(parameter('T')))], type_parameters=['T'])

    closure = resolve(generic(page, list_of(item)))

    assert names(closure) == ['Page', 'Tag', 'Item']
    assert 'Page<Array<Item>>' not in closure.registry.non_builtin_entries
