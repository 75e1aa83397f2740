from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Protocol, Sequence, TypedDict, TypeVar, Union

import pytest

from rpcgen.exceptions import GenericArityError, UnmappableTypeError
from rpcgen.reflection import TypeDescriber, describe_service, event, is_event
from rpcgen.typescript_generator import TypeScriptGenerator
from rpcgen.options import GeneratorOptions
from rpcgen.code_writer import LF
from rpcgen.types import TypeKind, INT, DOUBLE, BOOL, STRING, VOID, OBJECT, LIST

T = TypeVar('T')


class Color(Enum):
    Red = 1
    Green = 2


@dataclass
class Tree:
    label: str
    color: Color
    children: list['Tree'] = field(default_factory=list)


@dataclass
class Page(Generic[T]):
    items: list[T]
    total: int


class Settings(TypedDict):
    theme: str
    zoom: float


class Plain:
    name: str
    enabled: bool


class Opaque:
    pass


class Base(Protocol):
    def ping(self) -> None: ...


class Service(Base, Protocol):
    def find(self, label: str, depth: int) -> Tree: ...

    def pages(self, size: int) -> Page[Tree]: ...

    def untyped(self, value): ...

    def _internal(self) -> int: ...

    @property
    def name(self) -> str: ...

    @staticmethod
    def helper() -> int: ...

    @event
    def onChange(self, tree: Tree, color: Color) -> None: ...


@pytest.fixture
def describer():
    return TypeDescriber()


@pytest.mark.parametrize('annotation, identity', [
    (int, INT),
    (float, DOUBLE),
    (bool, BOOL),
    (str, STRING),
    (None, VOID),
    (type(None), VOID),
    (Any, OBJECT),
    (object, OBJECT),
])
def test_builtin_annotations(describer, annotation, identity):
    descriptor = describer.describe(annotation)
    assert descriptor.kind is TypeKind.PRIMITIVE
    assert descriptor.identity == identity


def test_list_annotations_become_generic(describer):
    for annotation in (list[int], List[int], Sequence[int]):
        descriptor = describer.describe(annotation)
        assert descriptor.kind is TypeKind.GENERIC
        assert descriptor.base_type.identity == LIST
        assert descriptor.argument.identity == INT


def test_enum(describer):
    descriptor = describer.describe(Color)
    assert descriptor.kind is TypeKind.ENUMERATION
    assert descriptor.members == ['Red', 'Green']
    assert descriptor.identity.endswith('Color')


def test_self_referencing_dataclass(describer):
    tree = describer.describe(Tree)

    assert tree.kind is TypeKind.COMPOSITE
    assert [f.name for f in tree.fields] == ['label', 'color', 'children']
    assert tree.fields[2].type.argument is tree


def test_identity_is_stable_within_a_run(describer):
    assert describer.describe(Tree) is describer.describe(Tree)
    assert describer.describe(list[Tree]) is describer.describe(list[Tree])


def test_generic_class(describer):
    descriptor = describer.describe(Page[Tree])

    assert descriptor.kind is TypeKind.GENERIC
    assert descriptor.base_type.type_parameters == ['T']
    assert descriptor.base_type.fields[0].type.argument.kind is TypeKind.PARAMETER
    assert descriptor.argument is describer.describe(Tree)


def test_typed_dict_and_annotated_class(describer):
    assert [f.name for f in describer.describe(Settings).fields] == ['theme', 'zoom']
    assert [f.name for f in describer.describe(Plain).fields] == ['name', 'enabled']


def test_unsupported_annotations_become_primitives(describer):
    assert describer.describe(Opaque).kind is TypeKind.PRIMITIVE
    assert describer.describe(Union[int, str]).kind is TypeKind.PRIMITIVE


def test_service_members_in_definition_order():
    service = describe_service(Service)

    assert service.name == 'Service'
    assert [m.name for m in service.methods] == ['ping', 'find', 'pages', 'untyped', '_internal']
    assert [e.name for e in service.events] == ['onChange']


def test_service_signatures():
    service = describe_service(Service)
    methods = {m.name: m for m in service.methods}

    assert [p.name for p in methods['find'].params] == ['label', 'depth']
    assert methods['find'].return_type.name == 'Tree'
    assert methods['ping'].return_type.identity == VOID
    assert methods['untyped'].params[0].type.identity == OBJECT
    assert methods['untyped'].return_type.identity == OBJECT
    assert [p.name for p in service.events[0].params] == ['tree', 'color']


def test_event_marker():
    assert is_event(Service.onChange)
    assert not is_event(Service.find)


def test_described_service_generates():
    generator = TypeScriptGenerator(GeneratorOptions(newline=LF))
    [(file_name, content)] = generator.generate(describe_service(Service))

    assert file_name == 'Service_rpc.ts'
    assert "interface Tree {\n    label: string;\n    color: Color;\n    children: Array<Tree>;\n}\n" in content
    assert "interface Page<T> {\n    items: Array<T>;\n    total: number;\n}\n" in content
    assert "enum Color {\n    Red,\n    Green,\n}\n" in content
    assert "    pages(size: number): Promise<Page<Tree>>;\n" in content
    assert "    untyped(value: any): Promise<any>;\n" in content
    assert "    onChange(callback: (tree: Tree, color: Color) => void): void;\n" in content
    assert '_internal' not in content
    assert 'const Service_methods: Array<keyof Service> = ["ping", "find", "pages", "untyped"];' in content
    assert content.count('interface Tree ') == 1


def test_opaque_type_fails_generation():
    class Broken(Protocol):
        def get(self) -> Opaque: ...

    with pytest.raises(UnmappableTypeError):
        TypeScriptGenerator().generate(describe_service(Broken))


@dataclass
class Holder:
    page: Page


def test_generic_template_without_argument_is_rejected(describer):
    with pytest.raises(GenericArityError) as excinfo:
        describer.describe(Holder)
    assert excinfo.value.identity == f"{Page.__module__}.Page"

    with pytest.raises(GenericArityError):
        TypeDescriber().describe(Page)
