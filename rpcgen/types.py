"""Data types describing a service and the types it references"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import GenericArityError


class TypeKind(Enum):
    PRIMITIVE = "primitive"
    COMPOSITE = "composite"
    ENUMERATION = "enumeration"
    GENERIC = "generic"
    PARAMETER = "parameter"


@dataclass(eq=False)
class TypeDescriptor:
    """Language-neutral description of one source type.

    Equality and hashing go through ``identity`` only, so descriptors of a
    cyclic type graph can be compared and used as keys safely. ``fields``
    is filled after construction by adapters that describe recursive types.
    """
    kind: TypeKind
    identity: str
    name: str
    fields: list['Member'] = field(default_factory=list, repr=False)
    members: list[str] = field(default_factory=list)
    type_parameters: list[str] = field(default_factory=list)
    base_type: Optional['TypeDescriptor'] = field(default=None, repr=False)
    arguments: list['TypeDescriptor'] = field(default_factory=list, repr=False)

    def __eq__(self, other):
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self):
        return hash(self.identity)

    @property
    def argument(self) -> 'TypeDescriptor':
        """The single type argument of a generic construction"""
        if len(self.arguments) != 1:
            raise GenericArityError(self.identity, len(self.arguments))
        return self.arguments[0]


@dataclass(frozen=True)
class Member:
    """Field of a composite type"""
    name: str
    type: TypeDescriptor


@dataclass(frozen=True)
class Param:
    """Method or event parameter"""
    name: str
    type: TypeDescriptor


@dataclass(frozen=True)
class Method:
    """Service method as reported by the host"""
    name: str
    return_type: TypeDescriptor
    params: tuple[Param, ...] = ()
    is_special_name: bool = False


@dataclass(frozen=True)
class Event:
    """Service event; params are those of the handler invocation"""
    name: str
    params: tuple[Param, ...] = ()


@dataclass(frozen=True)
class ServiceDescriptor:
    """Complete public surface of one service"""
    name: str
    methods: tuple[Method, ...] = ()
    events: tuple[Event, ...] = ()


@dataclass(frozen=True)
class Signature:
    """Extracted operation; events carry no return type"""
    name: str
    params: tuple[Param, ...] = ()
    return_type: Optional[TypeDescriptor] = None

    @property
    def types(self) -> list[TypeDescriptor]:
        """Every type this signature references, parameters first"""
        types = [p.type for p in self.params]
        if self.return_type is not None:
            types.append(self.return_type)
        return types


# Canonical identities of the primitive types every host adapter shares
INT = 'int'
LONG = 'long'
FLOAT = 'float'
DOUBLE = 'double'
BOOL = 'bool'
STRING = 'string'
VOID = 'void'
OBJECT = 'object'
LIST = 'list'


def primitive(identity: str, name: str = "") -> TypeDescriptor:
    return TypeDescriptor(TypeKind.PRIMITIVE, identity, name or identity)


def composite(name: str, fields: list[Member] = None, identity: str = "",
              type_parameters: list[str] = None) -> TypeDescriptor:
    return TypeDescriptor(
        TypeKind.COMPOSITE,
        identity or name,
        name,
        fields=list(fields or []),
        type_parameters=list(type_parameters or []),
    )


def enumeration(name: str, members: list[str], identity: str = "") -> TypeDescriptor:
    return TypeDescriptor(TypeKind.ENUMERATION, identity or name, name, members=list(members))


def parameter(name: str, identity: str = "") -> TypeDescriptor:
    return TypeDescriptor(TypeKind.PARAMETER, identity or f"~{name}", name)


def generic(base: TypeDescriptor, *arguments: TypeDescriptor) -> TypeDescriptor:
    """Generic construction; identity is composed from base and arguments"""
    args = ",".join(a.identity for a in arguments)
    return TypeDescriptor(
        TypeKind.GENERIC,
        f"{base.identity}[{args}]",
        base.name,
        base_type=base,
        arguments=list(arguments),
    )


def list_of(argument: TypeDescriptor) -> TypeDescriptor:
    return generic(primitive(LIST), argument)
