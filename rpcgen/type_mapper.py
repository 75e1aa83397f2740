"""Type registry mapping source type descriptors to target type names"""

from collections import ChainMap
from types import MappingProxyType
from typing import Mapping

from .types import TypeDescriptor, TypeKind, INT, LONG, FLOAT, DOUBLE, BOOL, STRING, VOID, OBJECT, LIST


class TypeRegistry:
    """Maps type identities to target type names.

    A registry never changes once created: ``extend`` and ``register``
    return a new registry layered over this one. Built-in names come from
    a fixed seed table and are never declared in generated output.
    """

    # Built-in TypeScript mappings
    TYPESCRIPT_TYPES = {
        INT: 'number',
        LONG: 'number',
        FLOAT: 'number',
        DOUBLE: 'number',
        BOOL: 'boolean',
        STRING: 'string',
        VOID: 'void',
        OBJECT: 'any',
        LIST: 'Array',
    }

    def __init__(self, builtins: Mapping[str, str], entries: ChainMap = None, reserved: frozenset = frozenset()):
        self._builtins = MappingProxyType(dict(builtins))
        self._entries = entries if entries is not None else ChainMap()
        self._reserved = frozenset(reserved)

    @classmethod
    def typescript(cls) -> 'TypeRegistry':
        return cls(cls.TYPESCRIPT_TYPES)

    def is_builtin(self, identity: str) -> bool:
        return identity in self._builtins

    def is_known(self, descriptor: TypeDescriptor) -> bool:
        """Check if type is built-in, registered, or a type parameter"""
        if descriptor.kind is TypeKind.PARAMETER:
            return True
        return descriptor.identity in self

    def map(self, descriptor: TypeDescriptor) -> str:
        """Convert a type descriptor to its target type name"""
        identity = descriptor.identity
        if identity in self._builtins:
            return self._builtins[identity]
        if identity in self._entries:
            return self._entries[identity]
        # Handle Base<Arg> without registering the composed form
        if descriptor.kind is TypeKind.GENERIC:
            argument = descriptor.argument
            return self.compose_generic(self.map(descriptor.base_type), self.map(argument))
        return descriptor.name

    @staticmethod
    def compose_generic(base: str, argument: str) -> str:
        return f'{base}<{argument}>'

    def unknown_types_of(self, descriptor: TypeDescriptor) -> list[TypeDescriptor]:
        """Types reachable from descriptor that still need a declaration.

        A generic construction contributes its template and its argument
        independently; anything else contributes itself when unknown.
        """
        if descriptor.kind is TypeKind.GENERIC:
            argument = descriptor.argument
            return self.unknown_types_of(descriptor.base_type) + self.unknown_types_of(argument)
        if self.is_known(descriptor):
            return []
        return [descriptor]

    def extend(self, identity: str, target_name: str) -> 'TypeRegistry':
        return TypeRegistry(self._builtins, self._entries.new_child({identity: target_name}), self._reserved)

    def reserve(self, *names: str) -> 'TypeRegistry':
        """Mark names declared outside the registry so no type is given them"""
        return TypeRegistry(self._builtins, self._entries, self._reserved | set(names))

    def register(self, descriptor: TypeDescriptor) -> 'TypeRegistry':
        """Extend with descriptor under a name derived from its own name"""
        return self.extend(descriptor.identity, self.target_name_for(descriptor))

    def target_name_for(self, descriptor: TypeDescriptor) -> str:
        """Derive a target name, suffixing a counter when another identity holds it"""
        if descriptor.identity in self._entries:
            return self._entries[descriptor.identity]
        taken = set(self._entries.values()) | set(self._builtins.values()) | self._reserved
        name = descriptor.name
        counter = 2
        while name in taken:
            name = f'{descriptor.name}{counter}'
            counter += 1
        return name

    @property
    def non_builtin_entries(self) -> tuple[str, ...]:
        """Registered target names in registration order"""
        return tuple(self._entries[identity] for identity in self._entries)

    def __contains__(self, identity: str) -> bool:
        return self.is_builtin(identity) or identity in self._entries
