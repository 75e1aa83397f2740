"""Type closure resolution - finds every new type a service needs declared"""

import logging
from dataclasses import dataclass
from typing import Iterable

from .exceptions import UnmappableTypeError
from .type_mapper import TypeRegistry
from .types import TypeDescriptor, TypeKind

logger = logging.getLogger(__name__)

DECLARABLE_KINDS = (TypeKind.COMPOSITE, TypeKind.ENUMERATION)


@dataclass(frozen=True)
class Closure:
    """Resolved types in declaration order, plus the registry that knows them all"""
    types: tuple[TypeDescriptor, ...]
    registry: TypeRegistry


class TypeClosureResolver:
    """Walks field references from a set of seed types.

    Every type on a frontier is registered before any of its members are
    inspected, so a type reached again through a cycle is already known
    and is neither revisited nor declared twice. Dependencies of a type
    are emitted before the type itself.
    """

    def __init__(self, registry: TypeRegistry):
        self.registry = registry

    def resolve(self, seeds: Iterable[TypeDescriptor]) -> Closure:
        registry = self.registry
        ordered = []

        frontier, registry = self._advance(seeds, registry)
        # Each frame holds the remaining frontier and the type to emit once it is exhausted
        stack = [(iter(frontier), None)]
        while stack:
            pending, owner = stack[-1]
            current = next(pending, None)
            if current is None:
                stack.pop()
                if owner is not None:
                    ordered.append(self._declarable(owner))
                continue
            children, registry = self._advance(self._next_seeds(current), registry)
            stack.append((iter(children), current))

        logger.debug("Resolved %d new types: %s", len(ordered), ", ".join(registry.non_builtin_entries))
        return Closure(tuple(ordered), registry)

    @staticmethod
    def _advance(seeds: Iterable[TypeDescriptor], registry: TypeRegistry):
        """Compute the unknown frontier of seeds and register all of it"""
        frontier = []
        for seed in seeds:
            for t in registry.unknown_types_of(seed):
                if t not in frontier:
                    frontier.append(t)
        for t in frontier:
            registry = registry.register(t)
        return frontier, registry

    @staticmethod
    def _next_seeds(descriptor: TypeDescriptor) -> list[TypeDescriptor]:
        if descriptor.kind is TypeKind.COMPOSITE:
            return [f.type for f in descriptor.fields]
        return []

    @staticmethod
    def _declarable(descriptor: TypeDescriptor) -> TypeDescriptor:
        if descriptor.kind not in DECLARABLE_KINDS:
            raise UnmappableTypeError(descriptor.identity, descriptor.kind.value)
        return descriptor
