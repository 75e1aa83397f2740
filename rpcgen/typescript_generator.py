"""TypeScript Generator - generates RPC interface modules for TypeScript clients"""

import logging

from .closure import TypeClosureResolver
from .code_model import (
    Argument, Constant, Enum, EventSignature, Export, Field, File, Interface,
    MethodSignature, TypedConstant, comma_join, quote,
)
from .code_writer import CodeWriter
from .extractor import MemberExtractor
from .generator import BaseGenerator
from .type_mapper import TypeRegistry
from .types import ServiceDescriptor, Signature, TypeDescriptor, TypeKind

logger = logging.getLogger(__name__)


class TypeScriptGenerator(BaseGenerator):
    """Generates one TypeScript module per service.

    The module declares every non built-in type the service reaches, the
    service interface with promisified methods and event registrations,
    the list of callable method names, and the argument names of each
    method so the calling runtime can send positional arguments by name.
    """

    def generate(self, service: ServiceDescriptor) -> list[tuple[str, str]]:
        members = MemberExtractor().extract(service)
        seeds = [t for s in members.signatures for t in s.types]
        registry = TypeRegistry.typescript().reserve(
            service.name, self._methods_name(service), self._arguments_name(service))
        closure = TypeClosureResolver(registry).resolve(seeds)
        registry = closure.registry

        declarations = [self._declare(t, registry) for t in closure.types]

        interface = Interface(
            service.name,
            methods=tuple(self._method(m, registry) for m in members.methods),
            events=tuple(self._event(e, registry) for e in members.events),
        )
        method_names = TypedConstant(
            self._methods_name(service),
            f"Array<keyof {interface.name}>",
            f"[{comma_join(quote(m.name) for m in members.methods)}]",
        )
        argument_map = Constant(
            self._arguments_name(service),
            f"{{{comma_join(self._argument_entry(m) for m in members.methods)}}}",
        )

        contents = (*declarations, interface, method_names, argument_map)
        file = File(contents=contents, exports=Export(tuple(c.name for c in contents)))

        writer = CodeWriter(self.options.indent_width, self.options.newline)
        file.generate(writer)

        file_name = self.options.file_name(service.name)
        logger.info("Generated %s: %d methods, %d events, %d types",
                    file_name, len(members.methods), len(members.events), len(declarations))
        return [(file_name, writer.get_code())]

    @staticmethod
    def _methods_name(service: ServiceDescriptor) -> str:
        return f"{service.name}_methods"

    @staticmethod
    def _arguments_name(service: ServiceDescriptor) -> str:
        return f"{service.name}_arguments"

    def _declare(self, descriptor: TypeDescriptor, registry: TypeRegistry):
        name = registry.map(descriptor)
        if descriptor.kind is TypeKind.ENUMERATION:
            return Enum(name, tuple(descriptor.members))
        fields = tuple(Field(f.name, registry.map(f.type)) for f in descriptor.fields)
        return Interface(name, fields=fields, type_parameters=tuple(descriptor.type_parameters))

    def _method(self, signature: Signature, registry: TypeRegistry) -> MethodSignature:
        return MethodSignature(
            signature.name,
            self._arguments(signature, registry),
            self._promisify(registry.map(signature.return_type)),
        )

    def _event(self, signature: Signature, registry: TypeRegistry) -> EventSignature:
        return EventSignature(signature.name, self._arguments(signature, registry))

    @staticmethod
    def _arguments(signature: Signature, registry: TypeRegistry) -> tuple[Argument, ...]:
        return tuple(Argument(p.name, registry.map(p.type)) for p in signature.params)

    def _promisify(self, type_name: str) -> str:
        return TypeRegistry.compose_generic(self.options.promise_type, type_name)

    @staticmethod
    def _argument_entry(signature: Signature) -> str:
        return f"{quote(signature.name)}: [{comma_join(quote(p.name) for p in signature.params)}]"
