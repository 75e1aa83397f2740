"""
RPC Stub Generator Package

Describes a service's public surface (methods, events and the types they
reference) and generates:
  1. TypeScript interface modules for cross-language RPC clients
"""

from .types import (
    TypeKind, TypeDescriptor, Member, Param, Method, Event, ServiceDescriptor, Signature,
)
from .exceptions import (
    RpcGenException, TypeMappingError, UnmappableTypeError, GenericArityError,
    HostError, ModuleLoadError, TypeExtractionError, ServiceNotFoundError, GeneratorNotFoundError,
)
from .type_mapper import TypeRegistry
from .closure import TypeClosureResolver, Closure
from .extractor import MemberExtractor, ServiceMembers
from .code_writer import CodeWriter
from .options import GeneratorOptions
from .generator import BaseGenerator, get_generator
from .typescript_generator import TypeScriptGenerator
from .reflection import TypeDescriber, describe_service, event

__all__ = [
    'TypeKind', 'TypeDescriptor', 'Member', 'Param', 'Method', 'Event', 'ServiceDescriptor', 'Signature',
    'RpcGenException', 'TypeMappingError', 'UnmappableTypeError', 'GenericArityError',
    'HostError', 'ModuleLoadError', 'TypeExtractionError', 'ServiceNotFoundError', 'GeneratorNotFoundError',
    'TypeRegistry', 'TypeClosureResolver', 'Closure',
    'MemberExtractor', 'ServiceMembers', 'CodeWriter', 'GeneratorOptions',
    'BaseGenerator', 'get_generator', 'TypeScriptGenerator',
    'TypeDescriber', 'describe_service', 'event',
]
