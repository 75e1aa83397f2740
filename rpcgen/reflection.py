"""
Python host adapter - describes annotated Python classes as services

A service is any class whose public functions are its operations. Methods
marked with ``@event`` are events: their parameters are the parameters
passed to subscribers. Types are read from annotations:

    @dataclass
    class Widget:
        name: str
        children: list['Widget']

    class Inspector(Protocol):
        def find(self, name: str) -> Widget: ...

        @event
        def onSelect(self, widget: Widget) -> None: ...
"""

import collections.abc
import dataclasses
import enum
import inspect
import typing
from typing import Any, ClassVar, TypeVar, get_args, get_origin, get_type_hints

from .exceptions import GenericArityError, TypeExtractionError
from .types import (
    TypeDescriptor, Member, Param, Method, Event, ServiceDescriptor,
    primitive, composite, enumeration, parameter, generic,
    INT, DOUBLE, BOOL, STRING, VOID, OBJECT, LIST,
)

EVENT_MARKER = '__rpc_event__'

PYTHON_TYPES = {
    int: INT,
    float: DOUBLE,
    bool: BOOL,
    str: STRING,
    type(None): VOID,
    object: OBJECT,
}

LIST_TYPES = (list, collections.abc.Sequence, collections.abc.MutableSequence)

# Modules whose classes contribute nothing to a service surface
FRAMEWORK_MODULES = ('builtins', 'typing', 'typing_extensions', 'abc')


def event(func):
    """Mark a service method as an event declaration"""
    setattr(func, EVENT_MARKER, True)
    return func


def is_event(func) -> bool:
    return getattr(func, EVENT_MARKER, False)


class TypeDescriber:
    """Builds type descriptors from annotations.

    One describer should be used per generation run: it caches every
    descriptor by identity so the same Python type always yields the same
    descriptor object, and a class is cached before its fields are
    described so self-referencing classes terminate.
    """

    def __init__(self):
        self._cache: dict[str, TypeDescriptor] = {}

    def describe(self, annotation) -> TypeDescriptor:
        if annotation is None:
            annotation = type(None)
        if annotation is Any:
            return self._cached(primitive(OBJECT))
        if isinstance(annotation, TypeVar):
            return self._cached(parameter(annotation.__name__))

        origin = get_origin(annotation)
        if origin is not None:
            arguments = [self.describe(a) for a in get_args(annotation)]
            if origin in LIST_TYPES:
                return self._cached(generic(self._cached(primitive(LIST)), *arguments))
            if isinstance(origin, type) and self._is_composite(origin):
                return self._cached(generic(self._describe_class(origin), *arguments))
            return self._cached(primitive(repr(annotation)))

        if annotation in LIST_TYPES:
            # Bare list: no type argument to map
            return self._cached(generic(self._cached(primitive(LIST))))

        if not isinstance(annotation, type):
            return self._cached(primitive(repr(annotation)))

        if annotation in PYTHON_TYPES:
            return self._cached(primitive(PYTHON_TYPES[annotation]))

        descriptor = self._describe_class(annotation)
        # A generic template is only usable with its type arguments
        if descriptor.type_parameters:
            raise GenericArityError(descriptor.identity, 0)
        return descriptor

    def _describe_class(self, annotation: type) -> TypeDescriptor:
        identity = f"{annotation.__module__}.{annotation.__qualname__}"
        if identity in self._cache:
            return self._cache[identity]

        if issubclass(annotation, enum.Enum):
            return self._cached(enumeration(annotation.__name__, [m.name for m in annotation], identity))
        if self._is_composite(annotation):
            return self._describe_composite(annotation, identity)
        return self._cached(primitive(identity, annotation.__name__))

    def _describe_composite(self, cls: type, identity: str) -> TypeDescriptor:
        type_parameters = [p.__name__ for p in getattr(cls, '__parameters__', ())]
        descriptor = self._cached(composite(cls.__name__, identity=identity, type_parameters=type_parameters))
        for name, hint in self._field_hints(cls).items():
            descriptor.fields.append(Member(name, self.describe(hint)))
        return descriptor

    def _cached(self, descriptor: TypeDescriptor) -> TypeDescriptor:
        return self._cache.setdefault(descriptor.identity, descriptor)

    @staticmethod
    def _field_hints(cls: type) -> dict:
        try:
            hints = get_type_hints(cls)
        except (NameError, TypeError) as e:
            raise TypeExtractionError(
                f"Cannot evaluate annotations of '{cls.__qualname__}': {e}",
                {"type": cls.__qualname__, "error": str(e)}
            ) from e
        return {name: hint for name, hint in hints.items() if get_origin(hint) is not ClassVar}

    @classmethod
    def _is_composite(cls, klass: type) -> bool:
        if dataclasses.is_dataclass(klass) or typing.is_typeddict(klass):
            return True
        if klass.__module__ in FRAMEWORK_MODULES:
            return False
        return bool(cls._field_hints(klass))


def describe_service(service: type, describer: TypeDescriber = None) -> ServiceDescriptor:
    """
    Describe the public surface of a Python service class

    Args:
        service: Class declaring the service operations and events
        describer: Type describer to share with other services of the same run

    Returns:
        ServiceDescriptor with methods and events in definition order

    Raises:
        TypeExtractionError: If annotations cannot be evaluated
    """
    describer = describer or TypeDescriber()
    methods = []
    events = []

    for name, member in _declared_members(service).items():
        # Properties, class attributes and static or class methods are not operations
        if not inspect.isfunction(member):
            continue
        params, return_type = _describe_callable(member, describer)
        if is_event(member):
            events.append(Event(name, params))
        else:
            methods.append(Method(name, return_type, params))

    return ServiceDescriptor(service.__name__, tuple(methods), tuple(events))


def _declared_members(service: type) -> dict:
    """Class attributes in definition order, base classes first, dunders excluded"""
    members = {}
    for klass in reversed(service.__mro__):
        if klass is object or klass.__module__ in FRAMEWORK_MODULES:
            continue
        for name, value in vars(klass).items():
            if name.startswith('__') and name.endswith('__'):
                continue
            members[name] = value
    return members


def _describe_callable(func, describer: TypeDescriber) -> tuple[tuple[Param, ...], TypeDescriptor]:
    try:
        hints = get_type_hints(func)
    except (NameError, TypeError) as e:
        raise TypeExtractionError(
            f"Cannot evaluate annotations of '{func.__qualname__}': {e}",
            {"function": func.__qualname__, "error": str(e)}
        ) from e

    # Drop the bound instance parameter
    parameters = list(inspect.signature(func).parameters.values())[1:]
    params = tuple(
        Param(p.name, describer.describe(hints.get(p.name, object)))
        for p in parameters
        if p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    )
    return_type = describer.describe(hints['return'] if 'return' in hints else object)
    return params, return_type
