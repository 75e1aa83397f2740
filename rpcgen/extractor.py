"""Member extraction - turns a service descriptor into ordered signatures"""

from dataclasses import dataclass

from .types import ServiceDescriptor, Method, Signature

# Prefixes of accessor methods a host synthesizes for events
EVENT_ACCESSOR_PREFIXES = ('add_', 'remove_')


@dataclass(frozen=True)
class ServiceMembers:
    methods: tuple[Signature, ...]
    events: tuple[Signature, ...]

    @property
    def signatures(self) -> tuple[Signature, ...]:
        return self.methods + self.events


class MemberExtractor:
    """Selects the user-declared operations and events of a service"""

    def extract(self, service: ServiceDescriptor) -> ServiceMembers:
        event_names = {e.name for e in service.events}
        methods = tuple(
            Signature(m.name, tuple(m.params), m.return_type)
            for m in service.methods
            if self.is_operation(m, event_names)
        )
        events = tuple(Signature(e.name, tuple(e.params)) for e in service.events)
        return ServiceMembers(methods, events)

    @staticmethod
    def is_operation(method: Method, event_names: set = frozenset()) -> bool:
        """Check if method is a direct, user-declared operation"""
        if method.is_special_name or method.name.startswith('_'):
            return False
        for prefix in EVENT_ACCESSOR_PREFIXES:
            if method.name.startswith(prefix) and method.name[len(prefix):] in event_names:
                return False
        return True
