"""Exception hierarchy for stub generation"""


class RpcGenException(Exception):
    """Base exception for all rpcgen errors"""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict:
        """Convert exception to structured log format"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


# Type mapping errors abort generation for the current service

class TypeMappingError(RpcGenException):
    """Base exception for type registry and closure errors"""
    pass


class UnmappableTypeError(TypeMappingError):
    """Raised when a type that is neither built-in, composite nor enum must be declared"""

    def __init__(self, identity: str, kind: str):
        super().__init__(
            f"Cannot declare type '{identity}' of kind {kind}: not a built-in, composite or enumeration",
            {"identity": identity, "kind": kind}
        )
        self.identity = identity


class GenericArityError(TypeMappingError):
    """Raised when a generic construction does not have exactly one type argument"""

    def __init__(self, identity: str, argument_count: int):
        super().__init__(
            f"Generic type '{identity}' has {argument_count} type arguments, expected exactly 1",
            {"identity": identity, "argument_count": argument_count}
        )
        self.identity = identity
        self.argument_count = argument_count


# Host driver errors

class HostError(RpcGenException):
    """Base exception for failures locating services and generators"""
    pass


class ModuleLoadError(HostError):
    """Raised when the module holding a service cannot be loaded"""
    pass


class TypeExtractionError(HostError):
    """Raised when annotations of a service or type cannot be evaluated"""
    pass


class ServiceNotFoundError(HostError):
    """Raised when the requested service symbol doesn't exist in the module"""

    def __init__(self, symbol: str, module: str):
        super().__init__(
            f"Cannot find service '{symbol}' within module '{module}'",
            {"symbol": symbol, "module": module}
        )
        self.symbol = symbol


class GeneratorNotFoundError(HostError):
    """Raised when no generator matches the requested name"""

    def __init__(self, name: str, available: list = None):
        super().__init__(
            f"Cannot find any generator named '{name}'",
            {"name": name, "available": available or []}
        )
        self.name = name
