"""Generator interface and lookup by name"""

import importlib
import logging
from abc import ABC, abstractmethod

from .exceptions import GeneratorNotFoundError
from .options import GeneratorOptions
from .types import ServiceDescriptor

logger = logging.getLogger(__name__)

# Short names of the generators shipped with rpcgen
GENERATORS = {
    'typescript': 'rpcgen.typescript_generator:TypeScriptGenerator',
    'ts': 'rpcgen.typescript_generator:TypeScriptGenerator',
}


class BaseGenerator(ABC):
    """Contract for every target language generator"""

    def __init__(self, options: GeneratorOptions = None):
        self.options = options or GeneratorOptions()

    @abstractmethod
    def generate(self, service: ServiceDescriptor) -> list[tuple[str, str]]:
        """
        Generate the stub files for one service

        Args:
            service: Public surface of the service

        Returns:
            List of (file name, file content) pairs

        Raises:
            TypeMappingError: If a referenced type cannot be expressed
        """
        pass


def get_generator(name: str, options: GeneratorOptions = None) -> BaseGenerator:
    """
    Instantiate a generator by short name or by 'module:Class' path

    Raises:
        GeneratorNotFoundError: If nothing matches name
    """
    path = GENERATORS.get(name.lower(), name)
    module_name, _, class_name = path.partition(':')
    if not class_name:
        raise GeneratorNotFoundError(name, sorted(GENERATORS))

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise GeneratorNotFoundError(name, sorted(GENERATORS)) from e

    cls = getattr(module, class_name, None)
    if not (isinstance(cls, type) and issubclass(cls, BaseGenerator)):
        raise GeneratorNotFoundError(name, sorted(GENERATORS))

    logger.debug("Using generator %s", path)
    return cls(options)
