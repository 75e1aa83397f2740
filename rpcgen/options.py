"""Generator configuration"""

from dataclasses import dataclass

from .code_writer import CRLF


@dataclass(frozen=True)
class GeneratorOptions:
    """Settings shared by all generators.

    indent_width: spaces per nesting level
    newline: line terminator of the generated file
    file_suffix: appended to the service name in the output file name
    extension: output file extension, without the dot
    promise_type: asynchronous result wrapper for method return types
    """
    indent_width: int = 4
    newline: str = CRLF
    file_suffix: str = "rpc"
    extension: str = "ts"
    promise_type: str = "Promise"

    def file_name(self, service_name: str) -> str:
        return f"{service_name}_{self.file_suffix}.{self.extension}"
