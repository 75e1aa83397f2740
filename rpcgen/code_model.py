"""Emittable TypeScript constructs.

Every node is immutable and renders itself, and its children, through a
``CodeWriter``. Nodes that introduce a top-level name expose ``name`` so a
``File`` can export them.
"""

from dataclasses import dataclass, field

from .code_writer import CodeWriter


def comma_join(items) -> str:
    return ", ".join(items)


def quote(text: str) -> str:
    return f'"{text}"'


@dataclass(frozen=True)
class Argument:
    name: str
    type: str

    def declaration(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass(frozen=True)
class Import:
    name: str
    source: str

    def generate(self, writer: CodeWriter) -> None:
        writer.line(f'import * as {self.name} from "{self.source}";')


@dataclass(frozen=True)
class Field:
    name: str
    type: str

    def generate(self, writer: CodeWriter) -> None:
        writer.line(f"{self.name}: {self.type};")


@dataclass(frozen=True)
class MethodSignature:
    name: str
    arguments: tuple[Argument, ...]
    return_type: str

    def generate(self, writer: CodeWriter) -> None:
        args = comma_join(a.declaration() for a in self.arguments)
        writer.line(f"{self.name}({args}): {self.return_type};")


@dataclass(frozen=True)
class EventSignature:
    """Registration member taking a callback with the event's parameters"""
    name: str
    arguments: tuple[Argument, ...]

    def generate(self, writer: CodeWriter) -> None:
        args = comma_join(a.declaration() for a in self.arguments)
        writer.line(f"{self.name}(callback: ({args}) => void): void;")


@dataclass(frozen=True)
class Interface:
    name: str
    methods: tuple[MethodSignature, ...] = ()
    events: tuple[EventSignature, ...] = ()
    fields: tuple[Field, ...] = ()
    type_parameters: tuple[str, ...] = ()

    def generate(self, writer: CodeWriter) -> None:
        params = f"<{comma_join(self.type_parameters)}>" if self.type_parameters else ""
        writer.write(f"interface {self.name}{params} ")
        writer.block(self._generate_members)

    def _generate_members(self, writer: CodeWriter) -> None:
        for member in (*self.methods, *self.events, *self.fields):
            member.generate(writer)


@dataclass(frozen=True)
class Enum:
    name: str
    members: tuple[str, ...]

    def generate(self, writer: CodeWriter) -> None:
        writer.write(f"enum {self.name} ")
        writer.block(self._generate_members)

    def _generate_members(self, writer: CodeWriter) -> None:
        for member in self.members:
            writer.line(f"{member},")


@dataclass(frozen=True)
class Constant:
    name: str
    expression: str

    def generate(self, writer: CodeWriter) -> None:
        writer.line(f"const {self.name} = {self.expression};")


@dataclass(frozen=True)
class TypedConstant:
    name: str
    type: str
    expression: str

    def generate(self, writer: CodeWriter) -> None:
        writer.line(f"const {self.name}: {self.type} = {self.expression};")


@dataclass(frozen=True)
class Export:
    names: tuple[str, ...]

    def generate(self, writer: CodeWriter) -> None:
        if self.names:
            writer.line(f"export {{ {comma_join(self.names)} }};")


@dataclass(frozen=True)
class File:
    """Whole generated document: imports, declarations, then the export list"""
    imports: tuple[Import, ...] = ()
    contents: tuple = ()
    exports: Export = field(default_factory=lambda: Export(()))

    def generate(self, writer: CodeWriter) -> None:
        for i in self.imports:
            i.generate(writer)
        if self.imports:
            writer.new_line()
        for code in self.contents:
            code.generate(writer)
            writer.new_line()
        self.exports.generate(writer)
