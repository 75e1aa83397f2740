"""Sample services for the stub generator.

Generate with:
    python bin/generate_stubs.py samples/inspector.py RemoteInspector ElementHighlighter -o generated/
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Protocol, TypeVar

from rpcgen import event

T = TypeVar('T')


class ElementState(Enum):
    Enabled = 1
    Disabled = 2
    Hidden = 3


@dataclass
class Bounds:
    x: int
    y: int
    width: int
    height: int


@dataclass
class Element:
    id: str
    name: str
    bounds: Bounds
    state: ElementState
    children: list['Element'] = field(default_factory=list)


@dataclass
class Page(Generic[T]):
    items: list[T]
    total: int


class RemoteInspector(Protocol):
    def getRoot(self) -> Element: ...

    def findElements(self, name: str, limit: int) -> list[Element]: ...

    def listWindows(self, page: int) -> Page[Element]: ...

    def getState(self, id: str) -> ElementState: ...

    def _cache(self) -> None: ...

    @property
    def version(self) -> str: ...

    @event
    def onSelectionChanged(self, element: Element) -> None: ...


class ElementHighlighter(Protocol):
    def highlight(self, id: str, bounds: Bounds) -> None: ...

    def clear(self) -> None: ...

    @event
    def onHover(self, x: int, y: int) -> None: ...
