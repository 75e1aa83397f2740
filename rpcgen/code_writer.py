"""Text writer with brace-delimited, indented blocks"""

from contextlib import contextmanager
from typing import Callable, Union

CRLF = "\r\n"
LF = "\n"


class CodeWriter:
    """Accumulates generated text, indenting each line by the current depth"""

    def __init__(self, indent_width: int = 4, newline: str = CRLF):
        self.indent_width = indent_width
        self.newline = newline
        self._parts: list[str] = []
        self._depth = 0
        self._at_line_start = True

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def current_indent(self) -> str:
        return " " * (self.indent_width * self._depth)

    def line(self, content: str = "") -> None:
        """Write content and terminate the line"""
        self.write(content)
        self.new_line()

    def write(self, content: str) -> None:
        """Write raw text; embedded newlines start indented lines"""
        first, *rest = content.split("\n")
        self._write_fragment(first)
        for fragment in rest:
            self.new_line()
            self._write_fragment(fragment)

    def _write_fragment(self, fragment: str) -> None:
        fragment = fragment.rstrip("\r")
        if not fragment:
            return
        if self._at_line_start:
            self._parts.append(self.current_indent)
            self._at_line_start = False
        self._parts.append(fragment)

    def new_line(self) -> None:
        self._parts.append(self.newline)
        self._at_line_start = True

    @contextmanager
    def indented(self):
        """Increase depth for the enclosed writes; restored on every exit path"""
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    def block(self, body: Union[Callable[['CodeWriter'], None], str]) -> None:
        """Write ``{``, the indented body, then ``}`` on its own line.

        ``body`` is either a callable receiving this writer or raw text.
        """
        self.line("{")
        with self.indented():
            if callable(body):
                body(self)
            else:
                self.write(body)
            if not self._at_line_start:
                self.new_line()
        self.line("}")

    def get_code(self) -> str:
        return "".join(self._parts)
