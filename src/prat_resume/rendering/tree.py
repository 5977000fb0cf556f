"""Visual tree produced by the preview renderer.

A tree is a nested set of immutable :class:`Node` values.  ``kind`` names
the visual role (``page``, ``section``, ``entry_heading`` ...), ``key``
identifies sections, columns and entries, and ``style`` carries the resolved
density tokens and colors.  Front ends lay out and paint the tree; the PDF
exporter walks it directly.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Node", "VisualTree"]


@dataclass(frozen=True)
class Node:
    kind: str
    text: str = ""
    key: str | None = None
    href: str | None = None
    style: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, kind: str, key: str | None = None) -> Node | None:
        for node in self.walk():
            if node.kind == kind and (key is None or node.key == key):
                return node
        return None

    def find_all(self, kind: str) -> list[Node]:
        return [node for node in self.walk() if node.kind == kind]

    def child(self, kind: str) -> Node | None:
        """Return the first direct child of *kind*."""
        for node in self.children:
            if node.kind == kind:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind}
        if self.text:
            data["text"] = self.text
        if self.key is not None:
            data["key"] = self.key
        if self.href is not None:
            data["href"] = self.href
        if self.style:
            data["style"] = dict(self.style)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class VisualTree:
    """Rendered resume plus the view transform for its target.

    ``content`` depends only on the document.  ``scale`` is the on-screen
    zoom and is always 1.0 for the print target.
    """

    content: Node
    scale: float = 1.0
    for_print: bool = False

    @property
    def transform(self) -> str | None:
        if self.scale == 1.0:
            return None
        return f"scale({self.scale:g})"

    def section(self, name: str) -> Node | None:
        return self.content.find("section", key=name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scale": self.scale,
            "transform": self.transform,
            "transformOrigin": "top center",
            "forPrint": self.for_print,
            "content": self.content.to_dict(),
        }
