"""Syntax tree nodes and the parser that owns them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Iterator

from .lexer import Lexer, Token


class NodeType(Enum):
    """Kinds of syntax tree node."""

    ROOT = auto()
    IDENTIFIER = auto()
    QUALIFIED_NAME = auto()
    USING_STMT = auto()


@dataclass(eq=False)
class Node:
    """Base of all syntax tree nodes."""

    parent: Node | None = field(default=None, repr=False)
    type: ClassVar[NodeType | None] = None


@dataclass(eq=False)
class BinaryNode(Node):
    """A node with a left and a right operand."""

    left: Node | None = None
    right: Node | None = None


@dataclass(eq=False)
class IdentifierNode(Node):
    """A name taken from a single token."""

    token: Token | None = None
    type: ClassVar[NodeType | None] = NodeType.IDENTIFIER


@dataclass(eq=False)
class QualifiedName(BinaryNode):
    """A name of the form ``left::right``."""

    type: ClassVar[NodeType | None] = NodeType.QUALIFIED_NAME


@dataclass(eq=False)
class UnaryStmt(Node):
    """A statement with a single operand."""

    node: Node | None = None


@dataclass(eq=False)
class UsingStmt(UnaryStmt):
    """A ``using`` statement."""

    type: ClassVar[NodeType | None] = NodeType.USING_STMT


@dataclass(eq=False)
class RootNode(Node):
    """The top of a syntax tree, holding its statements in order."""

    children: list[Node] = field(default_factory=list)
    type: ClassVar[NodeType | None] = NodeType.ROOT

    def add(self, child: Node) -> None:
        """Append a top-level node."""
        if not isinstance(child, Node):
            raise TypeError(f"expected a Node, got {child!r}")
        self.children.append(child)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)


class Parser:
    """Builds a syntax tree from a lexer's tokens."""

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.tree = RootNode()

    def new_node(self, node_class: type[Node], parent: Node | None, *args) -> Node:
        """Create a node of ``node_class`` under ``parent``."""
        if not (isinstance(node_class, type) and issubclass(node_class, Node)):
            raise TypeError(f"{node_class!r} is not a node class")
        return node_class(parent, *args)