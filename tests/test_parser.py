import pytest

from breezelang.lexer import Lexer, TokenType
from breezelang.parser import (
    BinaryNode,
    IdentifierNode,
    NodeType,
    Parser,
    QualifiedName,
    RootNode,
    UsingStmt,
)


@pytest.fixture
def parser():
    return Parser(Lexer("test.bl", "using a::b"))


def test_new_parser_has_empty_root(parser):
    assert parser.tree.type is NodeType.ROOT
    assert len(parser.tree) == 0
    assert list(parser.tree) == []
    assert parser.tree.parent is None


def test_parser_keeps_lexer():
    lexer = Lexer("test.bl", "")
    assert Parser(lexer).lexer is lexer


def test_identifier_node(parser):
    parser.lexer.next()
    token = parser.lexer.next()
    node = parser.new_node(IdentifierNode, parser.tree, token)
    assert node.type is NodeType.IDENTIFIER
    assert node.parent is parser.tree
    assert node.token is token
    assert node.token.type is TokenType.NAME


def test_qualified_name_is_binary(parser):
    left = parser.new_node(IdentifierNode, None)
    right = parser.new_node(IdentifierNode, None)
    name = parser.new_node(QualifiedName, parser.tree, left, right)
    assert isinstance(name, BinaryNode)
    assert name.type is NodeType.QUALIFIED_NAME
    assert (name.left, name.right) == (left, right)


def test_using_statement(parser):
    target = parser.new_node(IdentifierNode, None)
    stmt = parser.new_node(UsingStmt, parser.tree, target)
    assert stmt.type is NodeType.USING_STMT
    assert stmt.node is target


def test_root_add_preserves_order(parser):
    nodes = [parser.new_node(UsingStmt, parser.tree) for _ in range(3)]
    for node in nodes:
        parser.tree.add(node)
    assert list(parser.tree) == nodes
    assert len(parser.tree) == len(nodes)


def test_root_add_rejects_non_nodes():
    with pytest.raises(TypeError):
        RootNode().add("not a node")


def test_new_node_rejects_non_node_class(parser):
    with pytest.raises(TypeError):
        parser.new_node(dict, parser.tree)