import pytest

from gmml.ast import (
    AstBlock,
    AstEdge,
    AstEdgeDef,
    AstField,
    AstLeafDef,
    AstMessage,
    AstNumber,
    AstString,
    AstStruct,
    AstSymbol,
)
from gmml.diagnostics import InvalidTopLevelError, NonStringKeyError
from gmml.value import (
    Edge,
    Map,
    Message,
    Number,
    Pair,
    String,
    Symbol,
    Vec,
    build_document,
    reduce_document,
    reduce_node,
)


def test_literals_reduce_to_themselves() -> None:
    assert reduce_node(AstString("s")) == String("s")
    assert reduce_node(AstNumber(1.5)) == Number(1.5)
    assert reduce_node(AstSymbol("x")) == Symbol("x")


def test_definitions_reduce_to_pairs() -> None:
    edge = AstEdge(source=AstSymbol("a"), dest=AstNumber(2.0))

    assert reduce_node(AstLeafDef(target=AstSymbol("k"), stmt=AstString("v"))) == Pair(Symbol("k"), String("v"))
    assert reduce_node(AstEdgeDef(target=edge, stmt=AstSymbol("w"))) == Pair(
        Edge(Symbol("a"), Number(2.0)),
        Symbol("w"),
    )


def test_struct_reduces_to_vec_of_pairs() -> None:
    struct = AstStruct(
        entries=(
            AstField(key=AstSymbol("a"), value=AstNumber(1.0)),
            AstField(key=AstString("b"), value=AstMessage(name="f", args=(AstSymbol("x"),))),
        )
    )

    assert reduce_node(struct) == Vec(
        (
            Pair(Symbol("a"), Number(1.0)),
            Pair(String("b"), Message("f", (Symbol("x"),))),
        )
    )


def test_block_reduces_to_named_pair() -> None:
    block = AstBlock(name="g", content=(AstSymbol("x"), AstEdge(source=AstSymbol("x"), dest=AstSymbol("y"))))

    assert reduce_node(block) == Pair(String("g"), Vec((Symbol("x"), Edge(Symbol("x"), Symbol("y")))))


def test_reduce_rejects_non_ast_values() -> None:
    with pytest.raises(TypeError):
        reduce_node("not a node")  # type: ignore[arg-type]


def test_build_document_keeps_first_block_and_source_order() -> None:
    document = build_document(
        [
            Pair(String("b"), Vec((Symbol("first"),))),
            Pair(String("a"), Vec(())),
            Pair(String("b"), Vec((Symbol("second"),))),
        ]
    )

    assert list(document) == ["b", "a"]
    assert document["b"] == Vec((Symbol("first"),))
    assert len(document) == 2


def test_build_document_rejects_non_pair() -> None:
    with pytest.raises(InvalidTopLevelError) as excinfo:
        build_document([Vec(())])

    assert excinfo.value.value == Vec(())
    assert excinfo.value.code == "CONVERSION_INVALID_TOP_LEVEL"
    assert excinfo.value.range is None


def test_build_document_rejects_non_string_key() -> None:
    with pytest.raises(NonStringKeyError) as excinfo:
        build_document([Pair(Symbol("a"), Vec(()))])

    assert excinfo.value.key == Symbol("a")
    assert excinfo.value.code == "CONVERSION_NON_STRING_KEY"


def test_reduce_document_from_blocks() -> None:
    blocks = (
        AstBlock(name="a", content=(AstSymbol("x"),)),
        AstBlock(name="a", content=(AstSymbol("y"),)),
    )

    assert reduce_document(blocks) == Map({"a": Vec((Symbol("x"),))})


def test_map_is_read_only() -> None:
    document = Map({"a": Vec(())})

    with pytest.raises(TypeError):
        document.entries["b"] = Vec(())  # type: ignore[index]
    assert "b" not in document
    assert document.get("b") is None


def test_map_copies_its_input() -> None:
    entries = {"a": Vec(())}
    document = Map(entries)
    entries["b"] = Vec(())

    assert list(document) == ["a"]
    assert dict(document.items()) == {"a": Vec(())}
