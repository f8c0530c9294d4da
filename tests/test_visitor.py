import pytest

from dbussig.ast import (
    ArrayNode,
    BasicNode,
    DictNode,
    StructNode,
    VariantNode,
)
from dbussig.parser import parse_signature
from dbussig.syntax import BasicType
from dbussig.visitor import SignatureVisitor, traverse
from tests._shared_cases import WELL_FORMED_CASES, SignatureCase, case_id


class EventRecorder(SignatureVisitor):
    """Records every hook call as `(hook, label)`."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def _record(self, hook: str, label: str) -> None:
        self.events.append((hook, label))

    def enter_basic(self, node: BasicNode) -> None:
        self._record("enter_basic", node.type.code)

    def leave_basic(self, node: BasicNode) -> None:
        self._record("leave_basic", node.type.code)

    def enter_variant(self, node: VariantNode) -> None:
        self._record("enter_variant", "v")

    def leave_variant(self, node: VariantNode) -> None:
        self._record("leave_variant", "v")

    def enter_array(self, node: ArrayNode) -> None:
        self._record("enter_array", "a")

    def leave_array(self, node: ArrayNode) -> None:
        self._record("leave_array", "a")

    def enter_struct(self, node: StructNode) -> None:
        self._record("enter_struct", "(")

    def leave_struct(self, node: StructNode) -> None:
        self._record("leave_struct", ")")

    def enter_dict(self, node: DictNode) -> None:
        self._record("enter_dict", "{")

    def leave_dict(self, node: DictNode) -> None:
        self._record("leave_dict", "}")


def _record(source: str) -> list[tuple[str, str]]:
    recorder = EventRecorder()
    traverse(parse_signature(source), recorder)
    return recorder.events


def test_dict_visits_key_before_value() -> None:
    assert _record("{sv}") == [
        ("enter_dict", "{"),
        ("enter_basic", "s"),
        ("leave_basic", "s"),
        ("enter_variant", "v"),
        ("leave_variant", "v"),
        ("leave_dict", "}"),
    ]


def test_struct_fields_visited_in_declared_order() -> None:
    events = _record("(ybd)")
    entered = [label for hook, label in events if hook == "enter_basic"]
    assert entered == ["y", "b", "d"]
    assert events[0] == ("enter_struct", "(")
    assert events[-1] == ("leave_struct", ")")


def test_array_wraps_its_element() -> None:
    assert _record("ai") == [
        ("enter_array", "a"),
        ("enter_basic", "i"),
        ("leave_basic", "i"),
        ("leave_array", "a"),
    ]


@pytest.mark.parametrize("case", WELL_FORMED_CASES, ids=case_id)
def test_every_node_entered_and_left_once(case: SignatureCase) -> None:
    events = _record(case.source)
    enters = [hook for hook, _ in events if hook.startswith("enter_")]
    leaves = [hook for hook, _ in events if hook.startswith("leave_")]

    assert len(enters) == len(leaves) == len(case.source.replace(")", "").replace("}", ""))

    # enter/leave pairs nest like parentheses
    stack: list[str] = []
    for hook, _ in events:
        kind = hook.split("_", 1)[1]
        if hook.startswith("enter_"):
            stack.append(kind)
        else:
            assert stack.pop() == kind
    assert stack == []


@pytest.mark.parametrize("case", WELL_FORMED_CASES, ids=case_id)
def test_traversal_is_repeatable_and_non_mutating(case: SignatureCase) -> None:
    tree = parse_signature(case.source)
    snapshot = parse_signature(case.source)

    first = EventRecorder()
    second = EventRecorder()
    traverse(tree, first)
    traverse(tree, second)

    assert first.events == second.events
    assert tree == snapshot


def test_partial_visitor_only_sees_overridden_hooks() -> None:
    class StringCounter(SignatureVisitor):
        def __init__(self) -> None:
            self.count = 0

        def enter_basic(self, node: BasicNode) -> None:
            if node.type == BasicType.STRING:
                self.count += 1

    counter = StringCounter()
    traverse(parse_signature("a{sa(sv)}s"), counter)
    assert counter.count == 3


def test_base_visitor_is_a_no_op() -> None:
    traverse(parse_signature("a{s(iv)}"), SignatureVisitor())


def test_traverse_accepts_single_node_and_list() -> None:
    node = ArrayNode(element=BasicNode(BasicType.BYTE))

    single = EventRecorder()
    traverse(node, single)

    listed = EventRecorder()
    traverse([node], listed)

    assert single.events == listed.events == _record("ay")


def test_callback_errors_propagate() -> None:
    class Boom(SignatureVisitor):
        def enter_variant(self, node: VariantNode) -> None:
            raise KeyError("boom")

    with pytest.raises(KeyError, match="boom"):
        traverse(parse_signature("iv"), Boom())


def test_non_node_raises_type_error() -> None:
    with pytest.raises(TypeError, match="Not a signature node"):
        traverse(("i",), SignatureVisitor())  # type: ignore[arg-type]
