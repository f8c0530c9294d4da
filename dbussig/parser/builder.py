"""Token stream -> parse tree, driven by an explicit stack of open containers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging

from dbussig.ast import (
    ArrayNode,
    BasicNode,
    DictNode,
    SignatureNode,
    SignatureTree,
    StructNode,
    VariantNode,
)
from dbussig.diagnostics import (
    DictionaryOverflowError,
    EmptyStructError,
    IncompleteDictionaryError,
    InvalidDictionaryKeyError,
    MismatchedContainerError,
    UnbalancedContainerError,
    UnterminatedContainerError,
)
from dbussig.lexer import TokenKind
from dbussig.parser.options import ParserOptions
from dbussig.syntax import BasicType, NodeKind

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _ArrayFrame:
    start: int
    element: SignatureNode | None = None

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ARRAY

    def finish(self) -> ArrayNode:
        if self.element is None:
            raise RuntimeError("Array frame completed without an element type")
        return ArrayNode(element=self.element)


@dataclass(slots=True)
class _StructFrame:
    start: int
    fields: list[SignatureNode] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.STRUCT

    def finish(self) -> StructNode:
        return StructNode(fields=tuple(self.fields))


@dataclass(slots=True)
class _DictFrame:
    start: int
    key: SignatureNode | None = None
    value: SignatureNode | None = None

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DICT

    def finish(self) -> DictNode:
        if self.key is None or self.value is None:
            raise RuntimeError("Dict frame completed without key and value")
        return DictNode(key=self.key, value=self.value)


type _Frame = _ArrayFrame | _StructFrame | _DictFrame


class TreeBuilder:
    """Single-use builder: `feed` every token in order, then `finish`."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options if options is not None else ParserOptions()
        self._root: list[SignatureNode] = []
        self._stack: list[_Frame] = []
        self._position = 0

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def depth(self) -> int:
        """Number of containers currently open."""
        return len(self._stack)

    def feed(self, kind: TokenKind, offset: int | None = None) -> None:
        if offset is None:
            offset = self._position
        self._position = offset + 1

        match kind:
            case TokenKind.VARIANT:
                self._attach(VariantNode(), offset)
            case TokenKind.ARRAY:
                self._stack.append(_ArrayFrame(start=offset))
            case TokenKind.STRUCT_OPEN:
                self._stack.append(_StructFrame(start=offset))
            case TokenKind.DICT_OPEN:
                self._stack.append(_DictFrame(start=offset))
            case TokenKind.STRUCT_CLOSE:
                self._close(NodeKind.STRUCT, offset)
            case TokenKind.DICT_CLOSE:
                self._close(NodeKind.DICT, offset)
            case (
                TokenKind.BYTE
                | TokenKind.BOOLEAN
                | TokenKind.INT16
                | TokenKind.UINT16
                | TokenKind.INT32
                | TokenKind.UINT32
                | TokenKind.INT64
                | TokenKind.UINT64
                | TokenKind.DOUBLE
                | TokenKind.UNIX_FD
                | TokenKind.STRING
                | TokenKind.OBJECT_PATH
                | TokenKind.SIGNATURE
            ):
                self._attach(BasicNode(BasicType.from_token(kind)), offset)
            case _:
                raise RuntimeError(f"Unsupported TokenKind: {kind!r}")

    def finish(self) -> SignatureTree:
        if self._stack:
            unclosed = tuple(frame.kind for frame in self._stack)
            logger.debug("Signature ended with %d open container(s)", len(unclosed))
            raise UnterminatedContainerError(unclosed, self._position)
        return tuple(self._root)

    def _close(self, kind: NodeKind, offset: int) -> None:
        if not self._stack:
            logger.debug("Close of %s at offset %d with no open container", kind.label, offset)
            raise UnbalancedContainerError(kind, offset)

        top = self._stack[-1]
        if top.kind != kind:
            logger.debug("Close of %s at offset %d while %s is open", kind.label, offset, top.kind.label)
            raise MismatchedContainerError(top.kind, kind, offset)

        self._stack.pop()
        match top:
            case _StructFrame():
                if not top.fields and not self._options.allow_empty_struct:
                    raise EmptyStructError(top.start)
            case _DictFrame():
                if top.value is None:
                    raise IncompleteDictionaryError(top.start)
        self._attach(top.finish(), top.start)

    def _attach(self, node: SignatureNode, start: int) -> None:
        """Attach a completed node to the innermost open container, or the root.

        Completing an array's element completes the array itself, so this keeps
        attaching outward until a struct, dict or the root absorbs the node.
        """
        while True:
            if not self._stack:
                self._root.append(node)
                return

            container = self._stack[-1]
            match container:
                case _ArrayFrame():
                    container.element = node
                    self._stack.pop()
                    node, start = container.finish(), container.start
                case _StructFrame():
                    container.fields.append(node)
                    return
                case _DictFrame():
                    self._attach_to_dict(container, node, start)
                    return
                case _:
                    raise RuntimeError(f"Invalid container on stack: {container!r}")

    def _attach_to_dict(self, container: _DictFrame, node: SignatureNode, start: int) -> None:
        if container.key is None:
            if self._options.require_basic_dict_keys and not isinstance(node, BasicNode):
                raise InvalidDictionaryKeyError(node.kind, start)
            container.key = node
        elif container.value is None:
            container.value = node
        else:
            raise DictionaryOverflowError(start)


def build_tree(
    tokens: Iterable[TokenKind],
    options: ParserOptions | None = None,
) -> SignatureTree:
    """Build the parse tree for a token sequence; the offset of a token is its index."""
    builder = TreeBuilder(options)
    for offset, kind in enumerate(tokens):
        builder.feed(kind, offset)
    return builder.finish()
