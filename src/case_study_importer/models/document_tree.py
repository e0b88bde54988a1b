"""
Document tree data model.

Immutable node and mark types for the rich-document format consumed by the
case study editor and renderer. The JSON shape matches the editor's
(TipTap/ProseMirror) ``JSONContent``::

    {"type": "paragraph", "content": [{"type": "text", "text": "Hi",
                                       "marks": [{"type": "bold"}]}]}

Node types the compiler never produces (``image``, ``hardBreak``...) and
attributes it does not know about (``textAlign``...) are carried through
``from_dict``/``to_dict`` untouched.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..exceptions.import_exceptions import DocumentTreeError
from .enums import MarkType, NodeType


def _attrs_from_dict(data: Mapping[str, Any], owner: str) -> Dict[str, Any]:
    raw_attrs = data.get("attrs") or {}
    if not isinstance(raw_attrs, Mapping):
        raise DocumentTreeError(f"'attrs' of {owner} must be an object")
    return dict(raw_attrs)


@dataclass(frozen=True)
class Mark:
    """A single inline mark applied to a text node.

    Attributes:
        type: Mark type name (``bold``, ``italic``, ``link``...)
        attrs: Mark attributes, e.g. ``{"href": ...}`` for links
    """
    type: str
    attrs: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, mark_type: MarkType, **attrs: Any) -> "Mark":
        """Build a mark from a known mark type."""
        return cls(type=mark_type.value, attrs=dict(attrs))

    @classmethod
    def link(cls, href: str) -> "Mark":
        return cls.of(MarkType.LINK, href=href)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Mark":
        if not isinstance(data, Mapping) or not isinstance(data.get("type"), str):
            raise DocumentTreeError(f"Mark must be an object with a string 'type', got: {data!r}")
        return cls(type=data["type"], attrs=_attrs_from_dict(data, f"{data['type']} mark"))


@dataclass(frozen=True)
class DocumentNode:
    """A node of the document tree.

    Block and container nodes carry ``content``; text nodes carry ``text``
    and ``marks``. ``content`` is ``None`` for nodes that have no content
    list at all (text, horizontal rules) and an empty tuple for containers
    that are present but empty.

    Attributes:
        type: Node type name
        content: Child nodes, or None for leaf nodes
        attrs: Node attributes (heading ``level``, code block ``language``...)
        text: Text value, only for ``text`` nodes
        marks: Marks applied to a text node, in application order
    """
    type: str
    content: Optional[Tuple["DocumentNode", ...]] = None
    attrs: Dict[str, Any] = field(default_factory=dict)
    text: Optional[str] = None
    marks: Tuple[Mark, ...] = ()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def text_node(cls, value: str, marks: Sequence[Mark] = ()) -> "DocumentNode":
        return cls(type=NodeType.TEXT.value, text=value, marks=tuple(marks))

    @classmethod
    def block(
        cls,
        node_type: NodeType,
        content: Sequence["DocumentNode"] = (),
        **attrs: Any
    ) -> "DocumentNode":
        return cls(type=node_type.value, content=tuple(content), attrs=dict(attrs))

    @classmethod
    def leaf(cls, node_type: NodeType, **attrs: Any) -> "DocumentNode":
        return cls(type=node_type.value, attrs=dict(attrs))

    @classmethod
    def doc(cls, content: Sequence["DocumentNode"]) -> "DocumentNode":
        return cls.block(NodeType.DOC, content)

    def with_content(self, content: Sequence["DocumentNode"]) -> "DocumentNode":
        """Return a copy of this node with its children replaced."""
        return replace(self, content=tuple(content))

    # -- inspection -----------------------------------------------------------

    @property
    def is_text(self) -> bool:
        return self.type == NodeType.TEXT.value

    @property
    def has_marks(self) -> bool:
        return bool(self.marks)

    @property
    def children(self) -> Tuple["DocumentNode", ...]:
        return self.content or ()

    def mark_types(self) -> List[str]:
        return [mark.type for mark in self.marks]

    def plain_text(self) -> str:
        """Concatenated text of all descendant text leaves."""
        if self.is_text:
            return self.text or ""
        return "".join(child.plain_text() for child in self.children)

    # -- serialization --------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to editor JSON, omitting absent fields."""
        data: Dict[str, Any] = {"type": self.type}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        if self.content is not None:
            data["content"] = [child.to_dict() for child in self.content]
        if self.text is not None:
            data["text"] = self.text
        if self.marks:
            data["marks"] = [mark.to_dict() for mark in self.marks]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentNode":
        """Build a node tree from editor JSON.

        Raises:
            DocumentTreeError: If a node is not an object or has no string type
        """
        if not isinstance(data, Mapping):
            raise DocumentTreeError(f"Document node must be an object, got: {type(data).__name__}")

        node_type = data.get("type")
        if not isinstance(node_type, str) or not node_type:
            raise DocumentTreeError(f"Document node is missing a 'type': {dict(data)!r}")

        raw_content = data.get("content")
        content: Optional[Tuple[DocumentNode, ...]] = None
        if raw_content is not None:
            if not isinstance(raw_content, list):
                raise DocumentTreeError(f"'content' of {node_type} node must be a list")
            content = tuple(cls.from_dict(child) for child in raw_content)

        raw_marks = data.get("marks") or []
        if not isinstance(raw_marks, list):
            raise DocumentTreeError(f"'marks' of {node_type} node must be a list")

        text = data.get("text")
        if text is not None and not isinstance(text, str):
            raise DocumentTreeError(f"'text' of {node_type} node must be a string")

        return cls(
            type=node_type,
            content=content,
            attrs=_attrs_from_dict(data, f"{node_type} node"),
            text=text,
            marks=tuple(Mark.from_dict(mark) for mark in raw_marks),
        )


def empty_document() -> DocumentNode:
    """A doc holding a single empty paragraph; never a degenerate empty doc."""
    return DocumentNode.doc([DocumentNode.block(NodeType.PARAGRAPH)])
