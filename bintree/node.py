from typing import Optional, List, Dict, Any


# ---------------------------------------------------------------------------
# TreeNode
# ---------------------------------------------------------------------------
class TreeNode:
    """
    Immutable identity (id, value), mutable children and layout position.

    Attributes:
        id       : Unique, stable identifier within one tree.
        value    : Integer payload shown on the canvas and in the result list.
        left     : Left child (owned exclusively by this node) or None.
        right    : Right child or None.
        x, y     : Canvas coordinates, None until layout has run.
                   Never used for traversal.
    """

    __slots__ = ("_id", "_value", "left", "right", "x", "y")

    def __init__(
        self,
        value: int,
        node_id: Optional[str] = None,
        left: Optional["TreeNode"] = None,
        right: Optional["TreeNode"] = None,
    ):
        self._id: str                     = node_id if node_id is not None else str(value)
        self._value: int                  = value
        self.left: Optional["TreeNode"]   = left
        self.right: Optional["TreeNode"]  = right
        self.x: Optional[float]           = None
        self.y: Optional[float]           = None

    # ------------------------------------------------------------------
    # Identity (set once)
    # ------------------------------------------------------------------
    @property
    def id(self) -> str:
        return self._id

    @property
    def value(self) -> int:
        return self._value

    # ------------------------------------------------------------------
    # Structure helpers
    # ------------------------------------------------------------------
    def children(self) -> List["TreeNode"]:
        """Present children, left first."""
        return [c for c in (self.left, self.right) if c is not None]

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def is_positioned(self) -> bool:
        return self.x is not None and self.y is not None

    # ------------------------------------------------------------------
    # Serialisation  (session storage)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":    self.id,
            "value": self.value,
            "x":     self.x,
            "y":     self.y,
            "left":  self.left.to_dict() if self.left else None,
            "right": self.right.to_dict() if self.right else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TreeNode":
        node = cls(value=int(data["value"]), node_id=str(data["id"]))
        node.x = data.get("x")
        node.y = data.get("y")
        if data.get("left"):
            node.left = cls.from_dict(data["left"])
        if data.get("right"):
            node.right = cls.from_dict(data["right"])
        return node

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        pos = f"({self.x:.1f},{self.y:.1f})" if self.is_positioned else "unplaced"
        return f"TreeNode(id={self.id}, value={self.value}, pos={pos})"
