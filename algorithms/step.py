"""
step.py — Traversal Step Snapshot
==================================
The planner produces an ordered tuple of TraversalStep objects ahead of
time.  A step is one discrete unit of the traversal: "visit this node
now and append its value to the result".

Design decisions:
  - Step is a frozen dataclass.  The planner is the only writer; the
    stepper and the renderer are pure readers.
  - Steps only carry ids and values, never node references, so a plan
    can be serialised into the session next to the tree.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


VISIT_ROOT = "visit_root"


@dataclass(frozen=True)
class TraversalStep:
    """
    Attributes:
        step_number     : 0-based index of this step in the plan.
        action          : What happens at this step (always "visit_root").
        node_id         : Id of the node being visited.
        value           : Value appended to the result sequence.
        pseudocode_line : 0-based index of the pseudocode line executing now.
        explanation     : Human-readable description for the step panel.
    """

    step_number:     int
    node_id:         str
    value:           int
    action:          str = VISIT_ROOT
    pseudocode_line: int = 0
    explanation:     str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TraversalStep":
        return cls(**data)
