"""
visualizer.py — Visualizer State Container
===========================================
Single source of truth for one viewer: the tree, its plan, the stepper
(cursor / visited / result / playing) and the colour theme.

Every transition is a method; after each one the registered listeners
are called with the container so a render layer can redraw.  The tree
and the plan are only ever replaced together (regenerate / load_sample).

The playback epoch counts user actions that invalidate a scheduled tick
(advance, reset, play/pause, regenerate, load_sample).  An external timer
hands back the epoch it was armed under; `fire` ignores it once stale.

Usage:
    vis = Visualizer.sample()
    unsubscribe = vis.subscribe(lambda v: print(v.result))
    vis.advance()
    vis.regenerate(seed=7)
"""

import logging
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

from bintree import TreeNode, new_tree, node_count
from algorithms import TraversalStep, plan_inorder
from engine.stepper import Stepper, StepperState, DEFAULT_STEP_DELAY

logger = logging.getLogger(__name__)


THEMES = ("light", "dark")
DEFAULT_THEME = "light"

Listener = Callable[["Visualizer"], None]


class Visualizer:
    """
    Attributes:
        tree     : Root TreeNode with positions assigned (or None).
        plan     : Inorder plan for `tree`.
        stepper  : Playback over `plan`.
        theme    : "light" or "dark".
        epoch    : Playback epoch; bumped by every user action except the theme toggle.
    """

    def __init__(
        self,
        tree: Optional[TreeNode],
        theme: str = DEFAULT_THEME,
        delay: float = DEFAULT_STEP_DELAY,
    ):
        self.tree:    Optional[TreeNode]          = None
        self.plan:    Tuple[TraversalStep, ...]   = ()
        self.stepper: Stepper                     = Stepper(delay=delay)
        self.theme:   str                         = DEFAULT_THEME
        self.epoch:   int                         = 0
        self._listeners: List[Listener]           = []

        self.set_theme(theme)
        self._replace_tree(tree)

    @classmethod
    def sample(cls, theme: str = DEFAULT_THEME, delay: float = DEFAULT_STEP_DELAY) -> "Visualizer":
        return cls(new_tree(), theme=theme, delay=delay)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def advance(self) -> bool:
        taken = self.stepper.advance()
        self._bump()
        self._notify()
        return taken

    def tick(self, now: Optional[float] = None) -> bool:
        taken = self.stepper.tick(now)
        if taken:
            self._notify()
        return taken

    def fire(self, epoch: Optional[int] = None) -> bool:
        """
        Timer callback from an external scheduler.  A tick armed under an
        older epoch is dropped without touching the state.
        """
        if epoch is not None and epoch != self.epoch:
            logger.debug("Dropped tick for epoch %d (current %d)", epoch, self.epoch)
            return False
        taken = self.stepper.fire()
        if taken:
            self._notify()
        return taken

    def reset(self) -> None:
        self.stepper.reset()
        self._bump()
        self._notify()

    def toggle_play(self) -> None:
        self.stepper.toggle_play()
        self._bump()
        self._notify()

    def pause(self) -> None:
        self.stepper.pause()
        self._bump()
        self._notify()

    def regenerate(self, seed: Optional[int] = None) -> None:
        """Replace tree and plan with a fresh random tree."""
        self._replace_tree(new_tree(random_tree=True, seed=seed))
        self._bump()
        logger.info("Generated random tree with %d node(s)", node_count(self.tree))
        self._notify()

    def load_sample(self) -> None:
        self._replace_tree(new_tree())
        self._bump()
        self._notify()

    def toggle_theme(self) -> None:
        self.theme = "dark" if self.theme == "light" else "light"
        self._notify()

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self.theme = theme

    def _bump(self) -> None:
        self.epoch += 1

    def _replace_tree(self, tree: Optional[TreeNode]) -> None:
        self.tree = tree
        self.plan = plan_inorder(tree)
        self.stepper.load(self.plan)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def cursor(self) -> int:
        return self.stepper.cursor

    @property
    def state(self) -> StepperState:
        return self.stepper.state

    @property
    def visited(self) -> FrozenSet[str]:
        return self.stepper.visited

    @property
    def result(self) -> Tuple[int, ...]:
        return self.stepper.result

    @property
    def is_playing(self) -> bool:
        return self.stepper.is_playing

    @property
    def is_dark(self) -> bool:
        return self.theme == "dark"

    # ------------------------------------------------------------------
    # Serialisation  (Flask session)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "tree":       self.tree.to_dict() if self.tree else None,
            "plan":       [s.to_dict() for s in self.plan],
            "cursor":     self.cursor,
            "is_playing": self.is_playing,
            "theme":      self.theme,
            "delay":      self.stepper.delay,
            "epoch":      self.epoch,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Visualizer":
        """
        Rebuild from a session dict.  Visited set and result are not
        stored; they are replayed from the cursor so they always match
        the plan.
        """
        tree = TreeNode.from_dict(data["tree"]) if data.get("tree") else None
        vis = cls(tree, theme=data.get("theme", DEFAULT_THEME),
                  delay=data.get("delay", DEFAULT_STEP_DELAY))

        stored_plan = tuple(TraversalStep.from_dict(s) for s in data.get("plan", []))
        if stored_plan and stored_plan != vis.plan:
            raise ValueError("Stored plan does not match stored tree")

        for _ in range(int(data.get("cursor", -1)) + 1):
            if not vis.stepper.advance():
                break
        if data.get("is_playing"):
            vis.stepper.play()
        vis.epoch = int(data.get("epoch", 0))
        return vis
