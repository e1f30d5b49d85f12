"""Monte-Carlo tree search AI for NoGo."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from ai.base_ai import as_int
from ai.random_ai import RandomAI
from ai.rollout import simulate
from ai.search_tree import DEFAULT_EXPLORATION, ROOT, SearchTree
from engine.action import Placement
from engine.board import Board

LOGGER = logging.getLogger(__name__)

DEFAULT_SIMULATIONS = 100


class TreeMode(str, Enum):
    """How far the tree grows below the root."""

    FLAT = "flat"
    RECURSIVE = "recursive"


class MCTSAI(RandomAI):
    """UCB1 search over the root's placements, scored by random rollouts.

    Metadata keys: ``simulations`` (iterations per decision, default 100),
    ``tree`` (``flat`` expands only the root; ``recursive`` keeps growing
    visited leaves), ``exploration`` (UCB1 constant, default sqrt(2)) and
    ``debug_top_k`` (children listed in DEBUG diagnostics).
    """

    def __init__(self, args: str = "") -> None:
        super().__init__(args)
        self.simulations = self.meta_value("simulations", DEFAULT_SIMULATIONS, as_int)
        if self.simulations < 0:
            raise ValueError(f"invalid simulations: {self.simulations}")
        tree = self.meta_value("tree", TreeMode.FLAT.value)
        try:
            self.tree_mode = TreeMode(tree)
        except ValueError:
            raise ValueError(f"invalid tree mode: {tree}") from None
        self.exploration = self.meta_value("exploration", DEFAULT_EXPLORATION, float)
        self.debug_top_k = max(1, self.meta_value("debug_top_k", 3, as_int))
        self.opponent_space: List[Placement] = []
        self.last_iterations = 0

    def choose_move(self, board: Board) -> Optional[Placement]:
        """Run the fixed iteration budget and return the best root placement."""
        self._ensure_space(board)
        self.last_iterations = 0
        tree = SearchTree(board)
        if tree.expand(ROOT, self.space, self._rng) == 0:
            LOGGER.debug("%s has no legal placement; passing", self.side.value)
            return None

        recursive = self.tree_mode is TreeMode.RECURSIVE
        perspective = self.side if recursive else None
        for _ in range(self.simulations):
            index = tree.select(self.exploration, perspective)
            if recursive:
                index = self._grow(tree, index)
            win = simulate(tree.node(index).board, self.side, self._rng)
            tree.backpropagate(index, win)
            self.last_iterations += 1

        best = tree.best_child()
        self._log_diagnostics(tree, best)
        return tree.node(best).move

    def _grow(self, tree: SearchTree, index: int) -> int:
        """Expand a previously visited leaf and step into its first child."""
        node = tree.node(index)
        if node.visit_count == 0:
            return index
        if node.board.to_move is self.side:
            space = self.space
        else:
            space = self._opponent_space(node.board.size)
        if tree.expand(index, space, self._rng) == 0:
            return index
        return node.children[0]

    def _opponent_space(self, size: int) -> List[Placement]:
        if not self.opponent_space or self.opponent_space[0].size != size:
            opponent = self.side.opponent()
            self.opponent_space = [Placement(index=i, side=opponent, size=size) for i in range(size * size)]
        return self.opponent_space

    def _log_diagnostics(self, tree: SearchTree, chosen: int) -> None:
        """Emit top-k root children when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        root = tree.root
        ranked = sorted(root.children, key=lambda child: tree.node(child).win_rate, reverse=True)
        for rank, child in enumerate(ranked[: self.debug_top_k], start=1):
            node = tree.node(child)
            LOGGER.debug(
                "Candidate #%d move=%s win=%d visit=%d rate=%.3f chosen=%s",
                rank,
                node.move,
                node.win_count,
                node.visit_count,
                node.win_rate,
                child == chosen,
            )
        LOGGER.debug(
            "MCTS %s picked %s after %d iterations (root %d/%d, %d nodes, mode=%s)",
            self.name,
            tree.node(chosen).move,
            self.last_iterations,
            root.win_count,
            root.visit_count,
            len(tree),
            self.tree_mode.value,
        )
