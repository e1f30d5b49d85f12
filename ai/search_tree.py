"""Search tree for Monte-Carlo tree search.

Nodes live in a flat arena (``SearchTree.nodes``) and refer to each other by
index: children are index lists, the parent is an index with ``NO_PARENT``
for the root. A tree is built for one decision and dropped afterwards.

Win counts are always kept from the searching agent's perspective.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from engine.action import Placement
from engine.board import Board, PlaceResult
from engine.pieces import Side

NO_PARENT = -1
ROOT = 0
DEFAULT_EXPLORATION = math.sqrt(2.0)


@dataclass
class SearchNode:
    """One vertex of the search tree."""

    board: Board
    move: Optional[Placement] = None
    parent: int = NO_PARENT
    children: List[int] = field(default_factory=list)
    visit_count: int = 0
    win_count: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def win_rate(self) -> float:
        if self.visit_count == 0:
            return 0.0
        return self.win_count / self.visit_count

    def __repr__(self) -> str:
        return (
            f"SearchNode(move={self.move}, win={self.win_count}, "
            f"visit={self.visit_count}, children={len(self.children)})"
        )


class SearchTree:
    """Arena of search nodes rooted at a snapshot of the current board."""

    def __init__(self, board: Board) -> None:
        self.nodes: List[SearchNode] = [SearchNode(board=board.clone())]

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> SearchNode:
        return self.nodes[ROOT]

    def node(self, index: int) -> SearchNode:
        return self.nodes[index]

    def add_child(self, parent: int, move: Placement, board: Board) -> int:
        """Append a child owning ``board`` and link it under parent."""
        index = len(self.nodes)
        self.nodes.append(SearchNode(board=board, move=move, parent=parent))
        self.nodes[parent].children.append(index)
        return index

    def expand(self, index: int, space: List[Placement], rng: random.Random) -> int:
        """Add one child per legal placement in ``space``, in shuffled order.

        ``space`` is shuffled in place. Returns the number of children added;
        zero means the node is terminal for the side owning ``space``.
        """
        node = self.nodes[index]
        rng.shuffle(space)
        added = 0
        for move in space:
            after = node.board.clone()
            if move.apply(after) is PlaceResult.LEGAL:
                self.add_child(index, move, after)
                added += 1
        return added

    def ucb_score(self, parent: int, child: int, exploration: float = DEFAULT_EXPLORATION, invert: bool = False) -> float:
        """UCB1 score of a visited child; ``invert`` scores for the opponent."""
        parent_node = self.nodes[parent]
        child_node = self.nodes[child]
        exploit = child_node.win_count / child_node.visit_count
        if invert:
            exploit = 1.0 - exploit
        # exploration == sqrt(2) gives sqrt(2 * ln(N) / n)
        explore = exploration * math.sqrt(math.log(parent_node.visit_count) / child_node.visit_count)
        return exploit + explore

    def select_child(self, index: int, exploration: float = DEFAULT_EXPLORATION, perspective: Optional[Side] = None) -> int:
        """Pick the first unvisited child, else the first child with maximal UCB1."""
        node = self.nodes[index]
        invert = perspective is not None and node.board.to_move is not perspective
        best_child = NO_PARENT
        best_score = -math.inf
        for child in node.children:
            if self.nodes[child].visit_count == 0:
                return child
            score = self.ucb_score(index, child, exploration, invert)
            if score > best_score:
                best_child = child
                best_score = score
        return best_child

    def select(self, exploration: float = DEFAULT_EXPLORATION, perspective: Optional[Side] = None) -> int:
        """Descend from the root to the first node without children."""
        index = ROOT
        while self.nodes[index].children:
            index = self.select_child(index, exploration, perspective)
        return index

    def backpropagate(self, index: int, win: bool) -> None:
        """Credit one visit, and the win if any, to index and every ancestor."""
        reward = 1 if win else 0
        while index != NO_PARENT:
            node = self.nodes[index]
            node.visit_count += 1
            node.win_count += reward
            index = node.parent

    def depth(self, index: int) -> int:
        depth = 0
        while self.nodes[index].parent != NO_PARENT:
            index = self.nodes[index].parent
            depth += 1
        return depth

    def best_child(self) -> Optional[int]:
        """Root child with the highest win rate; unvisited children never win.

        The first child is the starting candidate even when unvisited, so it
        is returned when no child has been visited at all.
        """
        children: Sequence[int] = self.root.children
        if not children:
            return None
        best = children[0]
        first = self.nodes[best]
        best_rate = first.win_rate if first.visit_count > 0 else -math.inf
        for child in children:
            node = self.nodes[child]
            if node.visit_count == 0:
                continue
            if node.win_rate > best_rate:
                best = child
                best_rate = node.win_rate
        return best

    def best_move(self) -> Optional[Placement]:
        best = self.best_child()
        if best is None:
            return None
        return self.nodes[best].move
