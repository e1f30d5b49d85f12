"""Build agents from ``key=value`` configuration strings."""

from __future__ import annotations

from enum import Enum

from ai.base_ai import BaseAI, parse_meta
from ai.mcts_ai import MCTSAI
from ai.random_ai import RandomAI


class AgentKind(str, Enum):
    """The fixed set of agent variants."""

    RANDOM = "random"
    MCTS = "MCTS"


def agent_kind(args: str = "") -> AgentKind:
    """``search=MCTS`` selects tree search; ``search=random`` or no key selects random play."""
    meta = parse_meta(args)
    if "search" not in meta:
        return AgentKind.RANDOM
    search = meta["search"]
    try:
        return AgentKind(search)
    except ValueError:
        raise ValueError(f"Unsupported search: {search}") from None


def build_agent(args: str = "") -> BaseAI:
    kind = agent_kind(args)
    if kind is AgentKind.MCTS:
        return MCTSAI(args)
    return RandomAI(args)
