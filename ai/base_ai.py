"""Base AI interface and agent metadata."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Tuple, TypeVar

from engine.action import Placement
from engine.board import Board

DEFAULT_META = "name=unknown role=unknown"

T = TypeVar("T")


def _split_pair(pair: str) -> Tuple[str, str]:
    key, sep, value = pair.partition("=")
    # A bare token is stored as its own value.
    return key, value if sep else pair


def parse_meta(args: str = "") -> Dict[str, str]:
    """Parse whitespace-separated ``key=value`` pairs on top of the defaults.

    Later pairs override earlier ones, so ``role=black`` in args replaces the
    ``role=unknown`` default.
    """
    meta: Dict[str, str] = {}
    for pair in f"{DEFAULT_META} {args}".split():
        key, value = _split_pair(pair)
        meta[key] = value
    return meta


def as_int(value: str) -> int:
    """Numeric metadata is read as a float, then truncated ("7.0" -> 7)."""
    return int(float(value))


class BaseAI(ABC):
    """Abstract AI strategy contract with string metadata."""

    def __init__(self, args: str = "") -> None:
        self.args = args
        self.meta: Dict[str, str] = parse_meta(args)

    def open_episode(self, flag: str = "") -> None:
        """Called before a game starts."""

    def close_episode(self, flag: str = "") -> None:
        """Called after a game ends."""

    @property
    def name(self) -> str:
        return self.meta["name"]

    @property
    def role(self) -> str:
        return self.meta["role"]

    @abstractmethod
    def choose_move(self, board: Board) -> Optional[Placement]:
        """Choose a legal placement, or None when there is none."""
        raise NotImplementedError

    def property(self, key: str) -> str:
        return self.meta[key]

    def meta_value(self, key: str, default: Optional[T] = None, cast: Callable[[str], T] = str) -> Optional[T]:
        """Return meta[key] converted by cast, or default when the key is absent."""
        if key not in self.meta:
            return default
        return cast(self.meta[key])

    def notify(self, msg: str) -> None:
        """Store an out-of-band ``key=value`` message in the metadata."""
        key, value = _split_pair(msg)
        self.meta[key] = value
