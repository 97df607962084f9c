from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    """
    単方向リンクのノード
    value を1つと、次ノードへのリンク（なければ None）を持つ
    """
    value: T
    next: Optional["Node[T]"] = None
