from __future__ import annotations

from typing import List, TypeVar

from container import Container
from json_codec import Lookup
from models import Node

T = TypeVar("T")


class LinkedListStack(Container[T]):
    """
    単方向リンクで実装した Stack（LIFO）
    push: O(1)
    pop : O(1)

    JSON / 文字列表現は push 順（底が先頭）で出力する
    """

    label = "LinkedListStack"

    def _reset(self) -> None:
        self._head: Node[T] = Node(value=None)  # type: ignore[arg-type]
        self._len = 0

    def _insert(self, item: T) -> None:
        self.push(item)

    def push(self, item: T) -> None:
        self._head.next = Node(value=item, next=self._head.next)
        self._len += 1

    def pop(self) -> Lookup:
        if self._len == 0:
            return self._absent()
        node = self._head.next
        self._head.next = node.next
        node.next = None
        self._len -= 1
        return Lookup(node.value, True)

    def peek(self) -> Lookup:
        if self._len == 0:
            return self._absent()
        return Lookup(self._head.next.value, True)

    def values(self) -> List[T]:
        """top から順に（LIFO）"""
        result: List[T] = []
        node = self._head.next
        while node is not None:
            result.append(node.value)
            node = node.next
        return result

    def list_values(self) -> List[T]:
        """push 順（最初に push した要素が先頭）"""
        result: List[T] = [None] * self._len  # type: ignore[list-item]
        i = self._len - 1
        node = self._head.next
        while node is not None:
            result[i] = node.value
            i -= 1
            node = node.next
        return result

    def _serial_values(self) -> List[T]:
        return self.list_values()

    def clear(self) -> None:
        node = self._head
        while node is not None:
            nxt = node.next
            node.next = None
            node = nxt
        self._len = 0
