from __future__ import annotations

from typing import List, TypeVar

from container import Container
from json_codec import Lookup
from models import Node

T = TypeVar("T")


class LinkedListQueue(Container[T]):
    """
    単方向リンクで実装した Queue（FIFO）
    enqueue/dequeue/peek: O(1)
    values/clear        : O(n)

    ※ _head は番兵ノード（値は使わない）。
      空のとき _tail は _head 自身を指すので enqueue は分岐なしで書ける。
    """

    label = "LinkedListQueue"

    def _reset(self) -> None:
        self._head: Node[T] = Node(value=None)  # type: ignore[arg-type]
        self._tail: Node[T] = self._head
        self._len = 0

    def _insert(self, item: T) -> None:
        self.enqueue(item)

    def enqueue(self, item: T) -> None:
        self._tail.next = Node(value=item)
        self._tail = self._tail.next
        self._len += 1

    def dequeue(self) -> Lookup:
        if self._len == 0:
            return self._absent()
        node = self._head.next
        self._head.next = node.next
        node.next = None
        self._len -= 1
        if self._len == 0:
            # 空になったら tail を番兵に戻す
            self._tail = self._head
        return Lookup(node.value, True)

    def peek(self) -> Lookup:
        if self._len == 0:
            return self._absent()
        return Lookup(self._head.next.value, True)

    def values(self) -> List[T]:
        """先頭（次に dequeue される要素）から順に"""
        result: List[T] = []
        node = self._head.next
        while node is not None:
            result.append(node.value)
            node = node.next
        return result

    def clear(self) -> None:
        # 各ノードのリンクを外してから進む
        node = self._head
        while node is not None:
            nxt = node.next
            node.next = None
            node = nxt
        self._tail = self._head
        self._len = 0
