from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, List, TypeVar, Union

from pydantic import ValidationError

from json_codec import ArrayCodec, Lookup, zero_value

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Container(ABC, Generic[T]):
    """
    リンクリスト系コンテナの共通部分

    - 長さ / 空判定 / 文字列表現
    - JSON 変換（_serial_values() の順で出力、_insert() で1件ずつ戻す）
    """

    label: str = "Container"

    def __init__(self, element_type: Any = Any) -> None:
        self._codec: ArrayCodec[T] = ArrayCodec(element_type)
        self._reset()

    # -------------------------
    # サブクラスで実装
    # -------------------------
    @abstractmethod
    def _reset(self) -> None:
        """番兵だけの空状態にする"""

    @abstractmethod
    def _insert(self, item: T) -> None:
        """1件追加（enqueue / push）"""

    @abstractmethod
    def values(self) -> List[T]:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    def _serial_values(self) -> List[T]:
        return self.values()

    # -------------------------
    # 共通
    # -------------------------
    @property
    def element_type(self) -> Any:
        return self._codec.element_type

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def _absent(self) -> Lookup:
        # ゼロ値は毎回作り直す（list / dict などを呼び出し側と共有しない）
        return Lookup(zero_value(self.element_type), False)

    def to_json(self) -> bytes:
        return self._codec.encode(self._serial_values())

    def from_json(self, data: Union[bytes, str]) -> None:
        """
        JSON 配列で中身を置き換える
        全要素のデコードに成功した場合のみ clear -> 1件ずつ追加。
        失敗時は ValidationError をそのまま送出し、中身は変更しない
        """
        try:
            items = self._codec.decode(data)
        except ValidationError as e:
            logger.warning(
                f"{self.label}: rejected JSON input for {self._codec.describe()} ({e.error_count()} errors)"
            )
            raise

        old_len = self._len
        self.clear()
        for item in items:
            self._insert(item)
        logger.debug(f"{self.label}: replaced {old_len} elements with {self._len} from JSON")

    def __str__(self) -> str:
        return f"{self.label}: {self.to_json().decode('utf-8')}"

    def __repr__(self) -> str:
        return str(self)
