from __future__ import annotations

from functools import lru_cache
from typing import Any, Generic, List, NamedTuple, Optional, TypeVar, Union

from pydantic import ConfigDict, TypeAdapter

T = TypeVar("T")


class Lookup(NamedTuple):
    """
    peek / dequeue / pop の戻り値
    ok が False のとき value はゼロ値なので参照しないこと
    """
    value: Any
    ok: bool


@lru_cache(maxsize=None)
def _list_adapter(element_type: Any) -> TypeAdapter:
    # strict: "1" や true を int として受け付けない
    # NaN / Infinity は null ではなくリテラルで書き出す（json モジュールと同じ）
    config = ConfigDict(strict=True, ser_json_inf_nan="constants")
    return TypeAdapter(List[element_type], config=config)


def zero_value(element_type: Any) -> Any:
    """
    T のゼロ値
    引数なしで生成できるクラスなら element_type()（int -> 0, str -> ""）、
    それ以外（Any, Union, 引数必須のクラス）は None
    """
    if not isinstance(element_type, type):
        return None
    try:
        return element_type()
    except (TypeError, ValueError):
        return None


class ArrayCodec(Generic[T]):
    """
    T の同種配列 <-> JSON
    要素のエンコード/デコードは pydantic に任せる
    """

    def __init__(self, element_type: Any = Any) -> None:
        self.element_type = element_type
        self._adapter = _list_adapter(element_type)

    def encode(self, values: List[T]) -> bytes:
        return self._adapter.dump_json(values)

    def decode(self, data: Union[bytes, str]) -> List[T]:
        """
        配列全体をデコードしてから返す（途中までの結果は返さない）
        失敗時は pydantic.ValidationError をそのまま送出
        """
        return self._adapter.validate_json(data)

    def describe(self) -> str:
        name: Optional[str] = getattr(self.element_type, "__name__", None)
        return name or repr(self.element_type)
