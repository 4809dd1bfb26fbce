"""フィーチャーフラグのデータモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ParameterValue = str | int | float | bool


@dataclass
class FlagStrategy:
    """フラグのアクティベーション戦略。"""

    name: str
    parameters: dict[str, ParameterValue] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FlagStrategy:
        return cls(
            name=data.get("name", ""),
            parameters=dict(data.get("parameters") or {}),
        )


@dataclass
class FlagValue:
    """サーバーから返されるフィーチャーフラグ 1 件。"""

    name: str
    enabled: bool
    description: str | None = None
    strategies: list[FlagStrategy] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FlagValue:
        """API レスポンスの features 要素から FlagValue を生成する。

        レコード形状の検証は行わない。欠けたキーはデフォルト値になる。
        strategies は受信順のまま保持する。
        """
        return cls(
            name=data.get("name", ""),
            enabled=bool(data.get("enabled", False)),
            description=data.get("description"),
            strategies=[
                FlagStrategy.from_dict(s) for s in data.get("strategies") or []
            ],
        )
