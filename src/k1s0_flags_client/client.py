"""FlagsClient 実装"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import httpx
import structlog

from .config import FlagsConfig, NormalizedFlagsConfig, normalize
from .models import FlagValue

logger = structlog.get_logger(__name__)


class FlagsClient(ABC):
    """フィーチャーフラグクライアント抽象基底クラス。

    init() で取得したフラグをメモリに保持し、同期アクセサで参照する。
    自動更新は行わないため、次の init() までは前回の結果を返す。
    """

    def __init__(self) -> None:
        self._flags: list[FlagValue] = []

    @abstractmethod
    async def init(self) -> None:
        """フラグを取得してキャッシュを置き換える。"""
        ...

    @abstractmethod
    def get_user_id(self) -> str | None:
        """設定されたユーザー ID を返す。未設定なら None。"""
        ...

    def get_flags(self) -> list[FlagValue]:
        """キャッシュ中の全フラグを受信順で返す。"""
        return self._flags

    def get_flag(self, flag_name: str) -> FlagValue | None:
        """名前が一致する最初のフラグを返す。"""
        for flag in self._flags:
            if flag.name == flag_name:
                return flag
        return None


def _parse_features(payload: Any) -> list[FlagValue] | None:
    """レスポンス JSON から features を取り出す。期待した形でなければ None。"""
    if not isinstance(payload, dict):
        return None
    features = payload.get("features")
    if not isinstance(features, list):
        return None
    if not all(isinstance(record, dict) for record in features):
        return None
    return [FlagValue.from_dict(record) for record in features]


class HttpFlagsClient(FlagsClient):
    """httpx を使ったフラグ取得クライアント。

    取得に失敗しても例外は送出せず、キャッシュを空にして警告ログを出す。
    """

    def __init__(self, config: FlagsConfig | None) -> None:
        super().__init__()
        self._config = normalize(config)

    @property
    def config(self) -> NormalizedFlagsConfig:
        return self._config

    def _build_headers(self) -> httpx.Headers:
        headers = httpx.Headers(
            {
                "Content-Type": "application/json",
                "UNLEASH-APPNAME": self._config.app_name or "",
                "UNLEASH-INSTANCEID": self._config.instance_id or "",
            }
        )
        # 同名ヘッダーは extra_http_headers 側で上書きする
        headers.update(self._config.extra_http_headers)
        return headers

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self._build_headers(),
            timeout=self._config.timeout_seconds,
        )

    async def init(self) -> None:
        await self._fetch_flags()

    def get_user_id(self) -> str | None:
        return self._config.user_id or None

    async def _fetch_flags(self) -> None:
        url = self._config.features_url
        try:
            async with self._make_client() as client:
                resp = await client.get(url)
            flags = _parse_features(resp.json())
        except Exception as e:
            logger.warning("Failed to fetch feature flags", url=url, error=str(e))
            self._flags = []
            return

        if flags is None:
            logger.warning(
                "Failed to fetch feature flags",
                url=url,
                error="response has no features list",
            )
            self._flags = []
            return

        logger.debug("Fetched feature flags", url=url, count=len(flags))
        self._flags = flags


class InMemoryFlagsClient(FlagsClient):
    """テスト用インメモリフラグクライアント。

    set_flags() で登録したフラグが次の init() でキャッシュに反映される。
    """

    def __init__(self, user_id: str | None = None) -> None:
        super().__init__()
        self._user_id = user_id
        self._staged: list[FlagValue] = []

    def set_flags(self, flags: list[FlagValue]) -> None:
        """次の init() で公開するフラグを設定する。"""
        self._staged = list(flags)

    async def init(self) -> None:
        self._flags = list(self._staged)

    def get_user_id(self) -> str | None:
        return self._user_id or None
