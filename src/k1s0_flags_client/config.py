"""クライアント設定の型定義と正規化"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError, ConfigurationErrorCodes

logger = structlog.get_logger(__name__)

DEFAULT_FEATURES_URI = "/api/client/features"


class FlagsConfig(BaseModel):
    """呼び出し側が渡す未正規化の設定。

    必須項目の検査は normalize() で行うため、ここでは全て省略可能にしている。
    url は host の旧名で、非推奨。
    """

    app_name: str | None = None
    instance_id: str | None = None
    user_id: str | None = None
    host: str | None = None
    url: str | None = None
    uri: str | None = None
    extra_http_headers: dict[str, str] = Field(default_factory=dict)
    timeout_seconds: float | None = None


class NormalizedFlagsConfig(BaseModel):
    """normalize() 済みの不変な設定。"""

    model_config = ConfigDict(frozen=True)

    app_name: str
    instance_id: str
    host: str
    uri: str
    user_id: str | None = None
    extra_http_headers: dict[str, str] = Field(default_factory=dict)
    timeout_seconds: float | None = None

    @property
    def features_url(self) -> str:
        # host と uri は区切り文字を補わずにそのまま連結する
        return f"{self.host}{self.uri}"


def normalize(config: FlagsConfig | None) -> NormalizedFlagsConfig:
    """設定を検証し、非推奨フィールドを移行した新しい設定を返す。

    入力の FlagsConfig は変更しない。

    Raises:
        ConfigurationError: 設定が無い、または host / app_name / instance_id が空の場合
    """
    if config is None:
        raise ConfigurationError(
            code=ConfigurationErrorCodes.MISSING_CONFIG,
            message="No config provided",
        )

    host = config.host
    if not host and config.url:
        host = config.url
        logger.warning("config.url is deprecated, use config.host instead", url=config.url)

    missing = [
        name
        for name, value in (
            ("host", host),
            ("app_name", config.app_name),
            ("instance_id", config.instance_id),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(
            code=ConfigurationErrorCodes.INCOMPLETE_CONFIG,
            message=f"Provided config is incomplete: missing {', '.join(missing)}",
        )

    return NormalizedFlagsConfig(
        app_name=config.app_name,
        instance_id=config.instance_id,
        host=host,
        uri=config.uri or DEFAULT_FEATURES_URI,
        user_id=config.user_id,
        extra_http_headers=dict(config.extra_http_headers),
        timeout_seconds=config.timeout_seconds,
    )


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            code=ConfigurationErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            code=ConfigurationErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            code=ConfigurationErrorCodes.PARSE_YAML,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def load_config(path: Path, section: str = "flags") -> FlagsConfig:
    """YAML ファイルから FlagsConfig を読み込む。

    path: 設定ファイルパス
    section: フラグ設定を格納したトップレベルキー。存在しない場合はドキュメント全体を使う。
    """
    data = _read_yaml(path)
    raw = data.get(section, data)
    try:
        return FlagsConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(
            code=ConfigurationErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
