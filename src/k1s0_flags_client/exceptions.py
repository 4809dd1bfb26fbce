"""flags_client ライブラリの例外型定義"""

from __future__ import annotations


class ConfigurationError(Exception):
    """クライアント設定が不正な場合のエラー。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ConfigurationErrorCodes:
    """ConfigurationError のエラーコード定数。"""

    MISSING_CONFIG: str = "MISSING_CONFIG"
    INCOMPLETE_CONFIG: str = "INCOMPLETE_CONFIG"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"
