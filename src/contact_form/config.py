"""環境変数からアプリ設定を読み込む Settings を提供する。

入出力: 環境変数(CONTACT_FORM_*) -> Settings。
制約:
    - 未設定の項目は既定値で動作する
    - get_settings() はプロセス内で1インスタンスをキャッシュする

Note:
    - テストで設定を差し替える場合は get_settings.cache_clear() を呼ぶ
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from contact_form.form.engine import RevalidationPolicy


class Settings(BaseSettings):
    """アプリ設定。"""

    model_config = SettingsConfigDict(env_prefix="CONTACT_FORM_")

    app_name: str = "contact-form"
    log_level: str = Field(default="INFO", description="Logging level")
    revalidation_policy: RevalidationPolicy = Field(
        default=RevalidationPolicy.EDITED_AND_ERRORING,
        description="編集時に他項目をどこまで再検証するか",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """ログレベル名を大文字に揃え、未知の名前を拒否する。"""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """キャッシュ済みの Settings を返す。"""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """ルートロガーを設定値のレベルで初期化する。"""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
