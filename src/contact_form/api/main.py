"""問い合わせフォームを操作する API エンドポイントを提供する。

入出力: GET /health, /form, /submissions/last / PUT /form/* / POST /form/submit, /form/clear -> JSONレスポンス。
制約:
    - /health は常に 200 と {"status":"ok"} を返す
    - 検証失敗の submit は 200 と ok=false を返し、エラーはデータとして返す
    - テキスト項目以外への PUT /form/fields/{field} は 422 を返す

Note:
    - API は UI 層の代わりにイベントを Engine へ中継するだけで、検証ロジックを持たない
    - 送信成功した Contact は SubmissionStore に渡し、Engine 自身は保持しない
    - ハンドラはすべて async def とし、await を持たないため Engine への操作はイベントループ上で1件ずつ実行される
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from enum import Enum

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from contact_form.config import configure_logging, get_settings
from contact_form.form.engine import FormValidationEngine, SubmissionError
from contact_form.form.models import FormField
from contact_form.form.navigation import ime_action, next_focus
from contact_form.form.submission_store import SubmissionStore

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """起動時にログ設定を行う。"""
    configure_logging(settings)
    yield


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
submission_store = SubmissionStore()
engine = FormValidationEngine(
    on_submitted=submission_store.save,
    policy=settings.revalidation_policy,
)


class TextField(str, Enum):
    """PUT /form/fields/{field} で受け付ける項目名。"""

    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"


class FieldChangeRequest(BaseModel):
    """/form/fields/{field} のリクエストボディ。

    Args:
        value: 新しい入力値
    """

    value: str


class TermsToggleRequest(BaseModel):
    """/form/terms のリクエストボディ。"""

    agreed: bool


@app.get("/health")
async def health() -> dict[str, str]:
    """ヘルスチェック結果を返す。

    Returns:
        dict[str, str]: サービス正常時に {"status": "ok"} を返す
    """
    return {"status": "ok"}


@app.get("/form")
async def get_form() -> dict[str, object]:
    """現在の入力値とエラーを返す。"""
    return engine.snapshot().to_dict()


@app.put("/form/fields/{field}")
async def change_field(field: TextField, req: FieldChangeRequest) -> dict[str, object]:
    """テキスト項目を更新し、再検証後の状態を返す。

    Args:
        field: 更新対象の項目名
        req: value を含む入力モデル

    Returns:
        dict[str, object]: 更新後の fields/errors
    """
    return engine.on_field_change(FormField(field.value), req.value).to_dict()


@app.put("/form/terms")
async def toggle_terms(req: TermsToggleRequest) -> dict[str, object]:
    """規約同意フラグを更新し、再検証後の状態を返す。"""
    return engine.on_terms_toggle(req.agreed).to_dict()


@app.post("/form/submit")
async def submit() -> dict[str, object]:
    """全項目を検証し、成功時は Contact を返す。

    Returns:
        dict[str, object]: ok/contact/invalid_fields/focus/form を含む結果

    Raises:
        HTTPException: 送信先への受け渡しに失敗した場合
    """
    try:
        result = engine.submit()
    except SubmissionError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    invalid_fields: dict[str, str] = {}
    if result.failure is not None:
        invalid_fields = {issue.field.value: issue.message for issue in result.failure.issues}

    return {
        "ok": result.ok,
        "contact": result.contact.to_dict() if result.contact is not None else None,
        "invalid_fields": invalid_fields,
        "focus": result.focus.to_dict(),
        "form": result.snapshot.to_dict(),
    }


@app.post("/form/clear")
async def clear() -> dict[str, object]:
    """入力値とエラーを初期状態に戻す。"""
    return engine.clear().to_dict()


@app.get("/form/navigation/{field}")
async def navigation(field: FormField) -> dict[str, str | None]:
    """項目の確定キー種別と Next 押下時の移動先を返す。"""
    target = next_focus(field)
    return {
        "ime_action": ime_action(field).value,
        "next_focus": target.value if target is not None else None,
    }


@app.get("/submissions/last")
async def last_submission() -> dict[str, object]:
    """最後に送信された Contact を返す。

    Raises:
        HTTPException: まだ送信がない場合
    """
    contact = submission_store.last()
    if contact is None:
        raise HTTPException(status_code=404, detail="no submission yet")
    return contact.to_dict()
