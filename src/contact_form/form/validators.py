"""問い合わせフォーム各項目の Validator を提供する。

入出力: 入力値 -> エラーメッセージ(str) | None。
制約:
    - 有効な場合は None、不正な場合は固定の英語メッセージを返す
    - すべて副作用のない純粋関数とする

Note:
    - email は '@' と後続の '.' のみを確認する簡易判定（a@b. は通過する）
    - phone は区切り文字を無視して数字の個数だけを数える
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from contact_form.form.models import FormField, FormFields

NAME_MIN_LENGTH = 2
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

NAME_ERROR = "Name must be at least 2 characters"
EMAIL_ERROR = "Email must contain '@' and a '.' after it"
PHONE_ERROR = "Phone number must contain 10 to 15 digits"
TERMS_ERROR = "You must agree to the terms"


def validate_name(value: str) -> str | None:
    """前後の空白を除いて2文字以上なら有効とする。"""
    if len(value.strip()) >= NAME_MIN_LENGTH:
        return None
    return NAME_ERROR


def validate_email(value: str) -> str | None:
    """先頭以外に '@' があり、その後ろに '.' があれば有効とする。

    Args:
        value: 入力されたメールアドレス

    Returns:
        str | None: 不正な場合はエラーメッセージ

    Note:
        - 判定に使う '@' は最初に現れたもの
    """
    at = value.find("@")
    if at <= 0:
        return EMAIL_ERROR
    if value.find(".", at + 1) == -1:
        return EMAIL_ERROR
    return None


def validate_phone(value: str) -> str | None:
    """数字の個数が10〜15個なら有効とする。"""
    digits = sum(1 for ch in value if ch.isdecimal())
    if PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS:
        return None
    return PHONE_ERROR


def validate_terms(agreed: bool) -> str | None:
    """規約に同意済みなら有効とする。"""
    if agreed is True:
        return None
    return TERMS_ERROR


VALIDATORS: dict[FormField, Callable[[Any], str | None]] = {
    FormField.NAME: validate_name,
    FormField.EMAIL: validate_email,
    FormField.PHONE: validate_phone,
    FormField.TERMS: validate_terms,
}


def value_of(fields: FormFields, form_field: FormField) -> Any:
    """項目に対応する現在値を返す。"""
    if form_field is FormField.TERMS:
        return fields.agreed
    return getattr(fields, form_field.value)


def run_validator(fields: FormFields, form_field: FormField) -> str | None:
    """現在値に対して項目の Validator を実行する。"""
    return VALIDATORS[form_field](value_of(fields, form_field))
