"""フォームのキーボード操作順（IME Next/Done）を宣言的に提供する。

入出力: FormField -> ImeAction / 次のフォーカス先。
制約:
    - 画面順は name -> email -> phone -> terms で固定する
    - phone の Done は submit 要求として扱う

Note:
    - フォーカス移動そのものは UI 側の責務とし、ここでは行き先だけを返す
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from contact_form.form.models import FormField

FIELD_ORDER = (FormField.NAME, FormField.EMAIL, FormField.PHONE, FormField.TERMS)


class ImeAction(str, Enum):
    """ソフトウェアキーボードの確定キー種別。"""

    NEXT = "next"
    DONE = "done"
    NONE = "none"


_IME_ACTIONS = {
    FormField.NAME: ImeAction.NEXT,
    FormField.EMAIL: ImeAction.NEXT,
    FormField.PHONE: ImeAction.DONE,
    FormField.TERMS: ImeAction.NONE,
}

_NEXT_FOCUS = {
    FormField.NAME: FormField.EMAIL,
    FormField.EMAIL: FormField.PHONE,
}


def ime_action(form_field: FormField) -> ImeAction:
    """項目に割り当てる確定キー種別を返す。"""
    return _IME_ACTIONS[form_field]


def next_focus(form_field: FormField) -> FormField | None:
    """Next 押下時のフォーカス移動先を返す。

    Returns:
        FormField | None: 移動先がない場合は None（phone では submit を意味する）
    """
    return _NEXT_FOCUS.get(form_field)


def first_invalid(fields: Iterable[FormField]) -> FormField | None:
    """指定項目のうち画面順で最初のものを返す。"""
    flagged = set(fields)
    for form_field in FIELD_ORDER:
        if form_field in flagged:
            return form_field
    return None
