"""問い合わせフォームの状態とバリデーション結果を表すデータ型を提供する。

入出力: なし（データ定義のみ）。
制約:
    - FormFields/FormErrors は Engine が所有する可変状態とする
    - Contact/FieldInvalid/ValidationFailure/SubmitResult は不変スナップショットとする

Note:
    - 入力不正は例外ではなく FieldInvalid としてデータで表現する
    - to_dict() は API 層の JSON 変換にそのまま使う
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class FormField(str, Enum):
    """フォームの入力項目。"""

    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    TERMS = "terms"


TEXT_FIELDS = (FormField.NAME, FormField.EMAIL, FormField.PHONE)


@dataclass
class FormFields:
    """現在の入力値。"""

    name: str = ""
    email: str = ""
    phone: str = ""
    agreed: bool = False


@dataclass
class FormErrors:
    """項目ごとのエラー表示状態。None は有効または未検証を表す。"""

    name_error: str | None = None
    email_error: str | None = None
    phone_error: str | None = None
    terms_error: str | None = None

    def get(self, form_field: FormField) -> str | None:
        """指定項目のエラーを返す。"""
        return getattr(self, _ERROR_SLOTS[form_field])

    def set(self, form_field: FormField, message: str | None) -> None:
        """指定項目のエラーを上書きする。"""
        setattr(self, _ERROR_SLOTS[form_field], message)

    def invalid_fields(self) -> tuple[FormField, ...]:
        """エラー表示中の項目を画面順で返す。"""
        return tuple(f for f in FormField if self.get(f) is not None)

    def is_clear(self) -> bool:
        """全項目のエラーが None かどうかを返す。"""
        return not self.invalid_fields()


_ERROR_SLOTS = {
    FormField.NAME: "name_error",
    FormField.EMAIL: "email_error",
    FormField.PHONE: "phone_error",
    FormField.TERMS: "terms_error",
}


@dataclass(frozen=True)
class Contact:
    """送信成功時に生成される入力値のスナップショット。"""

    name: str
    email: str
    phone: str
    agreed: bool

    @classmethod
    def from_fields(cls, fields: FormFields) -> Contact:
        """現在の入力値から Contact を生成する。"""
        return cls(
            name=fields.name,
            email=fields.email,
            phone=fields.phone,
            agreed=fields.agreed,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FieldInvalid:
    """1項目分の検証エラー。"""

    field: FormField
    message: str


@dataclass(frozen=True)
class ValidationFailure:
    """submit 失敗時に集約される検証エラー一覧。

    Note:
        - issues は画面順（name, email, phone, terms）で保持する
    """

    issues: tuple[FieldInvalid, ...]

    @property
    def fields(self) -> tuple[FormField, ...]:
        return tuple(issue.field for issue in self.issues)

    @classmethod
    def from_errors(cls, errors: FormErrors) -> ValidationFailure:
        """FormErrors のうち非 None の項目から生成する。"""
        return cls(
            issues=tuple(
                FieldInvalid(field=f, message=errors.get(f))
                for f in errors.invalid_fields()
            )
        )


@dataclass(frozen=True)
class FocusTarget:
    """submit 後に UI が行うべきフォーカス操作のヒント。

    Note:
        - clear=True の場合はフォーカスを外す
        - 失敗時は不正な項目をすべて fields に載せ、どれを優先するかは UI 側が決める
    """

    clear: bool
    fields: tuple[FormField, ...] = ()

    @classmethod
    def cleared(cls) -> FocusTarget:
        return cls(clear=True)

    @classmethod
    def invalid(cls, fields: tuple[FormField, ...]) -> FocusTarget:
        return cls(clear=False, fields=fields)

    def to_dict(self) -> dict[str, Any]:
        return {"clear": self.clear, "fields": [f.value for f in self.fields]}


@dataclass(frozen=True)
class FormSnapshot:
    """描画用の入力値とエラーのコピー。"""

    fields: FormFields
    errors: FormErrors

    def to_dict(self) -> dict[str, Any]:
        return {"fields": asdict(self.fields), "errors": asdict(self.errors)}


@dataclass(frozen=True)
class SubmitResult:
    """submit の結果。contact と failure はどちらか一方のみが入る。"""

    contact: Contact | None
    failure: ValidationFailure | None
    focus: FocusTarget
    snapshot: FormSnapshot | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.contact is not None
