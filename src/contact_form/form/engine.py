"""問い合わせフォームの入力値とエラー状態を管理する FormValidationEngine を提供する。

入出力: 編集/submit/clear イベント -> FormSnapshot / SubmitResult。
制約:
    - 編集された項目は毎回 Validator を再実行する
    - 入力不正は例外にせず、FormErrors のメッセージとして保持する
    - submit 成功時のみ Contact を生成し、Engine 自身は保持しない

Note:
    - 他項目の再検証範囲は RevalidationPolicy で切り替える
    - フォーカス移動・通知表示は呼び出し側の責務とし、FocusTarget だけを返す
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from enum import Enum

from contact_form.form.models import (
    TEXT_FIELDS,
    Contact,
    FocusTarget,
    FormErrors,
    FormField,
    FormFields,
    FormSnapshot,
    SubmitResult,
    ValidationFailure,
)
from contact_form.form.validators import run_validator

logger = logging.getLogger(__name__)


class RevalidationPolicy(str, Enum):
    """編集時に他項目をどこまで再検証するか。"""

    EDITED_AND_ERRORING = "edited_and_erroring"
    ALL = "all"


class SubmissionError(Exception):
    """送信先コラボレータの失敗を表す例外。

    Note:
        - 検証エラーではなく、submitted(Contact) の受け取り側で発生した例外を包む
    """


class FormValidationEngine:
    """入力値・エラー状態・状態遷移規則を保持するクラス。"""

    def __init__(
        self,
        on_submitted: Callable[[Contact], None] | None = None,
        policy: RevalidationPolicy = RevalidationPolicy.EDITED_AND_ERRORING,
    ) -> None:
        """Engine を空の状態で初期化する。

        Args:
            on_submitted: submit 成功時に Contact を受け取るコールバック
            policy: 編集時の再検証範囲
        """
        self.on_submitted = on_submitted
        self.policy = RevalidationPolicy(policy)
        self.fields = FormFields()
        self.errors = FormErrors()

    def on_field_change(self, form_field: FormField, value: str) -> FormSnapshot:
        """テキスト項目の値を更新し、再検証する。

        Args:
            form_field: NAME/EMAIL/PHONE のいずれか
            value: 新しい入力値

        Returns:
            FormSnapshot: 更新後の状態

        Raises:
            ValueError: テキスト項目以外が指定された場合、または value が文字列でない場合
        """
        form_field = FormField(form_field)
        if form_field not in TEXT_FIELDS:
            raise ValueError(f"{form_field.value} is not a text field")
        if not isinstance(value, str):
            raise ValueError("value must be a string")

        setattr(self.fields, form_field.value, value)
        self._revalidate(form_field)
        return self.snapshot()

    def on_terms_toggle(self, agreed: bool) -> FormSnapshot:
        """規約同意フラグを更新し、再検証する。

        Raises:
            ValueError: agreed が bool でない場合
        """
        if not isinstance(agreed, bool):
            raise ValueError("agreed must be a bool")

        self.fields.agreed = agreed
        self._revalidate(FormField.TERMS)
        return self.snapshot()

    def validate_all(self) -> bool:
        """全項目を検証してエラー状態を上書きする。

        Returns:
            bool: 全項目が有効な場合 True
        """
        for form_field in FormField:
            self.errors.set(form_field, run_validator(self.fields, form_field))
        return self.errors.is_clear()

    def submit(self) -> SubmitResult:
        """全項目を検証し、成功時は Contact を生成する。

        Returns:
            SubmitResult: 成功時は contact、失敗時は failure を持つ結果

        Raises:
            SubmissionError: on_submitted コールバックが失敗した場合

        Note:
            - 失敗時は不正な項目をすべて FocusTarget に載せる
            - 検証失敗は例外にしない
        """
        if not self.validate_all():
            failure = ValidationFailure.from_errors(self.errors)
            logger.info(
                "submit rejected: %s",
                ", ".join(f.value for f in failure.fields),
            )
            return SubmitResult(
                contact=None,
                failure=failure,
                focus=FocusTarget.invalid(failure.fields),
                snapshot=self.snapshot(),
            )

        contact = Contact.from_fields(self.fields)
        if self.on_submitted is not None:
            try:
                self.on_submitted(contact)
            except Exception as exc:
                raise SubmissionError("failed to hand off submitted contact") from exc

        logger.info("submit accepted")
        return SubmitResult(
            contact=contact,
            failure=None,
            focus=FocusTarget.cleared(),
            snapshot=self.snapshot(),
        )

    def clear(self) -> FormSnapshot:
        """入力値とエラーを初期状態に戻す。"""
        self.fields = FormFields()
        self.errors = FormErrors()
        logger.debug("form cleared")
        return self.snapshot()

    def snapshot(self) -> FormSnapshot:
        """描画用に現在の状態のコピーを返す。"""
        return FormSnapshot(fields=replace(self.fields), errors=replace(self.errors))

    def _revalidate(self, edited: FormField) -> None:
        """編集項目と、ポリシーに応じた他項目を再検証する。"""
        # 編集された項目は直前のエラー有無に関わらず再検証する。
        self.errors.set(edited, run_validator(self.fields, edited))

        for form_field in FormField:
            if form_field is edited:
                continue
            if self.policy is RevalidationPolicy.EDITED_AND_ERRORING and self.errors.get(form_field) is None:
                continue
            self.errors.set(form_field, run_validator(self.fields, form_field))

        logger.debug("revalidated after edit: field=%s", edited.value)
