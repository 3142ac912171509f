"""キーボード操作順の宣言を検証するテスト。"""

from contact_form.form.models import FormField
from contact_form.form.navigation import FIELD_ORDER, ImeAction, first_invalid, ime_action, next_focus


def test_next_chain_is_name_email_phone():
    """Next で name -> email -> phone と移動することを確認する。"""
    assert next_focus(FormField.NAME) is FormField.EMAIL
    assert next_focus(FormField.EMAIL) is FormField.PHONE


def test_phone_is_done_and_has_no_next():
    """phone は Done（submit）で移動先がないことを確認する。"""
    assert ime_action(FormField.PHONE) is ImeAction.DONE
    assert next_focus(FormField.PHONE) is None


def test_checkbox_has_no_ime_action():
    """規約チェックには確定キーがないことを確認する。"""
    assert ime_action(FormField.TERMS) is ImeAction.NONE


def test_first_invalid_follows_screen_order():
    """指定順に関わらず画面順で最初の項目を返すことを確認する。"""
    assert first_invalid([FormField.TERMS, FormField.EMAIL]) is FormField.EMAIL
    assert first_invalid(reversed(FIELD_ORDER)) is FormField.NAME


def test_first_invalid_returns_none_when_empty():
    """項目がない場合は None を返すことを確認する。"""
    assert first_invalid([]) is None
