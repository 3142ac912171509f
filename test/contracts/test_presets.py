"""presets.json の存在と構造を検証するテストを提供する。

入出力: presets.json 読み込み -> 構造検証・Engine での判定結果検証。
制約:
    - 各要素は label, fields, expect_ok を持つ
    - fields は name/email/phone/agreed の4項目を持つ

Note:
    - expect_ok は Engine の submit 結果と一致しなければならない
"""

import json
from pathlib import Path

import pytest

from contact_form.form.engine import FormValidationEngine
from contact_form.form.models import FormField

PRESETS_PATH = Path(__file__).parent.parent.parent / "src/contracts/presets.json"
PRESETS = json.loads(PRESETS_PATH.read_text(encoding="utf-8"))


def test_presets_file_exists():
    """presets ファイルが存在することを確認する。"""
    assert PRESETS_PATH.exists()


def test_presets_has_valid_and_invalid_entries():
    """成功例と失敗例の両方が含まれることを確認する。"""
    outcomes = {preset["expect_ok"] for preset in PRESETS}
    assert outcomes == {True, False}


def test_each_preset_has_label_and_fields():
    """各プリセットが label と4項目の fields を持つことを確認する。"""
    for preset in PRESETS:
        assert preset["label"].strip() != ""
        assert set(preset["fields"]) == {"name", "email", "phone", "agreed"}


@pytest.mark.parametrize("preset", PRESETS, ids=[p["label"] for p in PRESETS])
def test_preset_outcome_matches_engine(preset):
    """expect_ok が Engine の submit 結果と一致することを確認する。"""
    engine = FormValidationEngine()
    fields = preset["fields"]
    engine.on_field_change(FormField.NAME, fields["name"])
    engine.on_field_change(FormField.EMAIL, fields["email"])
    engine.on_field_change(FormField.PHONE, fields["phone"])
    engine.on_terms_toggle(fields["agreed"])

    assert engine.submit().ok is preset["expect_ok"]
