"""SubmissionStore の保存契約を検証するテスト。"""

from contact_form.form.models import Contact
from contact_form.form.submission_store import SubmissionStore


def test_last_returns_none_when_empty():
    """未保存時に None を返すことを確認する。"""
    assert SubmissionStore().last() is None


def test_last_returns_latest_contact():
    """最後に保存した Contact を返すことを確認する。"""
    store = SubmissionStore()
    store.save(Contact(name="Al", email="a@b.c", phone="5551234567", agreed=True))
    store.save(Contact(name="Bo", email="b@c.d", phone="5559876543", agreed=True))

    assert store.last().name == "Bo"
    assert store.count() == 2
