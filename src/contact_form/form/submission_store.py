"""送信成功した Contact を保持する SubmissionStore を提供する。

入出力: Contact の保存 / 最新 Contact(Contact|None) の取得。
制約:
    - インメモリ保存のみを扱い、再起動をまたいで保持しない
    - save/last のインターフェースを固定し、送信先の差し替えを可能にする

Note:
    - Contact は不変だが、保存時に replace でコピーして呼び出し側と共有しない
    - last() は未保存時に None を返す
"""

from __future__ import annotations

from dataclasses import replace

from contact_form.form.models import Contact


class SubmissionStore:
    """送信済み Contact をインメモリで保持するクラス。"""

    def __init__(self) -> None:
        """空の履歴で初期化する。"""
        self._contacts: list[Contact] = []

    def save(self, contact: Contact) -> None:
        """Contact を1件保存する。

        Args:
            contact: 送信成功時のスナップショット
        """
        self._contacts.append(replace(contact))

    def last(self) -> Contact | None:
        """最新の Contact を返す。

        Returns:
            Contact | None: 未送信の場合は None
        """
        if not self._contacts:
            return None
        return self._contacts[-1]

    def count(self) -> int:
        return len(self._contacts)
