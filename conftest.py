"""pytest 実行時に `src/` 配下を import 可能にする設定を提供する。

入出力: pytest起動時の初期化 -> sys.path 更新。
制約:
    - アプリ本体は `src/` 配下のみを探索対象にする

Note:
    - `contact_form.*` を未インストールの状態でもテストから直接 import できるようにする
"""

import sys
from pathlib import Path

SRC_PATH = Path(__file__).parent / "src"

# インストール済みパッケージより作業ツリーを優先する。
sys.path.insert(0, str(SRC_PATH))
