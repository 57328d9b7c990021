from collections.abc import Callable
from typing import Any

import pytest

from domain_guard.core.domain.guard import GuardRule

SAMPLE_DIFF = """\
diff --git a/app.py b/app.py
index 83db48f..bf269f4 100644
--- a/app.py
+++ b/app.py
@@ -1,3 +1,4 @@
 import os
-print("old")
+print("new")
+# TODO fix
diff --git a/services/billing/invoice.py b/services/billing/invoice.py
index 1111111..2222222 100644
--- a/services/billing/invoice.py
+++ b/services/billing/invoice.py
@@ -10,2 +10,2 @@ def total():
-    total = 0
+    total = compute()
diff --git a/docs/readme.md b/docs/readme.md
--- a/docs/readme.md
+++ b/docs/readme.md
@@ -1 +1 @@
-Hello
+Hello world
"""


@pytest.fixture
def sample_diff() -> str:
    return SAMPLE_DIFF


@pytest.fixture
def make_rule() -> Callable[..., GuardRule]:
    """Build a GuardRule the way a configuration file would declare it."""

    def _make_rule(
        name: str,
        scope_dir: str = ".",
        paths: list[str] | None = None,
        filters: dict[str, Any] | None = None,
        actions: dict[str, Any] | None = None,
    ) -> GuardRule:
        raw: dict[str, Any] = {}
        if paths is not None:
            raw["paths"] = paths
        if filters is not None:
            raw["filters"] = filters
        if actions is not None:
            raw["actions"] = actions
        return GuardRule.from_config(name, raw, scope_dir)

    return _make_rule
