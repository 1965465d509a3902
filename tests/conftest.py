from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Callable, List
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from book_pager.options import PageOptions  # noqa: E402
from book_pager.strategies import paginate_text  # noqa: E402


@pytest.fixture
def paginate() -> Callable[..., List[str]]:
    """Return a helper running ``paginate_text`` with keyword options."""

    def _run(text: str, **opts) -> List[str]:
        return paginate_text(text, PageOptions(**opts))

    return _run


@pytest.fixture
def smart(paginate: Callable[..., List[str]]) -> Callable[..., List[str]]:
    return partial(paginate, strategy="smart")
