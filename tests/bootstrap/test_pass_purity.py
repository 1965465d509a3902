import re
from pathlib import Path

DISALLOWED = re.compile(r"\b(open|pathlib|subprocess|requests|socket|yaml)\b")

PACKAGE = Path(__file__).resolve().parents[2] / "book_pager"


def test_pagination_modules_have_no_io():
    targets = [
        *PACKAGE.joinpath("passes").glob("*.py"),
        *PACKAGE.joinpath("strategies").glob("*.py"),
    ]
    assert targets
    for p in targets:
        text = p.read_text(encoding="utf-8")
        assert not DISALLOWED.search(text), f"Disallowed I/O reference in {p}"
