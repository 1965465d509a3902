# Auto-register passes on package import (e.g., when importing any submodule)
from . import passes  # noqa: F401
from .codepoints import truncate_by_code_points
from .core import paginate_document, split_to_pages_safe
from .options import PageOptions
from .titles import extract_title_from_file_name

__all__: list[str] = [
    "PageOptions",
    "extract_title_from_file_name",
    "paginate_document",
    "split_to_pages_safe",
    "truncate_by_code_points",
]
