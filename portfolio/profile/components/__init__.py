from .sections import footer, last_edited_label, main_column, page_header
from .sidebar import sidebar

__all__ = ["footer", "last_edited_label", "main_column", "page_header", "sidebar"]
