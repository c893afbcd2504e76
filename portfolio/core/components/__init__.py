from .splash import splash
from .theme_toggle import theme_toggle

__all__ = ["splash", "theme_toggle"]
