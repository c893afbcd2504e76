from __future__ import annotations

from .data import PORTFOLIO
from .models import Portfolio

__all__ = ["PORTFOLIO", "Portfolio"]
