"""Exception types raised by the portfolio core."""

from __future__ import annotations


class PortfolioError(Exception):
    """Base class for every error raised by the portfolio package."""


class ThemeStoreError(PortfolioError):
    """The durable theme store could not be read or written."""


class SessionStateError(PortfolioError):
    """A session lifecycle method was called out of order."""
