from __future__ import annotations

import os

import reflex as rx


class PortfolioConfig(rx.Config):
    pass


config = PortfolioConfig(
    app_name="portfolio",
    api_url=os.environ.get("PORTFOLIO_API_URL", "http://localhost:8000"),
    deploy_url=os.environ.get("PORTFOLIO_DEPLOY_URL", "http://localhost:3000"),
)
