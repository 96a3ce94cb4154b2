"""FastAPI REST API for furniture estimation.

Usage:
    uvicorn furniture_estimator.web:app --reload
"""

from furniture_estimator.web.app import app, create_app

__all__ = ["app", "create_app"]
