"""Настройка роутеров приложения."""

from fastapi import FastAPI

from .health import HealthRouter
from .main import MainRouter
from .v1 import APIv1


def setup_routers(app: FastAPI):
    """
    Настраивает все роутеры для приложения FastAPI.
    """
    app.include_router(HealthRouter().get_router())
    app.include_router(MainRouter().get_router())

    app.include_router(APIv1().get_router(), prefix="/api/v1")
