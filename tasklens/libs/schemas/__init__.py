"""Pydantic models and settings."""

from .settings import AppSettings, get_settings
from .tasks import ClassificationPayload, TaskCreate

__all__ = ["AppSettings", "ClassificationPayload", "TaskCreate", "get_settings"]
