"""Typed per-resource facades over the core transport."""

from .actions import ActionsResource
from .domains import DomainsResource
from .monitor import MonitorResource
from .projects import ProjectsResource
from .services import ServicesResource
from .settings import SettingsResource

__all__ = [
    "ActionsResource",
    "DomainsResource",
    "MonitorResource",
    "ProjectsResource",
    "ServicesResource",
    "SettingsResource",
]
