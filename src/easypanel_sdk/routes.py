"""tRPC route constants and resource-kind substitution."""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union

from .core.errors import EasypanelBuildError

# Auth
GET_USER = "/api/trpc/auth.getUser"

# Projects
LIST_PROJECTS = "/api/trpc/projects.listProjects"
LIST_PROJECTS_AND_SERVICES = "/api/trpc/projects.listProjectsAndServices"
CAN_CREATE_PROJECT = "/api/trpc/projects.canCreateProject"
INSPECT_PROJECT = "/api/trpc/projects.inspectProject"
CREATE_PROJECT = "/api/trpc/projects.createProject"
DESTROY_PROJECT = "/api/trpc/projects.destroyProject"

# Monitor
GET_ADVANCED_STATS = "/api/trpc/monitor.getAdvancedStats"
GET_SYSTEM_STATS = "/api/trpc/monitor.getSystemStats"
GET_DOCKER_TASK_STATS = "/api/trpc/monitor.getDockerTaskStats"
GET_MONITOR_TABLE_DATA = "/api/trpc/monitor.getMonitorTableData"

# Settings
RESTART_EASYPANEL = "/api/trpc/settings.restartEasypanel"
GET_SERVER_IP = "/api/trpc/settings.getServerIp"
REFRESH_SERVER_IP = "/api/trpc/settings.refreshServerIp"
GET_GITHUB_TOKEN = "/api/trpc/settings.getGithubToken"
SET_GITHUB_TOKEN = "/api/trpc/settings.setGithubToken"
GET_PANEL_DOMAIN = "/api/trpc/settings.getPanelDomain"
SET_PANEL_DOMAIN = "/api/trpc/settings.setPanelDomain"
GET_LETS_ENCRYPT_EMAIL = "/api/trpc/settings.getLetsEncryptEmail"
SET_LETS_ENCRYPT_EMAIL = "/api/trpc/settings.setLetsEncryptEmail"
GET_TRAEFIK_CUSTOM_CONFIG = "/api/trpc/settings.getTraefikCustomConfig"
UPDATE_TRAEFIK_CUSTOM_CONFIG = "/api/trpc/settings.updateTraefikCustomConfig"
RESTART_TRAEFIK = "/api/trpc/settings.restartTraefik"
PRUNE_DOCKER_IMAGES = "/api/trpc/settings.pruneDockerImages"
PRUNE_DOCKER_BUILDER = "/api/trpc/settings.pruneDockerBuilder"
SET_PRUNE_DOCKER_DAILY = "/api/trpc/settings.setPruneDockerDaily"
CHANGE_CREDENTIALS = "/api/trpc/settings.changeCredentials"

# Domains
CREATE_DOMAIN = "/api/trpc/domains.createDomain"
UPDATE_DOMAIN = "/api/trpc/domains.updateDomain"
DELETE_DOMAIN = "/api/trpc/domains.deleteDomain"
LIST_DOMAINS = "/api/trpc/domains.listDomains"

# Logs
GET_SERVICE_LOGS = "/api/trpc/logs.getServiceLogs"
STREAM_LOGS_PATH = "/ws/serviceLogs"

# Actions
LIST_ACTIONS = "/api/trpc/actions.listActions"
GET_ACTION = "/api/trpc/actions.getAction"

# Service templates: "{type}" is replaced by a ServiceType tag
TYPE_PLACEHOLDER = "{type}"

CREATE_SERVICE = "/api/trpc/services.{type}.createService"
INSPECT_SERVICE = "/api/trpc/services.{type}.inspectService"
DESTROY_SERVICE = "/api/trpc/services.{type}.destroyService"
DEPLOY_SERVICE = "/api/trpc/services.{type}.deployService"
STOP_SERVICE = "/api/trpc/services.{type}.stopService"
RESTART_SERVICE = "/api/trpc/services.{type}.restartService"
DISABLE_SERVICE = "/api/trpc/services.{type}.disableService"
ENABLE_SERVICE = "/api/trpc/services.{type}.enableService"
EXPOSE_SERVICE = "/api/trpc/services.{type}.exposeService"
REFRESH_DEPLOY_TOKEN = "/api/trpc/services.{type}.refreshDeployToken"
UPDATE_SOURCE_GITHUB = "/api/trpc/services.{type}.updateSourceGithub"
UPDATE_SOURCE_GIT = "/api/trpc/services.{type}.updateSourceGit"
UPDATE_SOURCE_IMAGE = "/api/trpc/services.{type}.updateSourceImage"
UPDATE_BUILD = "/api/trpc/services.{type}.updateBuild"
UPDATE_ENV = "/api/trpc/services.{type}.updateEnv"
UPDATE_DOMAINS = "/api/trpc/services.{type}.updateDomains"
UPDATE_REDIRECTS = "/api/trpc/services.{type}.updateRedirects"
UPDATE_BASIC_AUTH = "/api/trpc/services.{type}.updateBasicAuth"
UPDATE_MOUNTS = "/api/trpc/services.{type}.updateMounts"
UPDATE_PORTS = "/api/trpc/services.{type}.updatePorts"
UPDATE_RESOURCES = "/api/trpc/services.{type}.updateResources"
UPDATE_DEPLOY = "/api/trpc/services.{type}.updateDeploy"
UPDATE_BACKUP = "/api/trpc/services.{type}.updateBackup"
UPDATE_ADVANCED = "/api/trpc/services.{type}.updateAdvanced"
UPDATE_SOURCE_INLINE = "/api/trpc/services.{type}.updateSourceInline"

# License templates: "{type}" is replaced by a LicenseType tag
GET_LICENSE_PAYLOAD = "/api/trpc/{type}License.getLicensePayload"
ACTIVATE_LICENSE = "/api/trpc/{type}License.activate"


class ServiceType(str, Enum):
    APP = "app"
    MYSQL = "mysql"
    MARIADB = "mariadb"
    POSTGRES = "postgres"
    MONGO = "mongo"
    REDIS = "redis"
    COMPOSE = "compose"


class LicenseType(str, Enum):
    LEMON = "lemon"
    PORTAL = "portal"


K = TypeVar("K", ServiceType, LicenseType)


def _coerce_kind(kind: Union[K, str], enum_cls: Type[K]) -> K:
    if isinstance(kind, enum_cls):
        return kind
    try:
        return enum_cls(kind)
    except ValueError as exc:
        allowed = ", ".join(k.value for k in enum_cls)
        raise EasypanelBuildError(
            f"Unknown {enum_cls.__name__} {kind!r}; expected one of: {allowed}"
        ) from exc


def _substitute(template: str, tag: str) -> str:
    if TYPE_PLACEHOLDER not in template:
        raise EasypanelBuildError(f"Route {template!r} has no {TYPE_PLACEHOLDER}")
    return template.replace(TYPE_PLACEHOLDER, tag, 1)


def service_route(template: str, kind: Union[ServiceType, str]) -> str:
    """Fill a services.{type}.* template, rejecting unknown service kinds."""
    return _substitute(template, _coerce_kind(kind, ServiceType).value)


def license_route(template: str, kind: Union[LicenseType, str]) -> str:
    """Fill a {type}License.* template, rejecting unknown license kinds."""
    return _substitute(template, _coerce_kind(kind, LicenseType).value)


__all__ = [
    "ServiceType",
    "LicenseType",
    "service_route",
    "license_route",
    "STREAM_LOGS_PATH",
]
