from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EasypanelModel(BaseModel):
    """
    Base model for Easypanel payloads.
    Wire names are camelCase; Python attributes stay snake_case.
    Unknown fields are ignored so newer panels don't break decoding.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# --- Auth ---


class User(EasypanelModel):
    id: str = ""
    created_at: str = ""
    email: str = ""
    admin: bool = False


# --- Projects ---


class ProjectName(EasypanelModel):
    name: str


class ProjectQuery(EasypanelModel):
    project_name: str


class ProjectInfo(EasypanelModel):
    name: str = ""
    created_at: str = ""


# --- Services: inputs ---


class SelectService(EasypanelModel):
    project_name: str
    service_name: str
    password: Optional[str] = None
    root_password: Optional[str] = None
    image: Optional[str] = None


class DomainParams(EasypanelModel):
    host: str
    https: Optional[bool] = None
    port: Optional[int] = None
    path: Optional[str] = None


class CreateServiceParams(SelectService):
    domains: Optional[List[DomainParams]] = None


class RedirectParams(EasypanelModel):
    regex: str
    replacement: str
    permanent: bool = False


class PortParams(EasypanelModel):
    protocol: str  # "tcp" or "udp"
    published: int
    target: int


class MountEntry(EasypanelModel):
    type: str  # "bind", "volume", "file"
    host_path: Optional[str] = None
    name: Optional[str] = None
    content: Optional[str] = None
    mount_path: str


class MountParams(SelectService):
    mounts: List[MountEntry] = Field(default_factory=list)


class UserParams(EasypanelModel):
    username: str
    password: str


class DeployParams(SelectService):
    replicas: int = 1
    command: List[str] = Field(default_factory=list)
    zero_downtime: bool = False
    cap_add: List[str] = Field(default_factory=list)
    cap_drop: List[str] = Field(default_factory=list)
    sysctls: List[str] = Field(default_factory=list)


class Resources(EasypanelModel):
    cpu_limit: float = 0
    cpu_reservation: float = 0
    memory_limit: float = 0
    memory_reservation: float = 0


class UpdateResources(SelectService):
    resources: Resources = Field(default_factory=Resources)


class UpdateBuildParams(SelectService):
    # "nixpacks", "herokuBuildpacks", "dockerfile", "none"
    build_type: Optional[str] = Field(default=None, alias="type")


class UpdateGithub(SelectService):
    owner: str
    repo: str
    branch: str
    path: Optional[str] = None
    auto_deploy: bool = False


class UpdateGit(SelectService):
    repo: str
    branch: str
    path: Optional[str] = None
    auto_deploy: bool = False


class UpdateImage(EasypanelModel):
    project_name: str
    service_name: str
    image: str
    username: Optional[str] = None
    password: Optional[str] = None


class UpdateEnv(SelectService):
    env: str


class UpdateRedirects(SelectService):
    redirects: List[RedirectParams] = Field(default_factory=list)


class UpdateBasicAuth(SelectService):
    basic_auth: List[UserParams] = Field(default_factory=list)


class UpdatePorts(SelectService):
    ports: List[PortParams] = Field(default_factory=list)


class ExposeServiceParams(SelectService):
    exposed_port: int


class UpdateAdvancedParams(SelectService):
    hostname: Optional[str] = None


class UpdateBackupParams(SelectService):
    pass


class UpdateSourceInline(EasypanelModel):
    project_name: str
    service_name: str
    compose_file: str
    compose_content: str


class UpdateSourceGitCompose(EasypanelModel):
    project_name: str
    service_name: str
    repo: str
    ref: str
    root_path: Optional[str] = None
    compose_file: Optional[str] = None
    auto_deploy: bool = False


# --- Services: outputs ---


class ServiceSource(EasypanelModel):
    type: Optional[str] = None
    auto_deploy: bool = False
    owner: Optional[str] = None
    repo: Optional[str] = None
    branch: Optional[str] = None
    ref: Optional[str] = None
    path: Optional[str] = None
    image: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


class Service(EasypanelModel):
    project_name: str = ""
    service_name: str = ""
    # some endpoints return "name" instead of "serviceName"
    name: Optional[str] = None
    type: str = ""
    enabled: bool = False
    token: str = ""
    env: Optional[str] = None
    command: Optional[str] = None
    image: Optional[str] = None
    password: Optional[str] = None
    root_password: Optional[str] = None
    deploy: Optional[DeployParams] = None
    domains: List[DomainParams] = Field(default_factory=list)
    mounts: List[MountEntry] = Field(default_factory=list)
    ports: List[PortParams] = Field(default_factory=list)
    redirects: List[RedirectParams] = Field(default_factory=list)
    basic_auth: List[UserParams] = Field(default_factory=list)
    exposed_port: Optional[int] = None
    deployment_url: Optional[str] = None
    source: Optional[ServiceSource] = None
    resources: Resources = Field(default_factory=Resources)

    @property
    def display_name(self) -> str:
        return self.service_name or self.name or ""


class ProjectInspect(EasypanelModel):
    project: ProjectInfo = Field(default_factory=ProjectInfo)
    services: List[Service] = Field(default_factory=list)


class ProjectsWithServices(EasypanelModel):
    projects: List[ProjectInfo] = Field(default_factory=list)
    services: List[Service] = Field(default_factory=list)


# --- Monitor ---


class TimeValue(EasypanelModel):
    value: str = ""
    time: str = ""


class NetworkValue(EasypanelModel):
    input: int = 0
    output: int = 0


class NetworkTimeValue(EasypanelModel):
    value: NetworkValue = Field(default_factory=NetworkValue)
    time: str = ""


class AdvancedStats(EasypanelModel):
    cpu: List[TimeValue] = Field(default_factory=list)
    disk: List[TimeValue] = Field(default_factory=list)
    memory: List[TimeValue] = Field(default_factory=list)
    network: List[NetworkTimeValue] = Field(default_factory=list)


class MemInfo(EasypanelModel):
    total_mem_mb: float = 0
    used_mem_mb: float = 0
    free_mem_mb: float = 0
    used_mem_percentage: float = 0
    free_mem_percentage: float = 0


class DiskInfo(EasypanelModel):
    total_gb: str = ""
    used_gb: str = ""
    free_gb: str = ""
    used_percentage: str = ""
    free_percentage: str = ""


class CPUInfo(EasypanelModel):
    used_percentage: float = 0
    count: int = 0
    loadavg: List[float] = Field(default_factory=list)


class NetworkInfo(EasypanelModel):
    input_mb: float = 0
    output_mb: float = 0


class SystemStats(EasypanelModel):
    uptime: float = 0
    mem_info: MemInfo = Field(default_factory=MemInfo)
    disk_info: DiskInfo = Field(default_factory=DiskInfo)
    cpu_info: CPUInfo = Field(default_factory=CPUInfo)
    network: NetworkInfo = Field(default_factory=NetworkInfo)


class TaskStatus(EasypanelModel):
    actual: int = 0
    desired: int = 0


# service name -> task status
DockerTaskStats = Dict[str, TaskStatus]


class CPUStat(EasypanelModel):
    percent: float = 0


class MemoryStat(EasypanelModel):
    usage: int = 0
    percent: float = 0


class NetworkStat(EasypanelModel):
    in_: int = Field(default=0, alias="in")
    out: int = 0


class ContainerStat(EasypanelModel):
    cpu: CPUStat = Field(default_factory=CPUStat)
    memory: MemoryStat = Field(default_factory=MemoryStat)
    network: NetworkStat = Field(default_factory=NetworkStat)


class ContainerStats(EasypanelModel):
    id: str = ""
    stats: ContainerStat = Field(default_factory=ContainerStat)
    project_name: str = ""
    service_name: str = ""
    container_name: str = ""


# --- Settings ---


class ChangeCredentialsParams(EasypanelModel):
    email: str
    old_password: str
    new_password: str


class PruneDockerDailyParams(EasypanelModel):
    prune_docker_daily: bool


class GithubTokenParams(EasypanelModel):
    github_token: str


class PanelDomainParams(EasypanelModel):
    serve_on_ip: bool = False
    default_panel_domain: str = ""
    panel_domain: str = ""


class PanelDomain(EasypanelModel):
    serve_on_ip: bool = False
    panel_domain: str = ""
    default_panel_domain: str = ""


class TraefikConfParams(EasypanelModel):
    config: str


class LetsEncryptParams(EasypanelModel):
    lets_encrypt_email: str


# --- Domains ---


class ServiceDestination(EasypanelModel):
    protocol: str = "http"
    port: int = 80
    path: str = "/"
    project_name: str
    service_name: str
    compose_service: Optional[str] = None


class Domain(EasypanelModel):
    id: str
    https: bool = False
    host: str
    path: str = "/"
    middlewares: List[str] = Field(default_factory=list)
    certificate_resolver: str = ""
    wildcard: bool = False
    destination_type: str = ""
    service_destination: Optional[ServiceDestination] = None


CreateDomainParams = Domain
UpdateDomainParams = Domain


class DeleteDomainParams(EasypanelModel):
    id: str


class ListDomainsParams(EasypanelModel):
    project_name: str
    service_name: str


# --- Actions ---


class Action(EasypanelModel):
    id: str = ""
    type: str = ""
    status: str = ""  # "success", "error", "running"
    project_name: str = ""
    service_name: str = ""
    service_type: str = ""
    created_at: str = ""
    updated_at: str = ""


class ActionDetail(Action):
    log: str = ""


class ListActionsParams(EasypanelModel):
    project_name: str
    service_name: str


class GetActionParams(EasypanelModel):
    action_id: str


# --- Log streaming ---


class StreamLogsParams(EasypanelModel):
    project_name: str
    service_name: str
    token: str  # service deploy token, not the API token
    compose: bool = False

    @property
    def service_id(self) -> str:
        return f"{self.project_name}_{self.service_name}"


class LogMessage(EasypanelModel):
    output: str = ""
