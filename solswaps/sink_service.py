"""Requests and responses of the sink deployment service."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from solswaps.substreams_models import Package


class DeploymentStatus(IntEnum):
    """Lifecycle state of a sink deployment."""

    UNKNOWN = 0
    RUNNING = 1
    FAILING = 2
    PAUSED = 3
    STOPPED = 4
    STARTING = 5
    PAUSING = 6
    STOPPING = 7
    REMOVING = 8
    RESUMING = 9

    def as_str_name(self) -> str:
        """Return the name used in the schema definition."""
        return self.name

    @classmethod
    def from_str_name(cls, value: str) -> Optional["DeploymentStatus"]:
        """Look a member up by its schema name; None when unknown."""
        return next((member for member in cls if member.as_str_name() == value), None)


@dataclass
class Parameter:
    key: str = ""
    value: str = ""


@dataclass
class DeployRequest:
    substreams_package: Optional[Package] = None
    development_mode: bool = False
    parameters: list[Parameter] = field(default_factory=list)


@dataclass
class DeployResponse:
    status: DeploymentStatus = DeploymentStatus.UNKNOWN
    # A short name (at most 8 characters) that identifies the deployment.
    deployment_id: str = ""
    services: dict[str, str] = field(default_factory=dict)
    reason: str = ""
    motd: str = ""


@dataclass
class UpdateRequest:
    substreams_package: Optional[Package] = None
    deployment_id: str = ""
    reset: bool = False


@dataclass
class UpdateResponse:
    status: DeploymentStatus = DeploymentStatus.UNKNOWN
    services: dict[str, str] = field(default_factory=dict)
    reason: str = ""
    motd: str = ""


@dataclass
class InfoRequest:
    deployment_id: str = ""


@dataclass
class SinkProgress:
    last_processed_block: int = 0


@dataclass
class PackageInfo:
    name: str = ""
    version: str = ""
    output_module_name: str = ""
    output_module_hash: str = ""


@dataclass
class InfoResponse:
    status: DeploymentStatus = DeploymentStatus.UNKNOWN
    services: dict[str, str] = field(default_factory=dict)
    reason: str = ""
    package_info: Optional[PackageInfo] = None
    progress: Optional[SinkProgress] = None
    motd: str = ""


@dataclass
class ListRequest:
    pass


@dataclass
class DeploymentWithStatus:
    id: str = ""
    status: DeploymentStatus = DeploymentStatus.UNKNOWN
    reason: str = ""
    package_info: Optional[PackageInfo] = None
    progress: Optional[SinkProgress] = None
    motd: str = ""


@dataclass
class ListResponse:
    deployments: list[DeploymentWithStatus] = field(default_factory=list)


@dataclass
class RemoveRequest:
    deployment_id: str = ""


@dataclass
class RemoveResponse:
    previous_status: DeploymentStatus = DeploymentStatus.UNKNOWN


@dataclass
class PauseRequest:
    deployment_id: str = ""


@dataclass
class PauseResponse:
    previous_status: DeploymentStatus = DeploymentStatus.UNKNOWN
    new_status: DeploymentStatus = DeploymentStatus.UNKNOWN


@dataclass
class StopRequest:
    deployment_id: str = ""


@dataclass
class StopResponse:
    previous_status: DeploymentStatus = DeploymentStatus.UNKNOWN
    new_status: DeploymentStatus = DeploymentStatus.UNKNOWN


@dataclass
class ResumeRequest:
    deployment_id: str = ""


@dataclass
class ResumeResponse:
    previous_status: DeploymentStatus = DeploymentStatus.UNKNOWN
    new_status: DeploymentStatus = DeploymentStatus.UNKNOWN