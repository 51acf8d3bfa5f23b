import datetime
from typing import Optional

from .base_model import BaseModel
from .version import Annotations


class DeploymentVersion(BaseModel):
    version_id: str
    percentage: float


class Deployment(BaseModel):
    id: str
    versions: list[DeploymentVersion] = []
    strategy: Optional[str] = None
    source: Optional[str] = None
    author_email: Optional[str] = None
    created_on: Optional[datetime.datetime] = None
    annotations: Optional[Annotations] = None

    def traffic_for(self, version_id: str) -> Optional[DeploymentVersion]:
        for version in self.versions:
            if version.version_id == version_id:
                return version
        return None
