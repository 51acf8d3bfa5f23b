from typing import Optional

from .base_model import BaseModel


class WorkerIdentity(BaseModel):
    """Which remote Worker every call of a command targets."""

    account_id: str
    script_name: str
    environment: Optional[str] = None
    legacy_env: bool = True

    @property
    def script_url(self) -> str:
        return f"/accounts/{self.account_id}/workers/scripts/{self.script_name}"

    @property
    def secrets_url(self) -> str:
        if self.environment and not self.legacy_env:
            return (
                f"/accounts/{self.account_id}/workers/services/{self.script_name}"
                f"/environments/{self.environment}/secrets"
            )
        return f"{self.script_url}/secrets"

    @property
    def label(self) -> str:
        """Worker name with the service environment, as shown to users."""
        if self.environment and not self.legacy_env:
            return f"{self.script_name} ({self.environment})"
        return self.script_name
