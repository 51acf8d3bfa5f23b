import logging
import time

import requests

from .common.config.environment import get_env_var
from .contract import (
    Deployment,
    ScriptSettings,
    VersionDetails,
    VersionUploadResponse,
    WorkerIdentity,
    WorkerVersion,
)
from .exceptions import UnexpectedResponseError

DEFAULT_API_BASE_URL = "https://api.cloudflare.com/client/v4"

logger = logging.getLogger(__name__)


class WorkersSession(object):
    """Authenticated access to the Workers management API."""

    def __init__(self, api_token, base_url=None):
        """
        Args:
            api_token: bearer token sent with every request.
            base_url: API root; defaults to $WORKERS_API_BASE_URL, then the public endpoint.
        """
        if not api_token:
            raise ValueError("Must supply an API token")
        self.base_url = (base_url or get_env_var("WORKERS_API_BASE_URL") or DEFAULT_API_BASE_URL).rstrip("/")
        self.session = requests.Session()
        self.session.headers["Authorization"] = f"Bearer {api_token}"

    def _api(self, method, endpoint, **kwargs):
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug(f"{method.upper()} {url}")
        retries = 0
        while True:
            try:
                response = getattr(self.session, method)(url, **kwargs)
            except requests.exceptions.ConnectionError:
                if retries == 3:
                    raise UnexpectedResponseError("Unable to connect", method, url, **kwargs)
                retries += 1
                time.sleep(2)
                continue
            except requests.exceptions.Timeout:
                raise UnexpectedResponseError("Connection timeout", method, url, **kwargs)
            break
        if response.status_code >= 400:
            raise UnexpectedResponseError(response, method, url, **kwargs)
        return response

    def fetch_result(self, endpoint, method="get", **kwargs):
        """Call the API and unwrap the ``result`` of its response envelope."""
        response = self._api(method, endpoint, **kwargs)
        try:
            body = response.json()
        except ValueError:
            raise UnexpectedResponseError(response, method, response.url, **kwargs)
        if not isinstance(body, dict) or not body.get("success", False):
            raise UnexpectedResponseError(response, method, response.url, **kwargs)
        return body.get("result")

    def _get(self, endpoint, **kwargs):
        return self.fetch_result(endpoint, **kwargs)

    def _delete(self, endpoint, **kwargs):
        return self.fetch_result(endpoint, method="delete", **kwargs)

    def _post(self, endpoint, **kwargs):
        return self.fetch_result(endpoint, method="post", **kwargs)

    def account_list(self):
        return self._get("/accounts") or []

    def secret_list(self, ident: WorkerIdentity):
        return self._get(ident.secrets_url)

    def secret_delete(self, ident: WorkerIdentity, key):
        return self._delete(f"{ident.secrets_url}/{key}")

    def version_list(self, ident: WorkerIdentity) -> list[WorkerVersion]:
        records = self._get(f"{ident.script_url}/versions") or {}
        return [WorkerVersion.model_validate(rec) for rec in records.get("items") or []]

    def version_info(self, ident: WorkerIdentity, version_id) -> VersionDetails:
        return VersionDetails.model_validate(self._get(f"{ident.script_url}/versions/{version_id}"))

    def deployment_list(self, ident: WorkerIdentity) -> list[Deployment]:
        records = self._get(f"{ident.script_url}/deployments") or {}
        return [Deployment.model_validate(rec) for rec in records.get("deployments") or []]

    def version_content(self, ident: WorkerIdentity, version_id) -> requests.Response:
        return self._api("get", f"{ident.script_url}/content/v2", params={"version": version_id})

    def script_settings(self, ident: WorkerIdentity) -> ScriptSettings:
        return ScriptSettings.model_validate(self._get(f"{ident.script_url}/script-settings") or {})

    def version_upload(self, ident: WorkerIdentity, files, headers=None) -> VersionUploadResponse:
        params = {
            "include_subdomain_availability": "true",
            # keep the script body out of the response
            "excludeScript": "true",
        }
        result = self._post(f"{ident.script_url}/versions", files=files, params=params, headers=headers)
        return VersionUploadResponse.model_validate(result or {})
