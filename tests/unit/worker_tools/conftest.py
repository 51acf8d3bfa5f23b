import io
from unittest.mock import MagicMock

import pytest

from worker_tools.api import WorkersSession
from worker_tools.command.context import CommandContext
from worker_tools.contract import WorkerIdentity


@pytest.fixture(scope="function")
def identity():
    return WorkerIdentity(account_id="MOCK-ACCOUNT-ID", script_name="mock-worker")


@pytest.fixture(scope="function")
def session():
    return MagicMock(spec=WorkersSession)


@pytest.fixture(scope="function")
def context(session, identity):
    return CommandContext(session=session, identity=identity, stdin=io.StringIO(""))


@pytest.fixture(scope="function")
def version_details_record():
    return {
        "id": "MOCK-VERSION-ID",
        "number": 3,
        "metadata": {"author_email": "dev@example.com", "created_on": "2024-05-01T12:00:00Z", "source": "wrangler"},
        "annotations": {"workers/tag": "v3"},
        "resources": {
            "bindings": [
                {"type": "plain_text", "name": "GREETING", "text": "hello"},
                {"type": "kv_namespace", "name": "CACHE", "namespace_id": "MOCK-NAMESPACE-ID"},
                {"type": "d1", "name": "DB", "id": "MOCK-DB-ID", "database_name": "main"},
                {"type": "secret_text", "name": "OLD_SECRET"},
                {"type": "secret_text", "name": "API_KEY"},
            ],
            "script": {
                "etag": "MOCK-ETAG",
                "handlers": ["fetch"],
                "placement_mode": "smart",
                "last_deployed_from": "wrangler",
            },
            "script_runtime": {
                "compatibility_date": "2024-04-01",
                "compatibility_flags": ["nodejs_compat"],
                "usage_model": "standard",
                "limits": {"cpu_ms": 50},
            },
        },
    }
