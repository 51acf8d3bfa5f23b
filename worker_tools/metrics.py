import logging

import requests

from .common.config.environment import get_env_var

logger = logging.getLogger(__name__)


def get_metrics_usage_headers(send_metrics):
    return {"metricsEnabled": "true" if send_metrics else "false"}


def send_metrics_event(event, send_metrics, properties=None):
    """Record a usage event. Never raises: metrics must not fail a command."""
    if not send_metrics:
        return
    payload = {"event": event, "properties": properties or {}}
    logger.debug(f"Metrics event: {event}")
    url = get_env_var("WORKERS_METRICS_URL")
    if url is None:
        return
    try:
        requests.post(url, json=payload, timeout=5)
    except requests.RequestException as e:
        logger.debug(f"Failed to send metrics event {event}: {e}")
