"""Secrets Manager Overlay: optional database credentials from AWS Secrets Manager.

Invariants:
    - Only consulted when Settings.use_secrets_manager is true
    - The secret is a JSON object with "username" and "password"
    - Any failure is logged and the environment credentials are kept

Design Decisions:
    - Returns a new Settings copy; the cached instance is never mutated
"""

import json
import logging
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from museum_api.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBCredentials:
    username: str
    password: str


def _secrets_client(region: str):
    return boto3.client("secretsmanager", region_name=region)


def fetch_db_credentials(secret_name: str, region: str) -> DBCredentials:
    """Fetch and decode the credential secret. Raises on any failure."""
    client = _secrets_client(region)
    result = client.get_secret_value(SecretId=secret_name)
    payload = json.loads(result["SecretString"])
    return DBCredentials(
        username=payload["username"], password=payload["password"],
    )


def apply_secret_credentials(settings: Settings) -> Settings:
    """Return settings with Secrets Manager credentials when enabled and reachable."""
    if not settings.use_secrets_manager:
        return settings
    try:
        creds = fetch_db_credentials(settings.secret_name, settings.aws_region)
    except (BotoCoreError, ClientError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Secrets Manager load failed, keeping env credentials: {e}")
        return settings
    logger.info("Secrets Manager credentials loaded")
    return settings.with_credentials(creds.username, creds.password)
