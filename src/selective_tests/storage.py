"""
Read the per-suite test statistics CSV from Google Cloud Storage.

The blob is written by the upstream statistics job; this module only knows
how its name is derived and how to download it read-only.
"""
import json
import logging

import google.auth
import requests
from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import storage
from google.cloud.storage.exceptions import DataCorruption
from google.oauth2 import service_account

from selective_tests.config import CREDENTIALS_ENV, READ_ONLY_SCOPE, SelectorConfig
from selective_tests.errors import (
    ObjectNotFoundError,
    StatisticsReadError,
    StoreConnectionError,
)

logger = logging.getLogger(__name__)


def blob_name(config: SelectorConfig, suite: str, cloud: str) -> str:
    return f"{config.file_prefix}-{suite}-{cloud}.{config.file_extension}"


def _credentials(config: SelectorConfig):
    if config.credentials_json:
        info = json.loads(config.credentials_json)
        return service_account.Credentials.from_service_account_info(
            info, scopes=[READ_ONLY_SCOPE]
        )
    logger.info(f"{CREDENTIALS_ENV} env is not set.")
    credentials, _ = google.auth.default(scopes=[READ_ONLY_SCOPE])
    return credentials


def make_client(config: SelectorConfig) -> storage.Client:
    try:
        return storage.Client(
            project=config.project,
            credentials=_credentials(config),
            client_options={"quota_project_id": config.project},
        )
    except (ValueError, auth_exceptions.GoogleAuthError) as err:
        raise StoreConnectionError(f"connection to GCS failed: {err}") from err


def fetch_statistics(config: SelectorConfig, suite: str, cloud: str) -> bytes:
    """Download the statistics blob for ``suite``/``cloud`` in a single call.

    No retries are attempted. ``config.timeout`` bounds the download.
    """
    name = blob_name(config, suite, cloud)
    client = make_client(config)
    try:
        blob = client.bucket(config.bucket).blob(name)
        body = blob.download_as_bytes(timeout=config.timeout, retry=None)
    except auth_exceptions.GoogleAuthError as err:
        raise StoreConnectionError(f"connection to GCS failed: {err}") from err
    except api_exceptions.GoogleAPICallError as err:
        raise ObjectNotFoundError(
            f"failed to get the object {name} in bucket {config.bucket}: {err}"
        ) from err
    except requests.exceptions.ConnectionError as err:
        raise StoreConnectionError(f"connection to GCS failed: {err}") from err
    except (requests.exceptions.RequestException, DataCorruption) as err:
        raise StatisticsReadError(
            f"failed to read CSV {name} from GCS: {err}"
        ) from err
    finally:
        client.close()
    logger.debug(f"read {len(body)} bytes from gs://{config.bucket}/{name}")
    return body
