import os
from typing import Optional

from pydantic import BaseModel

# -----------------------------
# Defaults
# -----------------------------
BUCKET = "test-selector"
PROJECT = "test-selector-stats"
FILE_PREFIX = "tests"
FILE_EXTENSION = "csv"
CREDENTIALS_ENV = "GOOGLE_EPHEMERAL_CREDENTIALS"
READ_ONLY_SCOPE = "https://www.googleapis.com/auth/devstorage.read_only"


class SelectorConfig(BaseModel):
    bucket: str = BUCKET
    project: str = PROJECT
    file_prefix: str = FILE_PREFIX
    file_extension: str = FILE_EXTENSION
    credentials_json: Optional[str] = None  # service-account JSON; None -> default credentials
    timeout: Optional[float] = None         # seconds, None waits forever

    @classmethod
    def from_env(cls, environ=None) -> "SelectorConfig":
        env = os.environ if environ is None else environ
        # timeout string is coerced and validated by pydantic
        return cls(
            bucket=env.get("SELECTIVE_TESTS_BUCKET", BUCKET),
            project=env.get("SELECTIVE_TESTS_PROJECT", PROJECT),
            file_prefix=env.get("SELECTIVE_TESTS_FILE_PREFIX", FILE_PREFIX),
            credentials_json=env.get(CREDENTIALS_ENV) or None,
            timeout=env.get("SELECTIVE_TESTS_TIMEOUT") or None,
        )
