"""
esschema Configuration

We read configuration from 2 sources, in order of precedence (higher is more priority)
- Environment variables
- A .env file, either in the current working directory or in a location specified
  by the ESSCHEMA_ENV_FILE environment variable
"""

import functools
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

from class_doc import extract_docs_from_cls_obj
from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "esschema_"


class FailureMode(str, Enum):
    #: raise a SchemaValidationError listing every mismatch (refuse to start)
    raise_error = "raise_error"

    #: log the full report as a warning and carry on with the existing index
    log_warning = "log_warning"


for field, doc in extract_docs_from_cls_obj(FailureMode).items():
    FailureMode[field].__doc__ = "\n".join(doc)


class Settings(BaseSettings):
    env_file: Annotated[
        Path,
        Field(
            description="Location of a .env file (if used) relative to working directory",
        ),
    ] = Path(".env")

    elastic_password: Annotated[
        str | None,
        Field(
            description=(
                "Elasticsearch password. This the password for the 'elastic' user when Elastic xpack security is enabled"
            )
        ),
    ] = None

    elastic_host: Annotated[
        str | None,
        Field(
            description=(
                "Elasticsearch host. "
                "Default: https://localhost:9200 if elastic_password is set, http://localhost:9200 otherwise"
            )
        ),
    ] = None

    elastic_verify_ssl: Annotated[
        bool | None,
        Field(
            description=(
                "Elasticsearch verify SSL (only used if elastic_password is set). Default: True unless host is localhost)"
            ),
        ),
    ] = None

    on_failure: Annotated[
        FailureMode,
        Field(description="What to do when the live index does not match the expected schema"),
    ] = FailureMode.raise_error

    log_level: Annotated[str, Field(description="Log level used by the command line interface")] = "INFO"

    @model_validator(mode="after")
    def set_ssl(self: Any) -> "Settings":
        if not self.elastic_host:
            self.elastic_host = ("https" if self.elastic_password else "http") + "://localhost:9200"
        if self.elastic_verify_ssl is None:
            self.elastic_verify_ssl = self.elastic_host not in {
                "http://localhost:9200",
                "https://localhost:9200",
            }
        return self

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)


@functools.lru_cache()
def get_settings() -> Settings:
    # Read once to find the env file, then again so its values are picked up
    temp = Settings()
    load_dotenv(temp.env_file, override=False)
    return Settings()
