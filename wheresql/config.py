"""Dialect selection from driver settings.

Connection settings are loaded by the embedding application (from a file,
the environment, ...).  The builder only needs the database type, which the
settings name under ``type`` or, as a fallback, ``platform``::

    config = DialectConfig.model_validate({"type": "pgsql", "host": "db", "db": "app"})
    where = config.where().cond().col("id").eq().val(":id").end()
"""
from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from wheresql.dialects import SQLDialect, get_dialect, resolve_db_type
from wheresql.errors import ConfigError
from wheresql.expressions import DbType
from wheresql.where.group import WhereSQL

logger = logging.getLogger(__name__)

_TYPE_KEYS = ["type", "platform"]


class DialectConfig(BaseModel):
    """The dialect part of a driver settings mapping.

    Keys other than ``type`` / ``platform`` (host, charset, credentials, ...)
    belong to the connection layer and are ignored.

    Attributes:
        type: The target database type.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: DbType

    @model_validator(mode="before")
    @classmethod
    def _fallback_to_platform(cls, data: Any) -> Any:
        """Use ``platform`` when ``type`` is absent; fail if both are missing."""
        if isinstance(data, dict):
            if data.get("type") is None:
                if data.get("platform") is None:
                    raise ConfigError(
                        "Invalid driver config data. Missing a type or platform declaration!",
                        keys=_TYPE_KEYS,
                    )
                data = {**data, "type": data["platform"]}
        return data

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type(cls, value: Any) -> DbType:
        return resolve_db_type(value)

    @property
    def dialect(self) -> SQLDialect:
        """The quoting dialect for the configured database type."""
        return get_dialect(self.type)

    def where(self) -> WhereSQL:
        """Start a new root WHERE clause for the configured database type."""
        logger.debug("Starting WHERE clause for %s", self.type.value)
        return WhereSQL.create(self.type)
