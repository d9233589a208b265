"""
Database Profile
================

``DatabaseProfile`` holds everything needed to open a store connection. It is
a frozen pydantic model: once built it cannot be changed, and the password is
a ``SecretStr`` so it never shows up in logs or ``repr``.

Engine kinds
~~~~~~~~~~~~
- ``networked``  a database server reached over host/port with credentials
                 (``mysql`` is accepted as an alias)
- ``embedded``   a file-backed database; only ``database`` (the file path)
                 is used (``sqlite`` is accepted as an alias)

The raw ``engine_kind`` string is kept as given and resolved when connecting,
so a profile with an unknown kind can still be loaded and reported.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr

from smilelib.errors import UnsupportedEngine


class EngineKind(str, Enum):
    """Category of backing store."""

    NETWORKED = "networked"
    EMBEDDED = "embedded"


_ENGINE_ALIASES = {
    "networked": EngineKind.NETWORKED,
    "mysql": EngineKind.NETWORKED,
    "embedded": EngineKind.EMBEDDED,
    "sqlite": EngineKind.EMBEDDED,
}


def resolve_engine_kind(engine_kind: Any) -> EngineKind:
    """
    Map a profile's engine kind to :class:`EngineKind`.

    Raises
    ------
    UnsupportedEngine
        If the value is not one of the known kinds or aliases.
    """
    if isinstance(engine_kind, EngineKind):
        return engine_kind
    if isinstance(engine_kind, str):
        kind = _ENGINE_ALIASES.get(engine_kind.strip().lower())
        if kind is not None:
            return kind
    raise UnsupportedEngine(engine_kind)


class DatabaseProfile(BaseModel):
    """
    Connection parameters for one store.

    Attributes
    ----------
    engine_kind : str
        ``networked``/``mysql`` or ``embedded``/``sqlite``.
    host : str | None
        Server host (networked only).
    port : int | None
        Server port (networked only).
    username : str | None
        Login name (networked only).
    password : SecretStr | None
        Login password (networked only).
    database : str
        Database name, or the file path for embedded stores.
    driver : str
        SQLAlchemy driver name used for networked stores.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    engine_kind: str = Field(
        ...,
        validation_alias=AliasChoices("engine_kind", "dbType", "type"),
        description="Engine kind: networked/mysql or embedded/sqlite.",
    )
    host: Optional[str] = Field(None, description="Hostname or IP of the database server.")
    port: Optional[int] = Field(None, description="Port of the database server.")
    username: Optional[str] = Field(None, description="Database username credential.")
    password: Optional[SecretStr] = Field(None, description="Database password credential.")
    database: str = Field(..., description="Database name, or file path for embedded stores.")
    driver: str = Field("mysql+pymysql", description="SQLAlchemy driver for networked stores.")

    @property
    def kind(self) -> EngineKind:
        """Resolved engine kind; raises ``UnsupportedEngine`` for unknown values."""
        return resolve_engine_kind(self.engine_kind)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "DatabaseProfile":
        """
        Build a profile from a parsed config section such as::

            database:
              dbType: mysql
              host: localhost
              port: 3306
              username: app
              password: secret
              database: app
        """
        return cls.model_validate(dict(mapping))
