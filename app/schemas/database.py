from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple, Union

class DatabaseDriver(str, Enum):
    POSTGRES = "postgres"

class TlsOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    reject_unauthorized: bool = False

class ConnectionOptions(BaseModel):
    """
    Resolved options handed to the database driver layer.
    `ssl` is None when TLS is disabled.
    """
    model_config = ConfigDict(frozen=True)

    driver: DatabaseDriver = DatabaseDriver.POSTGRES
    host: str
    # int when DB_PORT parses, float('nan') otherwise
    port: Union[int, float]
    username: str
    password: str = Field(..., repr=False)
    database: str
    entities: Tuple[str, ...] = ()
    synchronize: bool
    logging: bool
    ssl: Optional[TlsOptions] = None

class DatabaseInfo(BaseModel):
    driver: DatabaseDriver
    host: str
    port: Optional[int] = None
    port_valid: bool
    database: str
    username: str
    synchronize: bool
    logging: bool
    ssl_enabled: bool
