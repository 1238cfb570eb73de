import logging
import math
import os
import re
from typing import Mapping, Optional, Union
from app.schemas.database import ConnectionOptions, DatabaseDriver, TlsOptions

logger = logging.getLogger(__name__)

# Defaults used when a variable is unset or empty
DEFAULT_HOST = "localhost"
DEFAULT_PORT = "5432"
DEFAULT_USERNAME = "postgres"
DEFAULT_PASSWORD = "password"
DEFAULT_DATABASE = "product_explorer"

ENTITIES_GLOB = os.path.dirname(os.path.abspath(__file__)) + "/../**/*_entity.py"

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

def parse_int(value: str) -> Union[int, float]:
    """
    Parse the leading base-10 integer of `value`.
    Trailing characters are ignored ("6543abc" -> 6543).
    Returns float('nan') when there are no leading digits.
    """
    match = _LEADING_INT.match(value)
    if not match:
        return math.nan
    return int(match.group(1))

def _lookup(environment: Mapping[str, str], key: str, default: str) -> str:
    # Empty string counts as unset
    value: Optional[str] = environment.get(key)
    return value if value else default

def resolve_connection_options(environment: Mapping[str, str]) -> ConnectionOptions:
    """
    Build the database connection options from an environment mapping.

    Reads DB_HOST, DB_PORT, DB_USERNAME, DB_PASSWORD, DB_NAME, DB_SSL and
    NODE_ENV. Every value has a default, so this never raises. The mapping
    is only read.
    """
    raw_port = _lookup(environment, "DB_PORT", DEFAULT_PORT)
    port = parse_int(raw_port)
    if isinstance(port, float):
        # Passed through unchanged; the driver layer decides what to do with it
        logger.warning(f"DB_PORT '{raw_port}' is not a number, port resolves to NaN")

    node_env = environment.get("NODE_ENV")

    return ConnectionOptions(
        driver=DatabaseDriver.POSTGRES,
        host=_lookup(environment, "DB_HOST", DEFAULT_HOST),
        port=port,
        username=_lookup(environment, "DB_USERNAME", DEFAULT_USERNAME),
        password=_lookup(environment, "DB_PASSWORD", DEFAULT_PASSWORD),
        database=_lookup(environment, "DB_NAME", DEFAULT_DATABASE),
        entities=(ENTITIES_GLOB,),
        # Use migrations in production
        synchronize=node_env != "production",
        logging=node_env == "development",
        ssl=TlsOptions(reject_unauthorized=False) if environment.get("DB_SSL") == "true" else None,
    )
