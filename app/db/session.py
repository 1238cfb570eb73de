# Database handle built from the resolved connection options.
# No ORM or pool is opened here; the driver layer consumes `connection_string`.

import logging
import os
from typing import Mapping, Optional
from urllib.parse import quote
from app.core.database_config import resolve_connection_options
from app.schemas.database import ConnectionOptions, DatabaseInfo

logger = logging.getLogger(__name__)

class Database:
    def __init__(self, options: ConnectionOptions):
        self.options = options
        logger.info(f"Database configured for: {options.host}/{options.database}")
        if options.synchronize and not options.logging:
            logger.warning("Schema auto-sync is enabled outside development. Set NODE_ENV=production to use migrations.")

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> "Database":
        if environ is None:
            environ = os.environ
        return cls(resolve_connection_options(environ))

    @property
    def port_valid(self) -> bool:
        return isinstance(self.options.port, int)

    @property
    def connection_string(self) -> str:
        opts = self.options
        port = opts.port if self.port_valid else "nan"
        host = opts.host
        if ":" in host and not host.startswith("["):
            # IPv6 literal
            host = f"[{host}]"
        dsn = (
            f"postgresql://{quote(opts.username, safe='')}:{quote(opts.password, safe='')}@"
            f"{host}:{port}/{quote(opts.database, safe='')}"
        )
        if opts.ssl is not None:
            # reject_unauthorized=False: encrypt without verifying the certificate
            dsn += "?sslmode=require"
        return dsn

    def describe(self) -> DatabaseInfo:
        """Summary of the connection without credentials."""
        opts = self.options
        return DatabaseInfo(
            driver=opts.driver,
            host=opts.host,
            port=opts.port if self.port_valid else None,
            port_valid=self.port_valid,
            database=opts.database,
            username=opts.username,
            synchronize=opts.synchronize,
            logging=opts.logging,
            ssl_enabled=opts.ssl is not None,
        )

# Global database instance, resolved once at process start
db = Database.from_environment()
