"""Server settings read from the environment."""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 5000
PORT_ENV_VAR: str = "PORT"


class ServerSettings(BaseModel):
    """
    Network settings of the web server.

    The bind address defaults to all interfaces. The port comes from the
    PORT environment variable when set.
    """

    # Make the Pydantic instance immutable (read-only)
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default=DEFAULT_HOST, description="Server bind address")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Server TCP port")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ServerSettings":
        """
        Build settings from environment variables.

        Explicit keyword overrides (e.g. from the command line) take precedence
        over the environment. Overrides set to None are ignored.

        :param Mapping environ: Environment to read, defaults to os.environ
        :param overrides: Field values overriding the environment

        :return: Validated settings
        :rtype: ServerSettings
        :raises pydantic.ValidationError: If PORT is not an integer in 1..65535
        """
        environ = os.environ if environ is None else environ
        values = {}
        port: Optional[str] = environ.get(PORT_ENV_VAR)
        if port is not None and port.strip():
            values["port"] = port.strip()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    @property
    def url(self) -> str:
        """Base URL the server is reachable at."""
        host = str(self.host)
        if self.host.version == 6:
            host = f"[{host}]"
        return f"http://{host}:{self.port}"
