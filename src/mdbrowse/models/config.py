"""Pydantic configuration models for mdbrowse."""

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from ..http.client import DEFAULT_USER_AGENT


class ByteSize(int):
    """
    Custom type that parses human-readable byte sizes.

    Accepts:
        - Integers (bytes)
        - Strings like '200kb', '1mb', '5gb'

    Examples:
        >>> ByteSize._parse('200kb')
        204800
        >>> ByteSize._parse('1mb')
        1048576
        >>> ByteSize._parse(1024)
        1024
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(cls._parse)

    @classmethod
    def _parse(cls, v: Any) -> int:
        if isinstance(v, int):
            return v
        if isinstance(v, str):
            v = v.lower().strip()
            # Order matters: check longer suffixes first
            units = [("gb", 1024**3), ("mb", 1024**2), ("kb", 1024), ("b", 1)]
            for unit, mult in units:
                if v.endswith(unit):
                    num_str = v[: -len(unit)].strip()
                    try:
                        return int(float(num_str) * mult)
                    except ValueError as err:
                        raise ValueError(f"Invalid number in byte size: {v}") from err
            try:
                return int(v)
            except ValueError:
                pass
        raise ValueError(f"Invalid byte size: {v}. Use format like '200kb', '1mb', or integer bytes.")


class NetworkConfig(BaseModel):
    """Configuration for the HTTP transport."""

    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header sent upstream")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    proxy: Optional[str] = Field(None, description="HTTP/HTTPS proxy URL")
    max_content_size: ByteSize = Field(
        ByteSize(50 * 1024 * 1024),
        description="Maximum response size (e.g., '200kb', '50mb')",
    )

    model_config = {"extra": "forbid"}


class ConversionConfig(BaseModel):
    """Defaults for requests that do not set their own options."""

    send_accept_md: bool = Field(True, description="Advertise Markdown in the Accept header")
    auto_convert: bool = Field(True, description="Convert HTML responses to Markdown")

    model_config = {"extra": "forbid"}


class ServerConfig(BaseModel):
    """Configuration for the JSON API server."""

    host: str = Field("127.0.0.1", description="Interface to bind")
    port: int = Field(8080, ge=1, le=65535, description="Port to listen on")

    model_config = {"extra": "forbid"}


class MdbrowseConfig(BaseModel):
    """
    Root configuration model for mdbrowse.

    Example:
        config = MdbrowseConfig(network=NetworkConfig(timeout=10))

    YAML format:
        network:
          timeout: 10
          max_content_size: 5mb
        conversion:
          send_accept_md: false
        server:
          port: 9000
        log_level: DEBUG
    """

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "MdbrowseConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "MdbrowseConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text(encoding="utf-8"))
