import json
import os
import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

CONFIG_PATH = os.getenv("CONFIG_PATH", "config.json")


class ServerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, ge=1, le=65535, description="Listen port")


class UpstreamConfig(BaseModel):
    """One third-party API and the credential header pair it expects"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Display name used in error messages")
    url: str = Field(default="", description="Fixed endpoint URL")
    host: str = Field(default="", description="Value of the host credential header")
    key: str = Field(default="", description="Value of the key credential header")
    key_header: str = Field(default="x-rapidapi-key", description="Key credential header name")
    host_header: str = Field(default="x-rapidapi-host", description="Host credential header name")
    forward_fields: Tuple[str, ...] = Field(
        default=(),
        description="Field names the payload is duplicated under when forwarded"
    )

    def credential_headers(self) -> Dict[str, str]:
        return {self.key_header: self.key, self.host_header: self.host}


class LinkResolverConfig(UpstreamConfig):
    name: str = "RapidAPI"
    url: str = "https://social-download-all-in-one.p.rapidapi.com/v1/social/autolink"
    host: str = "social-download-all-in-one.p.rapidapi.com"


class VocalRemoverConfig(UpstreamConfig):
    name: str = "SplitBeat API"
    url: str = "https://splitbeat-vocal-remover-music-splitter.p.rapidapi.com/Upload_audio"
    host: str = "splitbeat-vocal-remover-music-splitter.p.rapidapi.com"
    forward_fields: Tuple[str, ...] = Field(default=("file", "audio", "audio_file"), min_length=1)


class TranscriberConfig(UpstreamConfig):
    name: str = "Transcription API"
    url: str = "https://api-real-time-speech-processing.p.rapidapi.com/asr"
    host: str = "api-real-time-speech-processing.p.rapidapi.com"
    forward_fields: Tuple[str, ...] = Field(default=("audio", "file", "audio_data", "data"), min_length=1)


class HttpConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    timeout_seconds: Optional[float] = Field(default=None, description="Outbound timeout (None disables it)")
    follow_redirects: bool = Field(default=True, description="Follow upstream redirects")


class LimitsConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_form_part_bytes: int = Field(
        default=100 * 1024 * 1024,
        ge=1024,
        description="Max size of a non-file multipart part (base64 audio)"
    )


class StaticConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    index_file: str = Field(default="static/index.html", description="Front-end entry file served at /")


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    format: str = Field(default="%(message)s", description="Log format")
    enable_rich: bool = Field(default=True, description="Enable rich console logging")

    @field_validator('level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


class ApiConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(default="Media Relay", description="API title")
    description: str = Field(
        default="CORS relay for social-video, vocal-remover and transcription APIs",
        description="API description"
    )
    version: str = Field(default="1.0.0", description="API version")
    cors_origins: list = Field(default=["*"], description="CORS allowed origins")
    debug: bool = Field(default=False, description="Enable debug mode (exposes /docs)")


class Config(BaseSettings):
    """Main configuration model"""
    model_config = SettingsConfigDict(
        env_prefix="RELAY_",
        env_nested_delimiter="__",
        frozen=True,
    )

    server: ServerConfig = Field(default_factory=ServerConfig)
    link_resolver: LinkResolverConfig = Field(default_factory=LinkResolverConfig)
    vocal_remover: VocalRemoverConfig = Field(default_factory=VocalRemoverConfig)
    transcriber: TranscriberConfig = Field(default_factory=TranscriberConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    static: StaticConfig = Field(default_factory=StaticConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @classmethod
    def load_from_file(cls, config_path: str = "config.json") -> "Config":
        """Load configuration from JSON file"""
        if os.path.exists(config_path):
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    config_data = json.load(f)
                logger.info(f"Configuration loaded from {config_path}")
                return cls(**config_data)
            except Exception as e:
                logger.error(f"Failed to load config from {config_path}: {str(e)}")
                logger.info("Using default configuration")
        else:
            logger.warning(f"Config file {config_path} not found, using defaults")

        return cls()

    @classmethod
    def load_from_env(cls) -> "Config":
        """
        Load configuration from environment variables.
        RELAY_* variables are read by pydantic-settings; the unprefixed
        names below are kept for existing deployments.
        """
        config_data: Dict[str, Any] = {}

        server = {}
        if os.getenv("HOST"):
            server["host"] = os.getenv("HOST")
        if os.getenv("PORT"):
            server["port"] = os.getenv("PORT")
        if server:
            config_data["server"] = server

        if os.getenv("RAPID_API_KEY"):
            config_data["link_resolver"] = {"key": os.getenv("RAPID_API_KEY")}
        if os.getenv("VOCAL_REMOVER_API_KEY"):
            config_data["vocal_remover"] = {"key": os.getenv("VOCAL_REMOVER_API_KEY")}
        if os.getenv("SPEECH_RECOGNITION_API_KEY"):
            config_data["transcriber"] = {"key": os.getenv("SPEECH_RECOGNITION_API_KEY")}

        if os.getenv("LOG_LEVEL"):
            config_data["logging"] = {"level": os.getenv("LOG_LEVEL")}

        return cls(**config_data) if config_data else cls()


def load_config() -> Config:
    """Load configuration with priority: config.json > env vars > defaults"""
    if os.path.exists(CONFIG_PATH):
        return Config.load_from_file(CONFIG_PATH)
    logger.info(f"Config file not found at {CONFIG_PATH}, checking environment variables")
    return Config.load_from_env()


config = load_config()
