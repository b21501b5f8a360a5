import datetime
import os
from enum import Enum
from typing import Any, Tuple, Type

from pydantic import AwareDatetime
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from app.types import LogFormats, LogLevels


class Environment(str, Enum):
    UNIT_TEST = "unit_test"
    LOCAL = "local"
    DEV = "dev"
    UAT = "uat"
    PROD = "prod"


class _BaseConfig(BaseSettings):
    """
    Stop pydantic-settings from reading configuration from anywhere other than the environment.
    """

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (env_settings,)


class _SharedConfig(_BaseConfig):
    """Shared configuration that is acceptable to be present in all environments (but we'd never expect to instantiate
    this class directly).

    Default configuration values, if provided, should be:
    1. valid and sensible if used in our production environments
    2. acceptable public values, considering they will be in source control

    Anything that does not meet both conditions should not be set as a default value on this base class. Anything
    that does not meet point 1, but does meet point 2, should be set on the appropriate derived class.
    """

    # Flask app
    FLASK_ENV: Environment
    SERVER_NAME: str
    SECRET_KEY: str
    WTF_CSRF_ENABLED: bool = True

    PROXY_FIX_PROTO: int = 1
    PROXY_FIX_HOST: int = 1

    # Logging
    LOG_LEVEL: LogLevels = "INFO"
    LOG_FORMATTER: LogFormats = "json"

    # Flask-Talisman
    TALISMAN_SETTINGS: dict[str, Any] = {
        "force_https": True,
        "session_cookie_secure": True,
        "content_security_policy": {
            "default-src": "'self'",
            "script-src": "'self'",
            "style-src": "'self'",
            "img-src": "'self' data:",
        },
    }

    # SendFox. Submissions are only forwarded when both of these are set; otherwise they are written to the log.
    SENDFOX_API_TOKEN: str | None = None
    SENDFOX_LIST_ID: int | None = None
    SENDFOX_API_BASE_URL: str = "https://api.sendfox.com"
    SENDFOX_TIMEOUT_SECONDS: float = 10

    # Launch
    LAUNCH_AT: AwareDatetime = datetime.datetime.fromisoformat("2026-03-31T09:00:00-04:00")


class LocalConfig(_SharedConfig):
    """
    Overrides / default configuration for local developer environments.
    """

    FLASK_ENV: Environment = Environment.LOCAL
    SERVER_NAME: str = "storiesthatlead.localhost:8080"
    SECRET_KEY: str = "unsafe"  # pragma: allowlist secret

    # Logging
    LOG_FORMATTER: LogFormats = "plaintext"

    # Flask-Talisman
    TALISMAN_SETTINGS: dict[str, Any] = {
        "force_https": False,
        "session_cookie_secure": False,
        "content_security_policy": {
            "default-src": "'self'",
            "script-src": "'self'",
            "style-src": "'self'",
            "img-src": "'self' data:",
        },
    }


class UnitTestConfig(LocalConfig):
    """
    Overrides / default configuration for running unit tests.
    """

    # Flask app
    FLASK_ENV: Environment = Environment.UNIT_TEST
    WTF_CSRF_ENABLED: bool = False


class DevConfig(_SharedConfig):
    """
    Overrides / default configuration for our deployed 'dev' environment
    """

    # Flask app
    FLASK_ENV: Environment = Environment.DEV
    LOG_LEVEL: LogLevels = "DEBUG"


class UatConfig(_SharedConfig):
    """
    Overrides / default configuration for our deployed 'uat' environment
    """

    # Flask app
    FLASK_ENV: Environment = Environment.UAT


class ProdConfig(_SharedConfig):
    """
    Overrides / default configuration for our deployed 'prod' environment
    """

    # Flask app
    FLASK_ENV: Environment = Environment.PROD


def get_settings() -> _SharedConfig:
    environment = os.getenv("FLASK_ENV", Environment.PROD.value)
    match Environment(environment):
        case Environment.UNIT_TEST:
            return UnitTestConfig()  # type: ignore[call-arg]
        case Environment.LOCAL:
            return LocalConfig()  # type: ignore[call-arg]
        case Environment.DEV:
            return DevConfig()  # type: ignore[call-arg]
        case Environment.UAT:
            return UatConfig()  # type: ignore[call-arg]
        case Environment.PROD:
            return ProdConfig()  # type: ignore[call-arg]

    raise ValueError(f"Unknown environment: {environment}")
