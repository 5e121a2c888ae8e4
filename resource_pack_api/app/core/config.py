"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can boot locally against an SQLite file without any outbound
integration configured.  In production, override them via
environment variables.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Resource Pack API")
    api_version: str = os.getenv("API_VERSION", "2.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Path of the SQLite file backing the document store.  Relative
    # paths are resolved against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "resource_pack.db")

    # Outbound email.  ``email_sender`` is used as the From address of
    # verification and account deletion mails.
    smtp_host: str = os.getenv("SMTP_HOST", "localhost")
    smtp_port: int = int(os.getenv("SMTP_PORT", "587"))
    smtp_username: str = os.getenv("SMTP_USERNAME", "")
    smtp_password: str = os.getenv("SMTP_PASSWORD", "")
    smtp_use_tls: bool = _env_bool("SMTP_USE_TLS", "true")
    email_sender: str = os.getenv("EMAIL_SENDER", "contact@resourcepack.local")

    # Public base URL of this API, used to build the link sent in the
    # verification email: ``<api_public_url>/auth/verify/<id>/<token>``.
    api_public_url: str = os.getenv("API_PUBLIC_URL", "http://localhost:8000/api/v2")

    # External mods catalog (CurseForge compatible).
    curseforge_api_url: str = os.getenv("CURSEFORGE_API_URL", "https://api.curseforge.com/v1")
    curseforge_api_key: str = os.getenv("CURSEFORGE_API_KEY", "")

    # CDN administration.  ``cloudflare_zones`` is a comma separated
    # list of zone identifiers; purge and dev mode apply to all of them.
    cloudflare_api_url: str = os.getenv("CLOUDFLARE_API_URL", "https://api.cloudflare.com/client/v4")
    cloudflare_token: str = os.getenv("CLOUDFLARE_TOKEN", "")
    cloudflare_zones: str = os.getenv("CLOUDFLARE_ZONES", "")

    # Timeout in seconds applied to every outbound HTTP call.
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "15"))

    def zone_ids(self) -> list[str]:
        return [z.strip() for z in self.cloudflare_zones.split(",") if z.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
