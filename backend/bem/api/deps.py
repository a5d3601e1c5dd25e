"""Common dependency functions for API routes."""

from fastapi import HTTPException

from bem.core.config import Settings, get_settings


def get_app_settings() -> Settings:
    return get_settings()


def ensure_within_limit(text: str, settings: Settings) -> str:
    """Reject payloads larger than ``settings.max_document_chars``."""

    if len(text) > settings.max_document_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Document exceeds {settings.max_document_chars} characters",
        )
    return text
