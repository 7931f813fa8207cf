"""Shared cross-cutting helpers: logging setup, datetime and id utilities.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = ["ensure_utc", "generate_cuid", "utc_now"]
