"""Bearer tokens in the shape ``get_current_user_id`` accepts.

Sign-in itself happens at the identity provider; this helper is used by the
developer scripts and the test-suite.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from jose import jwt

from serenity_pulse.config import settings

JWT_ALG = "HS256"


def issue_app_token(uid: str, email: str, expires_in: Optional[timedelta] = None) -> str:
    cfg = settings()
    now = datetime.utcnow()
    payload = {
        "uid": uid,
        "email": email,
        "iat": now,
        "exp": now + (expires_in if expires_in is not None else timedelta(hours=cfg.jwt_exp_hours)),
    }
    return jwt.encode(payload, cfg.jwt_secret, algorithm=JWT_ALG)
