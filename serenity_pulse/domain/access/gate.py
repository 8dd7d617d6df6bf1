"""Client routing decision for protected views.

This only tells a client where to go.  It is not an access-control boundary:
admin data is guarded by ``require_admin`` and every query is scoped to the
caller's user id.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

LOGIN_PATH = "/auth"
ONBOARDING_PATH = "/onboarding"
DEFAULT_PATH = "/dashboard"

# path -> (requires_auth, admin_only); unknown paths are treated as protected
ROUTE_RULES = {
    "/": (False, False),
    "/auth": (False, False),
    "/onboarding": (True, False),
    "/dashboard": (True, False),
    "/home": (True, False),
    "/progress": (True, False),
    "/settings": (True, False),
    "/admin": (True, True),
}
PUBLIC_ONLY_PATHS = {"/auth"}


class RouteAction(str, Enum):
    WAIT = "wait"
    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass
class AccessState:
    loading: bool = False
    authenticated: bool = False
    onboarding_completed: bool = False
    is_admin: bool = False


@dataclass
class RouteDecision:
    action: RouteAction
    redirect_to: Optional[str] = None
    reason: Optional[str] = None


def route_rule(path: str) -> tuple[bool, bool]:
    return ROUTE_RULES.get(path, (True, False))


def decide_route(state: AccessState, path: str) -> RouteDecision:
    requires_auth, admin_only = route_rule(path)

    if state.loading:
        return RouteDecision(RouteAction.WAIT, reason="session, role or profile lookup pending")

    if not state.authenticated:
        if requires_auth:
            return RouteDecision(RouteAction.REDIRECT, LOGIN_PATH, "not signed in")
        return RouteDecision(RouteAction.ALLOW)

    if path in PUBLIC_ONLY_PATHS:
        return RouteDecision(RouteAction.REDIRECT, DEFAULT_PATH, "already signed in")

    if not state.onboarding_completed and requires_auth and path != ONBOARDING_PATH:
        return RouteDecision(RouteAction.REDIRECT, ONBOARDING_PATH, "onboarding incomplete")

    if admin_only and not state.is_admin:
        return RouteDecision(RouteAction.REDIRECT, DEFAULT_PATH, "admin role required")

    return RouteDecision(RouteAction.ALLOW)
