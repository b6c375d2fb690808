from __future__ import annotations

from functools import wraps

from flask import g, session

from ..common.responses import domain_error
from ..core.exceptions import AuthenticationError, AuthorizationError
from .session import SessionContext


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = SessionContext.load(session)
        if ctx is None:
            return domain_error(AuthenticationError("Please sign in to continue"))
        g.session_context = ctx
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = SessionContext.load(session)
        if ctx is None:
            return domain_error(AuthenticationError("Please login as admin to access this page"))
        if not ctx.is_admin:
            return domain_error(AuthorizationError("Admin access required"))
        g.session_context = ctx
        return view(*args, **kwargs)

    return wrapper


def current_session() -> SessionContext:
    return g.session_context
