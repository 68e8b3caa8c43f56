"""
Security Utilities for the Company Cars API

Session check and per-user rate limiting for whitelisted methods.
"""

import frappe
from frappe import _
from frappe.utils import cint


def require_session_user() -> str:
    """
    Return the logged-in user of the current session.

    Raises:
        frappe.AuthenticationError: If the session is a Guest session
    """
    user = frappe.session.user
    if not user or user == "Guest":
        frappe.throw(_("Usuario no autenticado"), frappe.AuthenticationError)
    return user


def check_rate_limit(action: str, user: str, limit: int = 30, seconds: int = 60) -> None:
    """
    Count one call of `action` by `user` and reject it past `limit`.

    The counter lives in Frappe's cache (Redis) and expires `seconds` after
    the last accepted call. A limit of 0 or less disables the check.

    Raises:
        frappe.TooManyRequestsError: If the user already reached the limit
    """
    if limit <= 0:
        return

    cache_key = f"company_cars:rate_limit:{action}:{user}"
    calls = cint(frappe.cache.get_value(cache_key))

    if calls >= limit:
        frappe.log_error(
            title=_("Rate Limit Exceeded"),
            message=f"User: {user}, Action: {action}, Limit: {limit}/{seconds}s"
        )
        frappe.throw(
            _("Demasiadas consultas. Espere un momento e intente de nuevo."),
            frappe.TooManyRequestsError
        )

    frappe.cache.set_value(cache_key, calls + 1, expires_in_sec=seconds)
