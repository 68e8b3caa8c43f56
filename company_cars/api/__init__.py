"""
Company Cars API

Structure:
    api/
    ├── __init__.py              # This file
    ├── free_cars.py             # Free car lookup for the booking form
    └── security.py              # Rate limiting and session checks

Usage:
    frappe.call("company_cars.api.free_cars.get_free_cars", ...)
"""

from . import free_cars

__all__ = [
    "free_cars",
]
