"""
Company Cars Settings

Optional overrides read from site_config.json with the "company_cars_" prefix:

	{
		"company_cars_placeholder": "—",
		"company_cars_car_doctype": "Company Car"
	}
"""

import frappe


DEFAULTS = {
	"placeholder": "—",
	"directory_provider": "frappe",
	"rate_limit": 30,
	"job_role_field": "job_position",
	"role_doctype": "Job Position",
	"role_categories_doctype": "Job Position Comfort Category",
	"car_doctype": "Company Car",
	"booking_doctype": "Car Booking",
}


def get_setting(key: str):
	"""Valor de site config o el default."""
	if key not in DEFAULTS:
		raise KeyError(f"Unknown company_cars setting: {key}")

	value = frappe.conf.get(f"company_cars_{key}")
	if value is None or value == "":
		return DEFAULTS[key]
	return value
