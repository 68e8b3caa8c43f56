"""
Free Cars API Endpoint

Whitelisted method used by the booking form: lists the company cars the
logged-in user may book for a time window.
"""

import frappe
from frappe import _
from frappe.utils import cint, get_system_timezone
from typing import Any, Dict, List, Optional, Union

from company_cars.company_cars.availability.resolver import resolve_availability
from company_cars.company_cars.config import get_setting
from company_cars.api.security import check_rate_limit, require_session_user


@frappe.whitelist(methods=['GET'])
def get_free_cars(
	start_time: Optional[str] = None,
	end_time: Optional[str] = None
) -> Union[List[Dict[str, Any]], Dict[str, str]]:
	"""
	Obtiene los autos libres para el usuario de la sesión.

	Rate limited: company_cars_rate_limit requests per minute per user (30).

	Args:
		start_time: inicio (YYYY-MM-DD HH:MM:SS o ISO 8601)
		end_time: fin

	Returns:
		list[dict]: [{"name": str, "categoryId": str, "driver": str}, ...]
		o bien dict: {"error": str, "code": str}

	Example:
		```javascript
		frappe.call({
			method: "company_cars.api.free_cars.get_free_cars",
			type: "GET",
			args: {
				start_time: "2026-01-20 10:00:00",
				end_time: "2026-01-20 11:00:00"
			},
			callback: function(r) {
				console.log(r.message);
			}
		});
		```
	"""
	user = require_session_user()
	check_rate_limit("get_free_cars", user, limit=cint(get_setting("rate_limit")), seconds=60)

	try:
		result = resolve_availability(
			user,
			start_time,
			end_time,
			placeholder=get_setting("placeholder"),
			tz_name=get_system_timezone()
		)

	except Exception as e:
		frappe.log_error(f"Error in get_free_cars: {str(e)}", "API Error")
		frappe.throw(_("Error al obtener autos libres"))

	return result.to_response(translate=_)
