"""
Frappe Fleet Directory

Reads users, job positions, company cars and car bookings from the site
database. DocType names come from company_cars settings.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Set

import frappe
from frappe.utils import get_datetime

from ..assembler import format_person_name
from ..models import Reservation, Vehicle
from .base import DirectoryError, FleetDirectory, UserNotFoundError


class FrappeDirectory(FleetDirectory):
	"""Directorio respaldado por la base de datos de Frappe."""

	def __init__(
		self,
		job_role_field: str = "job_position",
		role_doctype: str = "Job Position",
		role_categories_doctype: str = "Job Position Comfort Category",
		car_doctype: str = "Company Car",
		booking_doctype: str = "Car Booking"
	):
		self.job_role_field = job_role_field
		self.role_doctype = role_doctype
		self.role_categories_doctype = role_categories_doctype
		self.car_doctype = car_doctype
		self.booking_doctype = booking_doctype

	@classmethod
	def from_settings(cls) -> "FrappeDirectory":
		from ...config import get_setting

		return cls(
			job_role_field=get_setting("job_role_field"),
			role_doctype=get_setting("role_doctype"),
			role_categories_doctype=get_setting("role_categories_doctype"),
			car_doctype=get_setting("car_doctype"),
			booking_doctype=get_setting("booking_doctype"),
		)

	def get_user_role(self, user_id: Any) -> Optional[Any]:
		try:
			user = frappe.db.get_value(
				"User",
				user_id,
				["name", self.job_role_field],
				as_dict=True
			)
		except Exception as e:
			raise DirectoryError(f"Error al consultar el usuario {user_id}: {str(e)}") from e

		if not user:
			raise UserNotFoundError(user_id)

		return user.get(self.job_role_field) or None

	def get_permitted_categories(self, role_id: Any) -> Set[Any]:
		# Tabla hija del cargo con una fila por categoría
		try:
			rows = frappe.get_all(
				self.role_categories_doctype,
				filters={"parent": role_id, "parenttype": self.role_doctype},
				pluck="comfort_category"
			)
		except Exception as e:
			raise DirectoryError(f"Error al consultar categorías del cargo {role_id}: {str(e)}") from e

		return {row for row in rows if row}

	def get_vehicles_by_categories(self, category_ids: Iterable[Any]) -> List[Vehicle]:
		category_ids = list(category_ids)
		if not category_ids:
			return []

		try:
			rows = frappe.get_all(
				self.car_doctype,
				filters={"comfort_category": ["in", category_ids]},
				fields=["name", "model", "comfort_category", "driver"],
				order_by="name asc"
			)
		except Exception as e:
			raise DirectoryError(f"Error al consultar autos: {str(e)}") from e

		vehicles = []
		for row in rows:
			vehicle = self._to_vehicle(row)
			if vehicle:
				vehicles.append(vehicle)
		return vehicles

	def _to_vehicle(self, row: Dict[str, Any]) -> Optional[Vehicle]:
		"""Valida el registro; sin categoría el auto se descarta."""
		if not row.get("comfort_category"):
			frappe.logger("company_cars").warning(
				f"{self.car_doctype} {row.get('name')} sin categoría de confort, se ignora"
			)
			return None

		return Vehicle(
			id=row.get("name"),
			name=row.get("model") or None,
			category_id=row.get("comfort_category"),
			driver_id=row.get("driver") or None
		)

	def get_overlapping_reservations(
		self,
		start: datetime,
		end: datetime,
		car_ids: Optional[Iterable[Any]] = None,
		driver_ids: Optional[Iterable[Any]] = None
	) -> List[Reservation]:
		# Condición de overlap: start_datetime < end AND end_datetime > start
		filters = {
			"start_datetime": ["<", end],
			"end_datetime": [">", start]
		}

		# Acotar a los autos o conductores de interés (OR)
		or_filters = {}
		car_ids = [c for c in (car_ids or []) if c]
		driver_ids = [d for d in (driver_ids or []) if d]
		if car_ids:
			or_filters["car"] = ["in", car_ids]
		if driver_ids:
			or_filters["driver"] = ["in", driver_ids]

		try:
			rows = frappe.get_all(
				self.booking_doctype,
				filters=filters,
				or_filters=or_filters or None,
				fields=["name", "car", "driver", "start_datetime", "end_datetime"]
			)
		except Exception as e:
			raise DirectoryError(f"Error al consultar reservas: {str(e)}") from e

		reservations = []
		for row in rows:
			if not row.get("start_datetime") or not row.get("end_datetime"):
				raise DirectoryError(f"{self.booking_doctype} {row.get('name')} sin fechas")
			try:
				reservations.append(Reservation(
					car_id=row.get("car") or None,
					driver_id=row.get("driver") or None,
					start=get_datetime(row.get("start_datetime")),
					end=get_datetime(row.get("end_datetime"))
				))
			except (ValueError, TypeError) as e:
				raise DirectoryError(
					f"{self.booking_doctype} {row.get('name')} con fechas inválidas: {str(e)}"
				) from e
		return reservations

	def get_driver_display_name(self, driver_id: Any) -> Optional[str]:
		try:
			driver = frappe.db.get_value(
				"User",
				driver_id,
				["first_name", "last_name"],
				as_dict=True
			)
		except Exception as e:
			raise DirectoryError(f"Error al consultar el conductor {driver_id}: {str(e)}") from e

		if not driver:
			return None

		return format_person_name(driver.get("first_name"), driver.get("last_name")) or None
