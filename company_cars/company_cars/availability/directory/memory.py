"""
In-memory Fleet Directory

Holds the four datasets as plain Python structures. Used for offline
resolution and by the test suite.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Set

from ..assembler import format_person_name
from ..models import Reservation, Vehicle
from .base import FleetDirectory, UserNotFoundError


class MemoryDirectory(FleetDirectory):
	"""
	Directorio en memoria.

	Args:
		users: {user_id: {"role": role_id, "first_name": str, "last_name": str}}
		roles: {role_id: iterable de category ids}
		vehicles: [Vehicle, ...]
		reservations: [Reservation, ...]
	"""

	def __init__(
		self,
		users: Optional[Dict[Any, Dict[str, Any]]] = None,
		roles: Optional[Dict[Any, Iterable[Any]]] = None,
		vehicles: Optional[List[Vehicle]] = None,
		reservations: Optional[List[Reservation]] = None
	):
		self.users = users or {}
		self.roles = roles or {}
		self.vehicles = list(vehicles or [])
		self.reservations = list(reservations or [])

	def get_user_role(self, user_id: Any) -> Optional[Any]:
		if user_id not in self.users:
			raise UserNotFoundError(user_id)
		return self.users[user_id].get("role")

	def get_permitted_categories(self, role_id: Any) -> Set[Any]:
		return set(self.roles.get(role_id) or ())

	def get_vehicles_by_categories(self, category_ids: Iterable[Any]) -> List[Vehicle]:
		wanted = set(category_ids)
		return [v for v in self.vehicles if v.category_id is not None and v.category_id in wanted]

	def get_overlapping_reservations(
		self,
		start: datetime,
		end: datetime,
		car_ids: Optional[Iterable[Any]] = None,
		driver_ids: Optional[Iterable[Any]] = None
	) -> List[Reservation]:
		cars = set(car_ids) if car_ids is not None else None
		drivers = set(driver_ids) if driver_ids is not None else None

		result = []
		for reservation in self.reservations:
			if not (reservation.start < end and reservation.end > start):
				continue
			if cars is not None or drivers is not None:
				by_car = cars is not None and reservation.car_id in cars
				by_driver = drivers is not None and reservation.driver_id in drivers
				if not (by_car or by_driver):
					continue
			result.append(reservation)
		return result

	def get_driver_display_name(self, driver_id: Any) -> Optional[str]:
		user = self.users.get(driver_id)
		if not user:
			return None
		return format_person_name(user.get("first_name"), user.get("last_name")) or None
