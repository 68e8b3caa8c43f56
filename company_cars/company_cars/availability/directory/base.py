"""
Base Fleet Directory

Defines the lookups the availability resolver needs from the outside world.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Iterable, List, Optional, Set

from ..models import Reservation, Vehicle


class FleetDirectory(ABC):
	"""
	Interfaz base para las fuentes de datos de la flota.

	Todas las implementaciones deben devolver registros ya tipados
	(Vehicle, Reservation); el resolver nunca arma consultas.
	"""

	@abstractmethod
	def get_user_role(self, user_id: Any) -> Optional[Any]:
		"""
		Obtiene el cargo (job role) del usuario.

		Returns:
			id del cargo, o None si el usuario no tiene cargo asignado

		Raises:
			UserNotFoundError: si el usuario no existe
			DirectoryError: si falla la consulta
		"""
		pass

	@abstractmethod
	def get_permitted_categories(self, role_id: Any) -> Set[Any]:
		"""Categorías de confort permitidas para el cargo (puede ser vacío)."""
		pass

	@abstractmethod
	def get_vehicles_by_categories(self, category_ids: Iterable[Any]) -> List[Vehicle]:
		"""Autos cuya categoría de confort está en category_ids."""
		pass

	@abstractmethod
	def get_overlapping_reservations(
		self,
		start: datetime,
		end: datetime,
		car_ids: Optional[Iterable[Any]] = None,
		driver_ids: Optional[Iterable[Any]] = None
	) -> List[Reservation]:
		"""
		Reservas que se solapan con [start, end).

		car_ids / driver_ids son una pista para acotar la consulta
		(auto IN car_ids OR conductor IN driver_ids); una implementación
		puede ignorarlas.
		"""
		pass

	@abstractmethod
	def get_driver_display_name(self, driver_id: Any) -> Optional[str]:
		"""Nombre visible del conductor ("Nombre Apellido"), o None si no existe."""
		pass


class DirectoryError(Exception):
	"""Excepción para fallas de consulta en el directorio."""
	pass


class UserNotFoundError(Exception):
	"""El identificador de usuario no corresponde a ningún usuario."""
	pass
