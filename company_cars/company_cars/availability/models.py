"""
Availability Records

Typed records shared by every stage of the free car resolution:
- Vehicle / Reservation (loaded from the directory)
- TimeWindow (validated request)
- AvailableCar / AvailabilityResult (output)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union


PLACEHOLDER = "—"

# Códigos de error expuestos al cliente
INVALID_INPUT = "invalid_input"
USER_NOT_FOUND = "user_not_found"
ROLE_NOT_ASSIGNED = "role_not_assigned"
LOOKUP_FAILED = "lookup_failed"

# Motivos de resultado vacío (no son errores)
NO_ELIGIBLE_CATEGORIES = "no_eligible_categories"
NO_CANDIDATE_VEHICLES = "no_candidate_vehicles"


@dataclass(frozen=True)
class TimeWindow:
	start: datetime
	end: datetime


@dataclass(frozen=True)
class Vehicle:
	id: Any
	name: Optional[str]
	category_id: Any
	driver_id: Optional[Any] = None


@dataclass(frozen=True)
class Reservation:
	car_id: Optional[Any]
	driver_id: Optional[Any]
	start: datetime
	end: datetime

	def overlaps(self, window: TimeWindow) -> bool:
		"""
		Solapamiento estricto con la ventana: start < window.end AND end > window.start.

		Una reserva que termina justo cuando empieza la ventana (o empieza justo
		cuando termina) no cuenta. Reservas con start >= end nunca solapan.
		"""
		if self.start >= self.end:
			return False
		return self.start < window.end and self.end > window.start


@dataclass(frozen=True)
class AvailableCar:
	id: Any
	name: str
	category_id: Any
	driver: str

	def to_dict(self) -> Dict[str, Any]:
		return {
			"name": self.name,
			"categoryId": self.category_id,
			"driver": self.driver,
		}


@dataclass(frozen=True)
class ResolutionError:
	code: str
	message: str


@dataclass(frozen=True)
class AvailabilityResult:
	"""
	Resultado de una resolución: o bien un error, o bien la lista de autos libres.

	empty_reason explica una lista vacía válida (sin categorías o sin
	candidatos); no es un error.
	"""

	cars: List[AvailableCar] = field(default_factory=list)
	error: Optional[ResolutionError] = None
	empty_reason: Optional[str] = None

	@classmethod
	def failure(cls, code: str, message: str) -> "AvailabilityResult":
		return cls(error=ResolutionError(code, message))

	@classmethod
	def empty(cls, reason: str) -> "AvailabilityResult":
		return cls(empty_reason=reason)

	@property
	def ok(self) -> bool:
		return self.error is None

	def to_response(
		self,
		translate: Optional[Callable[[str], str]] = None
	) -> Union[List[Dict[str, Any]], Dict[str, str]]:
		"""
		Lista de {name, categoryId, driver} o bien {error, code}.

		translate se aplica solo al mensaje de error (p. ej. frappe._).
		"""
		if self.error:
			message = translate(self.error.message) if translate else self.error.message
			return {"error": message, "code": self.error.code}
		return [car.to_dict() for car in self.cars]
