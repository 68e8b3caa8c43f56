"""
Conflict Filter

Detects booking conflicts (overlaps) for candidate cars, considering:
- Reservations of the car itself
- Reservations of the car's assigned driver
"""

from typing import Any, Dict, List

from .directory.base import FleetDirectory
from .models import Reservation, TimeWindow, Vehicle


def find_conflicts(reservations: List[Reservation], window: TimeWindow) -> Dict[str, Any]:
	"""
	Detecta qué autos y conductores están ocupados en la ventana.

	Args:
		reservations: reservas devueltas por el directorio
		window: ventana solicitada

	Returns:
		dict: {
			"busy_cars": set de ids de auto,
			"busy_drivers": set de ids de conductor,
			"conflicting_reservations": [Reservation, ...]
		}
	"""
	busy_cars = set()
	busy_drivers = set()
	conflicting = []

	for reservation in reservations:
		# Primero el filtro por tiempo; lo que no solapa no aporta nada
		if not reservation.overlaps(window):
			continue

		conflicting.append(reservation)
		if reservation.car_id is not None:
			busy_cars.add(reservation.car_id)
		if reservation.driver_id is not None:
			busy_drivers.add(reservation.driver_id)

	return {
		"busy_cars": busy_cars,
		"busy_drivers": busy_drivers,
		"conflicting_reservations": conflicting
	}


def is_vehicle_free(vehicle: Vehicle, busy_cars: set, busy_drivers: set) -> bool:
	"""Un auto está libre si ni él ni su conductor (si tiene) están ocupados."""
	if vehicle.id in busy_cars:
		return False
	if vehicle.driver_id is not None and vehicle.driver_id in busy_drivers:
		return False
	return True


def filter_free_vehicles(
	directory: FleetDirectory,
	candidates: Dict[Any, Vehicle],
	window: TimeWindow
) -> Dict[Any, Vehicle]:
	"""
	Quita los autos con conflicto en la ventana.

	Algoritmo:
		1. Reunir ids de autos y de conductores (no nulos) de los candidatos
		2. Consultar reservas que se solapan con la ventana
			(start < window.end AND end > window.start)
		3. Re-aplicar el filtro de solapamiento a cada reserva
		4. Excluir autos ocupados o cuyo conductor está ocupado

	Returns:
		dict: {vehicle_id: Vehicle} con los autos libres
	"""
	car_ids = list(candidates.keys())
	driver_ids = list({v.driver_id for v in candidates.values() if v.driver_id is not None})

	reservations = directory.get_overlapping_reservations(
		window.start,
		window.end,
		car_ids=car_ids,
		driver_ids=driver_ids
	)

	conflicts = find_conflicts(reservations, window)

	return {
		vehicle_id: vehicle
		for vehicle_id, vehicle in candidates.items()
		if is_vehicle_free(vehicle, conflicts["busy_cars"], conflicts["busy_drivers"])
	}
