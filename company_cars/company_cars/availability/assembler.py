"""
Result Assembler

Shapes the free cars into output records (name, category, driver name).
"""

from typing import Any, Dict, List, Optional

import frappe

from .directory.base import FleetDirectory
from .models import PLACEHOLDER, AvailableCar, Vehicle


def format_person_name(first_name: Optional[str], last_name: Optional[str]) -> str:
	"""Une nombre y apellido (recortados) con un solo espacio."""
	parts = [(part or "").strip() for part in (first_name, last_name)]
	return " ".join(part for part in parts if part)


def vehicle_sort_key(vehicle_id: Any):
	# Enteros en orden numérico primero, el resto como texto
	if isinstance(vehicle_id, int) and not isinstance(vehicle_id, bool):
		return (0, vehicle_id, "")
	return (1, 0, str(vehicle_id))


def assemble_result(
	directory: FleetDirectory,
	vehicles: Dict[Any, Vehicle],
	placeholder: str = PLACEHOLDER
) -> List[AvailableCar]:
	"""
	Arma la salida para cada auto libre.

	Args:
		directory: fuente de datos (para el nombre del conductor)
		vehicles: {vehicle_id: Vehicle} autos libres
		placeholder: valor para nombre/conductor ausente

	Returns:
		list[AvailableCar] ordenada por id de auto
	"""
	result = []

	for vehicle_id in sorted(vehicles, key=vehicle_sort_key):
		vehicle = vehicles[vehicle_id]

		driver = placeholder
		if vehicle.driver_id is not None:
			driver = directory.get_driver_display_name(vehicle.driver_id) or ""
			driver = driver.strip()
			if not driver:
				# Conductor sin usuario: se incluye igual con placeholder
				frappe.logger("company_cars").warning(
					f"Conductor {vehicle.driver_id} del auto {vehicle_id} no encontrado"
				)
				driver = placeholder

		name = (vehicle.name or "").strip() or placeholder

		result.append(AvailableCar(
			id=vehicle_id,
			name=name,
			category_id=vehicle.category_id,
			driver=driver
		))

	return result
