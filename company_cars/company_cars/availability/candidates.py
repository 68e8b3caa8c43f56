"""
Candidate Set Builder

Collects the vehicles whose comfort category is permitted.
"""

from typing import Any, Dict, Set

from .directory.base import FleetDirectory
from .models import Vehicle


def build_candidate_set(directory: FleetDirectory, category_ids: Set[Any]) -> Dict[Any, Vehicle]:
	"""
	Arma el conjunto de autos candidatos.

	Args:
		directory: fuente de datos de la flota
		category_ids: categorías permitidas (no vacío)

	Returns:
		dict: {vehicle_id: Vehicle}
	"""
	candidates = {}

	for vehicle in directory.get_vehicles_by_categories(category_ids):
		# Sin categoría nunca es elegible
		if vehicle.category_id is None or vehicle.category_id not in category_ids:
			continue
		# Ante ids duplicados se queda el primero
		candidates.setdefault(vehicle.id, vehicle)

	return candidates
