"""
Eligibility Resolver

Maps a user to the comfort categories their job role allows.
"""

from typing import Any, Set

from .directory.base import FleetDirectory


class RoleNotAssigned(Exception):
	"""El usuario existe pero no tiene cargo asignado."""
	pass


def resolve_comfort_categories(directory: FleetDirectory, user_id: Any) -> Set[Any]:
	"""
	Obtiene las categorías de confort permitidas para el usuario.

	Algoritmo:
		1. Obtener el cargo del usuario (UserNotFoundError si no existe)
		2. Si el cargo está vacío -> RoleNotAssigned
		3. Obtener categorías del cargo (un set vacío es válido)

	Returns:
		set de ids de categoría
	"""
	role_id = directory.get_user_role(user_id)
	if role_id is None or role_id == "":
		raise RoleNotAssigned(user_id)

	categories = directory.get_permitted_categories(role_id) or set()
	return {category for category in categories if category is not None and category != ""}
