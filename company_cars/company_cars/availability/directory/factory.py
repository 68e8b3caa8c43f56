"""
Fleet Directory Factory

Factory pattern to get the directory implementation for the site.
"""

from typing import Optional

import frappe

from .base import FleetDirectory


def get_directory(provider: Optional[str] = None) -> FleetDirectory:
	"""
	Factory para obtener el directorio de flota.

	Un hook "company_cars_directory" (ruta a una clase) tiene prioridad;
	si no hay hook se usa provider o el setting directory_provider.

	Args:
		provider: "frappe" o "memory"

	Returns:
		FleetDirectory: instancia del directorio

	Raises:
		ValueError: si provider no es soportado
	"""
	hooks = frappe.get_hooks("company_cars_directory")
	if hooks:
		return frappe.get_attr(hooks[-1])()

	if provider is None:
		from ...config import get_setting
		provider = get_setting("directory_provider")

	if provider == "frappe":
		from .frappe_directory import FrappeDirectory
		return FrappeDirectory.from_settings()
	elif provider == "memory":
		from .memory import MemoryDirectory
		return MemoryDirectory()
	else:
		raise ValueError(f"Unsupported directory provider: {provider}")
