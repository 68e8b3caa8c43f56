"""
Free Car Resolver

Runs the availability pipeline for one user and one time window:
window → categories → candidate cars → conflict filter → output records.
"""

from datetime import date, datetime
from typing import Any, Optional, Union

import frappe

from .assembler import assemble_result
from .candidates import build_candidate_set
from .conflicts import filter_free_vehicles
from .directory.base import DirectoryError, FleetDirectory, UserNotFoundError
from .eligibility import RoleNotAssigned, resolve_comfort_categories
from .models import (
	INVALID_INPUT,
	LOOKUP_FAILED,
	NO_CANDIDATE_VEHICLES,
	NO_ELIGIBLE_CATEGORIES,
	PLACEHOLDER,
	ROLE_NOT_ASSIGNED,
	USER_NOT_FOUND,
	AvailabilityResult,
)
from .window import InvalidTimeWindow, parse_time_window


DateTimeLike = Union[datetime, date, str, None]


def resolve_availability(
	user_id: Any,
	window_start: DateTimeLike,
	window_end: DateTimeLike,
	directory: Optional[FleetDirectory] = None,
	placeholder: Optional[str] = None,
	tz_name: Optional[str] = None
) -> AvailabilityResult:
	"""
	Obtiene los autos libres para el usuario en la ventana solicitada.

	Args:
		user_id: id del usuario que reserva
		window_start: inicio de la ventana
		window_end: fin de la ventana
		directory: fuente de datos (por defecto la del factory)
		placeholder: valor para nombre/conductor ausente
		tz_name: zona horaria del sitio

	Returns:
		AvailabilityResult: error o lista de autos (nunca ambos)

	Algoritmo:
		1. Validar ventana (invalid_input)
		2. Usuario -> cargo -> categorías (user_not_found / role_not_assigned)
		3. Categorías -> autos candidatos
		4. Quitar autos o conductores ocupados
		5. Armar salida
		Un conjunto vacío corta el flujo con una lista vacía.
	"""
	logger = frappe.logger("company_cars")
	placeholder = PLACEHOLDER if placeholder is None else placeholder

	# 1. Ventana
	try:
		window = parse_time_window(window_start, window_end, tz_name)
	except InvalidTimeWindow as e:
		return AvailabilityResult.failure(INVALID_INPUT, str(e))

	if user_id is None or user_id == "":
		return AvailabilityResult.failure(INVALID_INPUT, "Usuario no especificado")

	try:
		if directory is None:
			from .directory.factory import get_directory
			directory = get_directory()

		# 2. Categorías permitidas
		try:
			categories = resolve_comfort_categories(directory, user_id)
		except UserNotFoundError:
			return AvailabilityResult.failure(USER_NOT_FOUND, f"Usuario {user_id} no encontrado")
		except RoleNotAssigned:
			return AvailabilityResult.failure(ROLE_NOT_ASSIGNED, "El usuario no tiene un cargo asignado")

		if not categories:
			logger.info(f"Sin categorías de confort para {user_id}")
			return AvailabilityResult.empty(NO_ELIGIBLE_CATEGORIES)

		# 3. Candidatos
		candidates = build_candidate_set(directory, categories)
		if not candidates:
			logger.info(f"Sin autos en las categorías {sorted(map(str, categories))} para {user_id}")
			return AvailabilityResult.empty(NO_CANDIDATE_VEHICLES)

		# 4. Conflictos
		free = filter_free_vehicles(directory, candidates, window)

		# 5. Salida
		cars = assemble_result(directory, free, placeholder)

	except DirectoryError as e:
		logger.error(f"Error al resolver autos libres para {user_id}: {str(e)}")
		return AvailabilityResult.failure(LOOKUP_FAILED, "No se pudo consultar la disponibilidad de autos")

	except Exception as e:
		# Directorios de otras apps o proveedor mal configurado
		logger.error(f"Error inesperado al resolver autos libres para {user_id}: {e!r}")
		return AvailabilityResult.failure(LOOKUP_FAILED, "No se pudo consultar la disponibilidad de autos")

	logger.info(
		f"Autos libres para {user_id} ({window.start} - {window.end}): "
		f"{len(cars)} de {len(candidates)} candidatos"
	)

	return AvailabilityResult(cars=cars)
