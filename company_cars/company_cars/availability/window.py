"""
Time Window Validator

Parses the requested start/end instants into a TimeWindow.
"""

from datetime import date, datetime
from typing import Optional, Union

import pytz
from frappe.utils import get_datetime

from .models import TimeWindow


class InvalidTimeWindow(ValueError):
	"""Ventana de tiempo ausente, con formato inválido o con start >= end."""
	pass


def _to_datetime(value: Union[datetime, date, str, None], field_name: str, tz_name: Optional[str]) -> datetime:
	"""
	Convierte el valor recibido a un datetime naive en la zona horaria del sitio.

	Args:
		value: datetime, date o string
		field_name: nombre del parámetro (para mensajes)
		tz_name: zona horaria a la que se convierten los valores con tzinfo

	Returns:
		datetime naive
	"""
	if value is None or (isinstance(value, str) and not value.strip()):
		raise InvalidTimeWindow(f"{field_name} es requerido")

	if isinstance(value, str):
		value = value.strip()

	try:
		parsed = get_datetime(value)
	except (ValueError, TypeError, AttributeError, OverflowError):
		raise InvalidTimeWindow(f"Formato de fecha inválido en {field_name}")

	if not isinstance(parsed, datetime):
		raise InvalidTimeWindow(f"Formato de fecha inválido en {field_name}")

	# Fechas con timezone: llevar a la zona del sitio y quitar tzinfo
	if parsed.tzinfo is not None:
		try:
			tz = pytz.timezone(tz_name or "UTC")
		except pytz.UnknownTimeZoneError:
			tz = pytz.UTC
		parsed = parsed.astimezone(tz).replace(tzinfo=None)

	return parsed


def parse_time_window(
	start: Union[datetime, date, str, None],
	end: Union[datetime, date, str, None],
	tz_name: Optional[str] = None
) -> TimeWindow:
	"""
	Valida y construye la ventana solicitada.

	Args:
		start: inicio (datetime o string "YYYY-MM-DD HH:MM:SS", ISO 8601, ...)
		end: fin
		tz_name: zona horaria del sitio (para valores con tzinfo)

	Returns:
		TimeWindow con start < end

	Raises:
		InvalidTimeWindow: si falta algún valor, no se puede parsear,
			o start no es estrictamente menor que end
	"""
	start_dt = _to_datetime(start, "start_time", tz_name)
	end_dt = _to_datetime(end, "end_time", tz_name)

	if start_dt >= end_dt:
		raise InvalidTimeWindow("La hora de inicio debe ser anterior a la de fin")

	return TimeWindow(start=start_dt, end=end_dt)
