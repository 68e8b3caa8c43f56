"""
Tests for api/free_cars.py and api/security.py

Tests the whitelisted endpoint wiring. Session, cache and database are mocked.
"""

import unittest
from datetime import datetime
from unittest.mock import MagicMock, patch

import frappe

from company_cars.api import security
from company_cars.api.free_cars import get_free_cars
from company_cars.company_cars.availability.directory.memory import MemoryDirectory
from company_cars.company_cars.availability.models import Reservation, Vehicle


def _throw(msg, exc=frappe.ValidationError, *args, **kwargs):
	raise exc(msg)


def make_directory():
	return MemoryDirectory(
		users={
			"manager@example.com": {"role": "Manager"},
			"nobody@example.com": {"role": None},
			"driver@example.com": {"first_name": "Ivan", "last_name": "Petrov"},
		},
		roles={"Manager": ["Business"]},
		vehicles=[
			Vehicle("CAR-1", "Camry", "Business", "driver@example.com"),
			Vehicle("CAR-2", "Superb", "Business", None),
		],
		reservations=[
			Reservation("CAR-2", None, datetime(2026, 1, 20, 10, 0), datetime(2026, 1, 20, 12, 0)),
		]
	)


class TestGetFreeCars(unittest.TestCase):
	"""Tests for the get_free_cars endpoint."""

	def setUp(self):
		self.session = frappe._dict(user="manager@example.com")
		patchers = [
			patch("frappe.session", self.session),
			patch("frappe.conf", frappe._dict()),
			patch("frappe.logger"),
			patch("frappe.throw", side_effect=_throw),
			patch("frappe.log_error"),
			patch("company_cars.api.free_cars.check_rate_limit"),
			patch("company_cars.api.free_cars.get_system_timezone", return_value="UTC"),
			patch(
				"company_cars.company_cars.availability.directory.factory.get_directory",
				return_value=make_directory()
			),
			patch("company_cars.api.free_cars._", side_effect=lambda msg: msg),
			patch("company_cars.api.security._", side_effect=lambda msg: msg),
			# whitelist() checks local.flags.in_test before validating arguments
			patch.object(frappe.local, "flags", frappe._dict(in_test=True), create=True),
		]
		self.mocks = [p.start() for p in patchers]
		for p in patchers:
			self.addCleanup(p.stop)

		self.log_error = self.mocks[4]
		self.check_rate_limit = self.mocks[5]
		self.translate = self.mocks[8]

	def test_returns_free_cars(self):
		"""Test the list returned for an authenticated user."""
		result = get_free_cars("2026-01-20 10:00:00", "2026-01-20 11:00:00")

		self.assertEqual(result, [{"name": "Camry", "categoryId": "Business", "driver": "Ivan Petrov"}])

	def test_rate_limit_checked(self):
		"""Test that every call goes through the rate limiter."""
		get_free_cars("2026-01-20 10:00:00", "2026-01-20 11:00:00")

		self.check_rate_limit.assert_called_once_with(
			"get_free_cars", "manager@example.com", limit=30, seconds=60
		)

	def test_invalid_window_returns_error_object(self):
		"""Test that a bad window is an error object, not an exception."""
		result = get_free_cars("2026-01-20 11:00:00", "2026-01-20 10:00:00")

		self.assertEqual(result["code"], "invalid_input")
		self.assertTrue(result["error"])

	def test_error_message_translated(self):
		"""Test that the error message goes through frappe._ and the code does not."""
		self.translate.side_effect = lambda msg: f"[es] {msg}"

		result = get_free_cars("2026-01-20 11:00:00", "2026-01-20 10:00:00")

		self.assertTrue(result["error"].startswith("[es] "))
		self.assertEqual(result["code"], "invalid_input")

	def test_missing_params_return_error_object(self):
		"""Test calling without start_time / end_time."""
		result = get_free_cars()

		self.assertEqual(result["code"], "invalid_input")

	def test_role_not_assigned(self):
		"""Test the explanatory error for a user without job position."""
		self.session.user = "nobody@example.com"

		result = get_free_cars("2026-01-20 10:00:00", "2026-01-20 11:00:00")

		self.assertEqual(result["code"], "role_not_assigned")

	def test_guest_rejected(self):
		"""Test that Guest sessions are not allowed."""
		self.session.user = "Guest"

		with self.assertRaises(frappe.AuthenticationError):
			get_free_cars("2026-01-20 10:00:00", "2026-01-20 11:00:00")

		self.check_rate_limit.assert_not_called()

	def test_unexpected_error_logged(self):
		"""Test that unexpected exceptions are logged and re-thrown."""
		with patch("company_cars.api.free_cars.resolve_availability", side_effect=RuntimeError("boom")):
			with self.assertRaises(frappe.ValidationError):
				get_free_cars("2026-01-20 10:00:00", "2026-01-20 11:00:00")

		self.log_error.assert_called_once()


class TestRateLimit(unittest.TestCase):
	"""Tests for security.check_rate_limit."""

	def setUp(self):
		self.cache = MagicMock()
		patchers = [
			patch("frappe.cache", self.cache),
			patch("frappe.throw", side_effect=_throw),
			patch("company_cars.api.security._", side_effect=lambda msg: msg),
		]
		for p in patchers:
			p.start()
			self.addCleanup(p.stop)

		log_error_patcher = patch("frappe.log_error")
		self.log_error = log_error_patcher.start()
		self.addCleanup(log_error_patcher.stop)

	def test_counter_incremented(self):
		"""Test that a request under the limit increments the user's counter."""
		self.cache.get_value.return_value = 3

		security.check_rate_limit("get_free_cars", "a@example.com", limit=30, seconds=60)

		self.cache.set_value.assert_called_once_with(
			"company_cars:rate_limit:get_free_cars:a@example.com", 4, expires_in_sec=60
		)

	def test_first_call_starts_at_one(self):
		"""Test a user without a counter yet."""
		self.cache.get_value.return_value = None

		security.check_rate_limit("get_free_cars", "a@example.com", limit=30, seconds=60)

		self.cache.set_value.assert_called_once_with(
			"company_cars:rate_limit:get_free_cars:a@example.com", 1, expires_in_sec=60
		)

	def test_counters_are_per_user(self):
		"""Test that two users do not share a counter."""
		self.cache.get_value.return_value = 0

		security.check_rate_limit("get_free_cars", "a@example.com")
		security.check_rate_limit("get_free_cars", "b@example.com")

		keys = [c.args[0] for c in self.cache.get_value.call_args_list]
		self.assertEqual(keys, [
			"company_cars:rate_limit:get_free_cars:a@example.com",
			"company_cars:rate_limit:get_free_cars:b@example.com",
		])

	def test_limit_exceeded(self):
		"""Test that reaching the limit raises TooManyRequestsError."""
		self.cache.get_value.return_value = 30

		with self.assertRaises(frappe.TooManyRequestsError):
			security.check_rate_limit("get_free_cars", "a@example.com", limit=30, seconds=60)

		self.cache.set_value.assert_not_called()
		self.log_error.assert_called_once()

	def test_zero_limit_disables_check(self):
		"""Test that a limit of 0 never touches the cache."""
		security.check_rate_limit("get_free_cars", "a@example.com", limit=0)

		self.cache.get_value.assert_not_called()


def run_tests():
	"""Run all tests in this module."""
	unittest.main()
