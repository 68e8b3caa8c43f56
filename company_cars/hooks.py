app_name = "company_cars"
app_title = "Company Cars"
app_publisher = "Company Cars Contributors"
app_description = "Consulta de autos corporativos libres por cargo y horario"
app_email = "fleet@example.com"
app_license = "mit"

# Apps
# ------------------

# required_apps = []

# Fleet Directory
# ------------------
# Dotted path to a FleetDirectory subclass that replaces the default
# Frappe-backed lookups (user, job position, company car, car booking).
# This app defines none of those DocTypes; without the hook they must
# already exist on the site (see README).
# The last registered hook wins.

# company_cars_directory = [
# 	"custom_app.fleet.CustomFleetDirectory"
# ]

# Installation
# ------------

# before_install = "company_cars.install.before_install"
# after_install = "company_cars.install.after_install"

# Permissions
# -----------
# Permissions evaluated in scripted ways

# permission_query_conditions = {
# 	"Car Booking": "company_cars.permissions.get_permission_query_conditions",
# }

# Overriding Methods
# ------------------------------
#
# override_whitelisted_methods = {
# 	"company_cars.api.free_cars.get_free_cars": "custom_app.api.get_free_cars"
# }

# Testing
# -------

# before_tests = "company_cars.install.before_tests"

# Request Events
# ----------------
# before_request = ["company_cars.utils.before_request"]
# after_request = ["company_cars.utils.after_request"]

# Automatically update python controller files with type annotations for this app.
# export_python_type_annotations = True
