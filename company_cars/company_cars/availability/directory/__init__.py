"""
Fleet Directory Module

Provides the data sources the availability resolver reads from:
- Base interface (base.py)
- Factory for getting the right directory (factory.py)
- Frappe database implementation (frappe_directory.py)
- In-memory implementation (memory.py)
"""
