"""
Availability Module

This module resolves which company cars a user may book for a time window:
- Time window validation (window.py)
- Job position eligibility (eligibility.py)
- Candidate cars (candidates.py)
- Booking conflicts (conflicts.py)
- Output records (assembler.py)
- Pipeline entry point (resolver.py)
"""
