"""Student Roster package.

This package is organized by feature modules (students, roster, attendance,
reports) with a thin Flask controller layer over service/store layers.
"""
