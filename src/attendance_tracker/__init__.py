"""Attendance Tracker package.

This package is organized by feature modules (attendance, leaves, employees,
admins, ...) with a thin Flask controller layer on top of plain service and
repository layers.
"""
