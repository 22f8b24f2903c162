"""Shift Payroll package.

Organized by feature modules (employees, shifts, wages, payroll) with a thin
Flask controller layer over service/repository layers. The payroll engine
(duration split, wage timeline, period aggregation, yearly threshold) is pure
and never reads the clock.
"""
