"""Timeclock package.

A personal clock-in/clock-out tracker. The package is organized by feature
modules (timesheet, report) with a thin typer command layer on top of the
service/repository layers.
"""
