"""Attendance Tracker package.

Organized by feature modules (accounts, students, attendance) with a thin
Flask controller layer on top of service/repository layers.
"""
