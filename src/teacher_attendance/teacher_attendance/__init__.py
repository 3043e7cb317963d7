"""Teacher attendance API package.

Organized by feature modules (teachers, attendance, schedules, holidays)
with a thin Flask controller layer over service/repository layers.
"""
