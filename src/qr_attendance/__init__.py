"""QR attendance backend.

Organized by feature modules (teachers, students, subjects, qr_sessions,
attendance, sweep) with a thin Flask controller layer over service and
repository layers.
"""
