"""Shift planning package.

Organized by feature modules (slots, shifts, assignments, attendance, ...)
with a thin Flask controller layer over service/repository layers.
"""
