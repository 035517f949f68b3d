"""HR Dashboard package.

This package is organized by feature modules (attendance, leaves, users,
reports, ...) with a thin Flask controller layer over service/repository
layers. Persistence belongs to the remote HR API; repositories here talk HTTP.
"""
