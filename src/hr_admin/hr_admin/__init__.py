"""HR admin package.

This package is organized by feature modules (working_hours, ...) with a thin
Flask controller layer on top of pure service/model layers.
"""
