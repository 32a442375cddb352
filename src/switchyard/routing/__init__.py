"""Routing — compiled route table with exact and longest-prefix matching.

Routes are registered during setup and compiled into an immutable
lookup structure before the app serves its first request.
"""
