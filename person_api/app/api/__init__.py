"""
API package containing the HTTP routes.

The top‑level ``router`` in :mod:`person_api.app.api.router` bundles
the domain routers and is mounted under ``/api`` by the application
factory.
"""
