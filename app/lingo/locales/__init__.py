"""Packaged YAML message catalogs.

``messages.yml`` is the default catalog; ``messages.<locale>.yml`` files hold
the per-locale catalogs. Keeping this as a real package ships the files
with the distribution.
"""
