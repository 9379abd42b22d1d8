"""Volunteer matching API package.

The package is laid out in layers: ``domain`` entities and vocabularies,
``infrastructure`` persistence and security, ``application`` use cases and
``interfaces`` for the HTTP surface.
"""
