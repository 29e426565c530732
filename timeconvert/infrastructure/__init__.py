"""
Infrastructure layer package.

Contains the adapters that read external configuration
(JSON catalogs shipped as package resources) and turn it
into immutable domain catalogs.
"""
