"""Storefront services: records, storage and domain workflows."""
