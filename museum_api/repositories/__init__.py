"""Repositories: concrete store implementations of core/repository_protocols.py."""
