"""
Workflow Replicator

Helpers for a CI bot that copies GitHub workflow files from one repository
to the other repositories of an organization.
"""

__version__ = "0.1.0"
__description__ = "Replicate GitHub workflow files across the repositories of an organization"
