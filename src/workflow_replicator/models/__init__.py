"""
Data models for the workflow replicator.
"""

from .repository import Repository
from .filter_criteria import FilterCriteria
from .replication_target import ReplicationTarget, ReplicationPlan

__all__ = [
    "Repository",
    "FilterCriteria",
    "ReplicationTarget",
    "ReplicationPlan"
]
