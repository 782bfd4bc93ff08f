"""Cache dependency implementations."""

from keyedcache.infrastructure.dependencies.base import Dependency
from keyedcache.infrastructure.dependencies.callback import CallbackDependency
from keyedcache.infrastructure.dependencies.chained import ChainedDependency
from keyedcache.infrastructure.dependencies.expiring import ExpiringDependency
from keyedcache.infrastructure.dependencies.file import FileDependency
from keyedcache.infrastructure.dependencies.tag import TagDependency

__all__ = [
    "CallbackDependency",
    "ChainedDependency",
    "Dependency",
    "ExpiringDependency",
    "FileDependency",
    "TagDependency",
]
