from .ownership_resolver import OwnershipResolver
from .root_provisioning_service import RootProvisioningService
from .tree_copier import CopyStats, TreeCopier
from .tree_limits import TreeLimits
from .tree_reader import TreeReader

__all__ = [
    "CopyStats",
    "OwnershipResolver",
    "RootProvisioningService",
    "TreeCopier",
    "TreeLimits",
    "TreeReader",
]
