"""Single-request examples, one module per API area."""

from .backup import get_index_backup
from .browse import browse_backups, browse_indexes
from .cpe import get_cpe
from .index import (
    get_index_canaries,
    get_index_initial_access,
    get_index_ip_intel,
    get_index_vulnrichment,
    get_index_with_botnet_filter,
    get_index_with_cve_filter,
)
from .pdns import get_pdns
from .purl import get_purl
from .rule import get_rule
from .tag import get_tag

__all__ = [
    "browse_backups",
    "browse_indexes",
    "get_cpe",
    "get_index_backup",
    "get_index_canaries",
    "get_index_initial_access",
    "get_index_ip_intel",
    "get_index_vulnrichment",
    "get_index_with_botnet_filter",
    "get_index_with_cve_filter",
    "get_pdns",
    "get_purl",
    "get_rule",
    "get_tag",
]
