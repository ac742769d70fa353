"""
Reconcile — ``__init__.py`` re-exports the reconciliation engine.

Everything here is a pure transformation over already-fetched kits:
NO filesystem access, NO network calls, NO backend calls. ``KitManager``
is the only stateful piece and it only ever swaps whole snapshots.
"""

from kitmanager.core.services.reconcile.engine import (  # noqa: F401
    NO_VERSION,
    VersionTransition,
    classify,
    compute_check_groups,
    compute_check_items,
    is_uninstalling,
    on_disk,
    removed_components,
    transition_label,
    version_label,
)
from kitmanager.core.services.reconcile.grouping import (  # noqa: F401
    OTHERS_GROUP,
    group_items,
    group_label,
)
from kitmanager.core.services.reconcile.installer import (  # noqa: F401
    installer_groups,
    installer_items,
    to_check_item,
)
from kitmanager.core.services.reconcile.matching import (  # noqa: F401
    find_counterpart,
    is_restricted,
    same_component,
)
from kitmanager.core.services.reconcile.ordering import sort_components  # noqa: F401
from kitmanager.core.services.reconcile.selection import (  # noqa: F401
    MissingSourceError,
    checked_components,
    fill_restricted_sources,
    map_items,
    restricted_components,
    set_checked,
)
from kitmanager.core.services.reconcile.state import (  # noqa: F401
    KitManager,
    ManagerState,
    derive_groups,
    with_components,
    with_config,
    with_current,
    with_installed,
    with_kits,
    with_operation,
)
