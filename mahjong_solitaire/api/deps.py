"""API dependencies."""
from ..core.catalog import get_catalog, LayoutCatalog
from ..core.simulator import get_simulator, SolvabilitySimulator
from ..core.store import get_store, SessionStore


def get_layout_catalog() -> LayoutCatalog:
    """Dependency for layout catalog."""
    return get_catalog()


def get_solvability_simulator() -> SolvabilitySimulator:
    """Dependency for solvability simulator."""
    return get_simulator()


def get_session_store() -> SessionStore:
    """Dependency for session store."""
    return get_store()
