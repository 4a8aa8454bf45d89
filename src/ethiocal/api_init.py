"""Registry and catalog bootstrap (import side-effect)."""
from .api import set_catalog, set_registry
from .bootstrap import build_catalog, build_registry

set_registry(build_registry())
set_catalog(build_catalog())
