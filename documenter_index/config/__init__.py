"""Load and validate documenter_index configuration YAML.

This subpackage parses the project's ``index.yaml`` file and produces an
:class:`IndexConfig` dataclass that the CLI commands consume. The primary entry
point is :func:`load_index_config`, which applies defaults for omitted keys and
rejects unknown category tags or invalid JavaScript variable names.

Examples
--------
>>> from pathlib import Path
>>> from documenter_index.config import load_index_config
>>> config = load_index_config(Path("config/index.yaml"))  # doctest: +SKIP
>>> config.source  # doctest: +SKIP
'https://example.org/Pkg.jl/dev/search_index.js'
"""

from .loader import load_index_config
from .models import IndexConfig, IndexConfigError

__all__ = ["IndexConfig", "IndexConfigError", "load_index_config"]
