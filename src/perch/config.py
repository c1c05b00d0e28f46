"""Discovery configuration.

DiscoveryConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DiscoveryConfig:
    """Where to find an app directory and which file names mean what.

    All fields have sensible defaults. Override what you need::

        config = DiscoveryConfig(app_dir="src/app")
    """

    app_dir: str | Path = "app"

    # Implementation module file names
    page_file: str = "page.py"
    route_file: str = "route.py"
    layout_file: str = "layout.py"
    default_file: str = "default.py"
