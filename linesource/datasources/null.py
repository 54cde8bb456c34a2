from typing import List

from .base import Capabilities


class NullDataSource:
    """Stand-in for an unconfigured slot; always empty."""

    capabilities = Capabilities()

    def retrieve(self) -> List[str]:
        return []
