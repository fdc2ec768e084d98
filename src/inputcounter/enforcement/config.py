"""Client-reachable maximum-length configuration for rich-text fields.

Rich-text editing surfaces have no native length attribute, and a native
``maxlength`` on the underlying textarea would count markup. The maximum
is therefore handed to the client out-of-band, keyed by field key.

The map is filled once while a page or form renders
(:class:`ClientConfigBuilder`) and then frozen into a read-only
:class:`ClientConfig` shared by every session on that page.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)

CLIENT_CONFIG_VAR = "inputcounter_data"


class ClientConfig(Mapping[str, int]):
    """Read-only field key -> maximum mapping."""

    def __init__(self, maxima: Mapping[str, int] | None = None) -> None:
        self._maxima: Mapping[str, int] = MappingProxyType(dict(maxima or {}))

    def __getitem__(self, key: str) -> int:
        return self._maxima[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._maxima)

    def __len__(self) -> int:
        return len(self._maxima)

    def __repr__(self) -> str:
        return f"ClientConfig({dict(self._maxima)!r})"

    def maxlength_for(self, field_key: str) -> int:
        """Resolve the maximum for *field_key*; 0 (unlimited) when missing."""
        value = self._maxima.get(field_key)
        if value is None:
            logger.debug("No maxlength configured for %s, treating as unlimited", field_key)
            return 0
        return value

    def to_json(self) -> str:
        return json.dumps(dict(self._maxima), sort_keys=True)

    def to_script(self, var_name: str = CLIENT_CONFIG_VAR) -> str:
        """Render the map as an inline ``<script>`` assignment."""
        # "</" would close the script element early.
        payload = self.to_json().replace("</", "<\\/")
        return f"<script>var {var_name} = {payload};</script>"


class ClientConfigBuilder:
    """Collects maxima during rendering; :meth:`freeze` ends collection."""

    def __init__(self) -> None:
        self._maxima: dict[str, int] = {}
        self._frozen: ClientConfig | None = None

    def add(self, field_key: str, maxlength: int) -> None:
        if self._frozen is not None:
            msg = "Client configuration is frozen; it is populated once per page load"
            raise RuntimeError(msg)
        if maxlength > 0:
            self._maxima[field_key] = maxlength

    def __contains__(self, field_key: object) -> bool:
        return field_key in self._maxima

    def freeze(self) -> ClientConfig:
        if self._frozen is None:
            self._frozen = ClientConfig(self._maxima)
        return self._frozen
