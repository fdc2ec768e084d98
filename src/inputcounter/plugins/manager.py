"""Plugin discovery, loading, and filter resolution.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``inputcounter.plugins`` group. The built-in counter plugin is
registered explicitly by :func:`create_plugin_manager`.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

import pluggy

from inputcounter.plugins.hookspecs import CounterHookSpec
from inputcounter.services.render import CounterFilters

if TYPE_CHECKING:
    from inputcounter.config.models import CounterConfig
    from inputcounter.config.settings import CounterSettings

PROJECT_NAME = "inputcounter"
ENTRY_POINT_GROUP = "inputcounter.plugins"

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CounterHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Discover plugins from entry points.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay the host dispatches through."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def resolve_filters(self, config: CounterConfig) -> CounterFilters:
        """Merge configured defaults with plugin filter hooks.

        Allow-lists are the union of config and every plugin's result.
        Display and CSS toggles take the first plugin answer, else config.
        A failing plugin is logged and the configured value is used.
        """
        classes = list(config.allowed_classes)
        for extra in self._call_filter(self.hook.counter_classes, [], name="counter_classes"):
            classes.extend(t for t in extra or [] if t not in classes)

        ids = list(config.allowed_ids)
        for extra in self._call_filter(self.hook.counter_ids, [], name="counter_ids"):
            ids.extend(t for t in extra or [] if t not in ids)

        display = self._call_filter(
            self.hook.counter_display,
            None,
            name="counter_display",
            display=config.display,
        )
        load_css = self._call_filter(self.hook.counter_load_css, None, name="counter_load_css")

        return CounterFilters(
            display=display if display else config.display,
            allowed_classes=classes,
            allowed_ids=ids,
            load_css=config.load_css if load_css is None else bool(load_css),
        )

    @staticmethod
    def _call_filter(
        caller: Callable[..., T],
        fallback: T,
        *,
        name: str,
        **kwargs: object,
    ) -> T:
        """Call a filter hook; plugin failures are warnings, never errors."""
        try:
            return caller(**kwargs)
        except Exception:
            logger.warning("Filter hook %s failed; using configured value", name, exc_info=True)
            return fallback

    # ------------------------------------------------------------------
    # Entry-point normalization
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("inputcounter")`` sets an
        ``inputcounter_impl`` attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "inputcounter_impl", None):
                return True
        return False


def create_plugin_manager(settings: CounterSettings, *, discover: bool = True) -> PluginManager:
    """Build a manager with the built-in counter plugin registered.

    Entry-point plugins are loaded when *discover* is True.
    """
    from inputcounter.plugins.builtins.counter import CounterPlugin

    pm = PluginManager()
    pm.register_plugin(CounterPlugin(settings, pm), name="counter")
    if discover:
        pm.discover_and_load()
    return pm
