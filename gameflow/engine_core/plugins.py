"""
Plugins - Optional wrappers around moves plus initial-state augmentation.

A plugin is an opaque capability with two optional hooks:

    Plugin(
        fn_wrap=lambda fn: wrapped_fn,      # same signature as fn
        setup=lambda G, ctx: G,             # runs after the game's setup
    )

The first-declared plugin's wrapper is outermost: its pre-logic runs
first and its post-logic runs last.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Iterable, Mapping, Sequence

from .context import Ctx

WrapFn = Callable[[Callable[..., Any]], Callable[..., Any]]
SetupFn = Callable[[Any, Ctx], Any]


@dataclass(frozen=True)
class Plugin:
    fn_wrap: WrapFn | None = None
    setup: SetupFn | None = None

    @classmethod
    def coerce(cls, plugin: Any) -> Plugin:
        """Accept a Plugin, a mapping, or any object with fn_wrap/setup attributes."""
        if isinstance(plugin, Plugin):
            return plugin
        if isinstance(plugin, Mapping):
            return cls(fn_wrap=plugin.get("fn_wrap"), setup=plugin.get("setup"))
        return cls(
            fn_wrap=getattr(plugin, "fn_wrap", None),
            setup=getattr(plugin, "setup", None),
        )


def normalize_plugins(plugins: Iterable[Any] | None) -> tuple[Plugin, ...]:
    return tuple(Plugin.coerce(p) for p in plugins or ())


def fn_wrap(fn: Callable[..., Any], plugins: Sequence[Plugin]) -> Callable[..., Any]:
    """Wrap fn with every plugin's fn_wrap, first-declared outermost."""
    return reduce(
        lambda inner, plugin: plugin.fn_wrap(inner) if plugin.fn_wrap else inner,
        reversed(plugins),
        fn,
    )


def run_setup(G: Any, ctx: Ctx, plugins: Sequence[Plugin]) -> Any:
    """Chain every plugin's setup over G in declaration order."""
    for plugin in plugins:
        if plugin.setup:
            G = plugin.setup(G, ctx)
    return G
