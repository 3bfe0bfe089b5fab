from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from bead_pattern.grid import Grid


@dataclass(frozen=True)
class PatternSource:
    """Where the exported grid comes from.

    ``build_config`` draws the source's widgets and returns its config;
    ``load_grid`` turns that config into a grid and raises ``ExportError``
    on bad input.
    """

    label: str
    config_type: Type[Any]
    default_config: Callable[[], Any]
    build_config: Callable[[Any], Any]
    load_grid: Callable[[Any], Grid]


# Keyed by config type; insertion order is the order shown in the UI.
_SOURCES: Dict[Type[Any], PatternSource] = {}


def register_pattern_source(source: PatternSource) -> None:
    _SOURCES[source.config_type] = source


def pattern_sources() -> List[PatternSource]:
    return list(_SOURCES.values())


def source_for(config: object) -> Optional[PatternSource]:
    return _SOURCES.get(type(config))
