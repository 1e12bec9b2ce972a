from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from .. import components


@dataclass(frozen=True)
class Example:
    """A runnable example: CLI name, human description and the zero-argument function."""

    name: str
    description: str
    function: Callable[[], None]


def normalize_name(name: str) -> str:
    """Map user input to a registry key: spaces become hyphens, everything lowercased."""
    return name.replace(" ", "-").lower()


class Registry:
    def __init__(self, examples: Iterable[Example] = ()) -> None:
        self._examples: dict[str, Example] = {}
        for example in examples:
            self.register(example)

    def register(self, example: Example) -> None:
        if not example.name or not example.description:
            raise ValueError("Example requires a non-empty name and description")
        if example.name in self._examples:
            raise ValueError(f"Duplicate example name: {example.name}")
        self._examples[example.name] = example

    def get(self, name: str) -> Example | None:
        return self._examples.get(normalize_name(name))

    def names(self) -> list[str]:
        return sorted(self._examples)

    def __iter__(self) -> Iterator[Example]:
        return (self._examples[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._examples)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._examples


def default_registry() -> Registry:
    return Registry([
        Example("index-initial-access", "Get Index Initial Access", components.get_index_initial_access),
        Example("index-vulnrichment", "Get Index Vulnrichment", components.get_index_vulnrichment),
        Example("index-cve-filter", "Get Index with CVE Filter", components.get_index_with_cve_filter),
        Example("index-botnet-filter", "Get Index with Botnet Filter", components.get_index_with_botnet_filter),
        Example("index-ip-intel", "Get Index IP Intel", components.get_index_ip_intel),
        Example("index-canary", "Get Index Canaries", components.get_index_canaries),
        Example("browse-indexes", "Browse Indexes", components.browse_indexes),
        Example("browse-backups", "Browse Backups", components.browse_backups),
        Example("backup", "Get Index Backup", components.get_index_backup),
        Example("purl", "Get PURL", components.get_purl),
        Example("rule", "Get Rule", components.get_rule),
        Example("tag", "Get Tag", components.get_tag),
        Example("pdns", "Get PDNS", components.get_pdns),
        Example("cpe", "Get CPE", components.get_cpe),
    ])
