"""Catalog export for registered demos.

Converts a ``DemoRegistry`` into a plain dict/list structure that maps
naturally to JSON and YAML.  Entry points are represented by their
module path; the callables themselves are not serialized.

Usage
-----
::

    from langtour.catalog import CatalogSerializer
    from langtour.registry import get_default_registry

    serializer = CatalogSerializer()
    print(serializer.to_yaml(get_default_registry()))
"""
from __future__ import annotations

import json

import yaml

from langtour.registry import Demo, DemoRegistry


class CatalogSerializer:
    """Converts registries of ``Demo`` records to dicts, JSON and YAML."""

    def demo_to_dict(self, demo: Demo) -> dict[str, object]:
        return {
            "name": demo.name,
            "title": demo.title,
            "topic": demo.topic,
            "summary": demo.summary,
            "tags": list(demo.tags),
            "module": demo.module,
        }

    def to_dict(self, registry: DemoRegistry) -> dict[str, object]:
        """Serialize *registry* to a JSON-compatible dict."""
        from langtour import __version__

        return {
            "version": __version__,
            "topics": registry.list_topics(),
            "demos": [self.demo_to_dict(d) for d in registry.list_demos()],
        }

    def to_json(self, registry: DemoRegistry, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(registry), indent=indent, ensure_ascii=False)

    def to_yaml(self, registry: DemoRegistry) -> str:
        return yaml.dump(
            self.to_dict(registry),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
