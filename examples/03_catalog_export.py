#!/usr/bin/env python3
"""Example: Run everything and export the catalog — langtour

Usage:
    python examples/03_catalog_export.py [output.yaml]
"""
from __future__ import annotations

import sys
from pathlib import Path

import langtour


def main() -> None:
    results = langtour.run_all(strict=True)
    failed = [r for r in results if not r.ok]
    for result in results:
        marker = "ok " if result.ok else "ERR"
        print(f"[{marker}] {result.name:<14} {result.output}")
    print(f"{len(results) - len(failed)}/{len(results)} demos passed")

    catalog = langtour.export_catalog(output_format="yaml")
    if len(sys.argv) > 1:
        Path(sys.argv[1]).write_text(catalog, encoding="utf-8")
        print(f"Catalog written to {sys.argv[1]}")
    else:
        print(catalog)


if __name__ == "__main__":
    main()
