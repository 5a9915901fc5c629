#!/usr/bin/env python3
"""Example: Quickstart — langtour

List the built-in demos, run one, and print what it wrote.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install langtour
"""
from __future__ import annotations

import langtour


def main() -> None:
    print(f"langtour version: {langtour.__version__}")

    # Step 1: See what is available
    names = langtour.list_demos()
    print(f"{len(names)} demos: {', '.join(names)}")

    # Step 2: Run a single demo and capture its line
    result = langtour.run_demo("money", strict=True)
    print(f"money -> {result.output}")

    # Step 3: Look up its metadata
    demo = langtour.get_demo("money")
    print(f"{demo.title} [{demo.topic}]: {demo.summary}")


if __name__ == "__main__":
    main()
