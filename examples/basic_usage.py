#!/usr/bin/env python3
"""
Basic Usage Example - Stoic Deep Immutability Engine

This script demonstrates the basic usage of the sanitizer. It shows how to:
- Freeze a nested mutable document
- Read records and sequences
- Derive new sequences with view operations
- Observe omitted circular references

Run: python examples/basic_usage.py
"""

from datetime import datetime, timezone
from typing import Any, Dict

from stoic import OMITTED, MutationError, create
from stoic.logging import configure_logging


def create_sample_document() -> Dict[str, Any]:
    """Create a sample mutable document."""
    document = {
        "user": {"name": "Alice", "roles": ["admin", "editor"]},
        "scores": [7, 3, 9],
        "created_at": datetime.now(timezone.utc),
    }
    document["user"]["document"] = document  # circular
    return document


def main():
    """Run the example."""
    configure_logging(level="INFO")

    print("🧊 Freezing document...")
    events = []
    frozen = create(create_sample_document(), on_cycle=events.append)

    print(f"  user.name: {frozen.user.name}")
    print(f"  roles: {frozen.user.roles.join(', ')}")
    print(f"  created_at (epoch ms): {frozen.created_at}")
    print(f"  circular reference omitted: {frozen.user.document is OMITTED}")
    for event in events:
        print(f"  cycle at {list(event.current_path)} -> {list(event.original_path)}")

    print("\n🔁 View operations return new sequences...")
    doubled = frozen.scores.map(lambda x: x * 2)
    print(f"  scores:          {frozen.scores}")
    print(f"  doubled:         {doubled}")
    print(f"  sorted:          {frozen.scores.to_sorted()}")
    print(f"  with_item(0, 1): {frozen.scores.with_item(0, 1)}")
    print(f"  total:           {frozen.scores.reduce(lambda acc, x: acc + x, 0)}")

    print("\n🔒 Mutation attempts...")
    try:
        frozen.scores[0] = 100
    except MutationError as e:
        print(f"  rejected: {e}")
    try:
        frozen.user.name = "Mallory"
    except MutationError as e:
        print(f"  rejected: {e}")


if __name__ == "__main__":
    main()
