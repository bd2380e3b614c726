"""Build an expansion pipeline from a JSON document."""

import logging

from inflater.structured import ConfigError, build_producer, default_registry

logging.basicConfig(level=logging.DEBUG)

PIPELINE = """
{
  "kind": "take",
  "count": 3,
  "child": {
    "kind": "chain",
    "children": [
      {"kind": "map", "name": "strip"},
      {"kind": "filter", "name": "nonempty"},
      {"kind": "concat", "children": [
        {"kind": "identity"},
        {"kind": "prefix", "values": ["how to ", "why "]},
        {"kind": "suffix", "values": [" tutorial"]}
      ]},
      {"kind": "map", "name": "kebab"}
    ]
  }
}
"""


if __name__ == "__main__":
    registry = default_registry()
    registry.register_transform("kebab", lambda s: s.replace(" ", "-"))

    expand = build_producer(PIPELINE, registry)
    for rewrite in expand("  bake bread "):
        print(rewrite)

    try:
        build_producer('{"kind": "map", "name": "shout"}', registry)
    except ConfigError as exc:
        print(f"rejected: {exc}")
