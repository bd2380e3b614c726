"""
Query expansion with tracing.

This example shows:
1. A nested fan-out/pipeline graph expanding one search query
2. Early termination: only the first few rewrites are pulled
3. Trace output for every stage that ran
"""

import logging
from itertools import islice

from inflater import Trace, chain_many, concat_many, filter_values, identity, map_values, traced, with_suffixes

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("query_expansion")


def build_graph(trace: Trace):
    keep = identity()
    dictionary = traced(with_suffixes([" definition", " synonym"]), trace, "dictionary")
    plural = traced(map_values(lambda s: s if s.endswith("s") else s + "s"), trace, "plural")
    spelled = traced(
        filter_values(lambda s: s.isascii(), map_values(str.casefold)),
        trace,
        "casefold",
    )
    return concat_many(
        keep,
        dictionary,
        chain_many(spelled, concat_many(keep, plural)),
    )


if __name__ == "__main__":
    trace = Trace()
    expand = build_graph(trace)

    for query in ["Coffee", "Tea"]:
        logger.info("expanding %r", query)
        for rewrite in expand(query):
            print(rewrite)

    trace.clear()
    first = list(islice(expand("Espresso"), 2))
    logger.info("first rewrites: %s", first)
    for event in trace.get_events():
        logger.info("%s %s", event.action, event.info)
