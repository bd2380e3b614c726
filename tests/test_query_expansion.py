"""End-to-end query expansion graphs built from nested fan-out and pipelines."""

from inflater import chain_many, concat_many, filter_values, identity, map_values, with_suffixes


def test_conversion_graph():
    keep = identity()
    roma2hira = with_suffixes([":roma2hira"])
    hira2kata = with_suffixes([":hira2kata"])
    wide2narrow = with_suffixes([":wide2narrow"])
    narrow2wide = with_suffixes([":narrow2wide"])
    dict_ = with_suffixes([":dict"])

    compose = concat_many(
        keep,
        dict_,
        chain_many(roma2hira, concat_many(
            keep,
            dict_,
            chain_many(hira2kata, concat_many(
                keep,
                dict_,
                wide2narrow,
            )),
        )),
        narrow2wide,
    )

    assert list(compose("query")) == [
        "query",
        "query:dict",
        "query:roma2hira",
        "query:roma2hira:dict",
        "query:roma2hira:hira2kata",
        "query:roma2hira:hira2kata:dict",
        "query:roma2hira:hira2kata:wide2narrow",
        "query:narrow2wide",
    ]


def test_graph_is_reusable():
    expand = chain_many(
        concat_many(identity(), map_values(str.lower)),
        filter_values(lambda s: s.isalpha()),
    )
    assert list(expand("Query")) == ["Query", "query"]
    assert list(expand("Q1")) == []
    assert list(expand("Query")) == ["Query", "query"]
