from __future__ import annotations

from inflater import chain_many, concat_many, empty, from_list, identity, with_prefixes, with_suffixes


def show(title: str, values: list[str]) -> None:
    print(f"# {title}")
    for value in values:
        print(value)
    print()


if __name__ == "__main__":
    prefixes = with_prefixes(["1st ", "2nd ", "3rd "])
    suffixes = with_suffixes(["-san", "-sama", "-dono"])

    show("from_list", list(from_list(["foo", "bar", "baz"])("IGNORED")))
    show("with_prefixes", list(prefixes("item")))
    show("with_suffixes", list(suffixes("mina")))
    show("concat_many", list(concat_many(prefixes, suffixes)("foo")))
    show("chain_many", list(chain_many(prefixes, suffixes)("foo")))
    show("identity", list(concat_many(identity(), prefixes)("foo")))
    show("empty", list(chain_many(prefixes, suffixes, empty())("foo")))
