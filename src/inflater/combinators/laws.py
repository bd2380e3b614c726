"""Combinator laws and algebra documentation."""

# Combinators satisfy the following algebraic laws, for every producer p
# and every seed s ("==" means the same values in the same order):
#
# 1. Chain identity: chain(identity(), p) == p == chain(p, identity())
#    Passing a value through unchanged before or after p changes nothing
#
# 2. Empty absorption: chain(empty(), p) == empty() == chain(p, empty())
#    A stage with no values cuts every branch it sits on
#
# 3. Concat identity: concat(empty(), p) == p == concat(p, empty())
#    Fanning out to a producer with no values adds nothing
#
# 4. Concat associativity: concat_many(a, b, c) == a(s) + b(s) + c(s)
#    Output order is left to right no matter how the fold is nested
#
# 5. Chain associativity: chain(chain(a, b), c) == chain(a, chain(b, c))
#    chain_many may fold in either direction
#
# 6. Chain cardinality: len(chain(a, b)(s)) == sum(len(b(v)) for v in a(s))
#    Each value of a is a seed for b
#
# 7. Pass-through: map_values(None, p) == p == filter_values(None, p)
#    A missing transform or predicate keeps every value
