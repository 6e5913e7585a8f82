from core.occurrences import Occurrences

def combinations(occurrences: Occurrences) -> list[Occurrences]:
    """
    Return every subset of an occurrence list, including () and the list itself.

    The subsets of (('a', 2), ('b', 2)) are:

        (), (('a', 1),), (('a', 2),),
        (('b', 1),), (('a', 1), ('b', 1)), (('a', 2), ('b', 1)),
        (('b', 2),), (('a', 1), ('b', 2)), (('a', 2), ('b', 2))

    A list with counts c1..ck has (c1 + 1) * ... * (ck + 1) subsets. The order
    of the result is not significant.
    """
    if not occurrences:
        return [()]

    (letter, count), rest = occurrences[0], occurrences[1:]
    # letter sorts before everything in rest, so prepending keeps each subset canonical.
    return [
        ((letter, n),) + tail if n else tail
        for tail in combinations(rest)
        for n in range(count + 1)
    ]
