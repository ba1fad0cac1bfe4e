import itertools
import suite
from combinq import Combinations, ConstructionError, GeneratorState, combinations, C

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def collect(gen):
    """advance to the end, copying the aliased indices on every step"""
    got = []
    while gen.advance():
        got.append(gen.indices.copy())
    return got


# --- construction ---

@test("construction rejects k > n, n <= 0 and k <= 0 with readable reasons")
def test_construction_errors():
    with assert_raises(ConstructionError, "k must be less than or equal to n"):
        Combinations(1, 2)
    with assert_raises(ConstructionError, "n must be greater than 0"):
        Combinations(0, 1)
    with assert_raises(ConstructionError, "n must be greater than 0"):
        Combinations(-3, 2)
    with assert_raises(ConstructionError, "k must be greater than 0"):
        Combinations(1, 0)
    with assert_raises(ConstructionError, "k must be less than or equal to n"):
        Combinations(["a", "b"], 3)


@test("construction errors carry n and k and are value errors")
def test_construction_error_fields():
    try:
        Combinations(3, 5)
    except ConstructionError as e:
        assert_that(isinstance(e, ValueError), "construction errors should be value errors")
        assert_that((e.n, e.k) == (3, 5), "error should remember the rejected n and k")
    else:
        assert_that(False, "k > n should have failed")


@test("length is available before the first advance")
def test_length_up_front():
    c = Combinations(100, 34)
    assert_that(c.total_count() == 580717429720889409486981450, "length should be 100 choose 34")
    assert_that(c.length == c.total_count(), "length attribute and total_count() should agree")
    assert_that(c.state is GeneratorState.NOT_STARTED, "nothing should have been produced yet")
    assert_that(c.arity == 34, "arity is k")


# --- successor rule ---

@test("n=3, k=2 emits (0,1), (0,2), (1,2) in that order")
def test_small_sequence():
    assert_that(collect(Combinations(3, 2)) == [(0, 1), (0, 2), (1, 2)], "n=3 k=2 sequence is wrong")


@test("n=5, k=3 emits all ten tuples lexicographically")
def test_five_choose_three():
    want = [
        (0, 1, 2), (0, 1, 3), (0, 1, 4), (0, 2, 3), (0, 2, 4),
        (0, 3, 4), (1, 2, 3), (1, 2, 4), (1, 3, 4), (2, 3, 4),
    ]
    assert_that(collect(Combinations(5, 3)) == want, "n=5 k=3 sequence is wrong")


@test("k == n emits the single full tuple, k == 1 emits every singleton")
def test_boundary_arity():
    assert_that(collect(Combinations(2, 2)) == [(0, 1)], "k == n should give one tuple")
    assert_that(collect(Combinations(4, 1)) == [(0,), (1,), (2,), (3,)], "k == 1 should give singletons")


@test("matches itertools.combinations for larger inputs")
def test_against_itertools():
    for n, k in [(10, 8), (10, 3), (200, 3), (12, 6)]:
        got = collect(Combinations(n, k))
        want = list(itertools.combinations(range(n), k))
        assert_that(got == want, f"n={n} k={k} disagrees with itertools")


@test("exhaustion is permanent and leaves the last tuple in place")
def test_exhaustion_idempotent():
    c = Combinations(3, 2)
    while c.advance():
        pass
    assert_that(c.state is GeneratorState.EXHAUSTED, "generator should be exhausted")
    for _ in range(3):
        assert_that(c.advance() is False, "advance after exhaustion should keep returning false")
    assert_that(c.indices == (1, 2), "exhausted generator should not touch its indices")


# --- items ---

@test("items project indices onto a bound sequence")
def test_items_bound():
    c = Combinations(["a", "b", "c"], 2)
    got = []
    while c.advance():
        got.append(c.item_snapshot())
    assert_that(got == [("a", "b"), ("a", "c"), ("b", "c")], "projected strings are wrong")


@test("items project onto the whole alphabet with the same order as the indices")
def test_items_alphabet():
    letters = "a b c d e f g h i j k l m n o p q r s t u v w x y z".split()
    c = combinations(letters, 2)
    want = list(itertools.combinations(letters, 2))
    got = c.to.items()
    assert_that(len(got) == 325, "26 choose 2 should be 325")
    assert_that(got == want, "alphabet pairs disagree with itertools")
    assert_that(got[-1] == ("y", "z"), "last pair should be (y, z)")


@test("the comb accessor builds a bound generator")
def test_comb_accessor():
    combos = C([10, 20, 30, 40]).comb.combinations(2)
    assert_that(combos.to.items() == [(10, 20), (10, 30), (10, 40), (20, 30), (20, 40), (30, 40)],
                "combinations over numbers are wrong")
    assert_that(C([10, 20, 30, 40]).comb.binomial_coefficient(2) == 6, "4 choose 2 should be 6")
    assert_that(C([10, 20, 30, 40]).comb.binomial_coefficient(5) == 0, "k > n gives 0")


@test("iterating yields owned tuples")
def test_iteration():
    tuples = list(Combinations(4, 3))
    assert_that(tuples == [(0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 3)], "iteration should yield every tuple")
    assert_that(all(isinstance(t, tuple) for t in tuples), "iteration should yield tuples")


@test("combinations benchmark on 25 choose 5")
def test_combinations_performance():
    import time
    start = time.perf_counter()
    count = Combinations(25, 5).to.count()
    duration = (time.perf_counter() - start) * 1000
    print(f"    {suite._c.grey}-> 25c5 ({count:,} tuples) took: {duration:.2f}ms{suite._c.reset}")
    assert_that(count == 53130, "25 choose 5 should be 53130")


if __name__ == "__main__":
    suite.main("combinq combinations tests")
