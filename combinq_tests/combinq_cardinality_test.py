import math
import suite
from combinq import (
    factorial, choose, permute, multichoose,
    combination_appearances, permutation_appearances, multichoose_appearances
)

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

FACTORIAL_100 = int(
    "93326215443944152681699238856266700490715968264381621468592963895217599993229915608941463976156518286253697920827223758251185210916864000000000000000000000000"
)
CHOOSE_1000_832 = int(
    "1359578307154377147929220245480317022063628494700109214161339185998491705982730220827187173838995764985909775118253237706078706638334815696866772700709347742606303804123006462298452381996277060875"
)


@test("factorial matches known exact values")
def test_factorial_values():
    assert_that(factorial(0) == 1, "0! should be 1")
    assert_that(factorial(3) == 6, "3! should be 6")
    assert_that(factorial(4) == 24, "4! should be 24")
    assert_that(factorial(10) == 3628800, "10! should be 3628800")
    assert_that(factorial(20) == 2432902008176640000, "20! should fit exactly")
    assert_that(factorial(100) == FACTORIAL_100, "100! should be exact, far beyond 64 bits")


@test("factorial rejects negative input")
def test_factorial_negative():
    with assert_raises(ValueError):
        factorial(-1)


@test("choose matches known values including large ones")
def test_choose_values():
    cases = [
        (3, 2, 3),
        (4, 2, 6),
        (10, 2, 45),
        (20, 2, 190),
        (100, 2, 4950),
        (100, 34, 580717429720889409486981450),
        (1, 1, 1),
        (2, 3, 0),
        (1000, 832, CHOOSE_1000_832),
        (0, 0, 0),
    ]
    for n, k, want in cases:
        got = choose(n, k)
        assert_that(got == want, f"choose({n}, {k}) = {got}, want {want}")


@test("choose is zero outside its domain and agrees with math.comb inside it")
def test_choose_domain():
    assert_that(choose(5, 0) == 0, "k <= 0 gives 0")
    assert_that(choose(0, 3) == 0, "n <= 0 gives 0")
    assert_that(choose(-4, 2) == 0, "negative n gives 0")
    assert_that(choose(7, 7) == 1, "k == n gives 1")
    for n in range(1, 30):
        for k in range(1, n + 1):
            assert_that(choose(n, k) == math.comb(n, k), f"choose({n}, {k}) disagrees with math.comb")


@test("permute counts ordered selections")
def test_permute_values():
    assert_that(permute(5, 3) == 60, "5!/2! should be 60")
    assert_that(permute(5, 5) == 120, "5!/0! should be 120")
    assert_that(permute(5, 0) == 1, "one empty arrangement")
    assert_that(permute(3, 4) == 0, "k > n gives 0")
    assert_that(permute(1000, 3) == 1000 * 999 * 998, "large n stays exact")
    for n in range(0, 12):
        for k in range(0, n + 1):
            assert_that(permute(n, k) == math.perm(n, k), f"permute({n}, {k}) disagrees with math.perm")

    with assert_raises(ValueError):
        permute(-1, 0)


@test("multichoose counts multisets")
def test_multichoose_values():
    assert_that(multichoose(3, 2) == 6, "3 multichoose 2 should be 6")
    assert_that(multichoose(3, 3) == 10, "3 multichoose 3 should be 10")
    assert_that(multichoose(5, 1) == 5, "5 multichoose 1 should be 5")
    assert_that(multichoose(1, 4) == 1, "a single item can only repeat")
    assert_that(multichoose(15, 5) == 11628, "15 multichoose 5 should be 11628")
    assert_that(multichoose(0, 2) == 0, "no items, no multisets")
    for n in range(1, 15):
        for k in range(1, 15):
            assert_that(multichoose(n, k) == math.comb(n + k - 1, k), f"multichoose({n}, {k}) is wrong")


@test("appearance counts follow the closed forms")
def test_appearance_counts():
    # 10 choose 2 = 45 tuples, each value in 45 - 36 = 9 of them
    assert_that(combination_appearances(10, 2) == 9, "each value should appear 9 times in 10c2")
    assert_that(combination_appearances(4, 4) == 1, "with k == n every value appears once")
    assert_that(permutation_appearances(5, 3) == 36, "60 tuples * 3 slots / 5 values = 36")
    assert_that(permutation_appearances(3, 3) == 6, "full permutations contain every value")
    assert_that(multichoose_appearances(3, 2) == 4, "6 multisets * 2 slots / 3 values = 4")
    assert_that(multichoose_appearances(2, 5) == 15, "6 multisets * 5 slots / 2 values = 15")


if __name__ == "__main__":
    suite.main("combinq cardinality tests")
