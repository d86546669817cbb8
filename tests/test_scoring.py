import pytest
from wordbits import parse_word
from wordbits.engine import (compare, count_mask_hits, guess_information, information_bits,
                             information_bits_with_solutions, narrow)

POOL = [parse_word(s) for s in
        ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "speed", "erase", "arise"]]


def test_information_bits_examples():
    assert information_bits(16, 4) == 2.0
    assert information_bits(32, 1) == 5.0


def test_information_bits_non_negative_and_zero_when_unchanged():
    for old in range(1, 40):
        for new in range(1, old + 1):
            bits = information_bits(old, new)
            assert bits >= 0.0
            assert (bits == 0.0) == (new == old)


@pytest.mark.parametrize("old,new", [(10, 0), (0, 0), (0, 3)])
def test_information_bits_rejects_empty_counts(old, new):
    with pytest.raises(ValueError):
        information_bits(old, new)


def test_information_bits_with_solutions():
    assert information_bits_with_solutions(16, 4, 2) == 1.0
    with pytest.raises(ValueError):
        information_bits_with_solutions(16, 4, 0)


def test_narrow_keeps_order_and_answer():
    answer = parse_word("trace")
    mask = compare(parse_word("raise"), answer)
    survivors, bits = narrow(POOL, mask)
    assert answer in survivors
    assert len(survivors) <= len(POOL)
    assert survivors == [w for w in POOL if w in survivors]
    assert bits == pytest.approx(information_bits(len(POOL), len(survivors)))


def test_narrow_is_idempotent_and_leaves_input_alone():
    before = list(POOL)
    mask = compare(parse_word("speed"), parse_word("arise"))
    once, bits1 = narrow(POOL, mask)
    twice, bits2 = narrow(once, mask)
    assert twice == once
    assert bits2 == 0.0
    assert bits1 > 0.0
    assert POOL == before


def test_narrow_monotonic_over_many_masks():
    for g in POOL:
        for a in POOL:
            survivors, _ = narrow(POOL, compare(g, a))
            assert 1 <= len(survivors) <= len(POOL)


def test_guess_information_matches_narrow():
    mask = compare(parse_word("crane"), parse_word("cared"))
    _, bits = narrow(POOL, mask)
    assert guess_information(POOL, mask) == bits
    assert count_mask_hits(POOL, mask) == len(narrow(POOL, mask)[0])


def test_exact_mask_narrows_to_one():
    answer = parse_word("scoop")
    survivors, bits = narrow(POOL, compare(answer, answer))
    assert survivors == [answer]
    assert bits == pytest.approx(information_bits(len(POOL), 1))
