import random

import pytest

from genalgo.candidate import ProductCandidate
from genalgo.population import Population


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return min(self.value, n - 1)

    def random(self):
        return 0.5


def pattern(seed=1):
    return ProductCandidate(rng=random.Random(seed))


def with_genes(x1, x2):
    candidate = ProductCandidate(rng=random.Random(0))
    candidate.genotype[0].value = x1
    candidate.genotype[1].value = x2
    return candidate


def test_initial_population_has_requested_candidates():
    pop = Population(6, pattern(), rng=random.Random(0))
    assert len(pop) == 6
    assert all(isinstance(c, ProductCandidate) for c in pop.candidates)


def test_pattern_required_for_nonempty():
    with pytest.raises(ValueError):
        Population(3)


def test_calculate_records_sum_and_best():
    pop = Population(10, pattern(), rng=random.Random(0))
    pop.calculate()
    rates = [c.rate for c in pop.candidates]
    assert pop.rate_sum == sum(rates)
    assert pop.best_candidate.rate == max(rates)
    assert pop.best_rate() == max(rates)
    assert pop.best_val == max(rates)


def test_best_rate_of_empty_population():
    assert Population(0, pattern()).best_rate() == -1.0


def test_select_empty_raises():
    with pytest.raises(ValueError):
        Population(0, pattern()).select()


def test_select_favours_only_rated_candidate():
    pop = Population(5, pattern(), rng=random.Random(2))
    for candidate in pop.candidates:
        candidate.genotype[0].value = 0
    pop.candidates[-1].genotype[0].value = 4
    pop.candidates[-1].genotype[1].value = 5
    pop.calculate()
    assert all(pop.select() is pop.candidates[-1] for _ in range(50))


def test_mutation_flips_every_bit_when_always_drawn():
    assert Population(rng=FixedRng(0)).mutation("0101") == "1010"


def test_mutation_keeps_bits_when_never_drawn():
    assert Population(rng=FixedRng(99)).mutation("0110") == "0110"


def test_mutation_keeps_length_and_alphabet():
    bits = "0011010111001010"
    mutated = Population(rng=random.Random(5)).mutation(bits)
    assert len(mutated) == len(bits)
    assert set(mutated) <= {"0", "1"}


def test_cross_swaps_tails_and_appends():
    pop = Population(rng=FixedRng(99))
    first, second = with_genes(3, 5), with_genes(6, 2)
    bits1, bits2 = first.to_binary(), second.to_binary()
    split = first.max_bits()
    pop.cross(first, second)
    assert pop.candidates == [first, second]
    assert first.to_binary() == bits1[:split] + bits2[split:]
    assert second.to_binary() == bits2[:split] + bits1[split:]


def test_next_generation_keeps_size_and_id():
    pop = Population(10, pattern(3), id=7, rng=random.Random(3))
    pop.calculate()
    parents = [c.to_binary() for c in pop.candidates]
    child = pop.next_generation()
    assert child.id == 7
    assert len(child) == 10
    assert [c.id for c in child.candidates] == list(range(1, 11))
    assert child.best_val == pop.best_rate()
    assert [c.to_binary() for c in pop.candidates] == parents
    for candidate in child.candidates:
        for gene in candidate.genotype:
            assert gene.x_start <= gene.value <= gene.x_end


def test_next_generation_of_odd_population_drops_one():
    pop = Population(7, pattern(), rng=random.Random(4))
    pop.calculate()
    assert len(pop.next_generation()) == 6


def test_selection_test_counts_and_sorts():
    pop = Population(8, pattern(), rng=random.Random(6))
    pop.calculate()
    results = pop.selection_test(200)
    assert sum(r.hits for r in results) == 200
    assert [r.hits for r in results] == sorted((r.hits for r in results), reverse=True)
    assert {r.id for r in results} == {c.id for c in pop.candidates}
    assert all(r.percent == r.hits * 100 / 200 for r in results)


def test_selection_test_rejects_nonpositive():
    with pytest.raises(ValueError):
        Population(2, pattern()).selection_test(0)


def test_describe_names_population_and_best():
    pop = Population(4, pattern(), id=4, rng=random.Random(0))
    pop.calculate()
    text = pop.describe()
    assert "Population: 4" in text
    assert f"Best candidate id#{pop.best_candidate.id}" in text
    assert text.count("candidate#") == 4