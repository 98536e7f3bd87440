"""
Unit tests for evopool.pool.species module.

This module contains tests for the Species interface and the BasicSpecies
class created by the population.
"""

import math
import pytest
from unittest.mock import Mock

from evopool.pool.population import Population, BasicPopulation
from evopool.pool.species import Species, BasicSpecies


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def mock_population():
    return Mock(spec=Population)


@pytest.fixture
def species(mock_population):
    return BasicSpecies(mock_population)


# ============================================================================
# Test Species Initialization
# ============================================================================

class TestSpeciesInit:
    """Test BasicSpecies.__init__ method."""

    def test_abstract_species_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Species()

    def test_init_stores_population(self, species, mock_population):
        assert species.population is mock_population

    def test_init_is_empty_without_leader(self, species):
        assert species.members == []
        assert species.leader is None
        assert species.best_score == 0.0

    def test_init_counters_start_at_zero(self, species):
        assert species.age == 0
        assert species.gens_no_improvement == 0
        assert species.offspring_count == 0
        assert species.offspring_share == 0.0

    def test_population_cannot_be_reassigned(self, species):
        with pytest.raises(AttributeError):
            species.population = BasicPopulation()

    def test_members_lists_are_not_shared(self, mock_population, make_genome):
        s1 = BasicSpecies(mock_population)
        s2 = BasicSpecies(mock_population)
        s1.members.append(make_genome())

        assert s2.members == []


# ============================================================================
# Test Species add
# ============================================================================

class TestSpeciesAdd:
    """Test BasicSpecies.add method."""

    def test_add_appends_in_order(self, species, make_genome):
        g1, g2, g3 = make_genome(1.0), make_genome(2.0), make_genome(3.0)
        species.add(g1)
        species.add(g2)
        species.add(g3)

        assert species.members == [g1, g2, g3]

    def test_add_sets_back_references(self, species, mock_population, make_genome):
        genome = make_genome()
        species.add(genome)

        assert genome.species is species
        assert genome.population is mock_population

    def test_add_does_not_touch_leader(self, species, make_genome):
        species.add(make_genome())
        assert species.leader is None

    def test_add_allows_duplicates(self, species, make_genome):
        """Uniqueness of members is the species' own business, not enforced here."""
        genome = make_genome()
        species.add(genome)
        species.add(genome)

        assert len(species.members) == 2


# ============================================================================
# Test Species calculate_share
# ============================================================================

class TestSpeciesCalculateShare:
    """Test BasicSpecies.calculate_share method."""

    def test_share_is_mean_adjusted_score_when_maximizing(self, species, make_genome):
        species.add(make_genome(10.0, adjusted_score=2.0))
        species.add(make_genome(10.0, adjusted_score=4.0))

        share = species.calculate_share(should_minimize=False, max_score=100.0)

        assert share == pytest.approx(3.0)
        assert species.offspring_share == pytest.approx(3.0)

    def test_share_when_minimizing_measures_distance_from_max(self, species, make_genome):
        species.add(make_genome(adjusted_score=2.0))
        species.add(make_genome(adjusted_score=4.0))

        share = species.calculate_share(should_minimize=True, max_score=10.0)

        # (10 - 2 + 10 - 4) / 2
        assert share == pytest.approx(7.0)

    def test_share_skips_invalid_scores(self, species, make_genome):
        species.add(make_genome(adjusted_score=6.0))
        species.add(make_genome(adjusted_score=math.nan))
        species.add(make_genome(adjusted_score=math.inf))
        species.add(make_genome(adjusted_score=-math.inf))

        assert species.calculate_share(False, 0.0) == pytest.approx(6.0)

    def test_share_is_zero_without_valid_members(self, species, make_genome):
        species.offspring_share = 5.0
        species.add(make_genome(adjusted_score=math.nan))

        assert species.calculate_share(False, 0.0) == 0.0
        assert species.offspring_share == 0.0

    def test_share_of_empty_species_is_zero(self, species):
        assert species.calculate_share(True, 1.0) == 0.0

    def test_share_returns_python_float(self, species, make_genome):
        species.add(make_genome(adjusted_score=1.0))
        assert type(species.calculate_share(False, 0.0)) is float


# ============================================================================
# Test Species string representation
# ============================================================================

class TestSpeciesStr:

    def test_str_reports_size_and_best_score(self, species, make_genome):
        species.add(make_genome())
        species.add(make_genome())
        species.best_score = 1.5

        text = str(species)
        assert "members=2" in text
        assert "best_score=1.5" in text
