"""
Pool Package

This package contains the containers that hold a generation of genomes: the
population and the species it is split into for niching.

The pool only keeps books. Assigning genomes to species, evaluating them and
breeding the next generation are left to the trainer.

Modules:
    species:    Species interface and the concrete BasicSpecies
    population: Population interface and the concrete BasicPopulation

Exported Classes:
    Species:         A subgroup of genomes with a designated leader
    BasicSpecies:    The species created by BasicPopulation
    Population:      The full set of species for one generation
    BasicPopulation: Population made up of BasicSpecies
"""

from evopool.pool.species    import Species, BasicSpecies
from evopool.pool.population import Population, BasicPopulation

__all__ = [
    'Species',
    'BasicSpecies',
    'Population',
    'BasicPopulation',
]
