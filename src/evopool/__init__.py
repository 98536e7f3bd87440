"""
evopool - population and species bookkeeping for evolutionary algorithms.

This package provides the container a training loop (genetic algorithms,
neuroevolution) uses to hold one generation of genomes, split into species
for niching. It creates species, flattens the population into one list,
finds the species holding the best genome, and purges genomes whose fitness
turned NaN or infinite.

Main components:
- genotype: Genome and GenomeFactory interfaces
- pool: Species and Population containers
- run: Configuration

Example:
    >>> from evopool import BasicPopulation
    >>> population = BasicPopulation(population_size=100, genome_factory=my_factory)
    >>> species = population.create_species()
    >>> species.add(my_factory.factor())
    >>> population.purge_invalid_genomes()
    >>> population.count
    1
"""

__version__ = "0.1.0"

from evopool.run.config              import Config
from evopool.genotype.genome         import Genome, BasicGenome, is_valid_score
from evopool.genotype.genome_factory import GenomeFactory
from evopool.pool.species            import Species, BasicSpecies
from evopool.pool.population         import Population, BasicPopulation

__all__ = [
    "Config",
    "Genome",
    "BasicGenome",
    "GenomeFactory",
    "Species",
    "BasicSpecies",
    "Population",
    "BasicPopulation",
    "is_valid_score",
]
