"""
Population Module

This module implements the population container used by an evolutionary
training loop. The population is made up of species, and the species hold the
individual genomes. If speciation is not wanted, create a single species that
holds every genome.

The population is pure bookkeeping: it never evaluates, selects or breeds
genomes. A trainer typically drives it like this, once per generation:
    1. create species and fill them with genomes (via the genome factory and
       a speciation strategy)
    2. evaluate fitness and update 'best_genome'
    3. purge_invalid_genomes() to drop genomes whose score became NaN or infinite
    4. determine_best_species() / flatten() to inspect the aggregate state

The population is not thread-safe. All fitness evaluation must complete before
any of the operations above are called, and no species or member list may be
changed while they run.

Classes:
    Population:      Abstract base class defining the population interface
    BasicPopulation: Population made up of BasicSpecies
"""

import logging
import numpy as np
from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

from evopool.genotype.genome import is_valid_score
from evopool.pool.species    import BasicSpecies, Species

if TYPE_CHECKING:
    from evopool.genotype import Genome, GenomeFactory
    from evopool.run.config import Config

logger = logging.getLogger(__name__)

class Population(ABC):
    """
    Abstract base class for a population of genomes grouped into species.

    Public Attributes (must be provided by subclasses):
        species:         The species making up the population, in creation order
        best_genome:     The best genome seen so far, managed by the caller
        population_size: How many genomes the population should hold (advisory)
        genome_factory:  Factory used by callers to create genomes

    Public Properties (must be implemented by subclasses):
        count:               Number of distinct genomes across all species
        max_individual_size: Largest genome size the population accepts

    Public Methods (must be implemented by subclasses):
        clear():                  Remove all species
        create_species():         Create an empty species owned by this population
        determine_best_species(): Find the species holding the best genome
        flatten():                List every genome in the population
        purge_invalid_genomes():  Remove genomes with a NaN or infinite score
    """

    species        : list[Species]
    best_genome    : 'Genome | None'
    population_size: int
    genome_factory : 'GenomeFactory | None'

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of distinct genomes across all species."""
        pass

    @property
    @abstractmethod
    def max_individual_size(self) -> int:
        """Largest genome size the population accepts."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def create_species(self) -> Species:
        pass

    @abstractmethod
    def determine_best_species(self) -> Species | None:
        pass

    @abstractmethod
    def flatten(self) -> list['Genome']:
        pass

    @abstractmethod
    def purge_invalid_genomes(self) -> None:
        pass

class BasicPopulation(Population):
    """
    A population of genomes grouped into BasicSpecies.

    'best_genome' is set by the trainer and never validated or updated by the
    population. In particular it may refer to a genome that has since been
    purged, in which case determine_best_species() returns None.

    Public Attributes:
        name:            Descriptive name of this population
        species:         The species making up the population, in creation order
        best_genome:     The best genome seen so far (None until set by the caller)
        population_size: How many genomes the population should hold (not enforced)
        genome_factory:  Factory used by callers to create genomes (never called here)

    Public Properties:
        count:               Number of distinct genomes across all species
        max_individual_size: Largest genome size accepted; no limit is imposed

    Public Methods:
        clear():                  Remove all species
        create_species():         Create an empty species owned by this population
        determine_best_species(): Find the first species holding the best genome
        flatten():                List every genome, each one once
        purge_invalid_genomes():  Remove genomes with a NaN or infinite score

    Class Methods:
        from_config(config, genome_factory): Create a population from configuration
    """

    def __init__(self, population_size: int = 0, genome_factory: 'GenomeFactory | None' = None):
        """
        Initialize an empty population (no species).

        Parameters:
            population_size: How many genomes the population should hold
            genome_factory:  Factory used by callers to create genomes
        """
        self.name           : str                     = ""
        self.species        : list[Species]           = []
        self.best_genome    : 'Genome | None'         = None
        self.population_size: int                     = population_size
        self.genome_factory : 'GenomeFactory | None'  = genome_factory

    @classmethod
    def from_config(cls, config: 'Config', genome_factory: 'GenomeFactory | None' = None) -> 'BasicPopulation':
        """
        Create an empty population sized and named according to the configuration.

        Parameters:
            config:         Stores configuration parameters
            genome_factory: Factory used by callers to create genomes

        Returns:
            A new population with no species
        """
        population      = cls(config.population_size, genome_factory)
        population.name = config.name or ""
        return population

    def clear(self) -> None:
        """
        Remove all species, and with them every genome they hold.
        'best_genome' is left as it is.
        """
        logger.debug("Clearing %d species from population '%s'", len(self.species), self.name)
        self.species.clear()

    def create_species(self) -> Species:
        """
        Create a new, empty species owned by this population and append it to 'species'.

        Returns:
            The new species, with no members and no leader
        """
        species = BasicSpecies(self)
        self.species.append(species)
        logger.debug("Created species #%d in population '%s'", len(self.species), self.name)
        return species

    def determine_best_species(self) -> Species | None:
        """
        Find the species holding the best genome.

        Niching strategies use this to protect the species that currently
        holds the global best from being replaced.

        Returns:
            The first species (in creation order) whose members include
            'best_genome', or None if 'best_genome' is unset or held by no species
        """
        if self.best_genome is None:
            return None

        for species in self.species:
            if self.best_genome in species.members:
                return species
        return None

    def flatten(self) -> list['Genome']:
        """
        List every genome in the population.

        Genomes are listed species by species, in member order. A genome that
        (wrongly) appears in more than one species is listed only once, at its
        first occurrence. Genomes are matched with '==', so they need not be
        hashable. The returned list is a new object: changing it does not
        affect the population.
        """
        genomes = []
        for species in self.species:
            for genome in species.members:
                if genome not in genomes:
                    genomes.append(genome)
        return genomes

    @property
    def count(self) -> int:
        """Number of distinct genomes across all species, recomputed on every call."""
        return len(self.flatten())

    @property
    def max_individual_size(self) -> int:
        """Largest genome size accepted; this is the int32 maximum, i.e. no limit."""
        return int(np.iinfo(np.int32).max)

    def purge_invalid_genomes(self) -> None:
        """
        Remove every genome whose score or adjusted score is NaN or infinite.

        Such genomes come from failed or unstable evaluations and would dominate
        or corrupt any comparison made during selection. After the purge:
        - species left without members are removed from the population
        - a species whose leader was removed gets its first remaining member
          as the new leader (not its best-scoring one), and 'best_score' is
          reset to that leader's adjusted score

        Species and members are walked by index because both lists shrink
        while they are being scanned.
        """
        removed_genomes = 0
        removed_species = 0

        species_num = 0
        while species_num < len(self.species):
            species = self.species[species_num]

            genome_num = 0
            while genome_num < len(species.members):
                genome = species.members[genome_num]
                if is_valid_score(genome.score) and is_valid_score(genome.adjusted_score):
                    genome_num += 1
                else:
                    del species.members[genome_num]
                    removed_genomes += 1

            # the next species slides into this slot
            if not species.members:
                del self.species[species_num]
                removed_species += 1
                continue

            if species.leader not in species.members:
                species.leader     = species.members[0]
                species.best_score = species.leader.adjusted_score
                logger.debug("Species #%d lost its leader, promoted first member", species_num + 1)

            species_num += 1

        if removed_genomes:
            logger.info("Purged %d invalid genomes and %d empty species from population '%s'",
                        removed_genomes, removed_species, self.name)

    def __len__(self):
        return self.count

    def __str__(self):
        return f"[BasicPopulation: name='{self.name}', species={len(self.species)}, genomes={self.count}]"
