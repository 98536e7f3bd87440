"""
Species Module

This module defines the species capability used by the population container,
together with the concrete species the population creates.

A species is a subgroup of genetically similar genomes kept apart for niching:
members compete mostly among themselves, which protects young innovations from
being wiped out by mature solutions. How genomes are assigned to species is
decided by an external speciation strategy; this module only describes what a
species holds.

Classes:
    Species:      Abstract base class defining the species interface
    BasicSpecies: Species created by BasicPopulation.create_species()
"""

import logging
import numpy as np
from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

from evopool.genotype.genome import is_valid_score
if TYPE_CHECKING:
    from evopool.genotype        import Genome
    from evopool.pool.population import Population

logger = logging.getLogger(__name__)

class Species(ABC):
    """
    Abstract base class for a species held by a population.

    Public Attributes (must be provided by subclasses):
        members:             The genomes in this species; order matters, the first member
                             is the fallback leader
        leader:              The genome representing this species (None until assigned)
        best_score:          Score of the leader at the time it was last updated
        age:                 Number of generations this species has existed
        gens_no_improvement: Number of generations since 'best_score' last improved
        offspring_count:     Number of offspring allocated to this species
        offspring_share:     Share of the offspring, as computed by calculate_share()

    Public Properties (must be implemented by subclasses):
        population: The population owning this species, fixed at construction

    Public Methods (must be implemented by subclasses):
        add(genome):                                 Add a genome to this species
        calculate_share(should_minimize, max_score): Compute this species' offspring share
    """

    members            : list['Genome']
    leader             : 'Genome | None'
    best_score         : float
    age                : int
    gens_no_improvement: int
    offspring_count    : int
    offspring_share    : float

    @property
    @abstractmethod
    def population(self) -> 'Population':
        """The population owning this species."""
        pass

    @abstractmethod
    def add(self, genome: 'Genome') -> None:
        """
        Add a genome to this species.

        Parameters:
            genome: the genome to add
        """
        pass

    @abstractmethod
    def calculate_share(self, should_minimize: bool, max_score: float) -> float:
        """
        Calculate the share of offspring this species is entitled to.

        Parameters:
            should_minimize: whether lower scores are better
            max_score:       the worst possible score, when minimizing

        Returns:
            The offspring share
        """
        pass

class BasicSpecies(Species):
    """
    The species created by BasicPopulation.

    A new species is empty and has no leader. Its owner is set once, when the
    species is created, and cannot be changed afterwards.
    """

    def __init__(self, population: 'Population'):
        """
        Parameters:
            population: the population that owns this species
        """
        self._population: 'Population' = population

        self.members            : list['Genome'] = []
        self.leader             : 'Genome | None' = None
        self.best_score         : float = 0.0
        self.age                : int   = 0  # generations this species has existed
        self.gens_no_improvement: int   = 0  # generations since best_score last improved
        self.offspring_count    : int   = 0
        self.offspring_share    : float = 0.0

    @property
    def population(self) -> 'Population':
        return self._population

    def add(self, genome: 'Genome') -> None:
        """
        Append a genome to the members and point its back-references here.
        """
        genome.population = self._population
        genome.species    = self
        self.members.append(genome)

    def calculate_share(self, should_minimize: bool, max_score: float) -> float:
        """
        Calculate the offspring share as the average adjusted score of the members.

        Members whose adjusted score is NaN or infinite are left out. When
        minimizing, each score is measured as its distance below 'max_score',
        so that better (lower) scores still earn a larger share.

        Parameters:
            should_minimize: whether lower scores are better
            max_score:       the worst possible score, used only when minimizing

        Returns:
            The offspring share, also stored in 'offspring_share'.
            0.0 if no member has a valid adjusted score.
        """
        scores = [genome.adjusted_score for genome in self.members
                  if is_valid_score(genome.adjusted_score)]

        if not scores:
            self.offspring_share = 0.0
        elif should_minimize:
            self.offspring_share = float(np.mean([max_score - s for s in scores]))
        else:
            self.offspring_share = float(np.mean(scores))

        logger.debug("Species share %.6f from %d/%d valid members",
                     self.offspring_share, len(scores), len(self.members))
        return self.offspring_share

    def __str__(self):
        return (f"[BasicSpecies: members={len(self.members)}, best_score={self.best_score}, "
                f"age={self.age}, gens_no_improvement={self.gens_no_improvement}]")
