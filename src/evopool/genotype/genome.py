"""
Genome Module

This module defines the genome capability consumed by the population container.
A genome is a single candidate solution; the container only ever reads its
scores and compares it with other genomes. The encoding of the solution and
the genetic operators that act on it live elsewhere.

Classes:
    Genome:      Abstract base class defining the genome interface
    BasicGenome: Genome that stores its bookkeeping fields as plain attributes

Functions:
    is_valid_score(value): Whether a fitness value can take part in selection
"""

import numpy as np
from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evopool.pool.population import Population
    from evopool.pool.species    import Species

def is_valid_score(value: float) -> bool:
    """
    Check whether a fitness value is usable by selection.

    A failed or numerically unstable evaluation can leave a genome with a
    NaN or infinite score. Such values either dominate or poison every
    comparison they take part in, so they are treated as invalid.

    Parameters:
        value: a raw or adjusted score (Python float or numpy scalar)

    Returns:
        True if the value is finite, False for NaN and +/-inf
    """
    return bool(np.isfinite(value))

class Genome(ABC):
    """
    Abstract base class for genomes held by a population.

    Genomes are compared with '=='. Unless a subclass says otherwise the
    comparison is identity based, so two references are duplicates only if
    they point at the same genome. Genomes need not be hashable.

    Public Attributes (must be provided by subclasses):
        score:            Raw fitness, may be NaN or +/-inf after a failed evaluation
        adjusted_score:   Fitness adjusted for niching/age, same caveats as 'score'
        birth_generation: Generation in which this genome was created
        population:       The population this genome belongs to (or None)
        species:          The species currently holding this genome (or None)

    Public Properties (must be implemented by subclasses):
        size: Length of the encoded solution

    Public Methods:
        copy_from(source): Copy bookkeeping fields from another genome
    """

    score           : float
    adjusted_score  : float
    birth_generation: int
    population      : 'Population | None'
    species         : 'Species | None'

    @property
    @abstractmethod
    def size(self) -> int:
        """Length of the encoded solution."""
        pass

    def copy_from(self, source: 'Genome') -> None:
        """
        Copy the bookkeeping fields of another genome into this one.
        The species back-reference is not copied: a copy is placed into
        a species by whoever speciates it.

        Parameters:
            source: the genome to copy from
        """
        self.score            = source.score
        self.adjusted_score   = source.adjusted_score
        self.birth_generation = source.birth_generation
        self.population       = source.population

class BasicGenome(Genome):
    """
    A genome storing its scores and back-references as plain attributes.

    Concrete encodings derive from this class and implement 'size'.
    """

    def __init__(self):
        self.score           : float               = 0.0   # raw fitness
        self.adjusted_score  : float               = 0.0   # fitness after niching/age adjustments
        self.birth_generation: int                 = 0     # generation when created
        self.population      : 'Population | None' = None  # owning population
        self.species         : 'Species | None'    = None  # species currently holding it

    def __str__(self):
        return (f"{type(self).__name__}(score={self.score}, "
                f"adjusted_score={self.adjusted_score}, born={self.birth_generation})")
