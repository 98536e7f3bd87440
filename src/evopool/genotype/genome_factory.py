"""
Genome Factory Module

Classes:
    GenomeFactory: Abstract base class for objects that create genomes
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evopool.genotype.genome import Genome

class GenomeFactory(ABC):
    """
    Creates genomes for a population.

    A population stores its factory so that trainers can (re)seed it, but it
    never calls the factory itself.

    Public Methods (must be implemented by subclasses):
        factor():           Create a new random genome
        factor_from(other): Create a copy of an existing genome
    """

    @abstractmethod
    def factor(self) -> 'Genome':
        """
        Create a new random genome.
        """
        pass

    @abstractmethod
    def factor_from(self, other: 'Genome') -> 'Genome':
        """
        Create a new genome that is a copy of another.

        Parameters:
            other: the genome to copy
        """
        pass
