"""
Genotype Package

This package defines what the population container needs from a genome: read
access to its scores, equality comparison, and a few bookkeeping fields. How a
solution is encoded, mutated or crossed over is up to the concrete classes.

Modules:
    genome:         Genome interface, BasicGenome and the score validity check
    genome_factory: GenomeFactory interface

Exported Classes:
    Genome:        Abstract genome interface
    BasicGenome:   Genome storing its bookkeeping fields as attributes
    GenomeFactory: Abstract factory creating genomes

Exported Functions:
    is_valid_score: Whether a score is finite
"""

from evopool.genotype.genome         import Genome, BasicGenome, is_valid_score
from evopool.genotype.genome_factory import GenomeFactory

__all__ = ['BasicGenome',
           'Genome',
           'GenomeFactory',
           'is_valid_score']
