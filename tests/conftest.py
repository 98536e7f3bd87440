"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from evopool.genotype import BasicGenome, GenomeFactory


class ListGenome(BasicGenome):
    """Minimal concrete genome: the encoded solution is a plain list of numbers."""

    def __init__(self, genes=None, score=0.0, adjusted_score=None):
        super().__init__()
        self.genes          = list(genes) if genes is not None else []
        self.score          = score
        self.adjusted_score = score if adjusted_score is None else adjusted_score

    @property
    def size(self) -> int:
        return len(self.genes)


class ListGenomeFactory(GenomeFactory):
    """Creates ListGenome objects of a fixed length."""

    def __init__(self, length=3):
        self.length = length

    def factor(self):
        return ListGenome([0.0] * self.length)

    def factor_from(self, other):
        genome = ListGenome(other.genes)
        genome.copy_from(other)
        return genome


@pytest.fixture
def make_genome():
    """Build a ListGenome with the given score (and optionally a different adjusted score)."""
    def _make(score=0.0, adjusted_score=None):
        return ListGenome([score], score=score, adjusted_score=adjusted_score)
    return _make


@pytest.fixture
def genome_factory():
    return ListGenomeFactory()
