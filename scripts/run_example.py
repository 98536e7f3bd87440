#!/usr/bin/env python3
"""
Walk a population through a few generations of bookkeeping.

Genomes are random numpy vectors scored by a toy objective; a fraction of the
evaluations is made to fail (NaN or infinite score) so that the purge has
something to do.

Usage:
    python scripts/run_example.py
    python scripts/run_example.py --config examples/configs/config_pool.ini --generations 10
"""

import argparse
import logging
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from evopool import BasicGenome, BasicPopulation, Config, GenomeFactory


class VectorGenome(BasicGenome):
    """A genome encoded as a vector of floats."""

    def __init__(self, data: np.ndarray):
        super().__init__()
        self.data = data

    @property
    def size(self) -> int:
        return len(self.data)


class VectorGenomeFactory(GenomeFactory):

    def __init__(self, length: int, rng: np.random.Generator):
        self._length = length
        self._rng    = rng

    def factor(self) -> VectorGenome:
        return VectorGenome(self._rng.normal(size=self._length))

    def factor_from(self, other: VectorGenome) -> VectorGenome:
        genome = VectorGenome(other.data.copy())
        genome.copy_from(other)
        return genome


def main():
    parser = argparse.ArgumentParser(description='Population bookkeeping walkthrough')
    parser.add_argument('--config', default='examples/configs/config_pool.ini',
                        help='INI file with the population settings')
    parser.add_argument('--generations', type=int, default=5,
                        help='Number of generations to run')
    parser.add_argument('--num-species', type=int, default=3,
                        help='Number of species to split the population into')
    parser.add_argument('--failure-rate', type=float, default=0.2,
                        help='Fraction of evaluations that produce an invalid score')
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--verbose', action='store_true', help='Show debug log records')

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    rng        = np.random.default_rng(args.seed)
    config     = Config(args.config)
    factory    = VectorGenomeFactory(length=4, rng=rng)
    population = BasicPopulation.from_config(config, factory)

    genomes = [factory.factor() for _ in range(population.population_size)]
    for generation in range(args.generations):

        # Split genomes into species (round robin stands in for a real speciation strategy)
        population.clear()
        species = [population.create_species() for _ in range(args.num_species)]
        for i, genome in enumerate(genomes):
            species[i % args.num_species].add(genome)

        # Evaluate: the closer to the origin, the better; some evaluations fail
        for genome in population.flatten():
            if rng.random() < args.failure_rate:
                genome.score = np.nan
            else:
                genome.score = -float(np.linalg.norm(genome.data))
            genome.adjusted_score = genome.score

        for spec in population.species:
            if spec.members:
                spec.leader     = spec.members[0]
                spec.best_score = spec.leader.adjusted_score

        valid = [g for g in population.flatten() if np.isfinite(g.score)]
        if valid:
            candidate = max(valid, key=lambda g: g.score)
            if population.best_genome is None or candidate.score > population.best_genome.score:
                population.best_genome = candidate

        population.purge_invalid_genomes()
        best_species = population.determine_best_species()

        print(f"Generation {generation}: {population}")
        if population.best_genome is None:
            print("  no valid genome yet")
        elif best_species is None:
            print(f"  best genome (score {population.best_genome.score:.4f}) no longer in the population")
        else:
            index = population.species.index(best_species)
            print(f"  best genome (score {population.best_genome.score:.4f}) is in species #{index + 1}")

        # Refill from the survivors with perturbed copies
        survivors = population.flatten()
        if not survivors:
            print("  population died out")
            break
        genomes = list(survivors)
        while len(genomes) < population.population_size:
            parent = survivors[rng.integers(len(survivors))]
            child  = factory.factor_from(parent)
            child.data += rng.normal(scale=0.1, size=child.size)
            child.birth_generation = generation + 1
            genomes.append(child)


if __name__ == '__main__':
    main()
