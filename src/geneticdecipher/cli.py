from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from geneticdecipher.classical.vigenere import decrypt as vigenere_decrypt
from geneticdecipher.classical.vigenere import encrypt as vigenere_encrypt
from geneticdecipher.core.config import GAConfig
from geneticdecipher.core.results import GenerationReport, RunReport
from geneticdecipher.core.scoring import key_fitness, text_fitness
from geneticdecipher.core.utils import floor_to, load_ciphertext, normalize_letters
from geneticdecipher.genetic.engine import GeneticDecipher

app = typer.Typer(help="Genetic Decipher: break repeating-key shift ciphers with a genetic algorithm.")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log selection/breeding detail to stderr."),
):
    # Configure the log sink once per CLI run
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("geneticdecipher")


def _print_parameters(cfg: GAConfig, source: str) -> None:
    typer.echo("\nCurrent GA Parameters:\n")
    typer.echo(f"Population Size: {cfg.population_size}")
    typer.echo(f"Number of Generations: {cfg.max_generations}")
    typer.echo(f"Chromosome Size: {cfg.chromosome_size}")
    typer.echo(f"Number of Elites: {cfg.elite_count}")
    typer.echo(f"Tournament Size: {cfg.tournament_size}")
    typer.echo(f"Crossover Type: {cfg.crossover_type.label}")
    typer.echo(f"Mutation Type: {cfg.mutation_type.label}")
    typer.echo(f"Crossover Rate: {cfg.crossover_rate}")
    typer.echo(f"Mutation Rate: {cfg.mutation_rate}")
    typer.echo(f"Random Seed: {cfg.random_seed}")
    typer.echo(f"Encrypted Text Used: {source}\n")


def format_generation(r: GenerationReport) -> str:
    return (
        f"Generation {r.generation}, best is: ({r.best_key}, {floor_to(r.best_fitness, 4)}), "
        f"avg: {floor_to(r.average_fitness, 2)}"
    )


def format_result(r: RunReport) -> str:
    return f'\nBest chromosome was "{r.best_key}" with fitness {floor_to(r.best_fitness, 4)}.\n'


@app.command()
def run(
    file: Path = typer.Argument(..., help="Text file holding the ciphertext."),
    population: int = typer.Option(50, "--population", "-p", help="Population size [1, n]."),
    generations: int = typer.Option(20, "--generations", "-g", help="Maximum generations [1, n]."),
    chromosome: int = typer.Option(3, "--chromosome", "-c", help="Chromosome (key) size [1, n]."),
    elites: int = typer.Option(4, "--elites", "-e", help="Elite count [2, population/2]."),
    tournament: int = typer.Option(3, "--tournament", "-t", help="Tournament size [2, 5]."),
    crossover_type: int = typer.Option(
        3, "--crossover-type", help="1. 1-Point, 2. 2-Point, 3. Uniform, 4. Random."
    ),
    mutation_type: int = typer.Option(1, "--mutation-type", help="1. Uniform, 2. Non-Uniform."),
    crossover_rate: float = typer.Option(0.7, "--crossover-rate", help="Crossover rate [0.0, 1.0]."),
    mutation_rate: float = typer.Option(0.05, "--mutation-rate", help="Mutation rate [0.0, 1.0]."),
    seed: int = typer.Option(1, "--seed", "-s", help="Random seed [1, n]."),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per line instead of text."),
):
    """Search for the key of a ciphertext file. Out-of-range values are clamped."""
    try:
        ciphertext = load_ciphertext(file)
    except OSError as e:
        raise typer.BadParameter(f"Cannot read '{file}': {e}")
    if not ciphertext:
        raise typer.BadParameter(f"'{file}' contains no letters to decipher.")

    cfg = GAConfig.clamped(
        population_size=population,
        max_generations=generations,
        chromosome_size=chromosome,
        elite_count=elites,
        tournament_size=tournament,
        crossover_type=crossover_type,
        mutation_type=mutation_type,
        crossover_rate=crossover_rate,
        mutation_rate=mutation_rate,
        random_seed=seed,
    )
    ga = GeneticDecipher(cfg, ciphertext)

    if as_json:
        result = ga.run(lambda r: typer.echo(json.dumps(r.to_dict())))
        typer.echo(json.dumps({"result": result.to_dict(), "config": cfg.to_dict()}))
        return

    _print_parameters(cfg, str(file))
    result = ga.run(lambda r: typer.echo(format_generation(r)))
    typer.echo(format_result(result))


@app.command()
def decrypt(
    key: str = typer.Option(..., "--key", "-k", help="Key; '-' marks a skipped position."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
):
    """Decrypt with a known key (non-letters are dropped first)."""
    typer.echo(vigenere_decrypt(normalize_letters(text), key))


@app.command()
def encrypt(
    key: str = typer.Option(..., "--key", "-k", help="Key; '-' marks a skipped position."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
):
    """Encrypt with a known key (non-letters are dropped first)."""
    typer.echo(vigenere_encrypt(normalize_letters(text), key))


@app.command()
def score(
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Omit to score the text itself as plaintext."),
    text: str = typer.Argument(..., help="Ciphertext to score the key against."),
):
    """Fitness of a key against a ciphertext (0.0 is a perfect English match)."""
    ct = normalize_letters(text)
    if not ct:
        raise typer.BadParameter("Text contains no letters.")
    fit = text_fitness(ct) if key is None else key_fitness(key, ct)
    typer.echo(f"{fit:.4f}")


def main():
    app()


if __name__ == "__main__":
    main()
