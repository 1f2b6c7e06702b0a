#!/usr/bin/env python
"""
Run an FFT over a payload from the command line.

The payload is a list of real samples ('fft', 'mgn') or of {real, imag}
mappings ('inv'), read from a JSON/YAML file or given inline.

Usage:
    # Forward transform of inline samples
    python scripts/run_transform.py --values 1,1,1,1

    # Magnitude/phase of samples stored in a file
    python scripts/run_transform.py --input samples.json --algorithm mgn

    # Inverse transform, result written to disk
    python scripts/run_transform.py --input spectrum.yaml --algorithm inv --output result.json
"""

import sys
import json
import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml
import numpy as np

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console
from rich.table import Table
from rich import box

from src.fft_core import ALGORITHMS, process_payload
from src.utils.logging import setup_logging, log_config

console = Console()

DEFAULT_CONFIG = PROJECT_ROOT / 'configs' / 'transform.yaml'


def load_config(config_path: Optional[str]) -> Dict:
    """Load YAML configuration (empty dict if the default file is missing)."""
    path = Path(config_path) if config_path else DEFAULT_CONFIG
    if not path.exists():
        if config_path:
            raise FileNotFoundError(f"Config file not found: {path}")
        return {}
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def load_payload(input_path: Optional[str], values: Optional[str]) -> List:
    """Read the payload from --values or from a JSON/YAML file."""
    if values is not None:
        return [float(v) for v in values.split(',') if v.strip()]

    if input_path is None:
        raise ValueError("Either --input or --values must be given")

    path = Path(input_path)
    with open(path, 'r') as f:
        if path.suffix.lower() in ('.yaml', '.yml'):
            payload = yaml.safe_load(f)
        else:
            payload = json.load(f)

    if not isinstance(payload, list):
        raise ValueError(f"Payload must be a list, got {type(payload).__name__}")
    return payload


def display_result(result, algorithm: str):
    """Print the transformed payload as a table."""
    if isinstance(result, str):
        console.print(f"[red]✗[/red] {result}")
        return

    if algorithm == 'mgn':
        columns = ('magnitude', 'phase')
    else:
        columns = ('real', 'imag')

    table = Table(title=f"Result ({algorithm})", box=box.ROUNDED)
    table.add_column("Bin", justify="right", style="cyan")
    for col in columns:
        table.add_column(col.capitalize(), justify="right")

    for i, pair in enumerate(result):
        table.add_row(str(i), *[f"{pair[col]:.6f}" for col in columns])

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description='Arbitrary-length FFT over a payload')
    parser.add_argument('--input', type=str, default=None,
                        help='JSON or YAML file holding the payload list')
    parser.add_argument('--values', type=str, default=None,
                        help='Comma-separated real samples, e.g. "1,2,3"')
    parser.add_argument('--algorithm', type=str, default=None,
                        help=f'Algorithm selector {ALGORITHMS} (default from config)')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config file')
    parser.add_argument('--output', type=str, default=None,
                        help='Write the result as JSON to this path')
    args = parser.parse_args()

    config = load_config(args.config)
    log_cfg = config.get('logging', {})
    logger = setup_logging(
        log_file=log_cfg.get('file'),
        level=getattr(logging, str(log_cfg.get('level', 'INFO')).upper()),
        name='src'
    )

    algorithm = args.algorithm or config.get('algorithm', 'fft')
    dtype = np.dtype(config.get('dtype', 'float64'))
    degrees = bool(config.get('phase_degrees', True))

    log_config(logger, {
        'algorithm': algorithm,
        'dtype': str(dtype),
        'phase_degrees': degrees,
        'input': args.input or 'inline',
    })

    payload = load_payload(args.input, args.values)
    logger.info(f"Loaded payload with {len(payload)} elements")

    result = process_payload(payload, algorithm=algorithm, degrees=degrees, dtype=dtype)
    display_result(result, algorithm)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(result, f, indent=2)
        console.print(f"[green]✓[/green] Saved result to {output_path}")
        logger.info(f"Result saved to {output_path}")


if __name__ == "__main__":
    main()
