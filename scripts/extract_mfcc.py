#!/usr/bin/env python3
"""
Batch MFCC extraction for recorded prompts.

Decodes each recording, extracts MFCCs with one shared MFCCExtractor and
saves them in a FeatureStore under the subject's feature key. Files are
numbered as consecutive phrases starting at --start-phrase.

Usage:
    python scripts/extract_mfcc.py rec1.wav rec2.wav --name Ani --age 24 --gender Perempuan
    python scripts/extract_mfcc.py rec.wav --name Budi --age 31 --gender MALE --config configs/default.yaml
"""

import sys
import argparse
from pathlib import Path
from typing import Dict, List

import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich import box

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from voice_mfcc.config import load_config, mfcc_config_from_yaml
from voice_mfcc.data import Demographics, FeatureStore, Gender, feature_key
from voice_mfcc.dsp_core import MFCCExtractor
from voice_mfcc.utils import AudioLoadError, load_audio, log_config, setup_logging

console = Console()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Extract MFCCs from recorded prompts")
    parser.add_argument('audio', nargs='+', help='Recorded audio files, in phrase order')
    parser.add_argument('--config', type=str,
                        default=str(PROJECT_ROOT / 'configs' / 'default.yaml'),
                        help='Path to YAML configuration file')
    parser.add_argument('--store', type=str, default=None,
                        help='Feature store JSON file (overrides config store.path)')
    parser.add_argument('--name', type=str, required=True, help='Subject name')
    parser.add_argument('--age', type=int, required=True, help='Subject age')
    parser.add_argument('--gender', type=str, required=True,
                        help=f"One of: {', '.join(g.value for g in Gender)} (or MALE/FEMALE/OTHER)")
    parser.add_argument('--start-phrase', type=int, default=1,
                        help='Phrase number of the first file')
    parser.add_argument('--verbose', action='store_true', help='Log debug output to console')
    return parser.parse_args(argv)


def display_results_table(rows: List[Dict]):
    table = Table(title="MFCC Extraction", box=box.ROUNDED)
    table.add_column("File", style="bold")
    table.add_column("Key")
    table.add_column("Sample Rate", justify="right")
    table.add_column("Frames", justify="right")
    table.add_column("Status")

    for row in rows:
        table.add_row(
            row['file'],
            row['key'],
            str(row.get('sr', '-')),
            str(row.get('frames', '-')),
            row['status'],
        )
    console.print(table)


def run_extraction(args) -> int:
    try:
        yaml_config = load_config(args.config)
        mfcc_config = mfcc_config_from_yaml(args.config)
        demographics = Demographics(name=args.name, age=args.age, gender=args.gender)
    except (OSError, yaml.YAMLError, ValueError) as e:
        console.print(f"[red]✗ Invalid configuration: {escape(str(e))}[/red]")
        return 1

    store_path = args.store or (yaml_config.get('store') or {}).get('path', 'mfcc_store.json')
    log_file = (yaml_config.get('logging') or {}).get('log_file')

    logger = setup_logging(log_file=log_file, verbose=args.verbose)
    log_config(logger, {'mfcc': mfcc_config.to_dict(), 'store': str(store_path)})

    extractor = MFCCExtractor(mfcc_config)
    store = FeatureStore(store_path)

    console.print(Panel.fit(
        "[bold blue]MFCC Extraction[/bold blue]\n"
        f"Subject: {demographics.name} ({demographics.age}, {demographics.gender.value})\n"
        f"Store: {store_path}",
        border_style="blue"
    ))

    rows = []
    failures = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=30),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Extracting", total=len(args.audio))

        for offset, audio_path in enumerate(args.audio):
            key = feature_key(demographics, args.start_phrase + offset)
            row = {'file': Path(audio_path).name, 'key': key}
            progress.update(task, description=f"[cyan]{row['file']}")

            try:
                y, sr = load_audio(audio_path)
                features = extractor.extract(y, sr)
                store.save(key, features)
            except (AudioLoadError, ValueError, OSError) as e:
                logger.error(f"Failed to extract or save MFCCs for {audio_path}: {e}")
                row['status'] = f"[red]✗ {type(e).__name__}[/red]"
                failures += 1
            else:
                logger.info(f"{audio_path}: {features.shape[0]} frames @ {sr} Hz -> {key}")
                row.update(sr=sr, frames=features.shape[0], status="[green]✓[/green]")

            rows.append(row)
            progress.update(task, advance=1)

    console.print()
    display_results_table(rows)

    if failures:
        console.print(f"[red]✗ {failures} of {len(args.audio)} recordings failed[/red]")
        return 1

    console.print(f"[green]✓[/green] Saved {len(rows)} feature sequences to {store_path}")
    return 0


def main(argv=None):
    args = parse_args(argv)
    sys.exit(run_extraction(args))


if __name__ == "__main__":
    main()
