"""
Консольная генерация диаграммы бронирований из CSV
"""

import argparse
import sys
from pathlib import Path

from core.composer import ChartComposer
from core.config import load_chart_config
from core.errors import ChartError
from core.time_axis import parse_start_times
from utils.csv_reader import read_reservations
from utils.logging_config import setup_logging
from utils.visualization import render_chart, save_chart

INPUT_DIR = Path("input")
OUTPUT_DIR = Path("output")
DEFAULT_CONFIG = Path("data/configs/chart_config.json")


def choose_input_file(input_dir=INPUT_DIR, prompt=input):
    """
    Выбрать CSV из папки input/

    Один файл - берём его, несколько - спрашиваем номер.
    """
    files = sorted(Path(input_dir).glob("*.csv"))

    if not files:
        return None
    if len(files) == 1:
        return files[0]

    for i, f in enumerate(files, start=1):
        print(f"{i} {f.name}")

    while True:
        answer = prompt("Please select a file: ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(files):
            return files[int(answer) - 1]
        print(f"Invalid input, enter a number from 1 to {len(files)}")


def build_parser():
    ap = argparse.ArgumentParser(description="Table reservations Gantt chart")
    ap.add_argument("--input", help="CSV export with reservations (default: pick from input/)")
    ap.add_argument("--config", default=None, help="chart_config.json")
    ap.add_argument("--output-dir", default=str(OUTPUT_DIR))
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    config_path = args.config
    if config_path is None and DEFAULT_CONFIG.exists():
        config_path = DEFAULT_CONFIG
    config = load_chart_config(config_path)

    input_path = Path(args.input) if args.input else choose_input_file()
    if input_path is None:
        print(f"No CSV files found in {INPUT_DIR}/")
        return 1

    print("=== ДИАГРАММА БРОНИРОВАНИЙ ===\n")
    print(f"Файл: {input_path}")

    try:
        reservations = read_reservations(input_path)
    except (OSError, ValueError) as e:
        print(f"Не удалось прочитать файл: {e}")
        return 1
    print(f"Бронирований: {len(reservations)}")

    composer = ChartComposer(config)
    try:
        composed = composer.compose(reservations)
    except ChartError as e:
        print(f"Ошибка: {e}")
        return 1

    for warning in composed.warnings:
        print(f"  [!] {warning}")

    chart_date = min(parse_start_times(reservations)).date()
    image = render_chart(composed, config, composer.style)
    output_path = save_chart(image, args.output_dir, chart_date)

    print(f"\n✓ Диаграмма сохранена: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
