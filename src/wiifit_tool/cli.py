"""CLI para leer perfiles y pesajes de un archivo de guardado de Wii Fit."""

from __future__ import annotations

import argparse
import logging
from datetime import date, datetime
from pathlib import Path

from dateutil import parser as date_parser
from dateutil import tz

from wiifit_tool.errors import InvalidSource
from wiifit_tool.excel_writer import ExcelLayout, write_body_test_xlsx
from wiifit_tool.render import format_profile
from wiifit_tool.sources.wii_fit import WiiFitPaths, WiiFitSource
from wiifit_tool.tables import filter_since, profiles_to_frame, records_to_frame

_LOCAL_TZ = tz.tzlocal()


def _parse_since(value: str) -> date:
    try:
        return date_parser.isoparse(value).date()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Fecha inválida: {value}") from exc


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Perfiles y pesajes desde un archivo de guardado de Wii Fit."
    )
    parser.add_argument("save_file", help="Ruta a FitPlus0.dat.")
    parser.add_argument(
        "--excel",
        action="store_true",
        help="Exportar también a Excel.",
    )
    parser.add_argument(
        "--output-dir",
        default=str(Path.cwd() / "salidas"),
        help="Directorio para el Excel (default: ./salidas).",
    )
    parser.add_argument(
        "--since",
        type=_parse_since,
        default=None,
        help="Solo pesajes desde esta fecha (YYYY-MM-DD).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Nivel de logging (default: WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the extraction CLI.

    Returns:
        Exit code (0 on success, 1 if the save file cannot be read).
    """
    ns = parse_args(argv)
    logging.basicConfig(
        level=ns.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    save_file = Path(ns.save_file).expanduser().resolve()

    source = WiiFitSource(WiiFitPaths(root=save_file))
    try:
        source.validate()
        profiles = source.load_profiles()
    except (FileNotFoundError, InvalidSource) as exc:
        print(f"No se pudo leer el archivo: {exc}")
        return 1

    for profile in profiles:
        print(format_profile(profile))
        print()
    print(f"OK: {len(profiles)} perfil(es) en {save_file}")

    if ns.excel:
        records = filter_since(records_to_frame(profiles), ns.since)
        summary = profiles_to_frame(profiles)
        ts = datetime.now(tz=_LOCAL_TZ).strftime("%Y-%m-%d_%H-%M-%S")
        out_path = Path(ns.output_dir).expanduser() / f"wiifit_pesajes_{ts}.xlsx"
        write_body_test_xlsx(records, summary, out_path, ExcelLayout())
        print(f"OK: Output: {out_path}")
    return 0
