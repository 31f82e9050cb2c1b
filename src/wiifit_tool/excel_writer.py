"""Generación de Excel formateado con pesajes y resumen de perfiles."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, Side

_RECORD_HEADERS: dict[str, str] = {
    "name": "Mii",
    "datetime": "Fecha / Hora",
    "weight_kg": "Peso (kg)",
    "bmi": "IMC",
    "balance_pct": "Balance (%)",
}

_PROFILE_HEADERS: dict[str, str] = {
    "name": "Mii",
    "height_cm": "Altura (cm)",
    "birth_date": "Nacimiento",
    "records_count": "Pesajes",
    "first_weigh_in": "Primer pesaje",
    "last_weigh_in": "Último pesaje",
    "latest_weight_kg": "Último peso\n(kg)",
}

_WIDTHS: dict[str, int] = {
    "Mii": 14,
    "Fecha / Hora": 18,
    "Peso (kg)": 10,
    "IMC": 8,
    "Balance (%)": 12,
    "Altura (cm)": 11,
    "Nacimiento": 12,
    "Pesajes": 9,
    "Primer pesaje": 18,
    "Último pesaje": 18,
    "Último peso\n(kg)": 12,
}

_NUMBER_FORMATS: dict[str, str] = {
    "Fecha / Hora": "dd/mm/yyyy hh:mm",
    "Peso (kg)": "0.0",
    "IMC": "0.00",
    "Balance (%)": "0.0",
    "Nacimiento": "dd/mm/yyyy",
    "Pesajes": "0",
    "Primer pesaje": "dd/mm/yyyy hh:mm",
    "Último pesaje": "dd/mm/yyyy hh:mm",
    "Último peso\n(kg)": "0.0",
}

_THIN = Side(style="thin")
_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)


@dataclass(frozen=True)
class ExcelLayout:
    """Sheet names for the exported workbook."""

    records_sheet: str = "Pesajes"
    profiles_sheet: str = "Perfiles"


def write_body_test_xlsx(
    records: pd.DataFrame,
    profiles: pd.DataFrame,
    out_path: Path,
    layout: ExcelLayout,
) -> None:
    """Write weigh-ins and the profile summary to a formatted workbook.

    Args:
        records: Frame from ``records_to_frame``.
        profiles: Frame from ``profiles_to_frame``.
        out_path: Output path for the XLSX file.
        layout: Sheet naming.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    records_df = records.drop(columns=["date"], errors="ignore").rename(
        columns=_RECORD_HEADERS
    )
    profiles_df = profiles.rename(columns=_PROFILE_HEADERS)

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        records_df.to_excel(writer, index=False, sheet_name=layout.records_sheet)
        profiles_df.to_excel(writer, index=False, sheet_name=layout.profiles_sheet)
        _format_sheet(writer.book[layout.records_sheet])
        _format_sheet(writer.book[layout.profiles_sheet])


def _style_cells(cells: Any, alignment: Alignment, font: Font | None = None) -> None:
    for cell in cells:
        cell.alignment = alignment
        cell.border = _BORDER
        if font is not None:
            cell.font = font


def _style_sheet_cells(ws: Any) -> None:
    """Cabecera en negrita con ajuste de texto; cuerpo centrado; todo con borde."""
    _style_cells(
        ws[1],
        Alignment(horizontal="center", vertical="center", wrap_text=True),
        Font(bold=True),
    )
    body = Alignment(horizontal="center", vertical="center")
    for row in ws.iter_rows(min_row=2):
        _style_cells(row, body)


def _header_columns(ws: Any) -> dict[str, int]:
    return {str(cell.value): cell.column for cell in ws[1]}


def _apply_column_widths(ws: Any, col_index: dict[str, int]) -> None:
    for header, width in _WIDTHS.items():
        idx = col_index.get(header)
        if idx is not None:
            letter = ws.cell(row=1, column=idx).column_letter
            ws.column_dimensions[letter].width = width


def _apply_number_formats(ws: Any, col_index: dict[str, int]) -> None:
    for row in ws.iter_rows(min_row=2):
        for header, fmt in _NUMBER_FORMATS.items():
            idx = col_index.get(header)
            if idx is not None:
                row[idx - 1].number_format = fmt


def _format_sheet(ws: Any) -> None:
    """Style a written sheet: borders, bold header, widths and number formats."""
    _style_sheet_cells(ws)
    col_index = _header_columns(ws)
    _apply_column_widths(ws, col_index)
    _apply_number_formats(ws, col_index)
