from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import cast

from openpyxl import Workbook, load_workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from wiifit_tool.excel_writer import ExcelLayout, _format_sheet, write_body_test_xlsx
from wiifit_tool.model import Profile, Record
from wiifit_tool.tables import profiles_to_frame, records_to_frame


def _profiles() -> list[Profile]:
    return [
        Profile(
            "Ana",
            170,
            1985,
            3,
            7,
            records=[
                Record(datetime(2015, 6, 15, 9, 30), 725, 2145, 502),
                Record(datetime(2015, 7, 1, 8, 0), 718, 2124, 497),
            ],
        )
    ]


def test_write_body_test_xlsx_happy_path_and_formatting(tmp_path: Path) -> None:
    profiles = _profiles()
    out = tmp_path / "nested" / "out.xlsx"
    layout = ExcelLayout()
    write_body_test_xlsx(
        records_to_frame(profiles), profiles_to_frame(profiles), out, layout
    )

    wb = load_workbook(out)
    ws = cast(Worksheet, wb[layout.records_sheet])
    headers = [cell.value for cell in ws[1]]
    assert headers == ["Mii", "Fecha / Hora", "Peso (kg)", "IMC", "Balance (%)"]
    assert ws.cell(row=2, column=1).value == "Ana"
    assert ws.cell(row=2, column=3).value == 72.5
    assert ws.cell(row=2, column=3).number_format == "0.0"
    assert ws.cell(row=2, column=4).number_format == "0.00"
    assert ws.column_dimensions["B"].width == 18

    summary = cast(Worksheet, wb[layout.profiles_sheet])
    summary_headers = [cell.value for cell in summary[1]]
    assert "Pesajes" in summary_headers
    count_col = summary_headers.index("Pesajes") + 1
    assert summary.cell(row=2, column=count_col).value == 2
    letter = get_column_letter(count_col)
    assert summary.column_dimensions[letter].width == 9


def test_write_body_test_xlsx_without_profiles(tmp_path: Path) -> None:
    out = tmp_path / "empty.xlsx"
    write_body_test_xlsx(records_to_frame([]), profiles_to_frame([]), out, ExcelLayout())
    wb = load_workbook(out)
    ws = wb[ExcelLayout().records_sheet]
    assert ws.max_row == 1


def test_format_sheet_handles_missing_headers() -> None:
    wb = Workbook()
    ws = cast(Worksheet, wb.active)
    ws.append(["Solo"])
    ws.append([1])

    _format_sheet(ws)

    assert ws.cell(row=1, column=1).font.bold is True
    assert ws.cell(row=2, column=1).alignment.horizontal == "center"
    assert ws.cell(row=1, column=1).alignment.wrap_text is True
    assert ws.cell(row=1, column=1).border.left.style == "thin"
    assert ws.cell(row=2, column=1).border.bottom.style == "thin"
    assert ws.cell(row=2, column=1).font.bold is not True
