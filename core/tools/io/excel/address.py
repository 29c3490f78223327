"""
core/tools/io/excel/address.py - 조건부 서식 대상 주소 해석

워크시트 + 범위, 또는 워크시트를 포함하는 단일 참조에서
(워크시트, 범위 문자열) 쌍을 도출합니다.

지원 형식:
    resolve_address("A1:B10", worksheet=ws)
    resolve_address("B:B", worksheet=ws)            # 열 전체 -> B1:B1048576
    resolve_address("SalesTable", worksheet=ws)     # 테이블 이름
    resolve_address(ws["A1:C3"])                    # 셀 튜플
    resolve_address(ws["A1"])                       # 단일 셀
    resolve_address("Sheet1!A1:B2", workbook=wb)    # 시트 포함 참조
"""

import logging
from typing import Any, Iterable, Iterator, Optional, Tuple

from openpyxl.cell.cell import Cell, MergedCell
from openpyxl.utils.cell import get_column_letter, range_boundaries
from openpyxl.worksheet.cell_range import CellRange

from core.exceptions import AddressError

logger = logging.getLogger(__name__)

MAX_ROW = 1048576
MAX_COLUMN = 16384


def split_sheet_reference(reference: str) -> Tuple[Optional[str], str]:
    """시트 포함 참조 분리

    "Sheet1!A1:B2" -> ("Sheet1", "A1:B2"), 시트가 없으면 (None, reference)
    """
    sheet, sep, cells = reference.rpartition("!")
    if not sep:
        return None, reference
    if len(sheet) >= 2 and sheet.startswith("'") and sheet.endswith("'"):
        sheet = sheet[1:-1].replace("''", "'")
    return sheet, cells


def normalize_range(range_string: str) -> str:
    """범위 문자열을 명시적 경계를 가진 형태로 정규화

    열 전체("B:B")와 행 전체("2:2")를 시트 최대 경계로 확장하고
    절대 참조 기호($)를 제거합니다. 공백으로 구분된 다중 범위를 지원합니다.

    Raises:
        ValueError: 유효하지 않은 좌표 (openpyxl에서 발생)
    """
    parts = []
    for part in range_string.split():
        min_col, min_row, max_col, max_row = range_boundaries(part)
        min_col = min_col or 1
        max_col = max_col or MAX_COLUMN
        min_row = min_row or 1
        max_row = max_row or MAX_ROW
        parts.append(
            CellRange(
                min_col=min_col, min_row=min_row, max_col=max_col, max_row=max_row
            ).coord
        )
    if not parts:
        raise ValueError(f"{range_string!r} is not a valid coordinate or range")
    return " ".join(parts)


def _iter_cells(value: Iterable[Any]) -> Iterator[Cell]:
    for item in value:
        if isinstance(item, (Cell, MergedCell)):
            yield item
        elif isinstance(item, (tuple, list)):
            yield from _iter_cells(item)
        else:
            raise AddressError(item, "셀 튜플에 셀이 아닌 값이 포함됨")


def _range_from_cells(cells: Iterable[Any]) -> Tuple[Any, str]:
    flat = list(_iter_cells(cells))
    if not flat:
        raise AddressError(cells, "빈 셀 범위")

    worksheet = flat[0].parent
    min_row = min(c.row for c in flat)
    max_row = max(c.row for c in flat)
    min_col = min(c.column for c in flat)
    max_col = max(c.column for c in flat)

    if min_row == max_row and min_col == max_col:
        return worksheet, f"{get_column_letter(min_col)}{min_row}"
    return worksheet, (
        f"{get_column_letter(min_col)}{min_row}:{get_column_letter(max_col)}{max_row}"
    )


def resolve_address(
    address: Any,
    worksheet: Any = None,
    workbook: Any = None,
) -> Tuple[Any, str]:
    """주소를 (워크시트, 정규화된 범위 문자열)로 해석

    Args:
        address: 범위 문자열, 테이블 이름, CellRange, Cell 또는 셀 튜플
        worksheet: 대상 워크시트 (문자열 주소와 함께 사용)
        workbook: "Sheet!A1" 형식 주소에서 시트를 찾을 워크북

    Returns:
        (worksheet, range_string) 튜플

    Raises:
        AddressError: 워크시트를 도출할 수 없는 경우
        KeyError: 워크북에 해당 시트가 없는 경우 (openpyxl)
        ValueError: 유효하지 않은 좌표 (openpyxl)
    """
    if isinstance(address, (Cell, MergedCell)):
        address = (address,)

    if isinstance(address, tuple):
        ws, range_string = _range_from_cells(address)
        return worksheet or ws, range_string

    if isinstance(address, CellRange):
        if worksheet is None:
            raise AddressError(address, "CellRange에는 워크시트가 필요합니다")
        return worksheet, address.coord

    if not isinstance(address, str):
        raise AddressError(address, f"지원하지 않는 주소 타입: {type(address).__name__}")

    sheet_name, cells = split_sheet_reference(address.strip())

    if worksheet is None:
        if sheet_name is None or workbook is None:
            raise AddressError(address, "워크시트를 지정하거나 워크북과 'Sheet!A1' 형식을 사용하세요")
        worksheet = workbook[sheet_name]
    elif sheet_name is not None and sheet_name != worksheet.title:
        logger.debug(
            "Sheet part %r ignored in favour of worksheet %r", sheet_name, worksheet.title
        )

    tables = getattr(worksheet, "tables", None) or {}
    if cells in tables:
        return worksheet, tables[cells].ref

    return worksheet, normalize_range(cells)
