"""
core/tools/io/excel/number_format.py - 숫자 포맷 약어 확장 및 로케일 숫자 파싱

"Currency", "Percentage" 같은 약어를 전체 Excel 숫자 포맷 코드로 확장하고,
현재 로케일 규칙에 따라 문자열을 숫자로 해석합니다.

Usage:
    from core.tools.io.excel.number_format import expand_number_format, parse_number

    expand_number_format("Percentage")  # "0.00%"
    parse_number("1,000")  # 1000.0
"""

import locale
import logging
import math
from typing import Optional

from openpyxl.styles.numbers import BUILTIN_FORMATS_REVERSE

logger = logging.getLogger(__name__)

# =============================================================================
# 숫자 포맷 상수
# =============================================================================

NUMBER_FORMAT_GENERAL = "General"
NUMBER_FORMAT_NUMBER = "0.00"  # id 2
NUMBER_FORMAT_PERCENTAGE = "0.00%"  # id 10
NUMBER_FORMAT_SCIENTIFIC = "0.00E+00"  # id 11
NUMBER_FORMAT_FRACTION = "# ?/?"  # id 12
NUMBER_FORMAT_SHORT_DATE = "mm-dd-yy"  # id 14, Excel이 로케일에 맞게 표시
NUMBER_FORMAT_SHORT_TIME = "h:mm"  # id 20
NUMBER_FORMAT_LONG_TIME = "h:mm:ss"  # id 21
NUMBER_FORMAT_DATE_TIME = "m/d/yy h:mm"  # id 22
NUMBER_FORMAT_TEXT = "@"  # id 49

# 사용자 정의 포맷 시작 ID
CUSTOM_FORMAT_ID = 164

# 소문자 약어 -> 포맷 코드 (Currency는 로케일 의존이라 별도 처리)
NUMBER_FORMAT_SHORTHANDS = {
    "general": NUMBER_FORMAT_GENERAL,
    "number": NUMBER_FORMAT_NUMBER,
    "percentage": NUMBER_FORMAT_PERCENTAGE,
    "scientific": NUMBER_FORMAT_SCIENTIFIC,
    "fraction": NUMBER_FORMAT_FRACTION,
    "short date": NUMBER_FORMAT_SHORT_DATE,
    "short time": NUMBER_FORMAT_SHORT_TIME,
    "long time": NUMBER_FORMAT_LONG_TIME,
    "date-time": NUMBER_FORMAT_DATE_TIME,
    "text": NUMBER_FORMAT_TEXT,
}

SHORTHAND_NAMES = [
    "Currency",
    "Number",
    "Percentage",
    "Scientific",
    "Fraction",
    "Short Date",
    "Short Time",
    "Long Time",
    "Date-Time",
    "Text",
    "General",
]


# =============================================================================
# 포맷 확장
# =============================================================================


def currency_format(conv: Optional[dict] = None) -> str:
    """현재 로케일의 통화 규칙으로 통화 포맷 코드 생성

    Args:
        conv: locale.localeconv() 결과 (테스트용 주입)

    Returns:
        양수;음수 두 구역으로 된 포맷 코드 (예: "$#,##0.00;($#,##0.00)")
    """
    conv = conv if conv is not None else locale.localeconv()

    symbol = conv.get("currency_symbol") or "$"
    body = "#,##0.00"

    # CHAR_MAX(127)는 "정의되지 않음"
    precedes = conv.get("p_cs_precedes", 1)
    precedes = True if precedes in (None, 127) else bool(precedes)
    spaced = conv.get("p_sep_by_space", 0)
    spaced = False if spaced in (None, 127) else bool(spaced)

    gap = " " if spaced else ""
    quoted = f'"{symbol}"' if len(symbol) > 1 else symbol
    positive = f"{quoted}{gap}{body}" if precedes else f"{body}{gap}{quoted}"

    # n_sign_posn 0 = 괄호로 감쌈, 나머지는 마이너스 부호
    sign_posn = conv.get("n_sign_posn", 0)
    if sign_posn in (0, 127, None):
        negative = f"({positive})"
    else:
        negative = f"-{positive}"

    return f"{positive};{negative}"


def expand_number_format(value: str) -> str:
    """숫자 포맷 약어를 포맷 코드로 확장

    대소문자를 구분하지 않으며, 약어가 아니면 입력값을 그대로 반환합니다.
    """
    key = value.strip().lower()
    if key == "currency":
        return currency_format()
    return NUMBER_FORMAT_SHORTHANDS.get(key, value)


def number_format_id(code: str) -> int:
    """포맷 코드의 numFmtId 반환 (내장 포맷이 아니면 사용자 정의 ID)"""
    return BUILTIN_FORMATS_REVERSE.get(code, CUSTOM_FORMAT_ID)


# =============================================================================
# 로케일 숫자 파싱
# =============================================================================


def parse_number(value: str, conv: Optional[dict] = None) -> Optional[float]:
    """로케일 규칙에 따라 문자열을 숫자로 해석

    천 단위 구분자, 소수점, 통화 기호, 괄호 음수, 지수 표기를 허용합니다.

    Args:
        value: 해석할 문자열
        conv: locale.localeconv() 결과 (테스트용 주입)

    Returns:
        유한한 float, 숫자가 아니면 None
    """
    conv = conv if conv is not None else locale.localeconv()

    text = value.strip()
    if not text or "_" in text:
        return None

    negative = False
    if text.startswith("(") and text.endswith(")"):
        negative = True
        text = text[1:-1].strip()

    for symbol in (conv.get("currency_symbol"), (conv.get("int_curr_symbol") or "").strip()):
        if symbol:
            text = text.replace(symbol, "")

    decimal_point = conv.get("decimal_point") or "."
    thousands_sep = conv.get("thousands_sep") or ("," if decimal_point != "," else "")
    if thousands_sep:
        text = text.replace(thousands_sep, "")
        # 일부 로케일은 NBSP를 천 단위 구분자로 사용
        if thousands_sep.isspace():
            text = text.replace(" ", "")
    if decimal_point != ".":
        text = text.replace(decimal_point, ".")

    try:
        number = float(text.strip())
    except ValueError:
        return None

    if not math.isfinite(number):
        return None
    if negative:
        number = -number
    return number
