"""
core/tools/io/excel/styles.py - 조건부 서식 색상/패턴 상수 및 유틸리티

색상 이름과 채우기 패턴 이름을 openpyxl이 기대하는 값으로 정규화합니다.
알 수 없는 값은 그대로 통과시켜 openpyxl의 검증 에러가 전파되도록 합니다.
"""

import logging
import re
from typing import Optional

import webcolors

logger = logging.getLogger(__name__)

# =============================================================================
# 색상 상수 (RGB Hex)
# =============================================================================

# 색상 스케일 기본 팔레트
COLOR_SCALE_LOW = "F8696B"  # 최소값 (빨강)
COLOR_SCALE_MID = "FFEB84"  # 중간값 (노랑)
COLOR_SCALE_HIGH = "63BE7B"  # 최대값 (초록)

# 데이터 막대 기본 색상
COLOR_DATA_BAR = "638EC6"  # 파란색

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")

# =============================================================================
# 채우기 패턴 상수
# =============================================================================

# 소문자 이름 -> OOXML patternType
PATTERN_TYPES = {
    "none": None,
    "solid": "solid",
    "darkgray": "darkGray",
    "mediumgray": "mediumGray",
    "lightgray": "lightGray",
    "gray125": "gray125",
    "gray0625": "gray0625",
    "darkvertical": "darkVertical",
    "darkhorizontal": "darkHorizontal",
    "darkdown": "darkDown",
    "darkup": "darkUp",
    "darkgrid": "darkGrid",
    "darktrellis": "darkTrellis",
    "lightvertical": "lightVertical",
    "lighthorizontal": "lightHorizontal",
    "lightdown": "lightDown",
    "lightup": "lightUp",
    "lightgrid": "lightGrid",
    "lighttrellis": "lightTrellis",
}

# 밑줄 스타일
UNDERLINE_SINGLE = "single"
UNDERLINE_NONE = None


# =============================================================================
# 정규화 함수
# =============================================================================


def normalize_color(value: str) -> str:
    """색상 이름 또는 Hex 문자열을 ARGB 8자리로 변환

    색상 이름은 CSS3 색상 이름(webcolors)으로 해석합니다.

    Args:
        value: "Red", "Crimson", "#FF0000", "FF0000", "FFFF0000" 등

    Returns:
        "FFFF0000" 형식 문자열. 알 수 없는 값은 그대로 반환.
    """
    text = value.strip()
    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1).upper()
        return digits if len(digits) == 8 else "FF" + digits

    try:
        named = webcolors.name_to_hex(text.replace(" ", ""))
    except ValueError:
        named = None
    if named:
        return "FF" + named.lstrip("#").upper()

    logger.debug("Unrecognized color passed through: %s", value)
    return text


def normalize_pattern(value: str) -> Optional[str]:
    """채우기 패턴 이름을 OOXML patternType으로 변환

    "Solid" -> "solid", "DarkGray" -> "darkGray", "None" -> None.
    알 수 없는 값은 그대로 반환 (openpyxl 검증에 위임).
    """
    key = value.strip().lower().replace(" ", "")
    if key in PATTERN_TYPES:
        return PATTERN_TYPES[key]
    return value
