"""
core/tools/io/excel/conditional.py - openpyxl 조건부 서식 래퍼

이름 있는 파라미터(규칙 타입, 아이콘 세트, 데이터 막대 색상, 조건값, 폰트/채우기 옵션)를
openpyxl 조건부 서식 규칙으로 변환하여 워크시트에 추가합니다.

구성:
    - 규칙 모드: IconSetMode / DataBarMode / NamedRuleMode 중 정확히 하나
    - 조건값 정규화: 숫자 리터럴, 문자열 인용, 수식 앞 "=" 제거
    - 스타일 매핑: 명시적으로 지정된 필드만 규칙의 DifferentialStyle에 반영
    - 우선순위/중단: 지정된 경우에만 규칙에 복사

Usage:
    from openpyxl import Workbook
    from core.tools.io.excel.conditional import add_conditional_formatting

    wb = Workbook()
    ws = wb.active

    add_conditional_formatting("B2:B100", ws, "GreaterThan",
                               condition_value="1000", bold=True, background_color="LightGreen")
    add_conditional_formatting("C2:C100", ws, three_icon_set="Arrows", reverse=True)
    rule = add_conditional_formatting("Sheet!D2:D100", workbook=wb, data_bar_color="Blue", pass_thru=True)

    wb.save("report.xlsx")  # 저장은 호출자 책임
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from openpyxl.formatting.rule import ColorScaleRule, DataBarRule, IconSetRule, Rule
from openpyxl.styles import Font, PatternFill
from openpyxl.styles.differential import DifferentialStyle
from openpyxl.styles.numbers import NumberFormat
from openpyxl.utils.cell import get_column_letter, range_boundaries

from core.exceptions import ParameterConflictError

from .address import resolve_address
from .number_format import expand_number_format, number_format_id, parse_number
from .styles import (
    COLOR_DATA_BAR,
    COLOR_SCALE_HIGH,
    COLOR_SCALE_LOW,
    COLOR_SCALE_MID,
    UNDERLINE_NONE,
    UNDERLINE_SINGLE,
    normalize_color,
    normalize_pattern,
)

logger = logging.getLogger(__name__)


# =============================================================================
# 규칙 타입
# =============================================================================


class RuleType(str, Enum):
    """이름 있는 조건부 서식 규칙 타입"""

    # 비교
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    BETWEEN = "Between"
    NOT_BETWEEN = "NotBetween"
    # 텍스트
    CONTAINS_TEXT = "ContainsText"
    NOT_CONTAINS_TEXT = "NotContainsText"
    BEGINS_WITH = "BeginsWith"
    ENDS_WITH = "EndsWith"
    # 수식
    EXPRESSION = "Expression"
    # 빈 셀 / 오류
    CONTAINS_BLANKS = "ContainsBlanks"
    NOT_CONTAINS_BLANKS = "NotContainsBlanks"
    CONTAINS_ERRORS = "ContainsErrors"
    NOT_CONTAINS_ERRORS = "NotContainsErrors"
    # 중복 / 고유
    DUPLICATE_VALUES = "DuplicateValues"
    UNIQUE_VALUES = "UniqueValues"
    # 순위
    TOP = "Top"
    BOTTOM = "Bottom"
    TOP_PERCENT = "TopPercent"
    BOTTOM_PERCENT = "BottomPercent"
    # 평균
    ABOVE_AVERAGE = "AboveAverage"
    ABOVE_OR_EQUAL_AVERAGE = "AboveOrEqualAverage"
    BELOW_AVERAGE = "BelowAverage"
    BELOW_OR_EQUAL_AVERAGE = "BelowOrEqualAverage"
    ABOVE_STD_DEV = "AboveStdDev"
    BELOW_STD_DEV = "BelowStdDev"
    # 기간
    TODAY = "Today"
    YESTERDAY = "Yesterday"
    TOMORROW = "Tomorrow"
    LAST_7_DAYS = "Last7Days"
    THIS_WEEK = "ThisWeek"
    LAST_WEEK = "LastWeek"
    NEXT_WEEK = "NextWeek"
    THIS_MONTH = "ThisMonth"
    LAST_MONTH = "LastMonth"
    NEXT_MONTH = "NextMonth"
    # 색상 스케일
    TWO_COLOR_SCALE = "TwoColorScale"
    THREE_COLOR_SCALE = "ThreeColorScale"
    # 아이콘 세트 / 데이터 막대 (기본 스타일)
    THREE_ICON_SET = "ThreeIconSet"
    FOUR_ICON_SET = "FourIconSet"
    FIVE_ICON_SET = "FiveIconSet"
    DATA_BAR = "DataBar"

    @classmethod
    def parse(cls, value: Union[str, "RuleType"]) -> "RuleType":
        """대소문자 구분 없이 규칙 타입 조회

        Raises:
            ValueError: 알 수 없는 규칙 타입
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _RULE_TYPE_ALIASES:
            return _RULE_TYPE_ALIASES[key]
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ValueError(f"{value!r} is not a valid rule type")


_RULE_TYPE_ALIASES = {
    "notcontains": RuleType.NOT_CONTAINS_TEXT,
}

# 비교 규칙 -> cellIs 연산자
COMPARISON_OPERATORS = {
    RuleType.LESS_THAN: "lessThan",
    RuleType.LESS_THAN_OR_EQUAL: "lessThanOrEqual",
    RuleType.GREATER_THAN: "greaterThan",
    RuleType.GREATER_THAN_OR_EQUAL: "greaterThanOrEqual",
    RuleType.EQUAL: "equal",
    RuleType.NOT_EQUAL: "notEqual",
    RuleType.BETWEEN: "between",
    RuleType.NOT_BETWEEN: "notBetween",
}

# 텍스트 규칙 -> (type, operator, formula 템플릿)
TEXT_RULES = {
    RuleType.CONTAINS_TEXT: (
        "containsText",
        "containsText",
        'NOT(ISERROR(SEARCH("{text}",{cell})))',
    ),
    RuleType.NOT_CONTAINS_TEXT: (
        "notContainsText",
        "notContains",
        'ISERROR(SEARCH("{text}",{cell}))',
    ),
    RuleType.BEGINS_WITH: (
        "beginsWith",
        "beginsWith",
        'LEFT({cell},LEN("{text}"))="{text}"',
    ),
    RuleType.ENDS_WITH: (
        "endsWith",
        "endsWith",
        'RIGHT({cell},LEN("{text}"))="{text}"',
    ),
}

# 빈 셀 / 오류 규칙 -> (type, formula 템플릿)
CELL_STATE_RULES = {
    RuleType.CONTAINS_BLANKS: ("containsBlanks", "LEN(TRIM({cell}))=0"),
    RuleType.NOT_CONTAINS_BLANKS: ("notContainsBlanks", "LEN(TRIM({cell}))>0"),
    RuleType.CONTAINS_ERRORS: ("containsErrors", "ISERROR({cell})"),
    RuleType.NOT_CONTAINS_ERRORS: ("notContainsErrors", "NOT(ISERROR({cell}))"),
}

# 기간 규칙 -> (timePeriod, formula 템플릿)
TIME_PERIOD_RULES = {
    RuleType.TODAY: ("today", "FLOOR({cell},1)=TODAY()"),
    RuleType.YESTERDAY: ("yesterday", "FLOOR({cell},1)=TODAY()-1"),
    RuleType.TOMORROW: ("tomorrow", "FLOOR({cell},1)=TODAY()+1"),
    RuleType.LAST_7_DAYS: (
        "last7Days",
        "AND(TODAY()-FLOOR({cell},1)<=6,FLOOR({cell},1)<=TODAY())",
    ),
    RuleType.THIS_WEEK: (
        "thisWeek",
        "AND(TODAY()-ROUNDDOWN({cell},0)<=WEEKDAY(TODAY())-1,"
        "ROUNDDOWN({cell},0)-TODAY()<=7-WEEKDAY(TODAY()))",
    ),
    RuleType.LAST_WEEK: (
        "lastWeek",
        "AND(TODAY()-ROUNDDOWN({cell},0)>=(WEEKDAY(TODAY())),"
        "TODAY()-ROUNDDOWN({cell},0)<(WEEKDAY(TODAY())+7))",
    ),
    RuleType.NEXT_WEEK: (
        "nextWeek",
        "AND(ROUNDDOWN({cell},0)-TODAY()>(7-WEEKDAY(TODAY())),"
        "ROUNDDOWN({cell},0)-TODAY()<(15-WEEKDAY(TODAY())))",
    ),
    RuleType.THIS_MONTH: (
        "thisMonth",
        "AND(MONTH({cell})=MONTH(TODAY()),YEAR({cell})=YEAR(TODAY()))",
    ),
    RuleType.LAST_MONTH: (
        "lastMonth",
        "AND(MONTH({cell})=MONTH(EDATE(TODAY(),0-1)),YEAR({cell})=YEAR(EDATE(TODAY(),0-1)))",
    ),
    RuleType.NEXT_MONTH: (
        "nextMonth",
        "AND(MONTH({cell})=MONTH(EDATE(TODAY(),0+1)),YEAR({cell})=YEAR(EDATE(TODAY(),0+1)))",
    ),
}

# 순위 규칙 -> (bottom, percent)
RANK_RULES = {
    RuleType.TOP: (None, None),
    RuleType.BOTTOM: (True, None),
    RuleType.TOP_PERCENT: (None, True),
    RuleType.BOTTOM_PERCENT: (True, True),
}
DEFAULT_RANK = 10

# 평균 규칙 -> (aboveAverage, equalAverage, uses_std_dev)
AVERAGE_RULES = {
    RuleType.ABOVE_AVERAGE: (None, None, False),
    RuleType.ABOVE_OR_EQUAL_AVERAGE: (None, True, False),
    RuleType.BELOW_AVERAGE: (False, None, False),
    RuleType.BELOW_OR_EQUAL_AVERAGE: (False, True, False),
    RuleType.ABOVE_STD_DEV: (None, None, True),
    RuleType.BELOW_STD_DEV: (False, None, True),
}
DEFAULT_STD_DEV = 1

# =============================================================================
# 아이콘 세트
# =============================================================================

ICON_SETS = {
    3: ["Arrows", "ArrowsGray", "Flags", "Signs", "Symbols", "Symbols2", "TrafficLights1", "TrafficLights2"],
    4: ["Arrows", "ArrowsGray", "Rating", "RedToBlack", "TrafficLights"],
    5: ["Arrows", "ArrowsGray", "Quarters", "Rating"],
}

DEFAULT_ICON_SETS = {
    3: "TrafficLights1",
    4: "TrafficLights",
    5: "Arrows",
}

ICON_SET_RULE_TYPES = {
    RuleType.THREE_ICON_SET: 3,
    RuleType.FOUR_ICON_SET: 4,
    RuleType.FIVE_ICON_SET: 5,
}


def icon_set_name(icon_count: int, style: str) -> str:
    """아이콘 세트 이름을 OOXML 이름으로 변환

    "Arrows" -> "3Arrows", "3Arrows"는 그대로. 알 수 없는 이름도 접두사만 붙여
    openpyxl 검증에 위임합니다.
    """
    text = style.strip()
    if text[:1].isdigit():
        return text
    for name in ICON_SETS.get(icon_count, []):
        if name.lower() == text.lower():
            return f"{icon_count}{name}"
    return f"{icon_count}{text}"


def icon_thresholds(icon_count: int) -> List[int]:
    """아이콘 개수별 균등 퍼센트 임계값 (3 -> [0, 33, 67])"""
    return [round(100 * i / icon_count) for i in range(icon_count)]


# =============================================================================
# 규칙 모드 (상호 배타)
# =============================================================================


@dataclass(frozen=True)
class IconSetMode:
    """3/4/5 아이콘 세트 모드"""

    icon_count: int
    icon_style: str
    reverse: Optional[bool] = None


@dataclass(frozen=True)
class DataBarMode:
    """데이터 막대 모드"""

    color: str


@dataclass(frozen=True)
class NamedRuleMode:
    """이름 있는 규칙 타입 모드"""

    rule_type: RuleType
    reverse: Optional[bool] = None


RuleMode = Union[IconSetMode, DataBarMode, NamedRuleMode]

# 조건값은 문자열 또는 숫자
ConditionValue = Union[str, int, float, None]


def select_mode(
    rule_type: Union[str, RuleType, None] = None,
    three_icon_set: Optional[str] = None,
    four_icon_set: Optional[str] = None,
    five_icon_set: Optional[str] = None,
    data_bar_color: Optional[str] = None,
    reverse: Optional[bool] = None,
) -> RuleMode:
    """상호 배타 파라미터에서 규칙 모드를 하나 선택

    Raises:
        ParameterConflictError: 0개 또는 2개 이상 지정되었거나,
            아이콘 세트가 아닌 모드에 reverse가 지정된 경우
        ValueError: 알 수 없는 규칙 타입
    """
    candidates = {
        "rule_type": rule_type,
        "three_icon_set": three_icon_set,
        "four_icon_set": four_icon_set,
        "five_icon_set": five_icon_set,
        "data_bar_color": data_bar_color,
    }
    supplied = [name for name, value in candidates.items() if value is not None]
    if len(supplied) != 1:
        raise ParameterConflictError(
            supplied,
            "rule_type, three_icon_set, four_icon_set, five_icon_set, data_bar_color 중 "
            "정확히 하나를 지정해야 합니다",
        )

    selected = supplied[0]
    mode: RuleMode
    if selected == "three_icon_set":
        mode = IconSetMode(3, three_icon_set, reverse)
    elif selected == "four_icon_set":
        mode = IconSetMode(4, four_icon_set, reverse)
    elif selected == "five_icon_set":
        mode = IconSetMode(5, five_icon_set, reverse)
    elif selected == "data_bar_color":
        mode = DataBarMode(data_bar_color)
    else:
        mode = NamedRuleMode(RuleType.parse(rule_type), reverse)

    is_icon_set = isinstance(mode, IconSetMode) or (
        isinstance(mode, NamedRuleMode) and mode.rule_type in ICON_SET_RULE_TYPES
    )
    if reverse is not None and not is_icon_set:
        raise ParameterConflictError(
            ["reverse", selected], "reverse는 아이콘 세트 규칙에만 적용됩니다"
        )

    return mode


# =============================================================================
# 조건값 정규화
# =============================================================================


def is_quoted(value: str) -> bool:
    """큰따옴표로 감싼 문자열인지 확인"""
    return len(value) >= 2 and value.startswith('"') and value.endswith('"')


def strip_formula_prefix(value: str) -> str:
    """수식 앞의 "=" 하나를 제거"""
    return value[1:] if value.startswith("=") else value


def format_number(number: float) -> str:
    """숫자를 수식용 리터럴로 변환 (1000.0 -> "1000")"""
    if number.is_integer() and abs(number) < 1e15:
        return str(int(number))
    return repr(number)


def normalize_condition_value(value: Any) -> str:
    """비교 규칙용 조건값 정규화

    - int/float 값은 숫자 리터럴
    - 숫자로 해석되면 숫자 리터럴
    - "="로 시작하면 "="를 제거한 수식
    - 이미 인용된 문자열은 그대로
    - 그 외에는 큰따옴표로 감싼 문자열 리터럴
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(float(value))
    text = _as_text(value)
    number = parse_number(text)
    if number is not None:
        return format_number(number)
    if text.startswith("="):
        return strip_formula_prefix(text)
    if is_quoted(text):
        return text
    return '"' + text.replace('"', '""') + '"'


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _escape_text(value: str) -> str:
    return value.replace('"', '""')


def top_left_cell(range_string: str) -> str:
    """범위 문자열의 좌상단 셀 참조 ("B2:D10 F1" -> "B2")"""
    min_col, min_row, _, _ = range_boundaries(range_string.split()[0])
    return f"{get_column_letter(min_col or 1)}{min_row or 1}"


# =============================================================================
# 스타일 매핑
# =============================================================================


@dataclass
class RuleStyle:
    """규칙에 적용할 서식 (None = 지정 안 함, 라이브러리 기본값 유지)

    Attributes:
        bold: 굵게
        italic: 기울임
        underline: True면 한 줄 밑줄, False면 밑줄 없음
        strikethrough: 취소선
        foreground_color: 글자 색상
        background_color: 채우기 배경 색상
        background_pattern: 채우기 패턴 ("Solid", "DarkGray" 등)
        pattern_color: 패턴 색상
        number_format: 숫자 포맷 코드 또는 약어 ("Currency", "Percentage" 등)
    """

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    strikethrough: Optional[bool] = None
    foreground_color: Optional[str] = None
    background_color: Optional[str] = None
    background_pattern: Optional[str] = None
    pattern_color: Optional[str] = None
    number_format: Optional[str] = None

    def _has_font(self) -> bool:
        return any(
            v is not None
            for v in (self.bold, self.italic, self.underline, self.strikethrough, self.foreground_color)
        )

    def _has_fill(self) -> bool:
        return any(
            v is not None
            for v in (self.background_color, self.background_pattern, self.pattern_color)
        )

    def is_empty(self) -> bool:
        """지정된 필드가 하나도 없는지 확인"""
        return not (self._has_font() or self._has_fill() or self.number_format is not None)

    def apply(self, rule: Rule) -> Rule:
        """지정된 필드만 규칙의 DifferentialStyle에 반영"""
        if self.is_empty():
            return rule

        dxf = rule.dxf if rule.dxf is not None else DifferentialStyle()

        if self._has_font():
            font = dxf.font if dxf.font is not None else Font()
            if self.bold is not None:
                font.bold = self.bold
            if self.italic is not None:
                font.italic = self.italic
            if self.underline is not None:
                font.underline = UNDERLINE_SINGLE if self.underline else UNDERLINE_NONE
            if self.strikethrough is not None:
                font.strikethrough = self.strikethrough
            if self.foreground_color is not None:
                font.color = normalize_color(self.foreground_color)
            dxf.font = font

        if self._has_fill():
            fill = dxf.fill if dxf.fill is not None else PatternFill()
            if self.background_color is not None:
                fill.bgColor = normalize_color(self.background_color)
            if self.background_pattern is not None:
                fill.fill_type = normalize_pattern(self.background_pattern)
            if self.pattern_color is not None:
                fill.fgColor = normalize_color(self.pattern_color)
            dxf.fill = fill

        if self.number_format is not None:
            code = expand_number_format(self.number_format)
            dxf.numFmt = NumberFormat(numFmtId=number_format_id(code), formatCode=code)

        rule.dxf = dxf
        return rule


# =============================================================================
# 규칙 생성
# =============================================================================


@dataclass
class ConditionalFormat:
    """조건부 서식 하나의 전체 설정

    Attributes:
        mode: 규칙 모드 (IconSetMode / DataBarMode / NamedRuleMode)
        condition_value: 조건값 (비교/텍스트/수식/순위/표준편차)
        condition_value2: Between/NotBetween의 두 번째 조건값
        style: 서식 필드
        stop_if_true: 이후 규칙 평가 중단 여부
        priority: 평가 우선순위
    """

    mode: RuleMode
    condition_value: ConditionValue = None
    condition_value2: ConditionValue = None
    style: RuleStyle = field(default_factory=RuleStyle)
    stop_if_true: Optional[bool] = None
    priority: Optional[int] = None

    def build_rule(self, range_string: str) -> Rule:
        """워크시트를 건드리지 않고 설정된 Rule 생성"""
        if isinstance(self.mode, IconSetMode):
            rule = _build_icon_set(self.mode.icon_count, self.mode.icon_style, self.mode.reverse)
        elif isinstance(self.mode, DataBarMode):
            rule = _build_data_bar(self.mode.color)
        else:
            builder = _NAMED_BUILDERS[_family(self.mode.rule_type)]
            rule = builder(self, self.mode.rule_type, top_left_cell(range_string))

        self.style.apply(rule)

        if self.stop_if_true is not None:
            rule.stopIfTrue = self.stop_if_true
        if self.priority is not None:
            rule.priority = self.priority

        return rule

    def add_to(self, worksheet: Any, range_string: str) -> Rule:
        """규칙을 생성해 워크시트의 조건부 서식 목록에 추가"""
        rule = self.build_rule(range_string)
        worksheet.conditional_formatting.add(range_string, rule)
        logger.debug(
            "Added %s rule to %s!%s (priority=%s)",
            rule.type,
            worksheet.title,
            range_string,
            rule.priority,
        )
        return rule


def _build_icon_set(icon_count: int, style: str, reverse: Optional[bool]) -> Rule:
    return IconSetRule(
        icon_set_name(icon_count, style),
        "percent",
        icon_thresholds(icon_count),
        reverse=reverse,
    )


def _build_data_bar(color: str) -> Rule:
    return DataBarRule(start_type="min", end_type="max", color=normalize_color(color))


def _build_comparison(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    formula = []
    if fmt.condition_value is not None:
        formula.append(normalize_condition_value(fmt.condition_value))
    if rule_type in (RuleType.BETWEEN, RuleType.NOT_BETWEEN) and fmt.condition_value2 is not None:
        formula.append(normalize_condition_value(fmt.condition_value2))
    return Rule(type="cellIs", operator=COMPARISON_OPERATORS[rule_type], formula=formula)


def _build_text(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    type_, operator, template = TEXT_RULES[rule_type]
    rule = Rule(type=type_, operator=operator)
    if fmt.condition_value is not None:
        text = strip_formula_prefix(_as_text(fmt.condition_value))
        if is_quoted(text):
            logger.warning(
                "Condition value %s is quoted; the rule will look for the quote characters too",
                text,
            )
        rule.text = text
        rule.formula = [template.format(text=_escape_text(text), cell=cell)]
    return rule


def _build_expression(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    formula = []
    if fmt.condition_value is not None:
        formula.append(strip_formula_prefix(_as_text(fmt.condition_value)))
    return Rule(type="expression", formula=formula)


def _build_cell_state(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    type_, template = CELL_STATE_RULES[rule_type]
    return Rule(type=type_, formula=[template.format(cell=cell)])


def _build_uniqueness(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    if rule_type == RuleType.DUPLICATE_VALUES:
        return Rule(type="duplicateValues")
    return Rule(type="uniqueValues")


def _build_rank(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    bottom, percent = RANK_RULES[rule_type]
    rank = _as_text(fmt.condition_value).strip() if fmt.condition_value is not None else DEFAULT_RANK
    return Rule(type="top10", rank=rank, bottom=bottom, percent=percent)


def _build_average(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    above, equal, uses_std_dev = AVERAGE_RULES[rule_type]
    rule = Rule(type="aboveAverage", aboveAverage=above, equalAverage=equal)
    if uses_std_dev:
        rule.stdDev = (
            _as_text(fmt.condition_value).strip() if fmt.condition_value is not None else DEFAULT_STD_DEV
        )
    return rule


def _build_time_period(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    period, template = TIME_PERIOD_RULES[rule_type]
    return Rule(type="timePeriod", timePeriod=period, formula=[template.format(cell=cell)])


def _build_color_scale(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    if rule_type == RuleType.TWO_COLOR_SCALE:
        return ColorScaleRule(
            start_type="min",
            start_color=normalize_color(COLOR_SCALE_LOW),
            end_type="max",
            end_color=normalize_color(COLOR_SCALE_HIGH),
        )
    return ColorScaleRule(
        start_type="min",
        start_color=normalize_color(COLOR_SCALE_LOW),
        mid_type="percentile",
        mid_value=50,
        mid_color=normalize_color(COLOR_SCALE_MID),
        end_type="max",
        end_color=normalize_color(COLOR_SCALE_HIGH),
    )


def _build_default_icon_set(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    icon_count = ICON_SET_RULE_TYPES[rule_type]
    reverse = fmt.mode.reverse if isinstance(fmt.mode, NamedRuleMode) else None
    return _build_icon_set(icon_count, DEFAULT_ICON_SETS[icon_count], reverse)


def _build_default_data_bar(fmt: ConditionalFormat, rule_type: RuleType, cell: str) -> Rule:
    return _build_data_bar(COLOR_DATA_BAR)


def _family(rule_type: RuleType) -> str:
    if rule_type in COMPARISON_OPERATORS:
        return "comparison"
    if rule_type in TEXT_RULES:
        return "text"
    if rule_type == RuleType.EXPRESSION:
        return "expression"
    if rule_type in CELL_STATE_RULES:
        return "cell_state"
    if rule_type in (RuleType.DUPLICATE_VALUES, RuleType.UNIQUE_VALUES):
        return "uniqueness"
    if rule_type in RANK_RULES:
        return "rank"
    if rule_type in AVERAGE_RULES:
        return "average"
    if rule_type in TIME_PERIOD_RULES:
        return "time_period"
    if rule_type in (RuleType.TWO_COLOR_SCALE, RuleType.THREE_COLOR_SCALE):
        return "color_scale"
    if rule_type in ICON_SET_RULE_TYPES:
        return "icon_set"
    return "data_bar"


def rule_family(rule_type: Union[str, RuleType]) -> str:
    """규칙 타입의 계열 이름 ("comparison", "text", ...)"""
    return _family(RuleType.parse(rule_type))


_NAMED_BUILDERS: Dict[str, Callable[[ConditionalFormat, RuleType, str], Rule]] = {
    "comparison": _build_comparison,
    "text": _build_text,
    "expression": _build_expression,
    "cell_state": _build_cell_state,
    "uniqueness": _build_uniqueness,
    "rank": _build_rank,
    "average": _build_average,
    "time_period": _build_time_period,
    "color_scale": _build_color_scale,
    "icon_set": _build_default_icon_set,
    "data_bar": _build_default_data_bar,
}


# =============================================================================
# 공개 API
# =============================================================================


def add_conditional_formatting(
    address: Any,
    worksheet: Any = None,
    rule_type: Union[str, RuleType, None] = None,
    *,
    workbook: Any = None,
    three_icon_set: Optional[str] = None,
    four_icon_set: Optional[str] = None,
    five_icon_set: Optional[str] = None,
    data_bar_color: Optional[str] = None,
    reverse: Optional[bool] = None,
    condition_value: ConditionValue = None,
    condition_value2: ConditionValue = None,
    background_color: Optional[str] = None,
    foreground_color: Optional[str] = None,
    background_pattern: Optional[str] = None,
    pattern_color: Optional[str] = None,
    number_format: Optional[str] = None,
    bold: Optional[bool] = None,
    italic: Optional[bool] = None,
    underline: Optional[bool] = None,
    strikethrough: Optional[bool] = None,
    stop_if_true: Optional[bool] = None,
    priority: Optional[int] = None,
    pass_thru: bool = False,
) -> Optional[Rule]:
    """조건부 서식 규칙 하나를 생성해 워크시트에 추가

    Args:
        address: 범위 문자열/테이블 이름, 또는 워크시트를 포함하는 셀 참조
        worksheet: 대상 워크시트 (address가 셀 참조면 생략 가능)
        rule_type: 이름 있는 규칙 타입 ("GreaterThan", "ContainsText" 등)
        workbook: "Sheet!A1:B2" 형식 address에서 시트를 찾을 워크북
        three_icon_set / four_icon_set / five_icon_set: 아이콘 세트 이름
        data_bar_color: 데이터 막대 색상
        reverse: 아이콘 순서 반전 (아이콘 세트 전용)
        condition_value / condition_value2: 조건값 (문자열 또는 숫자)
        background_color, foreground_color, background_pattern, pattern_color,
        number_format, bold, italic, underline, strikethrough: 서식 (지정한 것만 적용)
        stop_if_true: 이후 규칙 평가 중단
        priority: 평가 우선순위
        pass_thru: True면 생성된 규칙 반환

    Returns:
        pass_thru가 True면 생성된 Rule, 아니면 None

    Raises:
        ParameterConflictError: 규칙 선택 파라미터가 0개 또는 2개 이상
        AddressError: 워크시트를 도출할 수 없음
        ValueError / TypeError: openpyxl 검증 실패 (그대로 전파)
    """
    mode = select_mode(
        rule_type=rule_type,
        three_icon_set=three_icon_set,
        four_icon_set=four_icon_set,
        five_icon_set=five_icon_set,
        data_bar_color=data_bar_color,
        reverse=reverse,
    )
    ws, range_string = resolve_address(address, worksheet=worksheet, workbook=workbook)

    if not isinstance(mode, NamedRuleMode) and (
        condition_value is not None or condition_value2 is not None
    ):
        logger.debug("Condition values are ignored for %s", type(mode).__name__)

    fmt = ConditionalFormat(
        mode=mode,
        condition_value=condition_value,
        condition_value2=condition_value2,
        style=RuleStyle(
            bold=bold,
            italic=italic,
            underline=underline,
            strikethrough=strikethrough,
            foreground_color=foreground_color,
            background_color=background_color,
            background_pattern=background_pattern,
            pattern_color=pattern_color,
            number_format=number_format,
        ),
        stop_if_true=stop_if_true,
        priority=priority,
    )
    rule = fmt.add_to(ws, range_string)

    if pass_thru:
        return rule
    return None
