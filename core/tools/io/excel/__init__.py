# core/tools/io/excel - openpyxl 조건부 서식 래퍼
"""
Excel 조건부 서식 유틸리티.

사용 예시:
    from openpyxl import load_workbook
    from core.tools.io.excel import add_conditional_formatting

    wb = load_workbook("report.xlsx")
    ws = wb["결과"]

    add_conditional_formatting("C2:C500", ws, "ContainsText",
                               condition_value="2003", foreground_color="DarkRed")
    add_conditional_formatting("D2:D500", ws, five_icon_set="Rating")

    wb.save("report.xlsx")

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    openpyxl 등 무거운 의존성을 실제 사용 시점에만 로드합니다.
"""

__all__ = [
    # 공개 API
    "add_conditional_formatting",
    "ConditionalFormat",
    "RuleStyle",
    "RuleType",
    "IconSetMode",
    "DataBarMode",
    "NamedRuleMode",
    "select_mode",
    "rule_family",
    "normalize_condition_value",
    "strip_formula_prefix",
    "is_quoted",
    "icon_set_name",
    "ICON_SETS",
    # 주소
    "resolve_address",
    "normalize_range",
    # 숫자 포맷
    "expand_number_format",
    "number_format_id",
    "parse_number",
    "SHORTHAND_NAMES",
    # 색상/패턴
    "normalize_color",
    "normalize_pattern",
]

# conditional.py 에서 가져올 항목들
_CONDITIONAL_ATTRS = {
    "add_conditional_formatting",
    "ConditionalFormat",
    "RuleStyle",
    "RuleType",
    "IconSetMode",
    "DataBarMode",
    "NamedRuleMode",
    "select_mode",
    "rule_family",
    "normalize_condition_value",
    "strip_formula_prefix",
    "is_quoted",
    "icon_set_name",
    "ICON_SETS",
}

# address.py 에서 가져올 항목들
_ADDRESS_ATTRS = {
    "resolve_address",
    "normalize_range",
}

# number_format.py 에서 가져올 항목들
_NUMBER_FORMAT_ATTRS = {
    "expand_number_format",
    "number_format_id",
    "parse_number",
    "SHORTHAND_NAMES",
}

# styles.py 에서 가져올 항목들
_STYLES_ATTRS = {
    "normalize_color",
    "normalize_pattern",
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _CONDITIONAL_ATTRS:
        from . import conditional

        return getattr(conditional, name)

    if name in _ADDRESS_ATTRS:
        from . import address

        return getattr(address, name)

    if name in _NUMBER_FORMAT_ATTRS:
        from . import number_format

        return getattr(number_format, name)

    if name in _STYLES_ATTRS:
        from . import styles

        return getattr(styles, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
