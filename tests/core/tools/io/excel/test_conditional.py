"""
tests/core/tools/io/excel/test_conditional.py - 조건부 서식 래퍼 테스트
"""

import logging
from unittest.mock import MagicMock

import pytest
from openpyxl.xml.functions import tostring

from core.exceptions import AddressError, ParameterConflictError
from core.tools.io.excel.conditional import (
    ConditionalFormat,
    DataBarMode,
    IconSetMode,
    NamedRuleMode,
    RuleStyle,
    RuleType,
    add_conditional_formatting,
    icon_set_name,
    icon_thresholds,
    is_quoted,
    normalize_condition_value,
    rule_family,
    select_mode,
    strip_formula_prefix,
    top_left_cell,
)

# =============================================================================
# RuleType 테스트
# =============================================================================


class TestRuleType:
    """RuleType 파싱 테스트"""

    def test_parse_exact(self):
        """정확한 이름"""
        assert RuleType.parse("GreaterThan") is RuleType.GREATER_THAN

    def test_parse_case_insensitive(self):
        """대소문자 무시"""
        assert RuleType.parse("containstext") is RuleType.CONTAINS_TEXT
        assert RuleType.parse("  LAST7DAYS ") is RuleType.LAST_7_DAYS

    def test_parse_alias(self):
        """NotContains 별칭"""
        assert RuleType.parse("NotContains") is RuleType.NOT_CONTAINS_TEXT

    def test_parse_member(self):
        """RuleType 멤버는 그대로 반환"""
        assert RuleType.parse(RuleType.TOP) is RuleType.TOP

    def test_parse_unknown(self):
        """알 수 없는 규칙 타입은 ValueError"""
        with pytest.raises(ValueError):
            RuleType.parse("GreaterThanish")

    def test_every_rule_type_has_family(self):
        """모든 규칙 타입이 계열에 속함"""
        families = {rule_family(member) for member in RuleType}
        assert families == {
            "comparison",
            "text",
            "expression",
            "cell_state",
            "uniqueness",
            "rank",
            "average",
            "time_period",
            "color_scale",
            "icon_set",
            "data_bar",
        }


# =============================================================================
# 모드 선택 테스트
# =============================================================================


class TestSelectMode:
    """상호 배타 모드 선택 테스트"""

    def test_named_rule(self):
        """규칙 타입 지정"""
        mode = select_mode(rule_type="Equal")
        assert mode == NamedRuleMode(RuleType.EQUAL)

    def test_three_icon_set(self):
        """3 아이콘 세트"""
        mode = select_mode(three_icon_set="Arrows", reverse=True)
        assert mode == IconSetMode(3, "Arrows", True)

    def test_four_and_five_icon_sets(self):
        """4/5 아이콘 세트"""
        assert select_mode(four_icon_set="Rating") == IconSetMode(4, "Rating")
        assert select_mode(five_icon_set="Quarters") == IconSetMode(5, "Quarters")

    def test_data_bar(self):
        """데이터 막대"""
        assert select_mode(data_bar_color="Blue") == DataBarMode("Blue")

    def test_nothing_supplied(self):
        """아무것도 지정하지 않으면 에러"""
        with pytest.raises(ParameterConflictError) as exc_info:
            select_mode()
        assert exc_info.value.parameters == []

    def test_multiple_supplied(self):
        """두 개 이상 지정하면 에러"""
        with pytest.raises(ParameterConflictError) as exc_info:
            select_mode(rule_type="GreaterThan", data_bar_color="Red")
        assert exc_info.value.parameters == ["rule_type", "data_bar_color"]

    def test_reverse_with_data_bar(self):
        """데이터 막대에 reverse 지정 불가"""
        with pytest.raises(ParameterConflictError) as exc_info:
            select_mode(data_bar_color="Red", reverse=True)
        assert "reverse" in exc_info.value.parameters

    def test_reverse_with_comparison(self):
        """비교 규칙에 reverse 지정 불가"""
        with pytest.raises(ParameterConflictError):
            select_mode(rule_type="GreaterThan", reverse=False)

    def test_reverse_with_named_icon_set(self):
        """이름 있는 아이콘 세트 규칙에는 reverse 허용"""
        mode = select_mode(rule_type="FiveIconSet", reverse=True)
        assert mode == NamedRuleMode(RuleType.FIVE_ICON_SET, True)


# =============================================================================
# 조건값 정규화 테스트
# =============================================================================


class TestConditionValue:
    """조건값 정규화 테스트"""

    def test_integer_becomes_numeric_literal(self):
        """정수는 숫자 리터럴"""
        assert normalize_condition_value("1000") == "1000"

    def test_decimal_becomes_numeric_literal(self):
        """소수는 숫자 리터럴"""
        assert normalize_condition_value("12.5") == "12.5"

    def test_negative_number(self):
        """음수"""
        assert normalize_condition_value("-3") == "-3"

    def test_text_is_quoted(self):
        """숫자가 아닌 문자열은 인용"""
        assert normalize_condition_value("Done") == '"Done"'

    def test_formula_prefix_stripped(self):
        """수식은 "=" 제거"""
        assert normalize_condition_value("=$B$1*2") == "$B$1*2"

    def test_already_quoted_kept(self):
        """이미 인용된 문자열은 그대로"""
        assert normalize_condition_value('"Done"') == '"Done"'

    def test_embedded_quotes_doubled(self):
        """내부 큰따옴표는 이중화"""
        assert normalize_condition_value('say "hi"') == '"say ""hi"""'

    def test_numeric_values(self):
        """int/float 값은 숫자 리터럴"""
        assert normalize_condition_value(1000) == "1000"
        assert normalize_condition_value(2.5) == "2.5"
        assert normalize_condition_value(-3) == "-3"
        assert normalize_condition_value(7.0) == "7"

    def test_bool_is_text(self):
        """bool은 숫자로 보지 않고 문자열로 인용"""
        assert normalize_condition_value(True) == '"True"'

    def test_helpers(self):
        """보조 함수"""
        assert is_quoted('"a"') is True
        assert is_quoted('"') is False
        assert is_quoted("a") is False
        assert strip_formula_prefix("=A1") == "A1"
        assert strip_formula_prefix("A1") == "A1"

    def test_top_left_cell(self):
        """좌상단 셀"""
        assert top_left_cell("B2:D10") == "B2"
        assert top_left_cell("C5") == "C5"
        assert top_left_cell("D3:D9 F1:F2") == "D3"


# =============================================================================
# 아이콘 세트 이름 테스트
# =============================================================================


class TestIconSetName:
    """아이콘 세트 이름 변환 테스트"""

    def test_short_name_prefixed(self):
        """짧은 이름에 개수 접두사"""
        assert icon_set_name(3, "Arrows") == "3Arrows"
        assert icon_set_name(4, "redtoblack") == "4RedToBlack"

    def test_ooxml_name_kept(self):
        """OOXML 이름은 그대로"""
        assert icon_set_name(3, "3TrafficLights2") == "3TrafficLights2"

    def test_thresholds(self):
        """균등 퍼센트 임계값"""
        assert icon_thresholds(3) == [0, 33, 67]
        assert icon_thresholds(4) == [0, 25, 50, 75]
        assert icon_thresholds(5) == [0, 20, 40, 60, 80]


# =============================================================================
# 비교 규칙 테스트
# =============================================================================


class TestComparisonRules:
    """비교 규칙 테스트"""

    def test_greater_than_numeric(self, worksheet):
        """GreaterThan 1000은 숫자 리터럴 수식"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "GreaterThan", condition_value="1000", pass_thru=True
        )

        assert rule.type == "cellIs"
        assert rule.operator == "greaterThan"
        assert list(rule.formula) == ["1000"]

    def test_numeric_condition_values(self, worksheet):
        """int/float 조건값은 숫자 리터럴"""
        greater = add_conditional_formatting(
            "A1:A10", worksheet, "GreaterThan", condition_value=1000, pass_thru=True
        )
        between = add_conditional_formatting(
            "A1:A10",
            worksheet,
            "Between",
            condition_value=100,
            condition_value2=500.5,
            pass_thru=True,
        )

        assert list(greater.formula) == ["1000"]
        assert list(between.formula) == ["100", "500.5"]

    def test_equal_text_quoted(self, worksheet):
        """Equal 문자열은 인용"""
        rule = add_conditional_formatting(
            "B1:B10", worksheet, "Equal", condition_value="item-3", pass_thru=True
        )

        assert list(rule.formula) == ['"item-3"']

    def test_less_than_formula(self, worksheet):
        """LessThan 수식은 "=" 제거"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "LessThan", condition_value="=AVERAGE($A$1:$A$10)", pass_thru=True
        )

        assert list(rule.formula) == ["AVERAGE($A$1:$A$10)"]

    def test_between_two_values(self, worksheet):
        """Between은 두 개의 수식"""
        rule = add_conditional_formatting(
            "A1:A10",
            worksheet,
            "Between",
            condition_value="200",
            condition_value2="=A1*2",
            pass_thru=True,
        )

        assert rule.operator == "between"
        assert list(rule.formula) == ["200", "A1*2"]

    def test_second_value_ignored_without_between(self, worksheet):
        """Between이 아니면 두 번째 조건값 무시"""
        rule = add_conditional_formatting(
            "A1:A10",
            worksheet,
            "NotEqual",
            condition_value="5",
            condition_value2="9",
            pass_thru=True,
        )

        assert list(rule.formula) == ["5"]


# =============================================================================
# 텍스트 규칙 테스트
# =============================================================================


class TestTextRules:
    """텍스트 규칙 테스트"""

    def test_contains_text(self, worksheet):
        """ContainsText 2003: 텍스트 그대로, 글자 색상 적용"""
        rule = add_conditional_formatting(
            "B1:B10",
            worksheet,
            "ContainsText",
            condition_value="2003",
            foreground_color="DarkRed",
            pass_thru=True,
        )

        assert rule.type == "containsText"
        assert rule.operator == "containsText"
        assert rule.text == "2003"
        assert list(rule.formula) == ['NOT(ISERROR(SEARCH("2003",B1)))']
        assert rule.dxf.font.color.rgb == "FF8B0000"

    def test_not_contains(self, worksheet):
        """NotContains 별칭"""
        rule = add_conditional_formatting(
            "B2:B10", worksheet, "NotContains", condition_value="x", pass_thru=True
        )

        assert rule.type == "notContainsText"
        assert rule.operator == "notContains"
        assert list(rule.formula) == ['ISERROR(SEARCH("x",B2))']

    def test_begins_with(self, worksheet):
        """BeginsWith"""
        rule = add_conditional_formatting(
            "B1:B10", worksheet, "BeginsWith", condition_value="item", pass_thru=True
        )

        assert rule.type == "beginsWith"
        assert list(rule.formula) == ['LEFT(B1,LEN("item"))="item"']

    def test_ends_with(self, worksheet):
        """EndsWith"""
        rule = add_conditional_formatting(
            "B1:B10", worksheet, "EndsWith", condition_value="-1", pass_thru=True
        )

        assert rule.type == "endsWith"
        assert rule.text == "-1"

    def test_quoted_text_warns(self, worksheet, caplog):
        """인용된 텍스트는 경고 후 그대로 사용"""
        with caplog.at_level(logging.WARNING, logger="core.tools.io.excel.conditional"):
            rule = add_conditional_formatting(
                "B1:B10", worksheet, "ContainsText", condition_value='"2003"', pass_thru=True
            )

        assert rule.text == '"2003"'
        assert list(rule.formula) == ['NOT(ISERROR(SEARCH("""2003""",B1)))']
        assert any("quoted" in record.getMessage() for record in caplog.records)

    def test_unquoted_text_does_not_warn(self, worksheet, caplog):
        """인용되지 않은 텍스트는 경고 없음"""
        with caplog.at_level(logging.WARNING, logger="core.tools.io.excel.conditional"):
            add_conditional_formatting("B1:B10", worksheet, "ContainsText", condition_value="2003")

        assert not caplog.records

    def test_formula_prefix_stripped(self, worksheet):
        """텍스트 규칙도 앞의 "=" 제거"""
        rule = add_conditional_formatting(
            "A1:A5", worksheet, "ContainsText", condition_value="=abc", pass_thru=True
        )

        assert rule.text == "abc"
        assert list(rule.formula) == ['NOT(ISERROR(SEARCH("abc",A1)))']

    def test_formula_prefix_stripped_before_quote_check(self, worksheet, caplog):
        """"=" 제거 후 인용 여부 확인"""
        with caplog.at_level(logging.WARNING, logger="core.tools.io.excel.conditional"):
            rule = add_conditional_formatting(
                "B1:B10", worksheet, "EndsWith", condition_value='="x"', pass_thru=True
            )

        assert rule.text == '"x"'
        assert caplog.records

    def test_numeric_text_value(self, worksheet):
        """숫자 조건값은 문자열로 변환"""
        rule = add_conditional_formatting(
            "B1:B10", worksheet, "BeginsWith", condition_value=2003, pass_thru=True
        )

        assert rule.text == "2003"
        assert list(rule.formula) == ['LEFT(B1,LEN("2003"))="2003"']


# =============================================================================
# 기타 이름 있는 규칙 테스트
# =============================================================================


class TestOtherNamedRules:
    """수식/빈 셀/순위/평균/기간/색상 스케일 규칙 테스트"""

    def test_expression(self, worksheet):
        """Expression 수식"""
        rule = add_conditional_formatting(
            "A1:B10", worksheet, "Expression", condition_value="=$A1>500", pass_thru=True
        )

        assert rule.type == "expression"
        assert list(rule.formula) == ["$A1>500"]

    def test_contains_blanks(self, worksheet):
        """ContainsBlanks"""
        rule = add_conditional_formatting("C3:C9", worksheet, "ContainsBlanks", pass_thru=True)

        assert rule.type == "containsBlanks"
        assert list(rule.formula) == ["LEN(TRIM(C3))=0"]

    def test_not_contains_errors(self, worksheet):
        """NotContainsErrors"""
        rule = add_conditional_formatting("A1:A10", worksheet, "NotContainsErrors", pass_thru=True)

        assert rule.type == "notContainsErrors"
        assert list(rule.formula) == ["NOT(ISERROR(A1))"]

    def test_duplicate_and_unique(self, worksheet):
        """DuplicateValues / UniqueValues"""
        dup = add_conditional_formatting("A1:A10", worksheet, "DuplicateValues", pass_thru=True)
        uniq = add_conditional_formatting("B1:B10", worksheet, "UniqueValues", pass_thru=True)

        assert dup.type == "duplicateValues"
        assert uniq.type == "uniqueValues"

    def test_top_default_rank(self, worksheet):
        """Top 기본 순위 10"""
        rule = add_conditional_formatting("A1:A10", worksheet, "Top", pass_thru=True)

        assert rule.type == "top10"
        assert rule.rank == 10
        assert rule.bottom is None
        assert rule.percent is None

    def test_bottom_percent_rank(self, worksheet):
        """BottomPercent 순위 지정"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "BottomPercent", condition_value="5", pass_thru=True
        )

        assert rule.rank == 5
        assert rule.bottom is True
        assert rule.percent is True

    def test_numeric_rank_and_std_dev(self, worksheet):
        """숫자 조건값으로 순위/표준편차 지정"""
        top = add_conditional_formatting("A1:A10", worksheet, "Top", condition_value=3, pass_thru=True)
        std = add_conditional_formatting(
            "A1:A10", worksheet, "AboveStdDev", condition_value=2, pass_thru=True
        )

        assert top.rank == 3
        assert std.stdDev == 2

    def test_expression_numeric_value(self, worksheet):
        """숫자 수식 조건값"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "Expression", condition_value=1, pass_thru=True
        )

        assert list(rule.formula) == ["1"]

    def test_invalid_rank_propagates(self, worksheet):
        """숫자가 아닌 순위는 openpyxl 에러 전파"""
        with pytest.raises((TypeError, ValueError)):
            add_conditional_formatting("A1:A10", worksheet, "Top", condition_value="many")

    def test_below_or_equal_average(self, worksheet):
        """BelowOrEqualAverage"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "BelowOrEqualAverage", pass_thru=True
        )

        assert rule.type == "aboveAverage"
        assert rule.aboveAverage is False
        assert rule.equalAverage is True

    def test_std_dev(self, worksheet):
        """AboveStdDev 기본값 1, BelowStdDev 지정값"""
        above = add_conditional_formatting("A1:A10", worksheet, "AboveStdDev", pass_thru=True)
        below = add_conditional_formatting(
            "A1:A10", worksheet, "BelowStdDev", condition_value="2", pass_thru=True
        )

        assert above.stdDev == 1
        assert below.stdDev == 2
        assert below.aboveAverage is False

    def test_time_period(self, worksheet):
        """Last7Days"""
        rule = add_conditional_formatting("D2:D20", worksheet, "Last7Days", pass_thru=True)

        assert rule.type == "timePeriod"
        assert rule.timePeriod == "last7Days"
        assert list(rule.formula) == ["AND(TODAY()-FLOOR(D2,1)<=6,FLOOR(D2,1)<=TODAY())"]

    def test_color_scales(self, worksheet):
        """TwoColorScale / ThreeColorScale"""
        two = add_conditional_formatting("A1:A10", worksheet, "TwoColorScale", pass_thru=True)
        three = add_conditional_formatting("A1:A10", worksheet, "ThreeColorScale", pass_thru=True)

        assert two.type == "colorScale"
        assert len(two.colorScale.color) == 2
        assert len(three.colorScale.color) == 3
        assert three.colorScale.color[0].rgb == "FFF8696B"

    def test_named_icon_set_default(self, worksheet):
        """ThreeIconSet 기본 스타일과 reverse"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "ThreeIconSet", reverse=True, pass_thru=True
        )

        assert rule.type == "iconSet"
        assert rule.iconSet.iconSet == "3TrafficLights1"
        assert rule.iconSet.reverse is True

    def test_named_data_bar_default(self, worksheet):
        """DataBar 기본 색상"""
        rule = add_conditional_formatting("A1:A10", worksheet, "DataBar", pass_thru=True)

        assert rule.type == "dataBar"
        assert rule.dataBar.color.rgb == "FF638EC6"


# =============================================================================
# 아이콘 세트 / 데이터 막대 모드 테스트
# =============================================================================


class TestIconSetAndDataBarModes:
    """아이콘 세트 / 데이터 막대 모드 테스트"""

    def test_three_icon_set_reverse(self, worksheet):
        """3 아이콘 세트 reverse 복사"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, three_icon_set="Arrows", reverse=True, pass_thru=True
        )

        assert rule.type == "iconSet"
        assert rule.iconSet.iconSet == "3Arrows"
        assert rule.iconSet.reverse is True
        assert [cfvo.val for cfvo in rule.iconSet.cfvo] == [0, 33, 67]

    def test_four_icon_set_without_reverse(self, worksheet):
        """reverse 미지정이면 None"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, four_icon_set="Rating", pass_thru=True
        )

        assert rule.iconSet.iconSet == "4Rating"
        assert rule.iconSet.reverse is None
        assert len(rule.iconSet.cfvo) == 4

    def test_five_icon_set(self, worksheet):
        """5 아이콘 세트"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, five_icon_set="5Quarters", pass_thru=True
        )

        assert rule.iconSet.iconSet == "5Quarters"
        assert len(rule.iconSet.cfvo) == 5

    def test_invalid_icon_set_propagates(self, worksheet):
        """잘못된 아이콘 세트 이름은 openpyxl ValueError 전파"""
        with pytest.raises(ValueError):
            add_conditional_formatting("A1:A10", worksheet, three_icon_set="Rating")

    def test_data_bar(self, worksheet):
        """데이터 막대 색상"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, data_bar_color="Blue", pass_thru=True
        )

        assert rule.type == "dataBar"
        assert rule.dataBar.color.rgb == "FF0000FF"
        assert rule.iconSet is None

    def test_data_bar_receives_range(self):
        """데이터 막대 생성 경로가 범위와 색상을 받음"""
        ws = MagicMock()
        ws.tables = {}

        add_conditional_formatting("A1:A3", ws, data_bar_color="#00FF00")

        ws.conditional_formatting.add.assert_called_once()
        range_string, rule = ws.conditional_formatting.add.call_args.args
        assert range_string == "A1:A3"
        assert rule.dataBar.color.rgb == "FF00FF00"
        assert rule.iconSet is None

    def test_invalid_color_propagates(self, worksheet):
        """잘못된 색상은 openpyxl ValueError 전파"""
        with pytest.raises(ValueError):
            add_conditional_formatting("A1:A10", worksheet, data_bar_color="NotAColor")


# =============================================================================
# 스타일 매핑 테스트
# =============================================================================


class TestRuleStyle:
    """스타일 필드 매핑 테스트"""

    def test_no_style_leaves_dxf_untouched(self, worksheet):
        """서식 미지정이면 dxf 없음"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "GreaterThan", condition_value="1", pass_thru=True
        )

        assert rule.dxf is None

    def test_bold_only(self, worksheet):
        """bold만 지정하면 dxf에 굵게만 기록"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "GreaterThan", condition_value="1", bold=True, pass_thru=True
        )

        xml = tostring(rule.dxf.to_tree()).decode()

        assert rule.dxf.font.bold is True
        assert "<b " in xml
        for tag in ("<i ", "<u", "<strike", "<color", "<fill", "<numFmt"):
            assert tag not in xml

    def test_explicit_false_values(self, worksheet):
        """명시적 False 적용"""
        rule = add_conditional_formatting(
            "A1:A10",
            worksheet,
            "Equal",
            condition_value="1",
            bold=False,
            italic=False,
            strikethrough=False,
            pass_thru=True,
        )

        assert rule.dxf.font.bold is False
        assert rule.dxf.font.italic is False
        assert rule.dxf.font.strikethrough is False

    def test_underline_true(self, worksheet):
        """underline True는 한 줄 밑줄"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "Equal", condition_value="1", underline=True, pass_thru=True
        )

        assert rule.dxf.font.underline == "single"

    def test_underline_false(self, worksheet):
        """underline False는 밑줄 없음"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "Equal", condition_value="1", underline=False, pass_thru=True
        )

        assert rule.dxf.font is not None
        assert rule.dxf.font.underline is None

    def test_fill_fields(self, worksheet):
        """배경/패턴/패턴 색상"""
        rule = add_conditional_formatting(
            "A1:A10",
            worksheet,
            "Equal",
            condition_value="1",
            background_color="LightGreen",
            background_pattern="DarkGrid",
            pattern_color="#112233",
            pass_thru=True,
        )

        assert rule.dxf.fill.bgColor.rgb == "FF90EE90"
        assert rule.dxf.fill.fill_type == "darkGrid"
        assert rule.dxf.fill.fgColor.rgb == "FF112233"
        assert rule.dxf.font is None

    def test_css_color_name(self, worksheet):
        """CSS 색상 이름으로 글자 색상 지정"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "Equal", condition_value="1", foreground_color="Crimson", pass_thru=True
        )

        assert rule.dxf.font.color.rgb == "FFDC143C"

    def test_background_color_only(self, worksheet):
        """배경 색상만 지정하면 패턴은 기본값"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "Equal", condition_value="1", background_color="Yellow", pass_thru=True
        )

        assert rule.dxf.fill.bgColor.rgb == "FFFFFF00"
        assert rule.dxf.fill.fill_type is None

    def test_invalid_pattern_propagates(self, worksheet):
        """잘못된 패턴은 openpyxl ValueError 전파"""
        with pytest.raises(ValueError):
            add_conditional_formatting(
                "A1:A10", worksheet, "Equal", condition_value="1", background_pattern="Zigzag"
            )

    def test_number_format_shorthand(self, worksheet):
        """숫자 포맷 약어 확장"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "Equal", condition_value="1", number_format="Percentage", pass_thru=True
        )

        assert rule.dxf.numFmt.formatCode == "0.00%"
        assert rule.dxf.numFmt.numFmtId == 10

    def test_number_format_custom(self, worksheet):
        """사용자 정의 숫자 포맷"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "Equal", condition_value="1", number_format='0.0 "kg"', pass_thru=True
        )

        assert rule.dxf.numFmt.formatCode == '0.0 "kg"'
        assert rule.dxf.numFmt.numFmtId == 164

    def test_style_on_icon_set(self, worksheet):
        """아이콘 세트에도 지정된 서식 적용"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, three_icon_set="Flags", italic=True, pass_thru=True
        )

        assert rule.dxf.font.italic is True

    def test_rule_style_is_empty(self):
        """빈 스타일 판정"""
        assert RuleStyle().is_empty() is True
        assert RuleStyle(underline=False).is_empty() is False
        assert RuleStyle(number_format="Text").is_empty() is False


# =============================================================================
# 우선순위 / 중단 테스트
# =============================================================================


class TestPriorityAndStop:
    """우선순위와 stopIfTrue 테스트"""

    def test_default_priority_assigned_by_library(self, worksheet):
        """우선순위 미지정이면 openpyxl이 순서대로 부여"""
        first = add_conditional_formatting("A1:A10", worksheet, "Top", pass_thru=True)
        second = add_conditional_formatting("A1:A10", worksheet, "Bottom", pass_thru=True)

        assert first.priority == 1
        assert second.priority == 2
        assert first.stopIfTrue is None

    def test_explicit_priority_and_stop(self, worksheet):
        """지정된 우선순위와 stopIfTrue 복사"""
        rule = add_conditional_formatting(
            "A1:A10",
            worksheet,
            "Top",
            priority=7,
            stop_if_true=True,
            pass_thru=True,
        )

        assert rule.priority == 7
        assert rule.stopIfTrue is True


# =============================================================================
# 공개 API 테스트
# =============================================================================


class TestAddConditionalFormatting:
    """add_conditional_formatting 동작 테스트"""

    def test_returns_none_without_pass_thru(self, worksheet):
        """pass_thru 없으면 None 반환, 규칙은 추가됨"""
        result = add_conditional_formatting("A1:A10", worksheet, "Top")

        assert result is None
        assert len(worksheet.conditional_formatting) == 1

    def test_one_rule_per_call(self, worksheet):
        """호출당 규칙 하나"""
        add_conditional_formatting("A1:A10", worksheet, "Top")
        add_conditional_formatting("A1:A10", worksheet, "Bottom")

        assert len(worksheet.conditional_formatting["A1:A10"]) == 2

    def test_rule_stored_on_range(self, worksheet):
        """규칙이 해당 범위에 저장됨"""
        rule = add_conditional_formatting(
            "A1:A10", worksheet, "GreaterThan", condition_value="500", pass_thru=True
        )

        assert worksheet.conditional_formatting["A1:A10"] == [rule]

    def test_combined_cell_reference(self, worksheet):
        """셀 튜플에서 워크시트와 범위 도출"""
        rule = add_conditional_formatting(
            worksheet["A1:A5"], rule_type="Equal", condition_value="100", pass_thru=True
        )

        assert worksheet.conditional_formatting["A1:A5"] == [rule]

    def test_sheet_reference_with_workbook(self, workbook, worksheet):
        """Sheet!A1 형식과 워크북"""
        rule = add_conditional_formatting(
            "Data!B1:B10", workbook=workbook, rule_type="UniqueValues", pass_thru=True
        )

        assert worksheet.conditional_formatting["B1:B10"] == [rule]

    def test_whole_column(self, worksheet):
        """열 전체 참조"""
        add_conditional_formatting("A:A", worksheet, "DuplicateValues")

        assert worksheet.conditional_formatting["A1:A1048576"]

    def test_missing_worksheet(self):
        """워크시트 없이 범위만 주면 AddressError"""
        with pytest.raises(AddressError):
            add_conditional_formatting("A1:A10", rule_type="Top")

    def test_invalid_range_propagates(self, worksheet):
        """잘못된 범위는 openpyxl ValueError 전파"""
        with pytest.raises(ValueError):
            add_conditional_formatting("A1-B2", worksheet, "Top")

    def test_conflict_checked_before_worksheet(self):
        """파라미터 충돌은 주소 해석 전에 검사"""
        with pytest.raises(ParameterConflictError):
            add_conditional_formatting("A1:A10", None, "Top", data_bar_color="Red")

    def test_round_trip_through_file(self, tmp_path, workbook, worksheet):
        """저장 후 다시 읽어도 규칙과 서식 유지"""
        from openpyxl import load_workbook

        add_conditional_formatting(
            "A1:A10",
            worksheet,
            "GreaterThan",
            condition_value="1000",
            bold=True,
            background_color="Red",
        )
        path = tmp_path / "out.xlsx"
        workbook.save(path)

        loaded = load_workbook(path)["Data"]
        rules = [rule for cf in loaded.conditional_formatting for rule in cf.rules]
        assert len(rules) == 1
        assert list(rules[0].formula) == ["1000"]
        assert rules[0].dxf.font.b is True


# =============================================================================
# ConditionalFormat 테스트
# =============================================================================


class TestConditionalFormat:
    """ConditionalFormat 빌더 테스트"""

    def test_build_rule_does_not_touch_worksheet(self):
        """build_rule은 워크시트 없이 규칙만 생성"""
        fmt = ConditionalFormat(
            mode=NamedRuleMode(RuleType.GREATER_THAN_OR_EQUAL),
            condition_value="3",
            style=RuleStyle(bold=True),
            priority=2,
        )

        rule = fmt.build_rule("C1:C5")

        assert rule.operator == "greaterThanOrEqual"
        assert list(rule.formula) == ["3"]
        assert rule.dxf.font.bold is True
        assert rule.priority == 2

    def test_add_to_worksheet(self, worksheet):
        """add_to는 규칙을 워크시트에 추가"""
        fmt = ConditionalFormat(mode=DataBarMode("Green"))

        rule = fmt.add_to(worksheet, "A1:A10")

        assert worksheet.conditional_formatting["A1:A10"] == [rule]
