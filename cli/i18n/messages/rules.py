"""
cli/i18n/messages/rules.py - Conditional Formatting Rule Messages

Contains translations for rule family names shown in listings.
"""

from __future__ import annotations

RULE_MESSAGES = {
    "family_comparison": {
        "ko": "비교",
        "en": "Comparison",
    },
    "family_text": {
        "ko": "텍스트",
        "en": "Text",
    },
    "family_expression": {
        "ko": "수식",
        "en": "Expression",
    },
    "family_cell_state": {
        "ko": "빈 셀/오류",
        "en": "Blanks/Errors",
    },
    "family_uniqueness": {
        "ko": "중복/고유",
        "en": "Duplicate/Unique",
    },
    "family_rank": {
        "ko": "순위",
        "en": "Rank",
    },
    "family_average": {
        "ko": "평균",
        "en": "Average",
    },
    "family_time_period": {
        "ko": "기간",
        "en": "Time Period",
    },
    "family_color_scale": {
        "ko": "색상 스케일",
        "en": "Color Scale",
    },
    "family_icon_set": {
        "ko": "아이콘 세트",
        "en": "Icon Set",
    },
    "family_data_bar": {
        "ko": "데이터 막대",
        "en": "Data Bar",
    },
}
