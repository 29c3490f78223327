"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI commands, help text, and error messages.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # CLI Help Text
    # =========================================================================
    "help_intro": {
        "ko": "Excel 워크북에 조건부 서식 규칙을 추가하는 CLI 도구입니다.",
        "en": "A CLI tool that adds conditional formatting rules to Excel workbooks.",
    },
    "help_add": {
        "ko": "워크북 범위에 조건부 서식 규칙 하나를 추가",
        "en": "Add one conditional formatting rule to a workbook range",
    },
    "help_rule_types": {
        "ko": "지원하는 규칙 타입 목록",
        "en": "List supported rule types",
    },
    "help_icon_sets": {
        "ko": "아이콘 세트 이름 목록",
        "en": "List icon set names",
    },
    "help_number_format": {
        "ko": "숫자 포맷 약어를 포맷 코드로 확장",
        "en": "Expand a number format shorthand into a format code",
    },
    # =========================================================================
    # Table Titles / Columns
    # =========================================================================
    "rule_types_title": {
        "ko": "규칙 타입",
        "en": "Rule Types",
    },
    "icon_sets_title": {
        "ko": "아이콘 세트",
        "en": "Icon Sets",
    },
    "col_rule_type": {
        "ko": "규칙 타입",
        "en": "Rule Type",
    },
    "col_family": {
        "ko": "계열",
        "en": "Family",
    },
    "col_icon_count": {
        "ko": "아이콘 수",
        "en": "Icons",
    },
    "col_icon_set": {
        "ko": "이름",
        "en": "Name",
    },
    # =========================================================================
    # Result / Error Messages
    # =========================================================================
    "rule_added": {
        "ko": "{sheet}!{range}에 {rule} 규칙을 추가했습니다 (우선순위 {priority})",
        "en": "Added {rule} rule to {sheet}!{range} (priority {priority})",
    },
    "saved_to": {
        "ko": "저장 완료: {path}",
        "en": "Saved: {path}",
    },
    "workbook_load_failed": {
        "ko": "워크북을 열 수 없습니다: {path} ({message})",
        "en": "Cannot open workbook: {path} ({message})",
    },
    "sheet_required": {
        "ko": "주소에 시트가 없으면 --sheet 옵션이 필요합니다 (예: Sheet1!A1:B10)",
        "en": "--sheet is required when the address has no sheet (e.g. Sheet1!A1:B10)",
    },
    "sheet_not_found": {
        "ko": "시트를 찾을 수 없습니다: {name}",
        "en": "Sheet not found: {name}",
    },
    "error": {
        "ko": "오류: {message}",
        "en": "Error: {message}",
    },
    "config_error": {
        "ko": "설정 오류: {message}",
        "en": "Configuration error: {message}",
    },
}
