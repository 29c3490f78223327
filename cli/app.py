"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    xcf --version                       # 버전 표시
    xcf add <워크북> <주소> [옵션]      # 조건부 서식 규칙 추가
    xcf rule-types                      # 규칙 타입 목록
    xcf icon-sets                       # 아이콘 세트 목록
    xcf number-format <약어>            # 숫자 포맷 확장

    예시:
    xcf add report.xlsx "Sheet1!B2:B100" -t GreaterThan -v 1000 --bold --bg LightGreen
    xcf add report.xlsx C2:C100 -s Sheet1 --three-icon-set Arrows --reverse
    xcf add report.xlsx D2:D100 -s Sheet1 --data-bar-color Blue -o out.xlsx

Usage:
    $ xcf add report.xlsx "Sheet1!A1:A10" -t ContainsText -v 2003 --fg Red
    $ python -m cli.app rule-types
"""

import logging
import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가 (python -m 실행 지원)
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import click  # noqa: E402
from click import Context  # noqa: E402

from cli.i18n import t  # noqa: E402

logger = logging.getLogger(__name__)


def get_version() -> str:
    """버전 문자열 반환 (version.txt)"""
    from core.config import get_version as config_get_version

    return config_get_version()


VERSION = get_version()


@click.group(help=t("cli.help_intro"))
@click.version_option(VERSION, prog_name="xcf")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default=None,
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.pass_context
def cli(ctx: Context, lang: str | None) -> None:
    from cli.i18n import set_lang
    from cli.ui.console import get_logger, print_error
    from core.config import load_settings
    from core.exceptions import ConfigError

    try:
        settings = load_settings()
    except ConfigError as e:
        print_error(t("cli.config_error", message=e.message))
        raise SystemExit(1) from e

    lang = lang or settings.lang
    set_lang(lang)
    # 라이브러리 로그(core.*)는 Rich 핸들러로 출력, 기본 WARNING
    get_logger("core").setLevel(settings.log_level_value)

    # Store settings in click context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["settings"] = settings


@cli.command("add", help=t("cli.help_add"))
@click.argument("workbook_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("address")
@click.option("-s", "--sheet", default=None, help="대상 시트 이름 (주소에 시트가 없을 때)")
@click.option("-t", "--rule-type", default=None, help="규칙 타입 (GreaterThan, ContainsText 등)")
@click.option("--three-icon-set", default=None, help="3 아이콘 세트 이름")
@click.option("--four-icon-set", default=None, help="4 아이콘 세트 이름")
@click.option("--five-icon-set", default=None, help="5 아이콘 세트 이름")
@click.option("--data-bar-color", default=None, help="데이터 막대 색상")
@click.option("--reverse/--no-reverse", default=None, help="아이콘 순서 반전 (아이콘 세트 전용)")
@click.option("-v", "--condition-value", default=None, help="조건값")
@click.option("--condition-value2", default=None, help="두 번째 조건값 (Between/NotBetween)")
@click.option("--bg", "--background-color", "background_color", default=None, help="배경 색상")
@click.option("--fg", "--foreground-color", "foreground_color", default=None, help="글자 색상")
@click.option("--background-pattern", default=None, help="채우기 패턴 (Solid, DarkGray 등)")
@click.option("--pattern-color", default=None, help="패턴 색상")
@click.option("--number-format", default=None, help="숫자 포맷 코드 또는 약어")
@click.option("--bold/--no-bold", default=None)
@click.option("--italic/--no-italic", default=None)
@click.option("--underline/--no-underline", default=None)
@click.option("--strikethrough/--no-strikethrough", default=None)
@click.option("--stop-if-true/--no-stop-if-true", default=None)
@click.option("--priority", type=int, default=None, help="평가 우선순위")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="출력 파일 경로 (기본: 원본 덮어쓰기)",
)
def add_cmd(
    workbook_path: Path,
    address: str,
    sheet: str | None,
    rule_type: str | None,
    three_icon_set: str | None,
    four_icon_set: str | None,
    five_icon_set: str | None,
    data_bar_color: str | None,
    reverse: bool | None,
    condition_value: str | None,
    condition_value2: str | None,
    background_color: str | None,
    foreground_color: str | None,
    background_pattern: str | None,
    pattern_color: str | None,
    number_format: str | None,
    bold: bool | None,
    italic: bool | None,
    underline: bool | None,
    strikethrough: bool | None,
    stop_if_true: bool | None,
    priority: int | None,
    output: Path | None,
) -> None:
    from zipfile import BadZipFile

    from openpyxl import load_workbook
    from openpyxl.utils.exceptions import InvalidFileException

    from cli.ui.console import print_error, print_success
    from core.exceptions import XCFError
    from core.tools.io.excel.address import split_sheet_reference
    from core.tools.io.excel.conditional import add_conditional_formatting

    try:
        wb = load_workbook(workbook_path)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as e:
        logger.debug("Failed to load workbook %s", workbook_path, exc_info=True)
        print_error(t("cli.workbook_load_failed", path=workbook_path, message=str(e)))
        raise SystemExit(1) from e

    # --sheet 옵션이 주소의 시트 부분보다 우선
    address_sheet, range_part = split_sheet_reference(address)
    sheet_name = sheet or address_sheet
    if sheet_name is None:
        print_error(t("cli.sheet_required"))
        raise SystemExit(1)
    if sheet_name not in wb.sheetnames:
        print_error(t("cli.sheet_not_found", name=sheet_name))
        raise SystemExit(1)
    worksheet = wb[sheet_name]

    try:
        rule = add_conditional_formatting(
            address,
            worksheet,
            rule_type,
            three_icon_set=three_icon_set,
            four_icon_set=four_icon_set,
            five_icon_set=five_icon_set,
            data_bar_color=data_bar_color,
            reverse=reverse,
            condition_value=condition_value,
            condition_value2=condition_value2,
            background_color=background_color,
            foreground_color=foreground_color,
            background_pattern=background_pattern,
            pattern_color=pattern_color,
            number_format=number_format,
            bold=bold,
            italic=italic,
            underline=underline,
            strikethrough=strikethrough,
            stop_if_true=stop_if_true,
            priority=priority,
            pass_thru=True,
        )
    except (XCFError, ValueError, TypeError) as e:
        logger.debug("Failed to add conditional formatting", exc_info=True)
        print_error(t("cli.error", message=str(e)))
        raise SystemExit(1) from e

    target = output or workbook_path
    wb.save(target)

    print_success(
        t(
            "cli.rule_added",
            sheet=worksheet.title,
            range=range_part,
            rule=rule.type,
            priority=rule.priority,
        )
    )
    print_success(t("cli.saved_to", path=target))


@cli.command("rule-types", help=t("cli.help_rule_types"))
def rule_types_cmd() -> None:
    from cli.ui.console import print_table
    from core.tools.io.excel.conditional import RuleType, rule_family

    rows = [[member.value, t(f"rules.family_{rule_family(member)}")] for member in RuleType]
    print_table(t("cli.rule_types_title"), [t("cli.col_rule_type"), t("cli.col_family")], rows)


@cli.command("icon-sets", help=t("cli.help_icon_sets"))
def icon_sets_cmd() -> None:
    from cli.ui.console import print_table
    from core.tools.io.excel.conditional import ICON_SETS

    rows = [[count, name, f"{count}{name}"] for count, names in ICON_SETS.items() for name in names]
    print_table(
        t("cli.icon_sets_title"),
        [t("cli.col_icon_count"), t("cli.col_icon_set"), "OOXML"],
        rows,
    )


@cli.command("number-format", help=t("cli.help_number_format"))
@click.argument("name")
def number_format_cmd(name: str) -> None:
    from core.tools.io.excel.number_format import expand_number_format

    click.echo(expand_number_format(name))


if __name__ == "__main__":
    cli()
