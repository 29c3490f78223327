"""
tests/conftest.py - pytest 공통 픽스처

openpyxl 워크북과 로케일 규칙 픽스처를 제공합니다.

Usage:
    def test_something(worksheet, us_conv):
        # worksheet: "Data" 시트가 있는 새 openpyxl 워크시트
        # us_conv: 미국식 locale.localeconv() 결과
        pass
"""

import sys
from pathlib import Path

import pytest
from openpyxl import Workbook

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (설정 환경 변수 초기화, 언어 복원)"""
    monkeypatch.delenv("XCF_LANG", raising=False)
    monkeypatch.delenv("XCF_LOG_LEVEL", raising=False)

    yield

    from cli.i18n import set_lang

    set_lang("ko")


# =============================================================================
# 워크북 픽스처
# =============================================================================


@pytest.fixture
def workbook():
    """Data 시트 하나를 가진 새 워크북"""
    wb = Workbook()
    ws = wb.active
    ws.title = "Data"
    for row in range(1, 11):
        ws.cell(row=row, column=1, value=row * 100)
        ws.cell(row=row, column=2, value=f"item-{row}")
    return wb


@pytest.fixture
def worksheet(workbook):
    """Data 워크시트"""
    return workbook["Data"]


@pytest.fixture
def workbook_file(tmp_path, workbook):
    """디스크에 저장된 워크북 경로"""
    path = tmp_path / "report.xlsx"
    workbook.save(path)
    return path


# =============================================================================
# 로케일 픽스처
# =============================================================================


@pytest.fixture
def us_conv():
    """en_US 로케일 규칙"""
    return {
        "decimal_point": ".",
        "thousands_sep": ",",
        "currency_symbol": "$",
        "int_curr_symbol": "USD ",
        "p_cs_precedes": 1,
        "p_sep_by_space": 0,
        "n_sign_posn": 0,
    }


@pytest.fixture
def de_conv():
    """de_DE 로케일 규칙"""
    return {
        "decimal_point": ",",
        "thousands_sep": ".",
        "currency_symbol": "€",
        "int_curr_symbol": "EUR ",
        "p_cs_precedes": 0,
        "p_sep_by_space": 1,
        "n_sign_posn": 1,
    }


@pytest.fixture
def c_conv():
    """C 로케일 규칙 (정의되지 않은 값은 127)"""
    return {
        "decimal_point": ".",
        "thousands_sep": "",
        "currency_symbol": "",
        "int_curr_symbol": "",
        "p_cs_precedes": 127,
        "p_sep_by_space": 127,
        "n_sign_posn": 127,
    }
