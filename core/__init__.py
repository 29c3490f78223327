# core/__init__.py
"""
core - XCF 라이브러리

openpyxl 조건부 서식 래퍼와 공통 인프라를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── tools/io/excel/  # 조건부 서식 (규칙 선택, 조건값 정규화, 스타일 매핑)
    ├── config.py        # 중앙 설정 관리
    └── exceptions.py    # 통합 예외 계층

Usage:
    # 조건부 서식
    from core.tools.io.excel import add_conditional_formatting
    add_conditional_formatting("A1:A10", ws, "GreaterThan", condition_value="100", bold=True)

    # 설정 사용
    from core.config import load_settings
    settings = load_settings()

    # 예외 처리
    from core.exceptions import ParameterConflictError
"""
