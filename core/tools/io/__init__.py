# core/tools/io - 파일 형식 모듈
"""
파일 형식 유틸리티

구조:
    core/tools/io/excel/  - Excel 조건부 서식 (openpyxl)

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.

사용 예시:
    from core.tools.io.excel import add_conditional_formatting
"""

__all__ = [
    "excel",
]


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name == "excel":
        from core.tools.io import excel

        return excel

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
