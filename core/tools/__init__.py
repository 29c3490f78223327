# core/tools - 도구 모듈
"""
XCF 도구 모음

구조:
    core/tools/io/  - 파일 형식 유틸리티 (Excel 조건부 서식)
"""
