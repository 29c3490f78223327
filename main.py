"""
main.py - xcf 콘솔 스크립트 진입점

설치 후 `xcf` 명령으로, 또는 저장소에서 `python main.py`로 실행합니다.
"""

import sys
from pathlib import Path

# 설치 없이 실행할 때 cli/core 패키지를 찾도록 프로젝트 루트 추가
_project_root = Path(__file__).resolve().parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from cli.app import cli  # noqa: E402


def main() -> None:
    """xcf CLI 실행"""
    cli(prog_name="xcf")


if __name__ == "__main__":
    main()
