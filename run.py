"""이 파일은 .py 엔트리포인트로 AES-NI 점검 리포트 생성을 실행합니다."""

import sys

from aes_inspector.cli import main

if __name__ == "__main__":
    sys.exit(main())
