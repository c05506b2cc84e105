"""이 파일은 .py 패키지 초기화 모듈로 버전 정보를 노출합니다."""

__version__ = "0.1.0"
