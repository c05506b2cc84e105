"""이 파일은 .py 런타임 환경 체커 모듈로 인터프리터 속성, 환경 변수, 보안 프로바이더를 기록합니다."""

from __future__ import annotations

import hashlib
import locale
import os
import platform
import ssl
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from aes_inspector.core.types import HeuristicResult

from .base import BaseChecker


@dataclass
class SecurityProvider:
    name: str
    version: str
    info: str
    entries: Dict[str, str] = field(default_factory=dict)


def runtime_properties() -> Dict[str, str]:
    # 자바 시스템 속성 이름에 맞춰 인터프리터/플랫폼 정보를 모은다.
    return {
        "python.version": sys.version.replace("\n", " "),
        "python.implementation": platform.python_implementation(),
        "python.executable": sys.executable,
        "python.prefix": sys.prefix,
        "python.base_prefix": sys.base_prefix,
        "python.path": os.pathsep.join(sys.path),
        "os.name": platform.system(),
        "os.version": platform.release(),
        "os.arch": platform.machine(),
        "os.processor": platform.processor(),
        "os.platform": platform.platform(),
        "host.name": platform.node(),
        "user.dir": os.getcwd(),
        "sun.cpu.endian": sys.byteorder,
        "file.encoding": locale.getpreferredencoding(False),
        "sun.jnu.encoding": sys.getfilesystemencoding(),
        "line.separator": repr(os.linesep),
    }


def openssl_provider() -> SecurityProvider:
    entries: Dict[str, str] = {}
    context = ssl.create_default_context()
    for cipher in context.get_ciphers():
        entries[f"Cipher.{cipher['name']}"] = cipher.get("description", "").strip()
    for proto in ("SSLv3", "TLSv1", "TLSv1_1", "TLSv1_2", "TLSv1_3"):
        entries[f"Protocol.{proto}"] = str(getattr(ssl, f"HAS_{proto}", False))
    version = ".".join(str(part) for part in ssl.OPENSSL_VERSION_INFO[:3])
    return SecurityProvider(
        name=ssl.OPENSSL_VERSION.split()[0],
        version=version,
        info=ssl.OPENSSL_VERSION,
        entries=entries,
    )


def hashlib_provider() -> SecurityProvider:
    entries = {}
    for algorithm in hashlib.algorithms_available:
        origin = "guaranteed" if algorithm in hashlib.algorithms_guaranteed else "available"
        entries[f"MessageDigest.{algorithm}"] = origin
    return SecurityProvider(
        name="hashlib",
        version=platform.python_version(),
        info="Python hashlib message digests",
        entries=entries,
    )


class RuntimeEnvironmentChecker(BaseChecker):
    checker_id = "runtime"
    CONFIG_SCHEMA = {
        "properties": {
            "include_environment": {"type": "boolean", "default": True},
            "include_providers": {"type": "boolean", "default": True},
        }
    }

    def check(self) -> List[HeuristicResult]:
        # 순수 나열만 하며 판정은 만들지 않는다.
        self.log_properties(runtime_properties())
        if self.config.get("include_environment", True):
            self.log_environment(os.environ)
        if self.config.get("include_providers", True):
            self.log_providers([openssl_provider(), hashlib_provider()])
        return self.results

    def log_properties(self, properties: Mapping[str, str]) -> None:
        self.out.start("Python Runtime Properties")
        for key in sorted(properties):
            self.out.line(f"{key} : {properties[key]}")
        self.out.end("Python Runtime Properties")

    def log_environment(self, environ: Mapping[str, str]) -> None:
        self.out.start("Environment")
        for key in sorted(environ):
            self.out.line(f"{key} : {environ[key]}")
        self.out.end("Environment")

    def log_providers(self, providers: List[SecurityProvider]) -> None:
        self.out.start("Security Providers")
        for provider in providers:
            self.out.line(f"{provider.name}@{provider.version}:")
            self.out.line("----")
            self.out.line(provider.info)
            self.out.line("----")
            for key in sorted(provider.entries):
                self.out.line(f"    {key} : {provider.entries[key]}")
            self.out.line()
        self.out.end("Security Providers")
