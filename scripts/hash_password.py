#!/usr/bin/env python3
"""
hash_password.py - 관리자 비밀번호 해시 생성

출력된 값을 ADMIN_PASSWORD_HASH 환경변수에 설정한다.

사용법:
    # 프롬프트로 입력 (화면에 표시되지 않음)
    uv run python scripts/hash_password.py

    # 인자로 전달
    uv run python scripts/hash_password.py --password 'secret'
"""

import argparse
import getpass

from werkzeug.security import generate_password_hash


def hash_password(password: str) -> str:
    """werkzeug 기본 방식(scrypt)으로 해시."""
    if not password:
        raise ValueError("Password must not be empty")
    return generate_password_hash(password)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="ADMIN_PASSWORD_HASH 값 생성",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--password",
        type=str,
        help="해시할 비밀번호 (생략 시 프롬프트)",
    )
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    print(hash_password(password))


if __name__ == "__main__":
    main()
