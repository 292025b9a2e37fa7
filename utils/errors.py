from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"


class AppError(Exception):
    """
    애플리케이션 공통 예외.

    kind 값으로 종류를 구분하고, main.py 핸들러가 kind 별로 HTTP 상태 코드를 결정한다.
    """

    def __init__(self, kind: ErrorKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail

    def __repr__(self) -> str:
        return f"AppError({self.kind.value!r}, {self.detail!r})"


def bad_request(detail: str) -> AppError:
    return AppError(ErrorKind.BAD_REQUEST, detail)


def not_found(detail: str) -> AppError:
    return AppError(ErrorKind.NOT_FOUND, detail)


def unauthorized(detail: str) -> AppError:
    return AppError(ErrorKind.UNAUTHORIZED, detail)
