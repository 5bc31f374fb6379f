import unittest

from gdriveclient.errors.exceptions import (
    ApiError,
    AuthError,
    AuthTimeoutError,
    ConflictError,
    GDriveClientError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidParentError,
    LocalFileNotFoundError,
    NotAFolderError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    TransportError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = GDriveClientError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_hierarchy(self) -> None:
        self.assertTrue(issubclass(AuthTimeoutError, AuthError))
        for cls in (LocalFileNotFoundError, InvalidParentError, NotAFolderError):
            self.assertFalse(issubclass(cls, TransportError))
        for cls in (NotFoundError, RateLimitError, ApiError, InvalidArgumentError):
            self.assertTrue(issubclass(cls, TransportError))

    def test_map_http_error_basic(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=404, message="not found"))
        self.assertIsInstance(err, NotFoundError)

        err = map_http_error(HttpErrorInfo(status_code=400, message="bad req"))
        self.assertIsInstance(err, InvalidArgumentError)

        err = map_http_error(HttpErrorInfo(status_code=429, message="rate"))
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(HttpErrorInfo(status_code=409, message="conflict"))
        self.assertIsInstance(err, ConflictError)

        err = map_http_error(HttpErrorInfo(status_code=401, message="auth"))
        self.assertIsInstance(err, AuthError)

    def test_map_http_error_403_variants(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="storageQuotaExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="userRateLimitExceeded", message="slow down")
        )
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientPermissions", message="x")
        )
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_other_is_api_error(self) -> None:
        self.assertIsInstance(map_http_error(HttpErrorInfo(status_code=503)), ApiError)
        err = map_http_error(HttpErrorInfo(status_code=418))
        self.assertIsInstance(err, ApiError)
        self.assertEqual(str(err), "HTTP error 418")


if __name__ == "__main__":
    unittest.main()
