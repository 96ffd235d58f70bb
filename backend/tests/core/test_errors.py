"""Error Hierarchy — codes, statuses and response envelope."""

from predictor_api.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity,
    PersistenceError, PredictorAPIError, StorageConnectionError, error_envelope,
)


def test_persistence_error_is_500_with_generic_message():
    err = PersistenceError(
        "create predictor", ErrorContext(debug_info={"driver_error": "secret"}),
    )
    assert isinstance(err, PredictorAPIError)
    assert err.http_status == 500
    assert err.code == "PERSISTENCE_ERROR"
    assert err.message == "Failed to create predictor"
    assert err.context.operation == "create predictor"


def test_storage_connection_error_is_critical():
    err = StorageConnectionError("timed out")
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.category is ErrorCategory.DATABASE
    assert err.code == "STORAGE_CONNECTION_ERROR"


def test_to_response_hides_debug_info():
    err = PersistenceError(
        "list predictors", ErrorContext(debug_info={"driver_error": "secret"}),
    )
    body = err.to_response()
    assert body["error"]["code"] == "PERSISTENCE_ERROR"
    assert body["error"]["category"] == "database"
    assert body["error"]["severity"] == "critical"
    assert "secret" not in str(body)


def test_error_envelope_merges_extra_fields():
    body = error_envelope(
        "VALIDATION_ERROR", "Invalid request data",
        ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        details=[{"field": "name"}],
    )
    assert body == {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": "error",
            "details": [{"field": "name"}],
        },
    }
