class AppStatusCode:
    # success
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    CREATED_SUCCESSFULLY = "101"
    UPDATED_SUCCESSFULLY = "102"
    DELETED_SUCCESSFULLY = "103"

    # failures
    OPERATION_FAILED = "200"
    OPERATION_ERROR = "201"
    INVALID_INPUT = "202"
    REQUIRED_VALIDATION_ERROR = "203"
    DUPLICATE_ADD_ERROR = "204"
    RECORD_NOT_FOUND = "205"
    INVALID_REFERENCE = "206"
    DEPENDENCY_EXISTS = "207"
