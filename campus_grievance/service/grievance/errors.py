class GrievanceError(Exception):
    """Base class for failures raised by the grievance workflow."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GrievanceValidationError(GrievanceError):
    status_code = 400


class TransitionNotAllowedError(GrievanceValidationError):
    pass


class GrievanceAuthorizationError(GrievanceError):
    status_code = 403


class GrievanceNotFoundError(GrievanceError):
    status_code = 404

    def __init__(self, message: str = "Grievance not found"):
        super().__init__(message)


class GrievanceConflictError(GrievanceError):
    status_code = 409


class GrievancePersistenceError(GrievanceError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
