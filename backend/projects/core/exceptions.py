class DbException(Exception):
    """Failure raised by the data-access layer.

    The lower-level error (driver, SQL, connection) is kept as ``cause`` and
    chained as ``__cause__``; callers never see the raw store error type.
    """

    def __init__(self, cause: BaseException | None = None, message: str | None = None):
        self.cause = cause
        if message is None:
            message = str(cause) if cause is not None else "database error"
        super().__init__(message)


class ProjectNotFound(LookupError):
    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(f"Project with project ID={project_id} does not exist.")
