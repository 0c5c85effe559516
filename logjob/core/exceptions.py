class SchedulerAlreadyRunning(Exception):
    """Exception raised when starting a scheduler service that is already running."""

    def __init__(self, message: str = "Scheduler service is already running"):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message}"


class JobAlreadyRegistered(Exception):
    """
    This exception is raised when a job name is registered twice and the new
    registration does not allow replacing the existing one.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A scheduled job named '{name}' is already registered")
