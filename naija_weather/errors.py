class WeatherError(Exception):
    """Base class for every failure the weather engine surfaces to its callers.

    ``location`` is the caller's original input that the failure relates to.
    ``status_code`` is the HTTP status the REST layer maps the failure onto.
    """

    status_code = 500

    def __init__(self, message: str, location: str):
        super().__init__(message)
        self.location = location


class LocationNotFound(WeatherError):
    status_code = 404

    def __init__(self, location: str):
        super().__init__(f"Location '{location}' not found", location)


class ProviderDataMissing(WeatherError):
    """The provider answered but left out the data block the forecast mode needs."""

    status_code = 502


class ProviderFetchFailed(WeatherError):
    """Transport error, non-2xx answer, undecodable body or deadline expiry."""

    status_code = 502

    def __init__(self, location: str, cause: BaseException):
        super().__init__(f"Failed to get weather for {location}: {cause}", location)
        self.cause = cause
