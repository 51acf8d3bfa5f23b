class WorkersException(RuntimeError):
    pass


class UserError(WorkersException):
    """An error the caller can correct, e.g. a missing Worker name."""


class FatalError(WorkersException):
    """The API answered in a shape it promised not to."""


class ConfigError(WorkersException):
    pass


class UnexpectedResponseError(WorkersException):
    def __init__(self, response, method, url, **kwargs):
        if isinstance(response, str):
            msg = [f"Unexpected response: {response}"]
        else:
            msg = [
                f"Unexpected response: {response.status_code} {response.reason}",
                f"  {method.upper()} {url}",
            ]
            for error in _api_errors(response):
                msg.append(f"  error {error.get('code')}: {error.get('message')}")
        if "params" in kwargs:
            msg.append(f'  params: {kwargs["params"]}')
        super(UnexpectedResponseError, self).__init__("\n".join(msg))
        self.response = None if isinstance(response, str) else response


def _api_errors(response):
    try:
        body = response.json()
    except ValueError:
        return []
    if not isinstance(body, dict):
        return []
    return body.get("errors") or []


class EnvironmentVariableNotFoundError(ConfigError):
    pass
