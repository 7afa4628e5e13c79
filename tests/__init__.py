import typing

import requests


def make_response(body: typing.Union[str, bytes], status_code: int = 200) -> requests.Response:
    """Return a requests response as received from RT."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode('utf-8') if isinstance(body, str) else body
    response.encoding = 'utf-8'
    return response


def rt_message(payload: str, status_line: str = 'RT/4.4.3 200 Ok') -> str:
    """Wrap payload into an RT REST 1.0 message."""
    return f'{status_line}\n\n{payload}'


class FakeGet:
    """Stand-in for ``requests.Session.get`` replaying queued responses."""

    def __init__(self) -> None:
        self.calls = []  # type: typing.List[typing.Dict[str, typing.Any]]
        self.responses = []  # type: typing.List[typing.Union[requests.Response, Exception]]

    def __call__(self, url: str, params: typing.Optional[dict] = None, timeout: typing.Optional[float] = None) -> requests.Response:
        self.calls.append({'url': url, 'params': params, 'timeout': timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result
