"""
Shared HTTP provider: one bounded GET, normalized into a record.

Every failure is returned as a Failure tagged with the provider name;
nothing is raised to the caller.
"""
import logging
from typing import Optional

import requests

from lookup.core import Deadline, ErrorKind, Failure, Outcome, Success
from lookup.core.outcome import timeout
from lookup.normalizers import (
    MalformedPayload, Normalizer, RecordNotFound, Schema, get_default_normalizer,
)

log = logging.getLogger(__name__)

USER_AGENT = "deadline-lookup/1.0"


class HttpProvider:
    """Base class: subclasses set `name`, `schema` and, if needed, `build_url`."""

    name: str = "http"
    schema: Schema

    def __init__(
        self,
        url_template: str,
        session: Optional[requests.Session] = None,
        normalizer: Optional[Normalizer] = None,
    ):
        self.url_template = url_template
        # a session passed in belongs to the caller; one we create is ours to close
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.normalizer = normalizer or get_default_normalizer()

    def build_url(self, key: str) -> str:
        return self.url_template.format(key=key)

    def fetch(self, key: str, deadline: Deadline) -> Outcome:
        try:
            request = self.session.prepare_request(requests.Request(
                "GET",
                self.build_url(key),
                headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            ))
        except (ValueError, requests.exceptions.RequestException) as e:
            log.warning("%s: cannot build request for %r: %s", self.name, key, e)
            return self._failure(ErrorKind.INVALID_REQUEST, str(e))

        # one reading: urllib3 rejects a 0.0 timeout
        remaining = deadline.remaining()
        if remaining <= 0:
            return timeout(self.name, "deadline done before the request was sent")

        try:
            response = self.session.send(request, timeout=remaining)
        except requests.exceptions.Timeout as e:
            return timeout(self.name, str(e))
        except requests.exceptions.RequestException as e:
            log.info("%s: transport error: %s", self.name, e)
            return self._failure(ErrorKind.UNREACHABLE, str(e))

        with response:
            # checkpoint: a cancelled ticket stops here and reports nothing useful
            if deadline.expired():
                return timeout(self.name, "cancelled while waiting for the response")

            if response.status_code != requests.codes.ok:
                return self._failure(
                    ErrorKind.REMOTE_REJECTED,
                    f"status code {response.status_code}",
                    code=response.status_code,
                )

            try:
                payload = response.json()
            except ValueError as e:
                return self._failure(ErrorKind.MALFORMED_RESPONSE, f"invalid JSON: {e}")

        try:
            record = self.normalizer.normalize_record(self.schema, payload, self.name)
        except RecordNotFound as e:
            return self._failure(ErrorKind.NOT_FOUND, str(e))
        except MalformedPayload as e:
            log.warning("%s: unexpected payload: %s", self.name, e)
            return self._failure(ErrorKind.MALFORMED_RESPONSE, str(e))

        log.debug("%s: fetched %r", self.name, record)
        return Success(record)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def _failure(self, kind: ErrorKind, detail: str, code: Optional[int] = None) -> Failure:
        return Failure(kind, source=self.name, detail=detail, code=code)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(name={self.name}, url={self.url_template})>"
