"""
REST client for the Flight Reservation API.
"""

import logging
from dataclasses import dataclass, asdict

import requests

logger = logging.getLogger(__name__)


class ReservationNotFoundError(LookupError):
    pass


@dataclass
class ReservationUpdateRequest:
    id: int
    checked_in: bool
    number_of_bags: int

    def to_dict(self):
        return asdict(self)


class ReservationRestClient:
    """Thin wrapper over GET /reservations/<id> and POST /reservations.

    No retries. HTTP 404 raises ReservationNotFoundError, other HTTP errors
    raise requests.HTTPError.
    """

    def __init__(self, base_url, session=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _handle(self, response, reservation_id):
        if response.status_code == 404:
            raise ReservationNotFoundError(f"Reservation not found for id: {reservation_id}")
        response.raise_for_status()
        return response.json()

    def find_reservation(self, reservation_id):
        url = f"{self.base_url}/reservations/{reservation_id}"
        logger.info("GET %s", url)
        response = self.session.get(url, timeout=self.timeout)
        return self._handle(response, reservation_id)

    def update_reservation(self, request):
        url = f"{self.base_url}/reservations"
        logger.info("POST %s %s", url, request)
        response = self.session.post(url, json=request.to_dict(), timeout=self.timeout)
        return self._handle(response, request.id)
