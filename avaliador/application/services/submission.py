"""Outbound submission to the spreadsheet endpoint.

The answers and the computed value are posted once, in the background.
The wizard never waits for the outcome: success and failure are only
logged, and there is no retry.
"""

from __future__ import annotations

import concurrent.futures
from typing import Any, Optional
from urllib.parse import urlparse

import requests

from avaliador.core.exceptions import ConfigurationError, InvalidParameterError, SubmissionError
from avaliador.core.logging import get_logger, mask_phone
from avaliador.domain.models.answers import KIND_LABELS, YES_NO_LABELS, AnswerSet, YesNo

log = get_logger(__name__)

# Placeholders expected by the spreadsheet columns
EMPTY_ADDRESS = "0"
UNSET_AMENITY = "False"
UNSET_ENERGY_CLASS = "Sem classe"


def _amenity(value: YesNo | None) -> str:
    return YES_NO_LABELS[value] if value is not None else UNSET_AMENITY


def _flag(value: bool) -> str:
    return YES_NO_LABELS[YesNo.YES] if value else YES_NO_LABELS[YesNo.NO]


def build_payload(answers: AnswerSet, estimated_value: int) -> dict[str, Any]:
    """Flat payload keyed by the spreadsheet column names.

    Args:
        answers: Completed answer set
        estimated_value: Valuation result in euros

    Returns:
        Dictionary ready to be sent as JSON
    """
    return {
        "Distrito": answers.region,
        "Concelho": answers.sub_region,
        "Freguesia": answers.local_area,
        "Morada": answers.address if answers.address.strip() else EMPTY_ADDRESS,
        "Tipo": KIND_LABELS.get(answers.kind, ""),
        "Área útil": answers.living_area,
        "Área total": answers.plot_area or answers.living_area,
        "Tipologia": answers.layout,
        "Ano construção": answers.construction_year,
        "Estado": answers.condition.value if answers.condition else "",
        "Piscina": _amenity(answers.pool),
        "Jardim": _amenity(answers.garden),
        "Garagem": _amenity(answers.garage),
        "Elevador": _amenity(answers.elevator),
        "Varanda": _amenity(answers.balcony),
        "Classe energética": answers.energy_class or UNSET_ENERGY_CLASS,
        "Telemóvel": answers.phone,
        "Ouvir propostas": _flag(answers.accepts_contact),
        "Avaliação presencial": _flag(answers.wants_professional_evaluation),
        "Valor estimado": estimated_value,
    }


class SubmissionClient:
    """Posts payloads to the spreadsheet endpoint."""

    def __init__(self, url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(f"Invalid submission URL: {url!r}")
        if timeout <= 0:
            raise InvalidParameterError("timeout", timeout, "must be positive")
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, payload: dict[str, Any]) -> int:
        """POST ``payload`` as JSON.

        Returns:
            HTTP status code

        Raises:
            SubmissionError: On a non-2xx response
            requests.RequestException: On transport errors
        """
        response = self.session.post(self.url, json=payload, timeout=self.timeout)
        if not 200 <= response.status_code < 300:
            raise SubmissionError(response.status_code, self.url)
        return response.status_code


def _log_outcome(future: concurrent.futures.Future, phone: str) -> None:
    """Done-callback: the only observer of a submission."""
    try:
        status = future.result()
    except SubmissionError as e:
        log.error("submission_failed", status=e.status_code, phone=phone)
    except requests.RequestException as e:
        log.error("submission_failed", error=str(e), phone=phone)
    except Exception as e:
        log.error("submission_failed", error=repr(e), phone=phone)
    else:
        log.info("submission_sent", status=status, phone=phone)


class BackgroundSubmitter:
    """Fire-and-forget dispatcher backed by a single worker thread."""

    def __init__(self, client: Optional[SubmissionClient]):
        self.client = client
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="submission"
        )

    def dispatch(self, answers: AnswerSet, estimated_value: int) -> Optional[concurrent.futures.Future]:
        """Queue the submission and return immediately.

        Returns:
            The future (for logging/tests only), or None when no endpoint is configured
        """
        phone = mask_phone(answers.phone)
        if self.client is None:
            log.info("submission_skipped", reason="no_endpoint", phone=phone)
            return None

        payload = build_payload(answers, estimated_value)
        try:
            future = self._executor.submit(self.client.send, payload)
        except RuntimeError as e:
            # Executor already shut down (interpreter exit)
            log.warning("submission_not_dispatched", error=str(e), phone=phone)
            return None
        future.add_done_callback(lambda f: _log_outcome(f, phone))
        log.info(
            "submission_dispatched",
            value=estimated_value,
            phone=phone,
        )
        return future

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
