"""ContactService — contact tracing wrapped in ServiceResult."""

from __future__ import annotations

from collections.abc import Iterable

from relgraph.config.settings import RelgraphSettings
from relgraph.domain.errors import EntityNotFoundError
from relgraph.domain.records import Contact
from relgraph.engines.contact import ContactTracer
from relgraph.services.base import BaseService
from relgraph.services.result import ServiceResult
from relgraph.services.telemetry import traced


class ContactService(BaseService):
    """Incremental contact graph with trace queries.

    The incubation delay comes from ``[contact] incubation``.
    """

    def __init__(
        self,
        contacts: Iterable[Contact] = (),
        settings: RelgraphSettings | None = None,
    ) -> None:
        super().__init__(settings)
        self._tracer = ContactTracer(contacts, incubation=self._settings.contact.incubation)

    @property
    def tracer(self) -> ContactTracer:
        return self._tracer

    @traced
    def add(self, contact: Contact) -> ServiceResult:
        """Record a contact. Duplicates succeed with a warning."""
        added = self._tracer.add_trace(contact)
        warnings: list[str] = []
        if not added:
            warnings.append(
                f"Duplicate contact ignored: {contact.person1} / {contact.person2} "
                f"at {contact.time}"
            )
        return ServiceResult(
            ok=True,
            op="add",
            data={"added": added, "people": len(self._tracer)},
            warnings=warnings,
        )

    @traced
    def times(self, person1: str, person2: str) -> ServiceResult:
        try:
            times = self._tracer.contact_times_between(person1, person2)
        except EntityNotFoundError as exc:
            return self._error_result("times", exc)
        return ServiceResult(
            ok=True,
            op="times",
            data={"person1": person1, "person2": person2, "times": times},
        )

    @traced
    def contacts(self, person: str, *, after: int | None = None) -> ServiceResult:
        """Direct contacts of *person*, optionally only those at or after *after*."""
        try:
            if after is None:
                found = self._tracer.contacts_of(person)
            else:
                found = self._tracer.contacts_after(person, after)
        except EntityNotFoundError as exc:
            return self._error_result("contacts", exc)
        return ServiceResult(
            ok=True,
            op="contacts",
            data={"person": person, "after": after, "count": len(found), "items": sorted(found)},
        )

    @traced
    def trace(self, person: str, contagion_time: int) -> ServiceResult:
        try:
            infected = self._tracer.contact_trace(person, contagion_time)
        except EntityNotFoundError as exc:
            return self._error_result("trace", exc)
        return ServiceResult(
            ok=True,
            op="trace",
            data={
                "origin": person,
                "contagion_time": contagion_time,
                "incubation": self._tracer.incubation,
                "count": len(infected),
                "items": sorted(infected),
            },
        )
