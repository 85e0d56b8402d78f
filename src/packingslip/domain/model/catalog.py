"""Catalog aggregate.

The catalog is loaded once per run and never changes afterwards.
Records are never rewritten: a lookup matches the CATALOG-NO text exactly
as it was written in the catalog file.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

CATALOG_NO_COLUMN = "CATALOG-NO"
TITLE_COLUMN = "TITLE"
UNIT_PRICE_COLUMN = "UNIT-PRICE"


@dataclass(frozen=True)
class CatalogRecord(Mapping):
    """One catalog row: column name -> field text.

    A column the row did not reach is present with the value ``None``.
    """

    fields: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getitem__(self, column: str) -> str | None:
        return self.fields[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def catalog_no(self) -> str | None:
        return self.fields.get(CATALOG_NO_COLUMN)

    @property
    def title(self) -> str | None:
        return self.fields.get(TITLE_COLUMN)

    @property
    def unit_price(self) -> str | None:
        return self.fields.get(UNIT_PRICE_COLUMN)


class Catalog:
    """Immutable, ordered collection of catalog records."""

    def __init__(self, records: Iterable[Mapping[str, str | None]]) -> None:
        self._records: tuple[CatalogRecord, ...] = tuple(
            CatalogRecord(record) for record in records
        )

    def __iter__(self) -> Iterator[CatalogRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def find(self, catalog_no: str) -> CatalogRecord | None:
        """Return the first record whose CATALOG-NO equals *catalog_no* exactly."""
        for record in self._records:
            if record.catalog_no == catalog_no:
                return record
        return None
