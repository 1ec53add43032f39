"""
Static lookup tables used by the document parser.

A ParserProfile bundles the defaults and word lists the heuristic scanners
rely on. Profiles are immutable and passed into the assembler, so several
parsers with different tables can run side by side.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_AUTHORITY = "MIA OF KAZAKHSTAN"
DEFAULT_NATIONALITY = "KAZ"

# Boilerplate words printed on the data page that look like name tokens
DEFAULT_DENYLIST: frozenset[str] = frozenset(
    {
        "PASSPORT",
        "CODE",
        "STATE",
        "KAZ",
        "SURNAME",
        "GIVEN",
        "NAMES",
        "NATIONALITY",
        "DATE",
        "BIRTH",
        "SEX",
        "PLACE",
        "ISSUE",
        "EXPIRY",
        "AUTHORITY",
        "MINISTRY",
        "INTERNAL",
        "AFFAIRS",
        "REPUBLIC",
        "KAZAKHSTAN",
        "ID",
        "MRZ",
        "DOCUMENT",
        "TYPE",
        "OF",
        "THE",
    }
)

# Checked in order, first hit wins
DEFAULT_KNOWN_AUTHORITIES: tuple[str, ...] = (
    "MINISTRY OF INTERNAL AFFAIRS",
    "MIA OF KAZAKHSTAN",
)

DEFAULT_FEMALE_MARKERS: tuple[str, ...] = ("Ж/F", "ЖЕН")
DEFAULT_MALE_MARKERS: tuple[str, ...] = ("М/M", "МУЖ")


@dataclass(frozen=True)
class ParserProfile:
    """Immutable configuration consumed by the parsing pipeline."""

    default_authority: str = DEFAULT_AUTHORITY
    default_nationality: str = DEFAULT_NATIONALITY
    denylist: frozenset[str] = DEFAULT_DENYLIST
    known_authorities: tuple[str, ...] = DEFAULT_KNOWN_AUTHORITIES
    female_markers: tuple[str, ...] = DEFAULT_FEMALE_MARKERS
    male_markers: tuple[str, ...] = DEFAULT_MALE_MARKERS


@dataclass(frozen=True)
class SiteProfile:
    """Form settings for one booking site, matched by host substring."""

    nationality_id: str = "367404"
    identity_document_id: str = "1"
    force_series: bool = False
    forced_series_code: str = DEFAULT_NATIONALITY


DEFAULT_SITE_PROFILE = SiteProfile()


@dataclass(frozen=True)
class SiteTable:
    """Ordered host-substring to SiteProfile mapping."""

    entries: tuple[tuple[str, SiteProfile], ...] = field(
        default_factory=lambda: (
            ("kompastour", SiteProfile(nationality_id="7", force_series=True)),
            ("kazunion", SiteProfile(nationality_id="7", force_series=False)),
        )
    )
    default: SiteProfile = DEFAULT_SITE_PROFILE

    def lookup(self, host: str) -> SiteProfile:
        """Return the profile of the first entry whose key occurs in host."""
        host = (host or "").lower()
        for key, profile in self.entries:
            if key in host:
                return profile
        return self.default


DEFAULT_PROFILE = ParserProfile()
DEFAULT_SITE_TABLE = SiteTable()

__all__ = [
    "DEFAULT_AUTHORITY",
    "DEFAULT_DENYLIST",
    "DEFAULT_NATIONALITY",
    "DEFAULT_PROFILE",
    "DEFAULT_SITE_PROFILE",
    "DEFAULT_SITE_TABLE",
    "ParserProfile",
    "SiteProfile",
    "SiteTable",
]
