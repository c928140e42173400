"""Accept-Language header parsing and language negotiation.

The header is split into priority groups: a run of language tags followed by
an optional `;q=<weight>`. For example "fr-CH, fr;q=0.9, en;q=0.8" yields

    [PriorityGroup(0.9, ["fr-CH", "fr"]), PriorityGroup(0.8, ["en"])]

A group without `q=` gets weight 0.0, so unweighted tags rank after every
explicitly weighted group. Groups are ordered by descending weight; groups
with equal weight keep their header order.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from localization.logging import get_module_logger

logger = get_module_logger(__name__)

WILDCARD = "*"

# "*", "en", "en-US"
_TAG = r"(?:\*|[a-z]{2}-[a-zA-Z]{2,}|[a-z]{2})"

# "en-US,en;q=0.5", "fr-CH, fr;q=0.9", "*"
_GROUP_PATTERN = re.compile(rf"(?:{_TAG},? ?)+;?(?:q=[0-9.]+)?")
_WEIGHT_PATTERN = re.compile(r"q=([0-9.]+)")
_TAG_PATTERN = re.compile(_TAG)


@dataclass
class PriorityGroup:
    """Language tags sharing one weight.

    Attributes:
        weight: Quality value from `q=`, 0.0 when absent or malformed.
        languages: Tags in order of appearance.
    """

    weight: float = 0.0
    languages: List[str] = field(default_factory=list)

    @classmethod
    def parse(cls, value: str) -> "PriorityGroup":
        """Build a group from one group substring (e.g. "fr-CH, fr;q=0.9")."""
        return cls(
            weight=_extract_weight(value),
            languages=_TAG_PATTERN.findall(value),
        )


@dataclass
class AcceptLanguages:
    """Parsed Accept-Language header.

    Attributes:
        groups: Priority groups ordered by descending weight.
    """

    groups: List[PriorityGroup] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.groups)

    def __bool__(self) -> bool:
        return bool(self.groups)

    def languages(self) -> List[str]:
        """All tags in weight-then-appearance order."""
        return [language for group in self.groups for language in group.languages]

    def find_first_matching(
        self, enabled_languages: Optional[Sequence[str]], default_language: str
    ) -> str:
        """Find the first accepted language that is enabled.

        `*` is treated as `default_language`. Groups are scanned by weight,
        tags within a group by appearance, and for each tag the enabled
        languages in the caller's priority order. Comparison is
        case-insensitive on the whole tag.

        Args:
            enabled_languages: Enabled language keywords, in priority order.
            default_language: Replacement for `*`.

        Returns:
            The matching keyword as spelled in `enabled_languages`, or ""
            when nothing matches.
        """
        if not enabled_languages:
            return ""

        for group in self._with_wildcard(default_language):
            for language in group.languages:
                folded = language.casefold()
                for enabled in enabled_languages:
                    if folded == enabled.casefold():
                        return enabled

        return ""

    def _with_wildcard(self, default_language: str) -> List[PriorityGroup]:
        """Copy of groups with `*` replaced; the stored groups stay as parsed."""
        return [
            PriorityGroup(
                weight=group.weight,
                languages=[
                    default_language if language == WILDCARD else language
                    for language in group.languages
                ],
            )
            for group in self.groups
        ]


def parse_accept_language(value: Optional[str]) -> AcceptLanguages:
    """Parse an Accept-Language header value.

    Never raises: an empty or unparseable value yields no groups.

    Args:
        value: Raw header value (e.g. "en-US,en;q=0.5").

    Returns:
        AcceptLanguages with groups ordered by descending weight.
    """
    if not value:
        return AcceptLanguages()

    groups = [
        PriorityGroup.parse(match.group(0)) for match in _GROUP_PATTERN.finditer(value)
    ]
    # sorted() is stable, equal weights keep header order
    groups = sorted(groups, key=lambda group: group.weight, reverse=True)

    return AcceptLanguages(groups=groups)


def negotiate_language(
    accept_language: Optional[str],
    enabled_languages: Optional[Sequence[str]],
    default_language: str,
) -> str:
    """Pick the best enabled language for a header, or the default.

    Args:
        accept_language: Raw Accept-Language header value.
        enabled_languages: Enabled language keywords, in priority order.
        default_language: Used for `*` and when nothing matches.

    Returns:
        Matching enabled language, or `default_language`.
    """
    accepted = parse_accept_language(accept_language)
    match = accepted.find_first_matching(enabled_languages, default_language)

    if match:
        logger.debug("negotiated_language", language=match)
        return match

    logger.debug(
        "no_matching_language_in_header",
        accept_language=accept_language,
        default_language=default_language,
    )
    return default_language


def _extract_weight(value: str) -> float:
    match = _WEIGHT_PATTERN.search(value)
    if match is None:
        return 0.0

    try:
        return float(match.group(1))
    except ValueError:
        return 0.0
