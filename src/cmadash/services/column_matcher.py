"""Heuristic header-to-field matching driven by a prioritized rule list.

Headers in the published sheets drift (``ANP_MTD``, ``ANP MTD``, ``Total
ANP MTD`` ...), so columns are found by scoring every header against every
field rule and assigning columns greedily, best score first.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

SCORE_EXACT = 100
SCORE_KEYWORDS = 80
SCORE_PARTIAL = 40

_NON_ALNUM_RE = re.compile(r"[^A-Z0-9]")


def compact(header: str) -> str:
    """``Total ANP_MTD`` -> ``TOTALANPMTD``."""
    return _NON_ALNUM_RE.sub("", header.upper())


class FieldRule(BaseModel):
    """How to recognize the column for one logical field.

    Any ``exclude`` fragment vetoes a header outright. Otherwise an ``exact``
    alias scores highest, then all ``keywords`` co-occurring, then any one
    ``partial`` fragment. All comparisons use the compacted header.
    """

    field: str
    exact: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    partial: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    def score(self, header: str) -> int:
        h = compact(header)
        if not h:
            return 0
        if any(compact(x) in h for x in self.exclude):
            return 0
        if h in {compact(x) for x in self.exact}:
            return SCORE_EXACT
        if self.keywords and all(compact(k) in h for k in self.keywords):
            return SCORE_KEYWORDS
        if any(compact(p) in h for p in self.partial):
            return SCORE_PARTIAL
        return 0


def match_headers(headers: list[str], rules: list[FieldRule]) -> dict[str, int]:
    """Map field name -> column index.

    Candidates are ordered by (score desc, column index asc, rule order) and
    taken greedily; a column is claimed by at most one field and a field by
    at most one column. Fields with no scoring column are absent.
    """
    candidates: list[tuple[int, int, int, str]] = []
    for priority, rule in enumerate(rules):
        for idx, header in enumerate(headers):
            score = rule.score(header)
            if score > 0:
                candidates.append((-score, idx, priority, rule.field))
    candidates.sort()

    mapping: dict[str, int] = {}
    claimed: set[int] = set()
    for _, idx, _, field in candidates:
        if field in mapping or idx in claimed:
            continue
        mapping[field] = idx
        claimed.add(idx)
    return mapping


# ---------------------------------------------------------------------------
# Sheet vocabularies
# ---------------------------------------------------------------------------

LEADER_RULES: list[FieldRule] = [
    FieldRule(
        field="name",
        exact=("LEADER_UM_NAME", "UM_NAME", "LEADER_NAME", "AGENT_NAME", "NAME"),
        keywords=("LEADER", "NAME"),
        partial=("UMNAME",),
        exclude=("AGENCY", "SUP"),
    ),
    FieldRule(field="agency_name", exact=("AGENCY_NAME", "AGENCY")),
    FieldRule(field="unit", exact=("UNIT", "UNIT_NAME")),
    FieldRule(
        field="anp_actual",
        exact=("ANP_MTD", "ANP", "TOTAL_ANP_MTD"),
        keywords=("ANP", "MTD"),
        partial=("ANP",),
        exclude=("FYC", "FYP", "YTD", "TARGET"),
    ),
    FieldRule(
        field="recruits_actual",
        exact=("NEW_RECRUIT", "NEW_RECRUITS", "NEW_RECRUIT_MTD", "RECRUITS"),
        keywords=("NEW", "RECRUIT"),
        partial=("RECRUIT",),
        exclude=("TARGET",),
    ),
    FieldRule(
        field="cases_actual",
        exact=("CASECNT_MTD", "CASES_MTD", "CASECNT", "CASES"),
        keywords=("CASE", "MTD"),
        partial=("CASECNT", "CASES"),
        exclude=("YTD",),
    ),
    FieldRule(
        field="fyp_actual",
        exact=("FYPI_MTD", "FYP_MTD", "TOTAL_FYP_MTD", "FYPI", "FYP"),
        keywords=("FYP", "MTD"),
        partial=("FYP",),
        exclude=("YTD", "TARGET"),
    ),
    FieldRule(
        field="fyc_actual",
        exact=("FYC_MTD", "TOTAL_FYC_MTD", "FYC"),
        keywords=("FYC", "MTD"),
        partial=("FYC",),
        exclude=("YTD", "TARGET", "FYP"),
    ),
    FieldRule(
        field="anp_ytd_actual",
        exact=("ANP_YTD", "TOTAL_ANP_YTD"),
        keywords=("ANP", "YTD"),
        exclude=("FYC", "FYP"),
    ),
    FieldRule(
        field="fyp_ytd_actual",
        exact=("FYPI_YTD", "FYP_YTD", "TOTAL_FYP_YTD"),
        keywords=("FYP", "YTD"),
    ),
    FieldRule(
        field="fyc_ytd_actual",
        exact=("FYC_YTD", "TOTAL_FYC_YTD"),
        keywords=("FYC", "YTD"),
        exclude=("FYP",),
    ),
]

AGENT_RULES: list[FieldRule] = [
    FieldRule(
        field="name",
        exact=("AGENT_NAME", "AGENT", "NAME"),
        keywords=("AGENT", "NAME"),
        exclude=("LEADER", "UMNAME", "AGENCY"),
    ),
    FieldRule(
        field="um_name",
        exact=("UM_NAME", "LEADER_NAME", "LEADER_UM_NAME"),
        keywords=("LEADER", "NAME"),
        partial=("UMNAME",),
    ),
    FieldRule(field="unit", exact=("UNIT", "UNIT_NAME")),
    FieldRule(
        field="anp_actual",
        exact=("ANP_MTD", "ANP"),
        keywords=("ANP", "MTD"),
        partial=("ANP",),
        exclude=("FYC", "FYP", "YTD", "TARGET"),
    ),
    FieldRule(
        field="fyp_actual",
        exact=("FYP_MTD", "FYP"),
        keywords=("FYP", "MTD"),
        partial=("FYP",),
        exclude=("YTD", "TARGET"),
    ),
    FieldRule(
        field="cases_actual",
        exact=("CASECNT_MTD", "CASES_MTD", "CASECNT", "CASES"),
        keywords=("CASE", "MTD"),
        partial=("CASECNT", "CASES"),
        exclude=("YTD",),
    ),
]
