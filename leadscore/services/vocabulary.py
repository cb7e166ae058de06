"""
leadscore/services/vocabulary.py — Read-only term tables used by the rule scorer.

Loaded once at import and exposed as immutable tuples / mapping proxies so no
caller can mutate them at runtime. All terms are already lower-case.
"""

from types import MappingProxyType

# Roles with buying authority (+20)
DECISION_MAKER_TERMS: tuple[str, ...] = (
    "founder",
    "cofounder",
    "ceo",
    "chief",
    "head",
    "director",
    "vp",
    "vice president",
    "owner",
)

# Roles that shape a purchase without owning it (+10)
INFLUENCER_TERMS: tuple[str, ...] = (
    "manager",
    "lead",
    "specialist",
    "consultant",
    "executive",
    "supervisor",
)

# Adjacent-industry table (+10). "finamce" and "recruitement" are kept as
# stored; correcting them changes which leads score, see DESIGN.md.
INDUSTRY_SYNONYMS: MappingProxyType = MappingProxyType({
    "saas": ("software", "cloud", "programming", "platform"),
    "hrtech": ("hr", "human resources", "recruitement"),
    "fintech": ("finamce", "banking", "payments"),
})
