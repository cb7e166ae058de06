"""
tests/test_rules.py — Unit tests for text normalization and the rule scorer.

Pure functions only: no DB, no LLM.
"""

from types import SimpleNamespace

import pytest

from leadscore.services.scoring import (
    RuleBreakdown,
    data_completeness_score,
    industry_score,
    role_score,
    rule_score,
)
from leadscore.services.text import normalize
from leadscore.services.vocabulary import INDUSTRY_SYNONYMS


def make_lead(**overrides):
    fields = {
        "name": "Ava Patel",
        "role": "Head of Growth",
        "company": "FlowMetrics",
        "industry": "SaaS",
        "location": "India",
        "linkedin_bio": "B2B SaaS growth expert with 10+ years in marketing",
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


# ── normalize ─────────────────────────────────────────────────────────────────

class TestNormalize:
    def test_lowercases_and_trims(self):
        assert normalize("  Head of Growth \n") == "head of growth"

    def test_empty_string(self):
        assert normalize("") == ""

    def test_none_returns_empty(self):
        assert normalize(None) == ""


# ── role_score ────────────────────────────────────────────────────────────────

class TestRoleScore:
    @pytest.mark.parametrize("role", [
        "CEO", "Co-Founder", "Chief Revenue Officer", "Head of Growth",
        "Sales Director", "VP Marketing", "Vice President, Sales", "Business OWNER",
    ])
    def test_decision_makers_score_20(self, role):
        assert role_score(role) == 20

    @pytest.mark.parametrize("role", [
        "Marketing Manager", "Team Lead", "SEO Specialist",
        "Growth Consultant", "Account Executive", "Floor Supervisor",
    ])
    def test_influencers_score_10(self, role):
        assert role_score(role) == 10

    def test_decision_maker_wins_over_influencer(self):
        # contains both "head" and "lead"
        assert role_score("Head of Lead Generation") == 20

    def test_unrelated_role_scores_0(self):
        assert role_score("Software Engineer") == 0

    def test_empty_role_scores_0(self):
        assert role_score("") == 0

    def test_substring_match_is_literal(self):
        # "vp" inside "mvp" still counts
        assert role_score("MVP Builder") == 20


# ── industry_score ────────────────────────────────────────────────────────────

class TestIndustryScore:
    def test_direct_match_case_insensitive(self):
        # offer entry contained in lead industry
        assert industry_score("B2B SaaS Mid-Market Software", ["b2b saas mid-market"]) == 20

    def test_direct_match_checks_every_offer_entry(self):
        assert industry_score("Healthcare", ["Retail", "healthcare"]) == 20

    def test_direct_match_beats_synonym(self):
        # "software" would be adjacent, but "software" is also a direct target
        assert industry_score("Software", ["Logistics", "software"]) == 20

    def test_synonym_term_scores_10(self):
        assert industry_score("Cloud Computing", ["B2B SaaS mid-market"]) == 10

    def test_synonym_key_scores_10(self):
        assert industry_score("Fintech", ["Healthcare"]) == 10

    def test_lead_industry_inside_use_case_is_direct(self):
        assert industry_score("SaaS", ["B2B SaaS mid-market"]) == 20

    @pytest.mark.parametrize("industry, targets", [
        ("IT", ["Digital marketing agencies"]),
        ("IT", ["Hospitality"]),
        ("Tech", ["Fintech startups"]),
    ])
    def test_short_industry_inside_another_word_is_not_direct(self, industry, targets):
        assert industry_score(industry, targets) == 0

    def test_short_industry_as_whole_word_is_direct(self):
        assert industry_score("IT", ["IT services"]) == 20

    def test_no_match_scores_0(self):
        assert industry_score("Agriculture", ["B2B SaaS mid-market"]) == 0

    def test_financial_technology_literal_gap(self):
        # none of fintech/finamce/banking/payments appear literally
        assert industry_score("Financial Technology", ["Healthcare"]) == 0

    def test_typo_synonyms_preserved(self):
        assert "finamce" in INDUSTRY_SYNONYMS["fintech"]
        assert "recruitement" in INDUSTRY_SYNONYMS["hrtech"]
        assert industry_score("Finance", ["Healthcare"]) == 0
        assert industry_score("Recruitment", ["Healthcare"]) == 0

    def test_empty_offer_entries_never_match(self):
        assert industry_score("Agriculture", ["", "   "]) == 0

    def test_empty_lead_industry_scores_0(self):
        assert industry_score("", ["SaaS"]) == 0

    def test_synonym_table_is_read_only(self):
        with pytest.raises(TypeError):
            INDUSTRY_SYNONYMS["edtech"] = ("education",)


# ── data_completeness_score ───────────────────────────────────────────────────

class TestDataCompleteness:
    def test_all_fields_present_scores_10(self):
        assert data_completeness_score(make_lead()) == 10

    @pytest.mark.parametrize("field", [
        "name", "role", "company", "industry", "location", "linkedin_bio",
    ])
    def test_single_blank_field_scores_0(self, field):
        assert data_completeness_score(make_lead(**{field: "   "})) == 0

    def test_none_field_scores_0(self):
        assert data_completeness_score(make_lead(location=None)) == 0


# ── rule_score ────────────────────────────────────────────────────────────────

class TestRuleScore:
    def test_total_is_sum_of_parts(self):
        offer = SimpleNamespace(ideal_use_cases=["SaaS"])
        result = rule_score(make_lead(), offer)
        assert isinstance(result, RuleBreakdown)
        assert result.total == result.role_score + result.industry_score + result.data_completeness_score

    def test_head_of_growth_saas_complete_lead_scores_50(self):
        offer = SimpleNamespace(ideal_use_cases=["B2B SaaS mid-market"])
        result = rule_score(make_lead(), offer)
        assert (result.role_score, result.industry_score, result.data_completeness_score) == (20, 20, 10)
        assert result.total == 50

    def test_minimum_is_zero(self):
        offer = SimpleNamespace(ideal_use_cases=["Healthcare"])
        lead = make_lead(role="Intern", industry="Agriculture", linkedin_bio="")
        assert rule_score(lead, offer).total == 0

    def test_uses_ideal_use_cases_as_targets(self):
        offer = SimpleNamespace(ideal_use_cases=["Agriculture"])
        lead = make_lead(industry="Agriculture")
        assert rule_score(lead, offer).industry_score == 20
