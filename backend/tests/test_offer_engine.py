"""
Tests du moteur d’offres : paliers, bornes exclusives, messages localisés.
"""

import pytest

from smartbank.core.errors import ValidationError
from smartbank.services.offer_engine import (
    TIER_EXTENSION,
    TIER_PREMIUM,
    TIER_REVIEW,
    Offer,
    OfferEngine,
    derive_offer,
    tier_for,
)

TIER_RANK = {TIER_REVIEW: 0, TIER_EXTENSION: 1, TIER_PREMIUM: 2}


class TestTierBoundaries:

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0.8, TIER_EXTENSION),
            (0.8000001, TIER_PREMIUM),
            (0.5, TIER_REVIEW),
            (0.5000001, TIER_EXTENSION),
            (1.0, TIER_PREMIUM),
            (0.0, TIER_REVIEW),
            (0.1, TIER_REVIEW),
            (0.65, TIER_EXTENSION),
            (0.95, TIER_PREMIUM),
        ],
    )
    def test_tier_for_score(self, score, expected):
        assert tier_for(score) == expected
        assert derive_offer(score, "Sara", "en").tier == expected

    def test_tiering_is_total_and_monotonic(self):
        scores = [i / 1000 for i in range(1001)]
        tiers = [tier_for(s) for s in scores]

        assert set(tiers) == {TIER_REVIEW, TIER_EXTENSION, TIER_PREMIUM}
        ranks = [TIER_RANK[t] for t in tiers]
        assert ranks == sorted(ranks), "un score plus élevé ne doit jamais donner un palier inférieur"


class TestMessages:

    @pytest.mark.parametrize("score", [0.9, 0.7, 0.2])
    @pytest.mark.parametrize("locale", ["ar", "en"])
    def test_message_is_personalized_with_name(self, score, locale):
        offer = derive_offer(score, "Sara", locale)
        assert "Sara" in offer.message
        assert offer.label

    def test_english_wording(self):
        assert derive_offer(0.9, "Sara", "en") == Offer(
            tier=TIER_PREMIUM,
            label="15% interest discount",
            message="Congratulations Sara! Based on your excellent rating, we are pleased to offer you a special discount.",
        )
        assert "extended repayment period" in derive_offer(0.6, "Sara", "en").message
        assert "review of your account" in derive_offer(0.3, "Sara", "en").message

    def test_arabic_is_default_locale(self):
        offer = derive_offer(0.3, "Sara")
        assert offer.label == "مراجعة الحساب مطلوبة"
        assert offer.message.startswith("السيد/ة Sara")

    def test_locale_changes_text_not_tier(self):
        ar = derive_offer(0.75, "Sara", "ar")
        en = derive_offer(0.75, "Sara", "en")
        assert ar.tier == en.tier == TIER_EXTENSION
        assert ar.message != en.message

    def test_braces_in_name_are_kept_verbatim(self):
        assert "{name}" in derive_offer(0.9, "{name}", "en").message

    def test_unknown_locale_is_rejected(self):
        with pytest.raises(ValidationError):
            derive_offer(0.9, "Sara", "fr")
        with pytest.raises(ValidationError):
            OfferEngine("fr")


class TestOfferEngine:

    def test_bound_locale_used_by_default(self):
        engine = OfferEngine("en")
        assert engine.derive(0.9, "Sara").label == "15% interest discount"

    def test_explicit_locale_overrides_bound_one(self):
        engine = OfferEngine("en")
        assert engine.derive(0.9, "Sara", "ar").label == "خصم 15% على الفوائد"
